"""Adherence engine: schedule matching, next dose, percentages and streaks."""

import uuid
from datetime import date, datetime, time, timedelta

import pytest

from medadherence.domain import DoseEvent, DoseStatus, Frequency
from medadherence.engine import adherence
from medadherence.scripts.seed_data import demo_medications, generate_history

MONDAY = date(2026, 10, 19)
TUESDAY = date(2026, 10, 20)
MED_ID = uuid.uuid4()


def _event(day, taken, hhmm="08:00", medication_id=MED_ID):
    return DoseEvent(
        medication_id=medication_id,
        date=day,
        scheduled_time=time.fromisoformat(hhmm),
        taken=taken,
    )


# -------------------------
# Schedule matching
# -------------------------

def test_specific_weekdays_medication_only_due_on_listed_days(make_medication):
    med = make_medication(frequency=Frequency.SPECIFIC_WEEKDAYS, weekdays={1, 3, 5})

    assert adherence.todays_doses([med], [], TUESDAY) == []
    monday_doses = adherence.todays_doses([med], [], MONDAY)
    assert [d.medication.id for d in monday_doses] == [med.id]


@pytest.mark.parametrize(
    "frequency",
    [Frequency.DAILY, Frequency.WEEKLY, Frequency.EVERY_N_DAYS, Frequency.AS_NEEDED],
)
def test_non_weekday_frequencies_are_due_every_day(make_medication, frequency):
    med = make_medication(frequency=frequency)
    for offset in range(7):
        assert adherence.is_due(med, MONDAY + timedelta(days=offset))


def test_todays_doses_sorted_by_time_then_name_with_status(make_medication):
    zinc = make_medication(name="Zinc", times=("08:00", "20:00"))
    aspirin = make_medication(name="Aspirin", times=("08:00",))
    events = [
        _event(MONDAY, True, "08:00", zinc.id),
        _event(MONDAY, False, "08:00", aspirin.id),
        # Yesterday's outcome must not leak into today.
        _event(MONDAY - timedelta(days=1), True, "20:00", zinc.id),
    ]

    doses = adherence.todays_doses([zinc, aspirin], events, MONDAY)

    assert [(d.medication.name, d.scheduled_time.isoformat(timespec="minutes"), d.status) for d in doses] == [
        ("Aspirin", "08:00", DoseStatus.MISSED),
        ("Zinc", "08:00", DoseStatus.TAKEN),
        ("Zinc", "20:00", DoseStatus.UNMARKED),
    ]


# -------------------------
# Next dose, countdown, dose window
# -------------------------

def test_next_dose_skips_taken_and_past_doses(make_medication):
    med = make_medication(times=("07:00", "13:00", "19:00"))
    events = [_event(MONDAY, True, "07:00", med.id)]
    doses = adherence.todays_doses([med], events, MONDAY)

    upcoming = adherence.next_dose(doses, datetime(2026, 10, 19, 12, 0))

    assert upcoming.dose.scheduled_time == time(13, 0)
    assert upcoming.countdown == "1:00"
    assert upcoming.in_window is False


def test_missed_dose_later_today_is_still_next(make_medication):
    med = make_medication(times=("13:00",))
    doses = adherence.todays_doses([med], [_event(MONDAY, False, "13:00", med.id)], MONDAY)

    upcoming = adherence.next_dose(doses, datetime(2026, 10, 19, 12, 0))

    assert upcoming.dose.status is DoseStatus.MISSED


def test_no_next_dose_once_everything_today_has_passed(make_medication):
    med = make_medication(times=("07:00", "13:00"))
    doses = adherence.todays_doses([med], [], MONDAY)

    # Nothing rolls over to tomorrow's 07:00.
    assert adherence.next_dose(doses, datetime(2026, 10, 19, 13, 0)) is None
    assert adherence.next_dose(doses, datetime(2026, 10, 19, 23, 59)) is None


def test_next_dose_tie_goes_to_medication_name(make_medication):
    b = make_medication(name="Beta", times=("13:00",))
    a = make_medication(name="Alpha", times=("13:00",))
    doses = adherence.todays_doses([b, a], [], MONDAY)

    upcoming = adherence.next_dose(list(reversed(doses)), datetime(2026, 10, 19, 12, 0))

    assert upcoming.dose.medication.name == "Alpha"


def test_dose_window_is_thirty_minutes_either_side():
    scheduled = time(13, 0)
    assert adherence.in_dose_window(datetime(2026, 10, 19, 12, 30), scheduled)
    assert adherence.in_dose_window(datetime(2026, 10, 19, 13, 30), scheduled)
    assert not adherence.in_dose_window(datetime(2026, 10, 19, 12, 29, 59), scheduled)
    assert not adherence.in_dose_window(datetime(2026, 10, 19, 13, 30, 1), scheduled)


def test_next_dose_inside_window_offers_take_now(make_medication):
    med = make_medication(times=("13:00",))
    doses = adherence.todays_doses([med], [], MONDAY)

    upcoming = adherence.next_dose(doses, datetime(2026, 10, 19, 12, 45))

    assert upcoming.countdown == "0:15"
    assert upcoming.in_window is True


@pytest.mark.parametrize(
    "remaining, expected",
    [
        (timedelta(hours=1), "1:00"),
        (timedelta(minutes=5), "0:05"),
        (timedelta(hours=12, minutes=30), "12:30"),
        # Seconds are dropped. Earlier builds rendered this as "59:59" (MM:SS).
        (timedelta(minutes=59, seconds=59), "0:59"),
        (timedelta(seconds=30), "0:00"),
    ],
)
def test_format_countdown(remaining, expected):
    assert adherence.format_countdown(remaining) == expected


# -------------------------
# Percentages
# -------------------------

def test_weekly_percentage_truncates():
    # 2 of 3 taken -> 66.67 -> 66
    events = [_event(MONDAY, True), _event(MONDAY, True, "09:00"), _event(MONDAY, False, "10:00")]
    assert adherence.weekly_adherence(events, MONDAY) == 66


def test_weekly_percentage_is_zero_without_events():
    assert adherence.weekly_adherence([], MONDAY) == 0


def test_weekly_percentage_ignores_events_outside_window():
    events = [
        _event(MONDAY - timedelta(days=6), True),
        _event(MONDAY - timedelta(days=7), False),
        _event(MONDAY + timedelta(days=1), False),
    ]
    assert adherence.weekly_adherence(events, MONDAY) == 100


def test_weekly_percentage_matches_floor_for_seeded_history():
    history = generate_history(demo_medications(), MONDAY, days=6)
    taken = sum(e.taken for e in history)
    assert adherence.weekly_adherence(history, MONDAY) == (100 * taken) // len(history)


def test_daily_percentages_cover_seven_days_oldest_first():
    days = adherence.daily_adherence([_event(MONDAY, True), _event(MONDAY, False, "09:00")], MONDAY)

    assert [d.date for d in days] == [MONDAY - timedelta(days=n) for n in range(6, -1, -1)]
    assert [d.percentage for d in days] == [0, 0, 0, 0, 0, 0, 50]


def test_daily_percentages_are_independent():
    sunday = MONDAY - timedelta(days=1)
    saturday = MONDAY - timedelta(days=2)
    base = [_event(saturday, True), _event(sunday, False)]

    before = adherence.daily_adherence(base, MONDAY)
    after = adherence.daily_adherence(base + [_event(sunday, True, "09:00")], MONDAY)

    assert before[-3].percentage == after[-3].percentage == 100
    assert before[-2].percentage == 0
    assert after[-2].percentage == 50


# -------------------------
# Streak
# -------------------------

def _perfect_days(k, today=MONDAY):
    return [_event(today - timedelta(days=n), True) for n in range(k + 1)]


@pytest.mark.parametrize("k", [0, 1, 4])
def test_streak_counts_today_and_preceding_perfect_days(k):
    breaker = _event(MONDAY - timedelta(days=k + 1), False)
    assert adherence.calculate_streak(_perfect_days(k) + [breaker], MONDAY) == k + 1


def test_streak_broken_by_day_without_events():
    events = _perfect_days(1) + [_event(MONDAY - timedelta(days=3), True)]
    assert adherence.calculate_streak(events, MONDAY) == 2


def test_streak_zero_when_today_has_a_missed_dose():
    events = _perfect_days(3) + [_event(MONDAY, False, "20:00")]
    assert adherence.calculate_streak(events, MONDAY) == 0


def test_streak_zero_when_today_has_no_events_yet():
    events = [_event(MONDAY - timedelta(days=n), True) for n in range(1, 4)]
    assert adherence.calculate_streak(events, MONDAY) == 0


def test_streak_from_yesterday_variant_ignores_today():
    # The older counting started at yesterday, so an unfinished today neither
    # breaks nor extends the streak. Current counting starts at today.
    events = [_event(MONDAY - timedelta(days=n), True) for n in range(1, 4)]
    events.append(_event(MONDAY, False))

    assert adherence.calculate_streak(events, MONDAY, include_today=False) == 3
    assert adherence.calculate_streak(events, MONDAY) == 0


@pytest.mark.parametrize(
    "weekly, starts_with",
    [(100, "Excellent"), (90, "Excellent"), (75, "Good job"), (50, "You're doing okay"), (49, "Let's work")],
)
def test_feedback_message_thresholds(weekly, starts_with):
    assert adherence.adherence_feedback(weekly).startswith(starts_with)


def test_day_labels_follow_weekday():
    assert adherence.day_label(MONDAY) == "Mon"
    assert adherence.day_label(MONDAY - timedelta(days=1)) == "Sun"
