"""
Module: adherence.

Pure derivations over a snapshot of medications and dose events. Nothing here
reads the clock or the database; callers pass ``now``/``today`` explicitly.

Percentages are whole numbers truncated toward zero (``taken * 100 // total``),
and any empty denominator yields 0.
"""

from __future__ import annotations

from collections import defaultdict
from datetime import date, datetime, time, timedelta
from typing import Iterable, Sequence

from medadherence.domain import (
    DayAdherence,
    DoseEvent,
    DoseStatus,
    Frequency,
    Medication,
    NextDose,
    TodayDose,
)

WEEK_DAYS = 7
DEFAULT_DOSE_WINDOW = timedelta(minutes=30)
DAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def percentage(taken: int, total: int) -> int:
    if total <= 0:
        return 0
    return (taken * 100) // total


def is_due(medication: Medication, day: date) -> bool:
    """
    Whether ``medication`` is scheduled on ``day``.

    Only SpecificWeekdays filters by weekday. Weekly, EveryNDays and AsNeeded
    have no anchor date or interval stored, so they are due every day, same
    as Daily.
    """
    if medication.frequency is Frequency.SPECIFIC_WEEKDAYS:
        return day.isoweekday() in medication.specific_weekdays
    return True


def todays_doses(medications: Iterable[Medication], events: Iterable[DoseEvent], today: date) -> list[TodayDose]:
    """Every scheduled dose for ``today`` with its status, ordered by time then name."""
    outcomes = {(e.medication_id, e.scheduled_time): e.taken for e in events if e.date == today}

    doses = [
        TodayDose(
            medication=med,
            scheduled_time=scheduled_time,
            status=DoseStatus.from_taken(outcomes.get((med.id, scheduled_time))),
        )
        for med in medications
        if is_due(med, today)
        for scheduled_time in med.scheduled_times
    ]
    doses.sort(key=lambda d: (d.scheduled_time, d.medication.name))
    return doses


def _until(now: datetime, scheduled_time: time) -> timedelta:
    # Same calendar day as now; doses never roll over to tomorrow.
    return datetime.combine(now.date(), scheduled_time) - now.replace(tzinfo=None)


def format_countdown(remaining: timedelta) -> str:
    """``H:MM`` with seconds dropped, e.g. 1:00, 0:05, 12:30."""
    total_minutes = max(int(remaining.total_seconds() // 60), 0)
    hours, minutes = divmod(total_minutes, 60)
    return f"{hours}:{minutes:02d}"


def in_dose_window(now: datetime, scheduled_time: time, window: timedelta = DEFAULT_DOSE_WINDOW) -> bool:
    return abs(_until(now, scheduled_time)) <= window


def next_dose(
    doses: Sequence[TodayDose],
    now: datetime,
    window: timedelta = DEFAULT_DOSE_WINDOW,
) -> NextDose | None:
    """
    The earliest dose today that is not taken and is still ahead of ``now``.

    Returns None when nothing remains today. Ties on time go to the
    medication name, then its id.
    """
    current = now.time().replace(tzinfo=None)
    pending = [d for d in doses if d.status is not DoseStatus.TAKEN and d.scheduled_time > current]
    if not pending:
        return None

    dose = min(pending, key=lambda d: (d.scheduled_time, d.medication.name, str(d.medication.id)))
    return NextDose(
        dose=dose,
        countdown=format_countdown(_until(now, dose.scheduled_time)),
        in_window=in_dose_window(now, dose.scheduled_time, window),
    )


def week_window(today: date) -> tuple[date, date]:
    return today - timedelta(days=WEEK_DAYS - 1), today


def weekly_adherence(events: Iterable[DoseEvent], today: date) -> int:
    start, end = week_window(today)
    in_range = [e for e in events if start <= e.date <= end]
    return percentage(sum(1 for e in in_range if e.taken), len(in_range))


def daily_adherence(events: Iterable[DoseEvent], today: date) -> list[DayAdherence]:
    """Seven (date, percentage) entries, oldest first, each day computed on its own."""
    start, _ = week_window(today)
    counts: dict[date, list[int]] = defaultdict(lambda: [0, 0])
    for e in events:
        counts[e.date][0] += int(e.taken)
        counts[e.date][1] += 1

    days = (start + timedelta(days=offset) for offset in range(WEEK_DAYS))
    return [DayAdherence(date=d, percentage=percentage(*counts.get(d, (0, 0)))) for d in days]


def calculate_streak(events: Iterable[DoseEvent], today: date, include_today: bool = True) -> int:
    """
    Consecutive days, walking backward, on which every recorded dose was taken.

    A day with no events, or with any missed dose, ends the streak. The walk
    starts at ``today``; ``include_today=False`` starts at yesterday instead,
    which is how the streak was counted before the in-progress day was
    included.
    """
    by_day: dict[date, list[bool]] = defaultdict(list)
    for e in events:
        by_day[e.date].append(e.taken)

    streak = 0
    day = today if include_today else today - timedelta(days=1)
    while by_day.get(day) and all(by_day[day]):
        streak += 1
        day -= timedelta(days=1)
    return streak


def adherence_feedback(weekly_percentage: int) -> str:
    if weekly_percentage >= 90:
        return "Excellent work! You're staying on track with your medications."
    if weekly_percentage >= 75:
        return "Good job! Keep up the consistency."
    if weekly_percentage >= 50:
        return "You're doing okay. Try to improve your consistency."
    return "Let's work on building a better routine together."


def day_label(day: date) -> str:
    return DAY_LABELS[day.weekday()]
