"""Module: validation."""

from __future__ import annotations

import uuid
from typing import Any

from medadherence.core.errors import MedicationValidationError
from medadherence.domain import Frequency, Medication, parse_time_of_day


def _clean(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def _as_list(value: Any) -> list | None:
    # None means "not given"; anything that is not a list is rejected by the caller.
    if value is None:
        return []
    if isinstance(value, (list, tuple, set, frozenset)):
        return list(value)
    return None


def validate_medication(
    *,
    name: Any,
    dosage: Any,
    scheduled_times: Any,
    notes: Any = None,
    frequency: Any = Frequency.DAILY,
    specific_weekdays: Any = None,
    medication_id: uuid.UUID | None = None,
) -> Medication:
    """
    Check a medication form and build the normalized snapshot to save.

    Inputs arrive as raw form values, so any type is accepted and judged here.
    All fields are checked before raising, and MedicationValidationError
    carries one message per bad field. Times are de-duplicated and sorted;
    blank notes become None; a new id is minted unless ``medication_id`` is
    given (edits keep their id).
    """
    errors: dict[str, str] = {}

    name_clean = _clean(name)
    if not name_clean:
        errors["name"] = "Name is required"

    dosage_clean = _clean(dosage)
    if not dosage_clean:
        errors["dosage"] = "Dosage is required"

    if notes is not None and not isinstance(notes, str):
        errors["notes"] = "Notes must be text"

    try:
        freq = Frequency(frequency if frequency is not None else Frequency.DAILY)
    except (TypeError, ValueError):
        freq = None
        errors["frequency"] = f"Frequency must be one of {', '.join(f.value for f in Frequency)}"

    raw_times = _as_list(scheduled_times)
    times = set()
    if raw_times is None:
        errors["scheduled_times"] = "Times must be a list of HH:MM (24h) values"
    else:
        bad_times = []
        for raw in raw_times:
            try:
                if not isinstance(raw, str):
                    raise TypeError(raw)
                times.add(parse_time_of_day(raw))
            except (TypeError, ValueError):
                bad_times.append(str(raw))
        if bad_times:
            errors["scheduled_times"] = f"Times must be HH:MM (24h): {', '.join(bad_times)}"
        elif not times:
            errors["scheduled_times"] = "At least one time is required"

    raw_weekdays = _as_list(specific_weekdays)
    weekdays = set()
    if raw_weekdays is None or any(
        isinstance(day, bool) or not isinstance(day, int) or day < 1 or day > 7 for day in raw_weekdays
    ):
        errors["specific_weekdays"] = "Weekdays must be between 1 (Monday) and 7 (Sunday)"
    else:
        weekdays = set(raw_weekdays)
        if freq is Frequency.SPECIFIC_WEEKDAYS and not weekdays:
            errors["specific_weekdays"] = "Pick at least one weekday"

    if errors:
        raise MedicationValidationError(errors)

    return Medication(
        id=medication_id or uuid.uuid4(),
        name=name_clean,
        dosage=dosage_clean,
        scheduled_times=tuple(sorted(times)),
        notes=_clean(notes) or None,
        frequency=freq,
        # Weekdays only mean something for SpecificWeekdays.
        specific_weekdays=frozenset(weekdays) if freq is Frequency.SPECIFIC_WEEKDAYS else frozenset(),
    )
