"""Module: domain."""

from __future__ import annotations

import enum
import uuid
from dataclasses import dataclass, field
from datetime import date, datetime, time

TIME_FORMAT = "%H:%M"


class Frequency(str, enum.Enum):
    DAILY = "Daily"
    SPECIFIC_WEEKDAYS = "SpecificWeekdays"
    EVERY_N_DAYS = "EveryNDays"
    WEEKLY = "Weekly"
    AS_NEEDED = "AsNeeded"


class DoseStatus(str, enum.Enum):
    TAKEN = "Taken"
    MISSED = "Missed"
    UNMARKED = "Unmarked"

    @classmethod
    def from_taken(cls, taken: bool | None) -> "DoseStatus":
        if taken is None:
            return cls.UNMARKED
        return cls.TAKEN if taken else cls.MISSED


def parse_time_of_day(value: str) -> time:
    """Parse a 24h ``HH:MM`` string. Raises ValueError on anything else."""
    return datetime.strptime(value.strip(), TIME_FORMAT).time()


def format_time_of_day(value: time) -> str:
    return value.strftime(TIME_FORMAT)


# Immutable snapshot of a catalog entry; repositories hand these to the engine.
@dataclass(frozen=True)
class Medication:
    id: uuid.UUID
    name: str
    dosage: str
    scheduled_times: tuple[time, ...]
    notes: str | None = None
    frequency: Frequency = Frequency.DAILY
    specific_weekdays: frozenset[int] = field(default_factory=frozenset)


@dataclass(frozen=True)
class DoseEvent:
    medication_id: uuid.UUID
    date: date
    scheduled_time: time
    taken: bool


@dataclass(frozen=True)
class TodayDose:
    medication: Medication
    scheduled_time: time
    status: DoseStatus


@dataclass(frozen=True)
class NextDose:
    dose: TodayDose
    countdown: str
    in_window: bool


@dataclass(frozen=True)
class DayAdherence:
    date: date
    percentage: int


# Single undo slot: state of one dose right before it was last marked.
# previous_taken is None when the dose was unmarked.
@dataclass(frozen=True)
class LastAction:
    medication_id: uuid.UUID
    date: date
    scheduled_time: time
    previous_taken: bool | None
