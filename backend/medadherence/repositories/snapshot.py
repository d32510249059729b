"""Module: snapshot."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from sqlalchemy.orm import Session

from medadherence import domain
from medadherence.engine.adherence import week_window
from medadherence.repositories.dose_events import DoseEventLog
from medadherence.repositories.medications import MedicationCatalog


# Catalog + event log as read in one go, for the adherence engine.
@dataclass(frozen=True)
class TrackerSnapshot:
    today: date
    medications: list[domain.Medication]
    # Every event from the earliest recorded date through today.
    events: list[domain.DoseEvent]

    @property
    def today_events(self) -> list[domain.DoseEvent]:
        return [e for e in self.events if e.date == self.today]

    @property
    def week_events(self) -> list[domain.DoseEvent]:
        start, end = week_window(self.today)
        return [e for e in self.events if start <= e.date <= end]


def load_snapshot(db: Session, today: date) -> TrackerSnapshot:
    log = DoseEventLog(db)
    earliest = log.earliest_date()
    events = log.events_in_range(min(earliest, today), today) if earliest else []
    return TrackerSnapshot(today=today, medications=MedicationCatalog(db).list_all(), events=events)
