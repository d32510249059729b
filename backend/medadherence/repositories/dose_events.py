"""Module: dose_events."""

from __future__ import annotations

import logging
import uuid
from datetime import date, time

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from medadherence import domain
from medadherence.db.models.dose_event import DoseEvent

logger = logging.getLogger(__name__)


class DoseEventLog:
    """
    Taken/missed outcomes keyed by (medication, date, scheduled time).

    A missing row is the "unmarked" state, so every getter that reports a
    single dose returns ``True``, ``False`` or ``None``.
    """

    def __init__(self, db: Session):
        self.db = db

    def _find(self, medication_id: uuid.UUID, day: date, scheduled_time: time) -> DoseEvent | None:
        stmt = select(DoseEvent).where(
            DoseEvent.medication_id == medication_id,
            DoseEvent.dose_date == day,
            DoseEvent.scheduled_time == domain.format_time_of_day(scheduled_time),
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def get_status(self, medication_id: uuid.UUID, day: date, scheduled_time: time) -> bool | None:
        row = self._find(medication_id, day, scheduled_time)
        return row.taken if row else None

    def record_dose(self, medication_id: uuid.UUID, day: date, scheduled_time: time, taken: bool) -> bool | None:
        """Upsert the outcome and return what was stored before (None if unmarked)."""
        row = self._find(medication_id, day, scheduled_time)
        previous = row.taken if row else None
        if row is None:
            self.db.add(
                DoseEvent(
                    medication_id=medication_id,
                    dose_date=day,
                    scheduled_time=domain.format_time_of_day(scheduled_time),
                    taken=taken,
                )
            )
        else:
            row.taken = taken
        self.db.commit()
        logger.info(
            "Recorded %s for medication %s on %s at %s (was %s)",
            "taken" if taken else "missed",
            medication_id,
            day.isoformat(),
            domain.format_time_of_day(scheduled_time),
            domain.DoseStatus.from_taken(previous).value,
        )
        return previous

    def unmark_dose(self, medication_id: uuid.UUID, day: date, scheduled_time: time) -> None:
        row = self._find(medication_id, day, scheduled_time)
        if row is None:
            return
        self.db.delete(row)
        self.db.commit()
        logger.info(
            "Unmarked medication %s on %s at %s",
            medication_id,
            day.isoformat(),
            domain.format_time_of_day(scheduled_time),
        )

    def events_on(self, day: date) -> list[domain.DoseEvent]:
        return self.events_in_range(day, day)

    def events_in_range(self, start: date, end: date) -> list[domain.DoseEvent]:
        stmt = (
            select(DoseEvent)
            .where(DoseEvent.dose_date >= start, DoseEvent.dose_date <= end)
            .order_by(DoseEvent.dose_date.asc(), DoseEvent.scheduled_time.asc())
        )
        return [r.to_domain() for r in self.db.execute(stmt).scalars().all()]

    def earliest_date(self) -> date | None:
        return self.db.execute(select(func.min(DoseEvent.dose_date))).scalar_one_or_none()

    def delete_all_for(self, medication_id: uuid.UUID, commit: bool = True) -> int:
        result = self.db.execute(delete(DoseEvent).where(DoseEvent.medication_id == medication_id))
        if commit:
            self.db.commit()
        return result.rowcount or 0
