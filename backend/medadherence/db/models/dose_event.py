"""Module: dose_event."""

import uuid
from datetime import date

from sqlalchemy import Boolean, Date, ForeignKey, Integer, String, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from medadherence import domain
from medadherence.db.base import Base


# Outcome of one scheduled dose. No row for a (medication, date, time) means unmarked.
class DoseEvent(Base):
    __tablename__ = "dose_events"
    __table_args__ = (
        UniqueConstraint("medication_id", "date", "scheduled_time", name="uq_dose_events_medication_date_time"),
    )

    dose_event_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    medication_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("medications.medication_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    dose_date: Mapped[date] = mapped_column("date", Date, nullable=False, index=True)
    scheduled_time: Mapped[str] = mapped_column(String(5), nullable=False)
    taken: Mapped[bool] = mapped_column(Boolean, nullable=False)

    def to_domain(self) -> domain.DoseEvent:
        return domain.DoseEvent(
            medication_id=self.medication_id,
            date=self.dose_date,
            scheduled_time=domain.parse_time_of_day(self.scheduled_time),
            taken=self.taken,
        )
