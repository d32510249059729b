"""Module: medication."""

import uuid

from sqlalchemy import Enum, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from medadherence import domain
from medadherence.db.base import Base
from medadherence.db.types import CommaSeparatedIntList, CommaSeparatedList


# A medication the user takes, with its dosing schedule.
class Medication(Base):
    __tablename__ = "medications"

    medication_id: Mapped[uuid.UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String, nullable=False, index=True)
    dosage: Mapped[str] = mapped_column(String, nullable=False)
    # "HH:MM" strings, kept sorted.
    scheduled_times: Mapped[list[str]] = mapped_column(CommaSeparatedList, nullable=False)
    notes: Mapped[str] = mapped_column(String, nullable=True)
    frequency: Mapped[domain.Frequency] = mapped_column(
        Enum(domain.Frequency, native_enum=False, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=domain.Frequency.DAILY,
    )
    # ISO weekday numbers, 1=Monday..7=Sunday.
    specific_weekdays: Mapped[list[int]] = mapped_column(CommaSeparatedIntList, nullable=False)

    def to_domain(self) -> domain.Medication:
        return domain.Medication(
            id=self.medication_id,
            name=self.name,
            dosage=self.dosage,
            scheduled_times=tuple(domain.parse_time_of_day(t) for t in self.scheduled_times),
            notes=self.notes,
            frequency=self.frequency,
            specific_weekdays=frozenset(self.specific_weekdays),
        )

    def apply(self, medication: domain.Medication) -> None:
        self.name = medication.name
        self.dosage = medication.dosage
        self.scheduled_times = [domain.format_time_of_day(t) for t in sorted(medication.scheduled_times)]
        self.notes = medication.notes
        self.frequency = medication.frequency
        self.specific_weekdays = sorted(medication.specific_weekdays)
