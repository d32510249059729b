"""Module: medications."""

from __future__ import annotations

import logging
import uuid

from sqlalchemy import select
from sqlalchemy.orm import Session

from medadherence import domain
from medadherence.db.models.medication import Medication
from medadherence.repositories.dose_events import DoseEventLog

logger = logging.getLogger(__name__)


class MedicationCatalog:
    """Create/read/update/delete access to the medication catalog."""

    def __init__(self, db: Session):
        self.db = db

    def add(self, medication: domain.Medication) -> domain.Medication:
        row = Medication(medication_id=medication.id)
        row.apply(medication)
        self.db.add(row)
        self.db.commit()
        logger.info("Added medication %s (%s)", row.medication_id, row.name)
        return row.to_domain()

    def update(self, medication: domain.Medication) -> domain.Medication | None:
        row = self.db.get(Medication, medication.id)
        if row is None:
            logger.warning("Update skipped, medication %s not found", medication.id)
            return None
        row.apply(medication)
        self.db.commit()
        logger.info("Updated medication %s", row.medication_id)
        return row.to_domain()

    def delete(self, medication_id: uuid.UUID) -> bool:
        row = self.db.get(Medication, medication_id)
        if row is None:
            return False
        # Events go in the same transaction so readers never see orphans.
        removed = DoseEventLog(self.db).delete_all_for(medication_id, commit=False)
        self.db.delete(row)
        self.db.commit()
        logger.info("Deleted medication %s and %d dose events", medication_id, removed)
        return True

    def get_by_id(self, medication_id: uuid.UUID) -> domain.Medication | None:
        row = self.db.get(Medication, medication_id)
        return row.to_domain() if row else None

    def list_all(self) -> list[domain.Medication]:
        rows = self.db.execute(select(Medication).order_by(Medication.name.asc())).scalars().all()
        return [r.to_domain() for r in rows]
