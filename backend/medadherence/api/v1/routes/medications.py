"""Module: medications."""

from __future__ import annotations

import logging
import uuid
from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from sqlalchemy.orm import Session

from medadherence.api.v1.routes.deps import get_context, get_db, parse_uuid
from medadherence.api.v1.routes.serializers import serialize_medication
from medadherence.core.context import AppContext
from medadherence.core.errors import MedicationValidationError
from medadherence.domain import Frequency
from medadherence.engine.validation import validate_medication
from medadherence.repositories.medications import MedicationCatalog

logger = logging.getLogger(__name__)

router = APIRouter()

# Raw form values; validate_medication judges every field and reports all errors at once.
class MedicationPayload(BaseModel):
    name: Any = None
    dosage: Any = None
    scheduled_times: Any = None
    notes: Any = None
    frequency: Any = Frequency.DAILY.value
    specific_weekdays: Any = None


def _validated(payload: MedicationPayload, medication_id: uuid.UUID | None = None):
    try:
        return validate_medication(
            name=payload.name,
            dosage=payload.dosage,
            scheduled_times=payload.scheduled_times,
            notes=payload.notes,
            frequency=payload.frequency,
            specific_weekdays=payload.specific_weekdays,
            medication_id=medication_id,
        )
    except MedicationValidationError as exc:
        logger.warning("Rejected medication form: %s", exc)
        raise HTTPException(status_code=422, detail={"errors": exc.errors})

# Endpoint: full catalog, ordered by name.
@router.get("", summary="List medications")
def list_medications(db: Session = Depends(get_db)):
    return [serialize_medication(m) for m in MedicationCatalog(db).list_all()]

@router.get("/{medication_id}", summary="Get one medication")
def get_medication(medication_id: str, db: Session = Depends(get_db)):
    mid = parse_uuid(medication_id, "medication_id")
    med = MedicationCatalog(db).get_by_id(mid)
    if med is None:
        raise HTTPException(status_code=404, detail="Medication not found")
    return serialize_medication(med)

@router.post("", status_code=201, summary="Add a medication")
def create_medication(
    payload: MedicationPayload,
    db: Session = Depends(get_db),
    context: AppContext = Depends(get_context),
):
    med = _validated(payload)
    with context.lock:
        saved = MedicationCatalog(db).add(med)
    return serialize_medication(saved)

@router.put("/{medication_id}", summary="Replace a medication (same id)")
def update_medication(
    medication_id: str,
    payload: MedicationPayload,
    db: Session = Depends(get_db),
    context: AppContext = Depends(get_context),
):
    mid = parse_uuid(medication_id, "medication_id")
    med = _validated(payload, medication_id=mid)
    with context.lock:
        saved = MedicationCatalog(db).update(med)
    if saved is None:
        raise HTTPException(status_code=404, detail="Medication not found")
    return serialize_medication(saved)

# Endpoint: removes the medication and every dose event recorded for it.
@router.delete("/{medication_id}", summary="Delete a medication and its dose history")
def delete_medication(
    medication_id: str,
    db: Session = Depends(get_db),
    context: AppContext = Depends(get_context),
):
    mid = parse_uuid(medication_id, "medication_id")
    with context.lock:
        deleted = MedicationCatalog(db).delete(mid)
        if deleted:
            context.undo_buffer.discard_for(mid)
    if not deleted:
        raise HTTPException(status_code=404, detail="Medication not found")
    return {"id": str(mid), "deleted": True}
