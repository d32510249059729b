"""Module: doses."""

from __future__ import annotations

from datetime import date, datetime

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from sqlalchemy.orm import Session

from medadherence import domain
from medadherence.api.v1.routes.deps import get_context, get_db, get_now, get_undo_buffer, parse_uuid
from medadherence.api.v1.routes.serializers import serialize_dose, serialize_last_action
from medadherence.core.context import AppContext
from medadherence.engine.adherence import is_due, todays_doses
from medadherence.engine.undo import UndoBuffer
from medadherence.repositories.dose_events import DoseEventLog
from medadherence.repositories.medications import MedicationCatalog
from medadherence.repositories.snapshot import load_snapshot

router = APIRouter()

class MarkDosePayload(BaseModel):
    medication_id: str
    scheduled_time: str
    taken: bool
    # Defaults to today's local date.
    dose_date: date | None = None


# Endpoint: today's schedule with taken/missed/unmarked status per dose.
@router.get("/today", summary="Today's doses")
def list_today_doses(
    now: datetime = Depends(get_now),
    db: Session = Depends(get_db),
    context: AppContext = Depends(get_context),
):
    today = now.date()
    with context.lock:
        snapshot = load_snapshot(db, today)
    doses = todays_doses(snapshot.medications, snapshot.today_events, today)
    return {"date": today.isoformat(), "doses": [serialize_dose(d) for d in doses]}

# Endpoint: record a dose as taken or missed, remembering its prior state for undo.
@router.post("/mark", summary="Mark a dose taken or missed")
def mark_dose(
    payload: MarkDosePayload,
    now: datetime = Depends(get_now),
    db: Session = Depends(get_db),
    context: AppContext = Depends(get_context),
    undo_buffer: UndoBuffer = Depends(get_undo_buffer),
):
    mid = parse_uuid(payload.medication_id, "medication_id")
    try:
        scheduled_time = domain.parse_time_of_day(payload.scheduled_time)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid scheduled_time (must be HH:MM)")
    day = payload.dose_date or now.date()
    if day > now.date():
        raise HTTPException(status_code=400, detail="Cannot mark a dose for a future date")

    with context.lock:
        med = MedicationCatalog(db).get_by_id(mid)
        if med is None:
            raise HTTPException(status_code=404, detail="Medication not found")
        if scheduled_time not in med.scheduled_times:
            raise HTTPException(
                status_code=400,
                detail=f"{payload.scheduled_time} is not a scheduled time for {med.name}",
            )
        if not is_due(med, day):
            raise HTTPException(status_code=400, detail=f"{med.name} is not scheduled on {day.isoformat()}")
        action = undo_buffer.mark(DoseEventLog(db), mid, day, scheduled_time, payload.taken)

    return {
        "medication_id": str(mid),
        "date": day.isoformat(),
        "scheduled_time": domain.format_time_of_day(scheduled_time),
        "status": domain.DoseStatus.from_taken(payload.taken).value,
        "message": "Dose marked as taken" if payload.taken else "Dose marked as missed",
        "undo": serialize_last_action(action),
    }

# Endpoint: restore the dose touched by the most recent mark. No-op when nothing to undo.
@router.post("/undo", summary="Undo the last mark")
def undo_last_mark(
    db: Session = Depends(get_db),
    context: AppContext = Depends(get_context),
    undo_buffer: UndoBuffer = Depends(get_undo_buffer),
):
    with context.lock:
        action = undo_buffer.undo(DoseEventLog(db))
    return {
        "undone": action is not None,
        "message": "Action undone" if action else "Nothing to undo",
        "restored": serialize_last_action(action),
    }

@router.get("/last-action", summary="Pending undo, if any")
def last_action(undo_buffer: UndoBuffer = Depends(get_undo_buffer)):
    return {"last_action": serialize_last_action(undo_buffer.last_action)}
