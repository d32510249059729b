"""Module: preferences."""

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from sqlalchemy.orm import Session

from medadherence.api.v1.routes.deps import get_context, get_db
from medadherence.core.context import AppContext
from medadherence.repositories.preferences import FONT_SCALES, PreferencesStore

router = APIRouter()


class DisplayPayload(BaseModel):
    font_scale: float


# Endpoint: first read creates the default row, so it takes the write lock like every other write.
@router.get("/display", summary="Display preferences")
def get_display(
    db: Session = Depends(get_db),
    context: AppContext = Depends(get_context),
):
    with context.lock:
        font_scale = PreferencesStore(db).get_font_scale()
    return {"font_scale": font_scale, "options": list(FONT_SCALES)}


@router.put("/display", summary="Update display preferences")
def update_display(
    payload: DisplayPayload,
    db: Session = Depends(get_db),
    context: AppContext = Depends(get_context),
):
    try:
        with context.lock:
            font_scale = PreferencesStore(db).set_font_scale(payload.font_scale)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return {"font_scale": font_scale, "options": list(FONT_SCALES)}
