"""Module: home."""

from datetime import datetime

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from medadherence.api.v1.routes.deps import get_context, get_db, get_now
from medadherence.api.v1.routes.serializers import serialize_dose
from medadherence.core.context import AppContext
from medadherence.engine.adherence import calculate_streak, next_dose, todays_doses, weekly_adherence
from medadherence.repositories.snapshot import load_snapshot

router = APIRouter()

ALL_DONE = "All done!"


# Endpoint: everything the home screen polls for, derived from one snapshot.
@router.get("", summary="Home screen summary")
def home_summary(
    now: datetime = Depends(get_now),
    db: Session = Depends(get_db),
    context: AppContext = Depends(get_context),
):
    today = now.date()
    with context.lock:
        snapshot = load_snapshot(db, today)

    doses = todays_doses(snapshot.medications, snapshot.today_events, today)
    upcoming = next_dose(doses, now, context.dose_window)

    if upcoming is None:
        next_payload = {"countdown": ALL_DONE, "dose": None, "in_window": False}
    else:
        next_payload = {
            "countdown": upcoming.countdown,
            "dose": serialize_dose(upcoming.dose),
            "in_window": upcoming.in_window,
        }

    return {
        "date": today.isoformat(),
        "now": now.isoformat(timespec="seconds"),
        "next_dose": next_payload,
        "doses": [serialize_dose(d) for d in doses],
        "weekly_adherence": weekly_adherence(snapshot.week_events, today),
        "streak_days": calculate_streak(snapshot.events, today),
    }
