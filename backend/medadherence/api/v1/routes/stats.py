"""Module: stats."""

from datetime import datetime

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from medadherence.api.v1.routes.deps import get_context, get_db, get_now
from medadherence.api.v1.routes.serializers import serialize_day
from medadherence.core.context import AppContext
from medadherence.engine.adherence import (
    adherence_feedback,
    calculate_streak,
    daily_adherence,
    week_window,
    weekly_adherence,
)
from medadherence.repositories.snapshot import load_snapshot

router = APIRouter()


# Endpoint: last 7 days (today included), overall and per day.
@router.get("/weekly", summary="Weekly adherence")
def weekly_stats(
    now: datetime = Depends(get_now),
    db: Session = Depends(get_db),
    context: AppContext = Depends(get_context),
):
    today = now.date()
    with context.lock:
        snapshot = load_snapshot(db, today)

    week_events = snapshot.week_events
    weekly = weekly_adherence(week_events, today)
    start, end = week_window(today)
    return {
        "start": start.isoformat(),
        "end": end.isoformat(),
        "weekly_percentage": weekly,
        "daily": [serialize_day(d) for d in daily_adherence(week_events, today)],
        "feedback": adherence_feedback(weekly),
        "streak_days": calculate_streak(snapshot.events, today),
        "total_events": len(week_events),
        "taken_events": sum(1 for e in week_events if e.taken),
    }
