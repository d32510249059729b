"""Module: deps."""

import uuid
from datetime import datetime
from typing import Generator

from fastapi import Depends, HTTPException, Request
from sqlalchemy.orm import Session

from medadherence.core.context import AppContext
from medadherence.engine.undo import UndoBuffer


def get_context(request: Request) -> AppContext:
    return request.app.state.context


# Dependency provider: one DB session per request lifecycle.
def get_db(context: AppContext = Depends(get_context)) -> Generator[Session, None, None]:
    db = context.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_undo_buffer(context: AppContext = Depends(get_context)) -> UndoBuffer:
    return context.undo_buffer


# "now" is sampled once per request so every derived value agrees.
def get_now(context: AppContext = Depends(get_context)) -> datetime:
    return context.clock()


# Validate and coerce UUID inputs from path/body payloads.
def parse_uuid(value: str, field_name: str = "id") -> uuid.UUID:
    try:
        return uuid.UUID(value)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Invalid {field_name} (must be UUID)")
