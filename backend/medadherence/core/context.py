"""Module: context."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Callable

from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from medadherence.core.config import Settings
from medadherence.engine.undo import UndoBuffer


# Everything a request needs, built once in create_app() and kept on app.state.
@dataclass
class AppContext:
    settings: Settings
    engine: Engine
    session_factory: sessionmaker
    undo_buffer: UndoBuffer = field(default_factory=UndoBuffer)
    # Local wall clock; tests swap in a fixed instant.
    clock: Callable[[], datetime] = datetime.now
    # Serializes writes against multi-query reads so stats never see half an update.
    lock: threading.RLock = field(default_factory=threading.RLock)

    @property
    def dose_window(self) -> timedelta:
        return timedelta(minutes=self.settings.dose_window_minutes)
