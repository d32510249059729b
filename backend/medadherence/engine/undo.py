"""Module: undo."""

from __future__ import annotations

import logging
import threading
import uuid
from datetime import date, time

from medadherence.domain import LastAction
from medadherence.repositories.dose_events import DoseEventLog

logger = logging.getLogger(__name__)


class UndoBuffer:
    """
    One-step undo for dose marks.

    Holds a single capture of a dose's state taken right before the most
    recent mark. A new mark replaces the capture, so only the latest mark can
    be undone; two quick marks of the same dose undo back to the state between
    them, not to the state before the first.
    """

    def __init__(self):
        self._last: LastAction | None = None
        self._lock = threading.RLock()

    @property
    def last_action(self) -> LastAction | None:
        return self._last

    def capture_before_mark(
        self, log: DoseEventLog, medication_id: uuid.UUID, day: date, scheduled_time: time
    ) -> LastAction:
        with self._lock:
            self._last = LastAction(
                medication_id=medication_id,
                date=day,
                scheduled_time=scheduled_time,
                previous_taken=log.get_status(medication_id, day, scheduled_time),
            )
            return self._last

    def mark(
        self, log: DoseEventLog, medication_id: uuid.UUID, day: date, scheduled_time: time, taken: bool
    ) -> LastAction:
        """Capture the current state and record the new outcome as one step."""
        with self._lock:
            action = self.capture_before_mark(log, medication_id, day, scheduled_time)
            log.record_dose(medication_id, day, scheduled_time, taken)
            return action

    def undo(self, log: DoseEventLog) -> LastAction | None:
        with self._lock:
            action = self._last
            if action is None:
                return None
            if action.previous_taken is None:
                log.unmark_dose(action.medication_id, action.date, action.scheduled_time)
            else:
                log.record_dose(action.medication_id, action.date, action.scheduled_time, action.previous_taken)
            self._last = None
            logger.info("Undid last mark for medication %s", action.medication_id)
            return action

    def discard_for(self, medication_id: uuid.UUID) -> None:
        # A deleted medication's dose must not be restored by a later undo.
        with self._lock:
            if self._last is not None and self._last.medication_id == medication_id:
                self._last = None

    def clear(self) -> None:
        with self._lock:
            self._last = None
