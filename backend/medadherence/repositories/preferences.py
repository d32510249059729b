"""Module: preferences."""

import logging

from sqlalchemy.orm import Session

from medadherence.db.models.display_preferences import SINGLETON_ID, DisplayPreferences

logger = logging.getLogger(__name__)

FONT_SCALES = (1.0, 1.15)


class PreferencesStore:
    def __init__(self, db: Session):
        self.db = db

    def _row(self) -> DisplayPreferences:
        row = self.db.get(DisplayPreferences, SINGLETON_ID)
        if row is None:
            row = DisplayPreferences(id=SINGLETON_ID, font_scale=FONT_SCALES[0])
            self.db.add(row)
            self.db.commit()
        return row

    def get_font_scale(self) -> float:
        return self._row().font_scale

    def set_font_scale(self, font_scale: float) -> float:
        if font_scale not in FONT_SCALES:
            raise ValueError(f"font_scale must be one of {', '.join(str(s) for s in FONT_SCALES)}")
        row = self._row()
        row.font_scale = font_scale
        self.db.commit()
        logger.info("Font scale set to %s", font_scale)
        return row.font_scale
