"""Module: display_preferences."""

from sqlalchemy import Float, Integer
from sqlalchemy.orm import Mapped, mapped_column

from medadherence.db.base import Base

SINGLETON_ID = 1


# Single-row table holding UI display preferences.
class DisplayPreferences(Base):
    __tablename__ = "display_preferences"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, default=SINGLETON_ID)
    font_scale: Mapped[float] = mapped_column(Float, nullable=False, default=1.0)
