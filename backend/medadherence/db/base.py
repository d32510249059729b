"""Module: base."""

from sqlalchemy.orm import DeclarativeBase

# Shared SQLAlchemy declarative base for the medication and dose-event tables.
# Alembic and init_db both read table definitions from Base.metadata.
class Base(DeclarativeBase):
    pass
