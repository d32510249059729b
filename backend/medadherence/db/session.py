"""Module: session."""

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from medadherence.core.config import settings


def build_engine(database_url: str, **kwargs) -> Engine:
    connect_args = kwargs.pop("connect_args", {})
    if database_url.startswith("sqlite"):
        # One connection may be handed across FastAPI's threadpool workers.
        connect_args.setdefault("check_same_thread", False)

    db_engine = create_engine(database_url, connect_args=connect_args, **kwargs)

    if db_engine.dialect.name == "sqlite":
        # SQLite leaves FK enforcement (and ON DELETE CASCADE) off per connection.
        @event.listens_for(db_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return db_engine


def build_session_factory(db_engine: Engine) -> sessionmaker:
    return sessionmaker(bind=db_engine, autoflush=False, expire_on_commit=False)


engine = build_engine(settings.database_url)
SessionLocal = build_session_factory(engine)
