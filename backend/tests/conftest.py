import uuid
from datetime import datetime, time

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from medadherence import domain
from medadherence.core.config import Settings
from medadherence.core.context import AppContext
from medadherence.db.init_db import init_db
from medadherence.db.session import build_engine, build_session_factory
from medadherence.main import create_app

# Monday 2026-10-19, noon local time.
FIXED_NOW = datetime(2026, 10, 19, 12, 0)


class FakeClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def engine():
    db_engine = build_engine("sqlite://", poolclass=StaticPool)
    init_db(db_engine)
    yield db_engine
    db_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def clock():
    return FakeClock(FIXED_NOW)


@pytest.fixture
def context(engine, session_factory, clock):
    return AppContext(
        settings=Settings(database_url="sqlite://"),
        engine=engine,
        session_factory=session_factory,
        clock=clock,
    )


@pytest.fixture
def client(context):
    with TestClient(create_app(context)) as test_client:
        yield test_client


@pytest.fixture
def make_medication():
    def _make(
        name="Amlodipine",
        times=("07:00",),
        frequency=domain.Frequency.DAILY,
        weekdays=(),
        dosage="5 mg",
        medication_id=None,
    ):
        return domain.Medication(
            id=medication_id or uuid.uuid4(),
            name=name,
            dosage=dosage,
            scheduled_times=tuple(domain.parse_time_of_day(t) for t in times),
            frequency=frequency,
            specific_weekdays=frozenset(weekdays),
        )

    return _make


def at(hhmm: str) -> time:
    return domain.parse_time_of_day(hhmm)
