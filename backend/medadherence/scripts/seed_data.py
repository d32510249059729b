"""
Module: seed_data.

Demo catalog and dose history for local development and the test suite.
Never called at application startup; run it by hand against a dev database:

    python -m medadherence.scripts.seed_data --days 6 --seed 42
"""

import argparse
import logging
import random
import uuid
from datetime import date, timedelta

from medadherence import domain
from medadherence.core.config import settings
from medadherence.core.logging_config import configure_logging
from medadherence.db.init_db import init_db
from medadherence.db.session import SessionLocal, engine
from medadherence.repositories.dose_events import DoseEventLog
from medadherence.repositories.medications import MedicationCatalog

logger = logging.getLogger(__name__)

TAKEN_PROBABILITY = 0.80

# (name, dosage, "HH:MM", notes)
DEMO_MEDICATIONS = [
    ("Amlodipine", "5 mg", "07:00", "Take with water in the morning"),
    ("Metoprolol", "50 mg", "19:00", "Take with dinner"),
    ("Aspirin", "81 mg", "21:00", "Low-dose for heart health"),
    ("Mesalamine", "800 mg", "08:00", "For IBD management"),
    ("Azathioprine", "50 mg", "22:00", "Immunosuppressant - take at bedtime"),
]


def demo_medications() -> list[domain.Medication]:
    # uuid5 keeps ids stable across runs.
    return [
        domain.Medication(
            id=uuid.uuid5(uuid.NAMESPACE_URL, f"medadherence/demo/{name.lower()}"),
            name=name,
            dosage=dosage,
            scheduled_times=(domain.parse_time_of_day(at),),
            notes=notes,
            frequency=domain.Frequency.DAILY,
        )
        for name, dosage, at, notes in DEMO_MEDICATIONS
    ]


def generate_history(
    medications: list[domain.Medication],
    today: date,
    days: int = 6,
    rng: random.Random | None = None,
    taken_probability: float = TAKEN_PROBABILITY,
) -> list[domain.DoseEvent]:
    """
    One event per scheduled dose for each of the ``days`` days before ``today``.

    Outcomes are drawn from ``rng`` so a fixed seed gives the same history.
    """
    rng = rng or random.Random(0)
    events = []
    for offset in range(days, 0, -1):
        day = today - timedelta(days=offset)
        for med in medications:
            for scheduled_time in med.scheduled_times:
                events.append(
                    domain.DoseEvent(
                        medication_id=med.id,
                        date=day,
                        scheduled_time=scheduled_time,
                        taken=rng.random() < taken_probability,
                    )
                )
    return events


def seed(db, today: date, days: int, seed_value: int) -> int:
    catalog = MedicationCatalog(db)
    if catalog.list_all():
        logger.info("Catalog not empty, skipping seed")
        return 0

    medications = demo_medications()
    for med in medications:
        catalog.add(med)

    log = DoseEventLog(db)
    history = generate_history(medications, today, days, random.Random(seed_value))
    for event in history:
        log.record_dose(event.medication_id, event.date, event.scheduled_time, event.taken)
    logger.info("Seeded %d medications and %d dose events", len(medications), len(history))
    return len(history)


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed demo medications and dose history")
    parser.add_argument("--days", type=int, default=6, help="days of history before today")
    parser.add_argument("--seed", type=int, default=42, help="random seed for taken/missed outcomes")
    args = parser.parse_args()

    configure_logging(settings.log_level)
    init_db(engine)
    db = SessionLocal()
    try:
        seed(db, date.today(), args.days, args.seed)
    finally:
        db.close()


if __name__ == "__main__":
    main()
