import logging

from sqlalchemy.engine import Engine

from medadherence.db.base import Base

# IMPORTANT: import models so they register with Base.metadata
import medadherence.db.models  # noqa: F401

logger = logging.getLogger(__name__)


def init_db(db_engine: Engine) -> None:
    Base.metadata.create_all(bind=db_engine)
    logger.info("Database schema ready at %s", db_engine.url.render_as_string(hide_password=True))
