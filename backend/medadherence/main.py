"""Module: main."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from medadherence.api.v1.api import api_router
from medadherence.core.config import settings
from medadherence.core.context import AppContext
from medadherence.core.logging_config import configure_logging
from medadherence.db.init_db import init_db
from medadherence.db.session import SessionLocal, engine

logger = logging.getLogger(__name__)


def create_app(context: AppContext | None = None) -> FastAPI:
    if context is None:
        configure_logging(settings.log_level)
        context = AppContext(settings=settings, engine=engine, session_factory=SessionLocal)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        init_db(context.engine)
        logger.info("Medication adherence API started")
        yield

    app = FastAPI(title="Medication Adherence API", version="0.1.0", lifespan=lifespan)
    app.state.context = context

    app.include_router(api_router, prefix="/api/v1")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=context.settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    return app


app = create_app()
