"""Quiz API — FastAPI application factory and entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Every dependency (settings, database, services) built once in lifespan and
      stored on app.state.container, never looked up implicitly
    - Startup waits for the database before serving

Design Decisions:
    - create_app(settings) factory: tests build their own app and container
    - Lifespan over @app.on_event: cleaner cleanup (engine disposed on shutdown)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from quiz.api.error_handlers import register_error_handlers
from quiz.api.routes import answers, health, questions
from quiz.config import Settings, get_settings
from quiz.container import build_container
from quiz.infrastructure.database import DatabaseSessionManager
from quiz.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        db = DatabaseSessionManager(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
        await db.wait_until_ready(
            settings.database_connect_retries,
            settings.database_retry_interval_seconds,
        )
        app.state.container = build_container(
            db, settings.transaction_isolation_level,
        )
        logger.info("Quiz API started")
        yield
        logger.info("Quiz API shutting down")
        await db.dispose()

    app = FastAPI(title="Quiz API", version="1.0.0", lifespan=lifespan)

    app.include_router(health.router)
    app.include_router(questions.router)
    app.include_router(answers.questions_router)
    app.include_router(answers.router)

    register_error_handlers(app)
    return app


app = create_app()
