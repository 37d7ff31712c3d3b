"""Q&A API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Stores are built once in the lifespan and published on app.state
    - The connection pool is created once per process and disposed on shutdown
    - CORS configured from settings (not hardcoded)

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Explicit injection (manager → store → app.state → Depends) instead of a
      module-level db singleton
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from qanda.api.error_handlers import register_error_handlers
from qanda.api.routes import answers, health, questions
from qanda.config import Settings, get_settings
from qanda.infrastructure.database import DatabaseSessionManager
from qanda.infrastructure.observability import setup_logging
from qanda.stores.memory import (
    InMemoryAnswersStore, InMemoryQuestionsStore, InMemoryStorage,
)
from qanda.stores.sql_answers import SqlAnswersStore
from qanda.stores.sql_questions import SqlQuestionsStore

logger = logging.getLogger(__name__)


async def init_stores(app: FastAPI, settings: Settings) -> DatabaseSessionManager | None:
    """Build the stores for the configured backend and attach them to app.state."""
    if settings.storage_backend == "memory":
        storage = InMemoryStorage()
        app.state.db_manager = None
        app.state.questions_store = InMemoryQuestionsStore(storage)
        app.state.answers_store = InMemoryAnswersStore(storage)
        return None

    db_manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.create_schema_on_startup:
        await db_manager.create_schema()
    app.state.db_manager = db_manager
    app.state.questions_store = SqlQuestionsStore(db_manager)
    app.state.answers_store = SqlAnswersStore(db_manager)
    return db_manager


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db_manager = await init_stores(app, settings)
    logger.info(f"Q&A API started ({settings.storage_backend} storage)")
    yield
    logger.info("Q&A API shutting down")
    if db_manager is not None:
        await db_manager.dispose()


app = FastAPI(title="Q&A API", version="0.1.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=settings.cors_allow_methods,
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(questions.router)
app.include_router(answers.router)

register_error_handlers(app)
