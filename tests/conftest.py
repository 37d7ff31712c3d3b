"""Root conftest — shared test configuration and store fixtures."""

import os

import pytest

# Settings are read when qanda.main is imported: never point tests at a real database
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("STORAGE_BACKEND", "memory")
os.environ.setdefault("LOG_FORMAT", "text")

from qanda.infrastructure.database import DatabaseSessionManager  # noqa: E402
from qanda.stores.memory import (  # noqa: E402
    InMemoryAnswersStore, InMemoryQuestionsStore, InMemoryStorage,
)
from qanda.stores.sql_answers import SqlAnswersStore  # noqa: E402
from qanda.stores.sql_questions import SqlQuestionsStore  # noqa: E402


@pytest.fixture
async def sql_db():
    """Fresh in-memory SQLite database with the schema and foreign keys on."""
    db = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    await db.create_schema()
    yield db
    await db.dispose()


@pytest.fixture(params=["sql", "memory"])
async def stores(request, sql_db):
    """(QuestionsStore, AnswersStore) pair for each backend."""
    if request.param == "sql":
        return SqlQuestionsStore(sql_db), SqlAnswersStore(sql_db)
    storage = InMemoryStorage()
    return InMemoryQuestionsStore(storage), InMemoryAnswersStore(storage)
