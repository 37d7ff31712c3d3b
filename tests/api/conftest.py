"""API test fixtures — FastAPI test client over a SQLite-backed store pair.

Invariants:
    - Every test gets a fresh in-memory SQLite database (foreign keys on)
    - app.state carries the stores the lifespan would have built
    - app.state is restored after each test

Design Decisions:
    - ASGITransport does not run the lifespan, so the fixture installs the stores itself
    - SQLite in-memory: fast, no external dependency; FK and cascade still enforced
"""

import pytest
from httpx import ASGITransport, AsyncClient

from qanda.main import app
from qanda.stores.sql_answers import SqlAnswersStore
from qanda.stores.sql_questions import SqlQuestionsStore

_STATE_KEYS = ("db_manager", "questions_store", "answers_store")


@pytest.fixture
async def client(sql_db):
    """FastAPI test client with SQL stores installed on app.state."""
    original = {key: getattr(app.state, key, None) for key in _STATE_KEYS}
    app.state.db_manager = sql_db
    app.state.questions_store = SqlQuestionsStore(sql_db)
    app.state.answers_store = SqlAnswersStore(sql_db)

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    for key, value in original.items():
        setattr(app.state, key, value)


@pytest.fixture
async def seed_question(client):
    """Create one question through the API."""
    res = await client.post("/question", json={"title": "T", "description": "D"})
    assert res.status_code == 200
    return res.json()
