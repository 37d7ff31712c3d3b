"""Question Routes — POST /question, GET /questions, DELETE /question.

Invariants:
    - Created question is returned with identifier and created_at
    - Malformed identifiers and blank fields are 400
    - DELETE of an absent question is 200 with an empty body, repeatedly
    - Unexpected exceptions are 500 INTERNAL_ERROR with no internal details
"""

from httpx import ASGITransport, AsyncClient

from qanda.main import app

MISSING_QUESTION = "11111111-1111-1111-1111-111111111111"


async def test_create_returns_question_detail(client):
    res = await client.post("/question", json={"title": "T", "description": "D"})

    assert res.status_code == 200
    body = res.json()
    assert set(body) == {"question_uuid", "title", "description", "created_at"}
    assert body["title"] == "T"
    assert body["description"] == "D"
    assert body["created_at"]


async def test_create_then_list(client, seed_question):
    res = await client.get("/questions")

    assert res.status_code == 200
    assert res.json() == [seed_question]


async def test_create_with_missing_field_is_400(client):
    res = await client.post("/question", json={"title": "T"})

    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_create_with_blank_title_is_400(client):
    res = await client.post("/question", json={"title": "  ", "description": "D"})

    assert res.status_code == 400
    assert res.json()["error"]["code"] == "BAD_REQUEST"


async def test_create_with_non_string_title_is_400(client):
    res = await client.post("/question", json={"title": 5, "description": "D"})
    assert res.status_code == 400


async def test_delete_question(client, seed_question):
    res = await client.request(
        "DELETE", "/question", json={"question_uuid": seed_question["question_uuid"]},
    )

    assert res.status_code == 200
    assert res.content == b""
    assert (await client.get("/questions")).json() == []


async def test_delete_missing_question_is_idempotent(client):
    for _ in range(2):
        res = await client.request(
            "DELETE", "/question", json={"question_uuid": MISSING_QUESTION},
        )
        assert res.status_code == 200


async def test_delete_with_malformed_identifier_is_400(client):
    res = await client.request("DELETE", "/question", json={"question_uuid": "nope"})

    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "BAD_REQUEST"
    assert "nope" in error["message"]


class _BrokenQuestionsStore:
    async def list(self):
        raise RuntimeError("secret connection string")


async def test_unexpected_error_is_500_without_details(client):
    app.state.questions_store = _BrokenQuestionsStore()
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        res = await c.get("/questions")

    assert res.status_code == 500
    assert res.json()["error"]["code"] == "INTERNAL_ERROR"
    assert "secret" not in res.text
