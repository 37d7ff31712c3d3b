"""Question/Answer Handlers — payload checks and the store → boundary error collapse.

Tests cover:
    - Blank or non-string fields rejected before the store is called
    - InvalidIdentifierError → BadRequestError
    - ConstraintViolationError / StorageFailureError → InternalError (generic message)
    - Each operation makes exactly one store call
"""

import logging

import pytest
from unittest.mock import AsyncMock

from qanda.core.domain_types import QuestionDetail
from qanda.core.errors import (
    BadRequestError, ConstraintViolationError, InternalError,
    InvalidIdentifierError, StorageFailureError,
)
from qanda.schemas.answer import AnswerCreate, AnswerRef
from qanda.schemas.question import QuestionCreate, QuestionRef
from qanda.services.handle_answers import AnswerHandlers
from qanda.services.handle_questions import QuestionHandlers
from qanda.services.handler_errors import require_text, to_handler_error
from qanda.stores.memory import (
    InMemoryAnswersStore, InMemoryQuestionsStore, InMemoryStorage,
)

MISSING_QUESTION = "11111111-1111-1111-1111-111111111111"


@pytest.fixture
def handlers():
    storage = InMemoryStorage()
    return (
        QuestionHandlers(InMemoryQuestionsStore(storage)),
        AnswerHandlers(InMemoryAnswersStore(storage)),
    )


def _failing_store(exc: Exception) -> AsyncMock:
    store = AsyncMock()
    for name in ("create", "list", "list_by_question", "delete"):
        getattr(store, name).side_effect = exc
    return store


# ─── Payload validation ──────────────────────────────────────────

def test_require_text_returns_value_unchanged():
    assert require_text("  T ", "title") == "  T "


@pytest.mark.parametrize("value", ["", "   ", None, 7])
def test_require_text_rejects_blank_or_non_string(value):
    with pytest.raises(BadRequestError) as exc_info:
        require_text(value, "title")
    assert "title" in exc_info.value.message


async def test_blank_title_never_reaches_store():
    store = AsyncMock()
    with pytest.raises(BadRequestError):
        await QuestionHandlers(store).create_question(
            QuestionCreate(title=" ", description="D"),
        )
    store.create.assert_not_called()


async def test_blank_content_never_reaches_store():
    store = AsyncMock()
    with pytest.raises(BadRequestError):
        await AnswerHandlers(store).create_answer(
            AnswerCreate(question_uuid=MISSING_QUESTION, content=""),
        )
    store.create.assert_not_called()


# ─── Error collapse ──────────────────────────────────────────────

def test_invalid_identifier_maps_to_bad_request():
    mapped = to_handler_error(InvalidIdentifierError("nope"), "Failed to delete question")
    assert isinstance(mapped, BadRequestError)
    assert mapped.message == "Could not parse UUID: nope"


@pytest.mark.parametrize("exc", [
    ConstraintViolationError("Invalid question uuid x"),
    StorageFailureError("Question list failed"),
])
def test_storage_errors_map_to_internal_error(exc):
    mapped = to_handler_error(exc, "Failed to read questions")
    assert isinstance(mapped, InternalError)
    assert mapped.message == "Failed to read questions"


def test_storage_error_mapping_does_not_log_at_error(caplog):
    with caplog.at_level(logging.DEBUG, logger="qanda.services.handler_errors"):
        to_handler_error(StorageFailureError("Question list failed"), "Failed to read questions")

    assert not [r for r in caplog.records if r.levelno >= logging.ERROR]


async def test_storage_failure_on_create_is_internal_error():
    cause = StorageFailureError("Question create failed")
    handlers = QuestionHandlers(_failing_store(cause))

    with pytest.raises(InternalError) as exc_info:
        await handlers.create_question(QuestionCreate(title="T", description="D"))

    assert exc_info.value.__cause__ is cause


async def test_storage_failure_on_read_answers_is_internal_error():
    handlers = AnswerHandlers(_failing_store(StorageFailureError("down")))
    with pytest.raises(InternalError):
        await handlers.read_answers(QuestionRef(question_uuid=MISSING_QUESTION))


# ─── Operations over the in-memory stores ────────────────────────

async def test_create_and_read_questions(handlers):
    questions, _ = handlers
    created = await questions.create_question(QuestionCreate(title="T", description="D"))

    listed = await questions.read_questions()

    assert listed == [created]
    assert isinstance(created, QuestionDetail)


async def test_create_answer_for_missing_question_is_internal_error(handlers):
    _, answers = handlers
    with pytest.raises(InternalError) as exc_info:
        await answers.create_answer(
            AnswerCreate(question_uuid=MISSING_QUESTION, content="A1"),
        )
    assert isinstance(exc_info.value.__cause__, ConstraintViolationError)
    assert await answers.read_answers(QuestionRef(question_uuid=MISSING_QUESTION)) == []


async def test_malformed_identifiers_are_bad_requests(handlers):
    questions, answers = handlers
    with pytest.raises(BadRequestError):
        await questions.delete_question(QuestionRef(question_uuid="abc"))
    with pytest.raises(BadRequestError):
        await answers.read_answers(QuestionRef(question_uuid="abc"))
    with pytest.raises(BadRequestError):
        await answers.delete_answer(AnswerRef(answer_uuid="abc"))
    with pytest.raises(BadRequestError):
        await answers.create_answer(AnswerCreate(question_uuid="abc", content="A1"))


async def test_delete_question_is_idempotent(handlers):
    questions, _ = handlers
    await questions.delete_question(QuestionRef(question_uuid=MISSING_QUESTION))
    await questions.delete_question(QuestionRef(question_uuid=MISSING_QUESTION))


async def test_each_operation_calls_store_once():
    store = AsyncMock()
    store.list_by_question.return_value = []
    await AnswerHandlers(store).read_answers(QuestionRef(question_uuid=MISSING_QUESTION))
    store.list_by_question.assert_awaited_once_with(MISSING_QUESTION)
