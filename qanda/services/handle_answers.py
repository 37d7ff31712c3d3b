"""Answer Handlers — create_answer, read_answers, delete_answer.

Invariants:
    - Each operation makes exactly one AnswersStore call
    - Blank content / identifiers rejected with BadRequestError before the store is called
    - A missing question on create surfaces as InternalError (ConstraintViolation)
    - read_answers for an unknown question returns [] (no existence check)
"""

from qanda.core.domain_types import AnswerDetail
from qanda.core.errors import StoreError
from qanda.core.repository_protocols import AnswersStore
from qanda.schemas.answer import AnswerCreate, AnswerRef
from qanda.schemas.question import QuestionRef
from qanda.services.handler_errors import require_text, to_handler_error


class AnswerHandlers:
    """Orchestrates answer requests against an AnswersStore."""

    def __init__(self, store: AnswersStore):
        self.store = store

    async def create_answer(self, payload: AnswerCreate) -> AnswerDetail:
        question_uuid = require_text(payload.question_uuid, "question_uuid")
        content = require_text(payload.content, "content")
        try:
            return await self.store.create(content, question_uuid)
        except StoreError as exc:
            raise to_handler_error(exc, "Failed to create answer") from exc

    async def read_answers(self, payload: QuestionRef) -> list[AnswerDetail]:
        question_uuid = require_text(payload.question_uuid, "question_uuid")
        try:
            return await self.store.list_by_question(question_uuid)
        except StoreError as exc:
            raise to_handler_error(exc, "Failed to read answers") from exc

    async def delete_answer(self, payload: AnswerRef) -> None:
        answer_uuid = require_text(payload.answer_uuid, "answer_uuid")
        try:
            await self.store.delete(answer_uuid)
        except StoreError as exc:
            raise to_handler_error(exc, "Failed to delete answer") from exc
