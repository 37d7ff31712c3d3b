"""Question Handlers — create_question, read_questions, delete_question.

Invariants:
    - Each operation makes exactly one QuestionsStore call
    - Blank title/description rejected with BadRequestError before the store is called
    - Only HandlerError subclasses escape (StoreError re-mapped via to_handler_error)
"""

from qanda.core.domain_types import QuestionDetail
from qanda.core.errors import StoreError
from qanda.core.repository_protocols import QuestionsStore
from qanda.schemas.question import QuestionCreate, QuestionRef
from qanda.services.handler_errors import require_text, to_handler_error


class QuestionHandlers:
    """Orchestrates question requests against a QuestionsStore."""

    def __init__(self, store: QuestionsStore):
        self.store = store

    async def create_question(self, payload: QuestionCreate) -> QuestionDetail:
        title = require_text(payload.title, "title")
        description = require_text(payload.description, "description")
        try:
            return await self.store.create(title, description)
        except StoreError as exc:
            raise to_handler_error(exc, "Failed to create question") from exc

    async def read_questions(self) -> list[QuestionDetail]:
        try:
            return await self.store.list()
        except StoreError as exc:
            raise to_handler_error(exc, "Failed to read questions") from exc

    async def delete_question(self, payload: QuestionRef) -> None:
        """Delete a question and, through the storage cascade, its answers."""
        question_uuid = require_text(payload.question_uuid, "question_uuid")
        try:
            await self.store.delete(question_uuid)
        except StoreError as exc:
            raise to_handler_error(exc, "Failed to delete question") from exc
