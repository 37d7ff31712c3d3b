"""In-Memory Stores — dict-backed QuestionsStore / AnswersStore for tests and local runs.

Invariants:
    - Both stores share one InMemoryStorage, so the answers→questions reference
      is checked the way the database checks it (ConstraintViolationError)
    - Deleting a question drops its answers (cascade)
    - Identifiers are parsed with the same codec as the SQL stores
    - Insertion order is the listing order
"""

import uuid
from datetime import datetime, timezone

from qanda.core.domain_types import AnswerDetail, AnswerId, QuestionDetail, QuestionId
from qanda.core.errors import ConstraintViolationError, ErrorContext
from qanda.core.identifiers import format_identifier, parse_identifier


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class InMemoryStorage:
    """The two tables, keyed by primary key."""

    def __init__(self):
        self.questions: dict[QuestionId, QuestionDetail] = {}
        self.answers: dict[AnswerId, AnswerDetail] = {}


class InMemoryQuestionsStore:
    """QuestionsStore over InMemoryStorage."""

    def __init__(self, storage: InMemoryStorage):
        self._storage = storage

    async def create(self, title: str, description: str) -> QuestionDetail:
        question_id = QuestionId(uuid.uuid4())
        detail = QuestionDetail(
            question_uuid=format_identifier(question_id),
            title=title,
            description=description,
            created_at=_now(),
        )
        self._storage.questions[question_id] = detail
        return detail

    async def list(self) -> list[QuestionDetail]:
        return [*self._storage.questions.values()]

    async def delete(self, question_uuid: str) -> None:
        question_id = QuestionId(parse_identifier(question_uuid))
        if self._storage.questions.pop(question_id, None) is None:
            return
        owned = format_identifier(question_id)
        for answer_id, answer in [*self._storage.answers.items()]:
            if answer.question_uuid == owned:
                del self._storage.answers[answer_id]


class InMemoryAnswersStore:
    """AnswersStore over InMemoryStorage."""

    def __init__(self, storage: InMemoryStorage):
        self._storage = storage

    async def create(self, content: str, question_uuid: str) -> AnswerDetail:
        question_id = QuestionId(parse_identifier(question_uuid))
        if question_id not in self._storage.questions:
            raise ConstraintViolationError(
                f"Invalid question uuid {question_uuid}",
                ErrorContext(
                    resource_type="answer", resource_id=question_uuid, operation="create",
                ),
            )
        answer_id = AnswerId(uuid.uuid4())
        detail = AnswerDetail(
            answer_uuid=format_identifier(answer_id),
            question_uuid=format_identifier(question_id),
            content=content,
            created_at=_now(),
        )
        self._storage.answers[answer_id] = detail
        return detail

    async def list_by_question(self, question_uuid: str) -> list[AnswerDetail]:
        owned = format_identifier(parse_identifier(question_uuid))
        return [
            answer for answer in self._storage.answers.values()
            if answer.question_uuid == owned
        ]

    async def delete(self, answer_uuid: str) -> None:
        self._storage.answers.pop(AnswerId(parse_identifier(answer_uuid)), None)
