"""SQL Questions Store — Question persistence over the shared async engine.

Invariants:
    - One session and one statement per operation; commit or roll back, never partial
    - question_uuid is parsed before any statement is issued
    - Every SQLAlchemy, connect or timeout error leaves this module as a StoreError (via _translate_error)
    - delete() of a missing row is a no-op, not an error
"""

import logging

from sqlalchemy import delete, select

from qanda.core.domain_types import QuestionDetail, QuestionId
from qanda.core.errors import ErrorContext, StorageFailureError, StoreError
from qanda.core.identifiers import format_identifier, parse_identifier
from qanda.infrastructure.database import (
    STORAGE_ERRORS, DatabaseSessionManager, format_timestamp,
)
from qanda.models.question import Question

logger = logging.getLogger(__name__)


def _to_detail(row: Question) -> QuestionDetail:
    return QuestionDetail(
        question_uuid=format_identifier(row.question_uuid),
        title=row.title,
        description=row.description,
        created_at=format_timestamp(row.created_at),
    )


class SqlQuestionsStore:
    """QuestionsStore backed by the relational database."""

    def __init__(self, db: DatabaseSessionManager):
        self._db = db

    async def create(self, title: str, description: str) -> QuestionDetail:
        try:
            async with self._db.session() as session:
                row = Question(title=title, description=description)
                session.add(row)
                await session.commit()
                await session.refresh(row)
                return _to_detail(row)
        except STORAGE_ERRORS as exc:
            raise self._translate_error(exc, "create") from exc

    async def list(self) -> list[QuestionDetail]:
        try:
            async with self._db.session() as session:
                result = await session.execute(select(Question))
                return [_to_detail(row) for row in result.scalars().all()]
        except STORAGE_ERRORS as exc:
            raise self._translate_error(exc, "list") from exc

    async def delete(self, question_uuid: str) -> None:
        question_id = QuestionId(parse_identifier(question_uuid))
        try:
            async with self._db.session() as session:
                await session.execute(
                    delete(Question).where(Question.question_uuid == question_id),
                )
                await session.commit()
        except STORAGE_ERRORS as exc:
            raise self._translate_error(exc, "delete", question_uuid) from exc

    def _translate_error(
        self, exc: Exception, operation: str, question_uuid: str | None = None,
    ) -> StoreError:
        """Questions carry no integrity rule the caller can break: all failures are storage failures."""
        logger.error(
            f"Question {operation} failed: {exc}",
            extra={"operation": f"question.{operation}", "question_uuid": question_uuid},
            exc_info=exc,
        )
        return StorageFailureError(
            f"Question {operation} failed",
            ErrorContext(
                resource_type="question", resource_id=question_uuid, operation=operation,
            ),
        )
