"""SQL Answers Store — Answer persistence over the shared async engine.

Invariants:
    - question_uuid / answer_uuid are parsed before any statement is issued
    - A missing referenced question surfaces as ConstraintViolationError (database FK)
    - Every other SQLAlchemy, connect or timeout error surfaces as StorageFailureError
    - list_by_question() performs no existence check on the question
    - delete() of a missing row is a no-op, not an error
"""

import logging

from sqlalchemy import delete, select
from sqlalchemy.exc import DBAPIError

from qanda.core.domain_types import AnswerDetail, AnswerId, QuestionId
from qanda.core.errors import (
    ConstraintViolationError, ErrorContext, StorageFailureError, StoreError,
)
from qanda.core.identifiers import format_identifier, parse_identifier
from qanda.infrastructure.database import (
    STORAGE_ERRORS, DatabaseSessionManager, format_timestamp,
    is_foreign_key_violation,
)
from qanda.models.answer import Answer

logger = logging.getLogger(__name__)


def _to_detail(row: Answer) -> AnswerDetail:
    return AnswerDetail(
        answer_uuid=format_identifier(row.answer_uuid),
        question_uuid=format_identifier(row.question_uuid),
        content=row.content,
        created_at=format_timestamp(row.created_at),
    )


class SqlAnswersStore:
    """AnswersStore backed by the relational database."""

    def __init__(self, db: DatabaseSessionManager):
        self._db = db

    async def create(self, content: str, question_uuid: str) -> AnswerDetail:
        question_id = QuestionId(parse_identifier(question_uuid))
        try:
            async with self._db.session() as session:
                row = Answer(question_uuid=question_id, content=content)
                session.add(row)
                await session.commit()
                await session.refresh(row)
                return _to_detail(row)
        except STORAGE_ERRORS as exc:
            raise self._translate_error(exc, "create", question_uuid) from exc

    async def list_by_question(self, question_uuid: str) -> list[AnswerDetail]:
        question_id = QuestionId(parse_identifier(question_uuid))
        try:
            async with self._db.session() as session:
                result = await session.execute(
                    select(Answer).where(Answer.question_uuid == question_id),
                )
                return [_to_detail(row) for row in result.scalars().all()]
        except STORAGE_ERRORS as exc:
            raise self._translate_error(exc, "list", question_uuid) from exc

    async def delete(self, answer_uuid: str) -> None:
        answer_id = AnswerId(parse_identifier(answer_uuid))
        try:
            async with self._db.session() as session:
                await session.execute(
                    delete(Answer).where(Answer.answer_uuid == answer_id),
                )
                await session.commit()
        except STORAGE_ERRORS as exc:
            raise self._translate_error(exc, "delete", answer_uuid=answer_uuid) from exc

    def _translate_error(
        self,
        exc: Exception,
        operation: str,
        question_uuid: str | None = None,
        answer_uuid: str | None = None,
    ) -> StoreError:
        """Map a storage error to ConstraintViolationError or StorageFailureError."""
        context = ErrorContext(
            resource_type="answer",
            resource_id=answer_uuid or question_uuid,
            operation=operation,
        )
        if isinstance(exc, DBAPIError) and is_foreign_key_violation(exc):
            logger.warning(
                f"Answer {operation} rejected: question {question_uuid} does not exist",
                extra={"operation": f"answer.{operation}", "question_uuid": question_uuid},
            )
            return ConstraintViolationError(
                f"Invalid question uuid {question_uuid}", context,
            )
        logger.error(
            f"Answer {operation} failed: {exc}",
            extra={
                "operation": f"answer.{operation}",
                "question_uuid": question_uuid,
                "answer_uuid": answer_uuid,
            },
            exc_info=exc,
        )
        return StorageFailureError(f"Answer {operation} failed", context)
