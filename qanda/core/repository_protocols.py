"""Boundary Protocols — contracts between the orchestration layer and storage.

Invariants:
    - Services depend on these Protocols only, never on a concrete store
    - Every method raises only StoreError subclasses (core/errors.py)
    - Identifiers cross this boundary as raw strings; stores parse them
    - delete() on a missing record is a successful no-op

Design Decisions:
    - Protocol over ABC: structural subtyping, SQL and in-memory stores share no base
    - Async in Protocol: implementations do IO even when the in-memory one does not
"""

from typing import Protocol

from qanda.core.domain_types import AnswerDetail, QuestionDetail


class QuestionsStore(Protocol):
    """Contract for Question persistence."""
    async def create(self, title: str, description: str) -> QuestionDetail: ...
    async def list(self) -> list[QuestionDetail]: ...
    async def delete(self, question_uuid: str) -> None: ...


class AnswersStore(Protocol):
    """Contract for Answer persistence. Each Answer belongs to one Question."""
    async def create(self, content: str, question_uuid: str) -> AnswerDetail: ...
    async def list_by_question(self, question_uuid: str) -> list[AnswerDetail]: ...
    async def delete(self, answer_uuid: str) -> None: ...
