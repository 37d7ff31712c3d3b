"""Domain Types — identity aliases and read-only projections of persisted records.

Invariants:
    - QuestionId, AnswerId wrap UUIDs produced by the identifier codec only
    - QuestionDetail / AnswerDetail are frozen: callers cannot mutate a projection
    - Identifiers in details are canonical lowercase hyphenated strings
    - created_at is an ISO-8601 string, assigned once by the store

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - Frozen dataclasses for details: FastAPI serializes dataclasses natively, and
      core stays free of pydantic (schemas/ owns the wire contract)
"""

from dataclasses import dataclass
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

QuestionId = NewType("QuestionId", UUID)
AnswerId = NewType("AnswerId", UUID)


# ─── Projections ─────────────────────────────────────────────────

@dataclass(frozen=True)
class QuestionDetail:
    """A persisted Question as returned to callers."""
    question_uuid: str
    title: str
    description: str
    created_at: str


@dataclass(frozen=True)
class AnswerDetail:
    """A persisted Answer as returned to callers."""
    answer_uuid: str
    question_uuid: str
    content: str
    created_at: str
