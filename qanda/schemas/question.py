"""Question Schemas — Pydantic request/response models for the question routes.

Invariants:
    - Request models only enforce shape (required, string-typed); emptiness and
      identifier format are checked by services/ and the identifier codec
    - question_uuid stays a plain string so malformed ids reach the codec
"""

from pydantic import BaseModel


class QuestionCreate(BaseModel):
    """Body of POST /question."""
    title: str
    description: str


class QuestionRef(BaseModel):
    """Body naming one question (DELETE /question, GET /answers)."""
    question_uuid: str


class QuestionResponse(BaseModel):
    """Public projection of a persisted question."""
    question_uuid: str
    title: str
    description: str
    created_at: str
