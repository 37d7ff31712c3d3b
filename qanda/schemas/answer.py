"""Answer Schemas — Pydantic request/response models for the answer routes."""

from pydantic import BaseModel


class AnswerCreate(BaseModel):
    """Body of POST /answer."""
    question_uuid: str
    content: str


class AnswerRef(BaseModel):
    """Body of DELETE /answer."""
    answer_uuid: str


class AnswerResponse(BaseModel):
    """Public projection of a persisted answer."""
    answer_uuid: str
    question_uuid: str
    content: str
    created_at: str
