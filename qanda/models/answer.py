"""Answer ORM — persists answers owned by a question.

Invariants:
    - Always belongs to a Question (question_uuid FK, enforced on insert)
    - Deleting the owning Question deletes its answers (ON DELETE CASCADE)
    - content is non-nullable text
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from qanda.db.base import Base


class Answer(Base):
    """Answer row."""
    __tablename__ = "answers"

    answer_uuid: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    question_uuid: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("questions.question_uuid", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
