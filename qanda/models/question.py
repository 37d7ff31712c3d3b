"""Question ORM — persists the owning side of the Q&A relationship.

Invariants:
    - question_uuid is the UUID primary key, assigned on insert
    - title and description are non-nullable text
    - created_at is assigned on insert and never updated

Design Decisions:
    - No ORM relationship to Answer: the answers FK carries ON DELETE CASCADE,
      so deleting a question relies on the database, not on loaded children
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from qanda.db.base import Base


class Question(Base):
    """Question row."""
    __tablename__ = "questions"

    question_uuid: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
