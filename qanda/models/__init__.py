"""ORM Models — SQLAlchemy declarative models for questions and answers.

Invariants:
    - All models inherit from Base (db/base.py)
    - Question is the owner; answers are scoped by question_uuid

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all runs
"""

from qanda.models.question import Question  # noqa: F401
from qanda.models.answer import Answer  # noqa: F401
