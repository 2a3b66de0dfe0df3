"""ORM Models — SQLAlchemy declarative models for questions and answers.

Invariants:
    - All models inherit from Base (db/base.py)
    - Question is the aggregate root; answers scoped by question_id
    - Both tables carry a nullable deleted_at soft-delete marker

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from quiz.models.question import Question  # noqa: F401
from quiz.models.answer import Answer  # noqa: F401
