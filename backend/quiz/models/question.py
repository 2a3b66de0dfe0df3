"""Question ORM — the aggregate root owning an ordered list of answers.

Invariants:
    - id is an integer primary key assigned by storage (explicit ids allowed)
    - text is non-nullable
    - deleted_at non-null means logically deleted; reads filter on it
    - answers are ordered by created_at, then id (contract, not default)

Design Decisions:
    - lazy="raise" on answers: async sessions cannot lazy-load, so callers must
      eager-load explicitly (repositories/question_repository.py)
    - ON UPDATE/DELETE CASCADE lives on the FK (models/answer.py)
"""

from datetime import datetime, timezone

from sqlalchemy import Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship

from quiz.db.base import Base, BigId


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Question(Base):
    """Question entity, owns its answers."""
    __tablename__ = "questions"

    id: Mapped[int] = mapped_column(
        BigId, primary_key=True, autoincrement=True,
    )
    text: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow,
    )
    deleted_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True, index=True,
    )

    answers: Mapped[list["Answer"]] = relationship(
        "Answer", back_populates="question",
        order_by="[Answer.created_at, Answer.id]",
        passive_deletes=True, lazy="raise",
    )

    def __repr__(self) -> str:
        return f"Question(id={self.id!r}, text={self.text!r})"
