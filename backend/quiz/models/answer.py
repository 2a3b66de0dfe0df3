"""Answer ORM — a user's answer, always attached to one Question.

Invariants:
    - question_id is non-nullable and never changes after insert
    - user_id is an opaque UUID supplied by the client
    - deleted_at non-null means logically deleted

Design Decisions:
    - FK with ON UPDATE/DELETE CASCADE: physical deletes of a question remove its answers
    - Existence of the parent is checked in AnswerService.add_answer, not by the FK,
      so a missing question surfaces as NotFoundError rather than IntegrityError
"""

import uuid
from datetime import datetime

from sqlalchemy import Text, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from quiz.db.base import Base, BigId
from quiz.models.question import utcnow


class Answer(Base):
    """Answer entity, belongs to exactly one Question."""
    __tablename__ = "answers"

    id: Mapped[int] = mapped_column(
        BigId, primary_key=True, autoincrement=True,
    )
    question_id: Mapped[int] = mapped_column(
        BigId,
        ForeignKey("questions.id", onupdate="CASCADE", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), nullable=False, index=True,
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

    question: Mapped["Question"] = relationship(
        "Question", back_populates="answers", lazy="raise",
    )

    def __repr__(self) -> str:
        return (
            f"Answer(id={self.id!r}, question_id={self.question_id!r}, "
            f"user_id={self.user_id!r})"
        )
