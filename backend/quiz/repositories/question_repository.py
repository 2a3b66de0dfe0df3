"""Question Repository — persistence for the Question aggregate root.

Invariants:
    - get_one returns None for absent or soft-deleted questions (never raises)
    - with_answers eager-loads live answers ordered by created_at, then id
    - delete soft-deletes the question and its live answers in the same context
    - insert maps unique-key violations to DuplicateError, nothing else

Design Decisions:
    - selectinload with and_() criteria: soft-delete scoping applied to the
      collection, ordering comes from the relationship's order_by
"""

import logging

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import selectinload

from quiz.core.errors import DuplicateError
from quiz.core.repository_protocols import ExecutionContext
from quiz.infrastructure.db_errors import is_duplicate_key_error
from quiz.models.answer import Answer
from quiz.models.question import Question, utcnow


class QuestionRepository:
    """QuestionStore backed by SQLAlchemy."""

    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or logging.getLogger(__name__)

    async def insert(self, ctx: ExecutionContext, question: Question) -> Question:
        op = "repository.QuestionRepository.insert"
        now = utcnow()
        question.created_at = now
        question.updated_at = now
        ctx.session.add(question)
        try:
            await ctx.persist()
        except IntegrityError as e:
            if is_duplicate_key_error(e):
                self.logger.error(
                    "Duplicated key when create question",
                    extra={"op": op, "question_id": question.id},
                )
                raise DuplicateError(question.id, "Question") from e
            raise
        self.logger.info(
            "Question created",
            extra={"op": op, "question_id": question.id},
        )
        return question

    async def get_one(
        self, ctx: ExecutionContext, question_id: int, with_answers: bool = False,
    ) -> Question | None:
        op = "repository.QuestionRepository.get_one"
        query = select(Question).where(
            Question.id == question_id, Question.deleted_at.is_(None),
        )
        if with_answers:
            query = query.options(selectinload(
                Question.answers.and_(Answer.deleted_at.is_(None)),
            ))
        result = await ctx.session.execute(query)
        question = result.scalar_one_or_none()
        if question is None:
            self.logger.warning(
                "Question not found",
                extra={"op": op, "question_id": question_id},
            )
            return None
        self.logger.debug(
            "Question found", extra={"op": op, "question_id": question_id},
        )
        return question

    async def get_all(self, ctx: ExecutionContext) -> list[Question]:
        result = await ctx.session.execute(
            select(Question)
            .where(Question.deleted_at.is_(None))
            .order_by(Question.id.asc()),
        )
        return list(result.scalars().all())

    async def delete(self, ctx: ExecutionContext, question_id: int) -> bool:
        op = "repository.QuestionRepository.delete"
        now = utcnow()
        result = await ctx.session.execute(
            update(Question)
            .where(Question.id == question_id, Question.deleted_at.is_(None))
            .values(deleted_at=now, updated_at=now),
        )
        if result.rowcount == 0:
            self.logger.warning(
                "Deletable question not found",
                extra={"op": op, "question_id": question_id},
            )
            return False
        await ctx.session.execute(
            update(Answer)
            .where(Answer.question_id == question_id, Answer.deleted_at.is_(None))
            .values(deleted_at=now, updated_at=now),
        )
        await ctx.persist()
        self.logger.info(
            "Question deleted", extra={"op": op, "question_id": question_id},
        )
        return True
