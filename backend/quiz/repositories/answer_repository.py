"""Answer Repository — persistence for answers.

Invariants:
    - get_one returns None for absent or soft-deleted answers
    - get_all(question_id=0) lists every live answer; otherwise filters by question
    - Listings ordered by created_at, then id
"""

import logging

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError

from quiz.core.errors import DuplicateError
from quiz.core.repository_protocols import ExecutionContext
from quiz.infrastructure.db_errors import is_duplicate_key_error
from quiz.models.answer import Answer
from quiz.models.question import utcnow


class AnswerRepository:
    """AnswerStore backed by SQLAlchemy."""

    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or logging.getLogger(__name__)

    async def insert(self, ctx: ExecutionContext, answer: Answer) -> Answer:
        op = "repository.AnswerRepository.insert"
        now = utcnow()
        answer.created_at = now
        answer.updated_at = now
        ctx.session.add(answer)
        try:
            await ctx.persist()
        except IntegrityError as e:
            if is_duplicate_key_error(e):
                self.logger.error(
                    "Duplicated key when create answer",
                    extra={"op": op, "answer_id": answer.id},
                )
                raise DuplicateError(answer.id, "Answer") from e
            raise
        self.logger.info(
            "Answer created",
            extra={
                "op": op, "answer_id": answer.id,
                "question_id": answer.question_id,
            },
        )
        return answer

    async def get_one(self, ctx: ExecutionContext, answer_id: int) -> Answer | None:
        op = "repository.AnswerRepository.get_one"
        result = await ctx.session.execute(
            select(Answer).where(
                Answer.id == answer_id, Answer.deleted_at.is_(None),
            ),
        )
        answer = result.scalar_one_or_none()
        if answer is None:
            self.logger.warning(
                "Answer not found", extra={"op": op, "answer_id": answer_id},
            )
        return answer

    async def get_all(
        self, ctx: ExecutionContext, question_id: int = 0,
    ) -> list[Answer]:
        query = select(Answer).where(Answer.deleted_at.is_(None))
        if question_id:
            query = query.where(Answer.question_id == question_id)
        result = await ctx.session.execute(
            query.order_by(Answer.created_at.asc(), Answer.id.asc()),
        )
        return list(result.scalars().all())

    async def delete(self, ctx: ExecutionContext, answer_id: int) -> bool:
        op = "repository.AnswerRepository.delete"
        now = utcnow()
        result = await ctx.session.execute(
            update(Answer)
            .where(Answer.id == answer_id, Answer.deleted_at.is_(None))
            .values(deleted_at=now, updated_at=now),
        )
        if result.rowcount == 0:
            self.logger.warning(
                "Deletable answer not found",
                extra={"op": op, "answer_id": answer_id},
            )
            return False
        await ctx.persist()
        self.logger.info(
            "Answer deleted", extra={"op": op, "answer_id": answer_id},
        )
        return True
