"""Question Service — question use cases over QuestionStore.

Invariants:
    - find_one_detailed converts absence (None) into NotFoundError(question_id)
    - delete reports "nothing deleted" as False, never as an error
    - No cross-entity invariant here: every call is one ambient unit of work
"""

import logging

from quiz.core.errors import NotFoundError
from quiz.core.repository_protocols import QuestionStore, UnitOfWork
from quiz.models.question import Question


class QuestionService:
    """Create, read, and soft-delete questions."""

    def __init__(
        self,
        questions: QuestionStore,
        uow: UnitOfWork,
        logger: logging.Logger | None = None,
    ):
        self.questions = questions
        self.uow = uow
        self.logger = logger or logging.getLogger(__name__)

    async def create(self, question: Question) -> Question:
        op = "service.QuestionService.create"
        try:
            async with self.uow.ambient() as ctx:
                question = await self.questions.insert(ctx, question)
        except Exception:
            self.logger.error(
                "Error when trying to create question", extra={"op": op},
            )
            raise
        self.logger.info(
            "Question created", extra={"op": op, "question_id": question.id},
        )
        return question

    async def find_one_detailed(self, question_id: int) -> Question:
        op = "service.QuestionService.find_one_detailed"
        async with self.uow.ambient() as ctx:
            question = await self.questions.get_one(
                ctx, question_id, with_answers=True,
            )
        if question is None:
            self.logger.warning(
                "Question not found", extra={"op": op, "question_id": question_id},
            )
            raise NotFoundError(question_id, "Question")
        return question

    async def find_all(self) -> list[Question]:
        async with self.uow.ambient() as ctx:
            return await self.questions.get_all(ctx)

    async def delete(self, question_id: int) -> bool:
        op = "service.QuestionService.delete"
        async with self.uow.ambient() as ctx:
            deleted = await self.questions.delete(ctx, question_id)
        if not deleted:
            self.logger.warning(
                "Question to delete not found",
                extra={"op": op, "question_id": question_id},
            )
            return False
        self.logger.info(
            "Question deleted", extra={"op": op, "question_id": question_id},
        )
        return True
