"""Answer Service — answer use cases, including the one transactional operation.

Invariants:
    - add_answer checks the parent question and inserts the answer inside ONE
      transaction at READ COMMITTED: both commit or both roll back
    - A missing parent aborts the transaction with NotFoundError(question_id);
      no answer row is ever written for it
    - find_one converts absence into NotFoundError(answer_id)
    - delete reports "nothing deleted" as False, never as an error

Design Decisions:
    - Existence check and insert share the TransactionContext: a question deleted
      concurrently between the two steps cannot leave an orphan answer
      (within read-committed guarantees)
"""

import logging

from quiz.core.errors import NotFoundError
from quiz.core.repository_protocols import (
    AnswerStore, IsolationLevel, QuestionStore, UnitOfWork,
)
from quiz.models.answer import Answer


class AnswerService:
    """Attach, read, list, and soft-delete answers."""

    def __init__(
        self,
        answers: AnswerStore,
        questions: QuestionStore,
        uow: UnitOfWork,
        logger: logging.Logger | None = None,
        isolation_level: IsolationLevel | None = IsolationLevel.READ_COMMITTED,
    ):
        self.answers = answers
        self.questions = questions
        self.uow = uow
        self.logger = logger or logging.getLogger(__name__)
        self.isolation_level = isolation_level

    async def add_answer(self, answer: Answer) -> Answer:
        op = "service.AnswerService.add_answer"
        question_id = answer.question_id
        async with self.uow.transaction(self.isolation_level) as ctx:
            question = await self.questions.get_one(
                ctx, question_id, with_answers=False,
            )
            if question is None:
                self.logger.warning(
                    "Question to add answer to not found",
                    extra={"op": op, "question_id": question_id},
                )
                raise NotFoundError(question_id, "Question")
            answer = await self.answers.insert(ctx, answer)
        self.logger.info(
            "Answer added",
            extra={
                "op": op, "answer_id": answer.id, "question_id": question_id,
            },
        )
        return answer

    async def find_one(self, answer_id: int) -> Answer:
        op = "service.AnswerService.find_one"
        async with self.uow.ambient() as ctx:
            answer = await self.answers.get_one(ctx, answer_id)
        if answer is None:
            self.logger.warning(
                "Answer not found", extra={"op": op, "answer_id": answer_id},
            )
            raise NotFoundError(answer_id, "Answer")
        return answer

    async def find_all_by_question_id(self, question_id: int) -> list[Answer]:
        """Live answers of one question, oldest first."""
        async with self.uow.ambient() as ctx:
            question = await self.questions.get_one(ctx, question_id)
            if question is None:
                raise NotFoundError(question_id, "Question")
            return await self.answers.get_all(ctx, question_id)

    async def delete(self, answer_id: int) -> bool:
        op = "service.AnswerService.delete"
        async with self.uow.ambient() as ctx:
            deleted = await self.answers.delete(ctx, answer_id)
        if not deleted:
            self.logger.warning(
                "Answer to delete not found",
                extra={"op": op, "answer_id": answer_id},
            )
            return False
        self.logger.info(
            "Answer deleted", extra={"op": op, "answer_id": answer_id},
        )
        return True
