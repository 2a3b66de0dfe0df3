"""Boundary Protocols — contracts between the domain services and persistence.

Invariants:
    - Every store operation takes an ExecutionContext as its first argument
    - Stores report absence as None (never as an error)
    - Stores classify only duplicate-key violations (DuplicateError)
    - Implementations provided by repositories/ and infrastructure/ via injection

Design Decisions:
    - ExecutionContext replaces a nullable transaction handle: the caller always
      states which unit of work a call joins (ADR: explicit transactional composition)
    - Two contexts behind one protocol: ambient (commit per write) and
      transaction (flush per write, commit at block exit); identical business semantics
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
"""

from contextlib import AbstractAsyncContextManager
from enum import Enum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from quiz.models.answer import Answer
    from quiz.models.question import Question


class IsolationLevel(str, Enum):
    """Transaction isolation levels a service may request."""
    READ_COMMITTED = "READ COMMITTED"
    REPEATABLE_READ = "REPEATABLE READ"
    SERIALIZABLE = "SERIALIZABLE"


class ExecutionContext(Protocol):
    """The current unit of work a store call runs against."""
    session: "AsyncSession"

    async def persist(self) -> None:
        """Make pending writes durable for this context (commit or flush)."""
        ...


class UnitOfWork(Protocol):
    """Factory of execution contexts, implemented by DatabaseSessionManager."""
    def ambient(self) -> AbstractAsyncContextManager[ExecutionContext]: ...

    def transaction(
        self, isolation_level: IsolationLevel | None = None,
    ) -> AbstractAsyncContextManager[ExecutionContext]: ...


class QuestionStore(Protocol):
    """Contract for question persistence."""
    async def insert(
        self, ctx: ExecutionContext, question: "Question",
    ) -> "Question": ...

    async def get_one(
        self, ctx: ExecutionContext, question_id: int, with_answers: bool = False,
    ) -> "Question | None": ...

    async def get_all(self, ctx: ExecutionContext) -> list["Question"]: ...

    async def delete(self, ctx: ExecutionContext, question_id: int) -> bool: ...


class AnswerStore(Protocol):
    """Contract for answer persistence. question_id=0 in get_all means all answers."""
    async def insert(
        self, ctx: ExecutionContext, answer: "Answer",
    ) -> "Answer": ...

    async def get_one(
        self, ctx: ExecutionContext, answer_id: int,
    ) -> "Answer | None": ...

    async def get_all(
        self, ctx: ExecutionContext, question_id: int = 0,
    ) -> list["Answer"]: ...

    async def delete(self, ctx: ExecutionContext, answer_id: int) -> bool: ...
