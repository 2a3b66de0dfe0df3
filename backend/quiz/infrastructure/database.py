"""Database Session Manager — async connection pool, execution contexts, health checks.

Invariants:
    - Every context rolls back on exception (no partial commits leak)
    - A transaction context always finalizes (commit or rollback) before control
      returns, including on cancellation
    - SQLAlchemy exceptions escaping a context are mapped to StorageError;
      domain errors (NotFoundError, DuplicateError) pass through after rollback
    - Connection pool uses pool_pre_ping for stale connection detection

Design Decisions:
    - DatabaseSessionManager implements core UnitOfWork: services open contexts,
      repositories only run statements on ctx.session
    - AmbientContext commits per persist(); TransactionContext only flushes and
      commits once at block exit
    - expire_on_commit=False: returned entities stay readable after the session closes
    - SQLite has no READ COMMITTED: requested isolation is skipped there (tests only)
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

from quiz.core.errors import StorageError
from quiz.core.repository_protocols import IsolationLevel

_ISOLATION_UNSUPPORTED = {"sqlite"}


class AmbientContext:
    """Runs against a plain pooled session; every persist() commits."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def persist(self) -> None:
        await self.session.commit()


class TransactionContext:
    """Joins an open transaction; persist() flushes, the owner commits."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def persist(self) -> None:
        await self.session.flush()


def to_storage_error(exc: SQLAlchemyError) -> StorageError:
    """Map a SQLAlchemy failure to the unclassified StorageError."""
    if isinstance(exc, IntegrityError):
        return StorageError("Integrity constraint violated", "commit")
    if isinstance(exc, OperationalError):
        return StorageError("Connection or operational error", "execute")
    if isinstance(exc, DBAPIError):
        return StorageError("Database driver error", "query")
    return StorageError("Database operation failed", "unknown")


class DatabaseSessionManager:
    """Owns the async engine and hands out execution contexts."""

    def __init__(
        self,
        database_url: str,
        pool_size: int = 20,
        max_overflow: int = 10,
        logger: logging.Logger | None = None,
    ):
        self.logger = logger or logging.getLogger(__name__)
        self.backend = make_url(database_url).get_backend_name()
        engine_kwargs: dict = {"pool_pre_ping": True}
        if self.backend != "sqlite":
            engine_kwargs.update(
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_recycle=3600,
            )
        self.engine = create_async_engine(database_url, **engine_kwargs)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def ambient(self) -> AsyncGenerator[AmbientContext, None]:
        """Provide an ambient context with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield AmbientContext(session)
        except SQLAlchemyError as e:
            await session.rollback()
            self.logger.error(f"DB error in ambient context: {e}")
            raise to_storage_error(e) from e
        except BaseException:
            await session.rollback()
            raise
        finally:
            await session.close()

    @asynccontextmanager
    async def transaction(
        self, isolation_level: IsolationLevel | None = None,
    ) -> AsyncGenerator[TransactionContext, None]:
        """Provide a transactional context; commit on exit, rollback on any exception."""
        session = self._session_factory()
        try:
            async with session.begin():
                if isolation_level is not None:
                    await self._apply_isolation(session, isolation_level)
                yield TransactionContext(session)
        except SQLAlchemyError as e:
            self.logger.error(f"DB error in transaction: {e}")
            raise to_storage_error(e) from e
        finally:
            await session.close()

    async def _apply_isolation(
        self, session: AsyncSession, isolation_level: IsolationLevel,
    ) -> None:
        if self.backend in _ISOLATION_UNSUPPORTED:
            self.logger.debug(
                f"Isolation {isolation_level.value} not supported by "
                f"{self.backend}, using dialect default",
            )
            return
        await session.connection(
            execution_options={"isolation_level": isolation_level.value},
        )

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.ambient() as ctx:
                await ctx.session.execute(text("SELECT 1"))
            return True
        except Exception as e:
            self.logger.error(f"DB health check failed: {e}")
            return False

    async def wait_until_ready(
        self, retries: int = 10, interval_seconds: float = 5.0,
    ) -> None:
        """Block startup until the database answers, or raise StorageError."""
        for attempt in range(1, retries + 1):
            if await self.health_check():
                self.logger.info("Database is ready")
                return
            self.logger.warning(
                f"Waiting for database ({attempt}/{retries})",
                extra={"attempt": attempt},
            )
            if attempt < retries:
                await asyncio.sleep(interval_seconds)
        raise StorageError(
            f"Database unavailable after {retries} attempts", "connect",
        )

    async def dispose(self) -> None:
        await self.engine.dispose()
