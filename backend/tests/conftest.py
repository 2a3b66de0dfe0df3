"""Root conftest — shared database, container, and HTTP client fixtures.

Invariants:
    - Every test gets a fresh SQLite file database built from Base.metadata
    - The app under test never runs its lifespan: the container is assigned directly

Design Decisions:
    - File database over :memory: so concurrent transactions get real,
      separate connections (aiosqlite pools one connection for :memory:)
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("LOG_FORMAT", "text")

import uuid  # noqa: E402
from datetime import datetime, timezone  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

import quiz.models  # noqa: E402,F401
from quiz.config import Settings  # noqa: E402
from quiz.container import build_container  # noqa: E402
from quiz.db.base import Base  # noqa: E402
from quiz.infrastructure.database import DatabaseSessionManager  # noqa: E402
from quiz.main import create_app  # noqa: E402
from quiz.models.answer import Answer  # noqa: E402
from quiz.models.question import Question  # noqa: E402


@pytest.fixture
async def db(tmp_path):
    manager = DatabaseSessionManager(
        f"sqlite+aiosqlite:///{tmp_path / 'quiz.db'}",
    )
    async with manager.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield manager
    await manager.dispose()


@pytest.fixture
def container(db):
    return build_container(db)


@pytest.fixture
def app(container):
    application = create_app(Settings(database_url="sqlite+aiosqlite:///unused.db"))
    application.state.container = container
    return application


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def seed_question(db):
    """A live question inserted straight through the ORM."""
    async with db.ambient() as ctx:
        question = Question(text="What is the capital of France?")
        ctx.session.add(question)
        await ctx.persist()
    return question


@pytest.fixture
def insert_answer(db):
    """Insert an answer with an explicit created_at, bypassing the repository."""
    async def _insert(question_id: int, text: str, created_at: datetime) -> Answer:
        async with db.ambient() as ctx:
            answer = Answer(
                question_id=question_id,
                user_id=uuid.uuid4(),
                text=text,
                created_at=created_at,
                updated_at=created_at,
            )
            ctx.session.add(answer)
            await ctx.persist()
        return answer
    return _insert


@pytest.fixture
def at():
    """Distinct, ordered timestamps for ordering tests: at(minute)."""
    def _at(minute: int) -> datetime:
        return datetime(2026, 1, 1, 12, minute, tzinfo=timezone.utc)
    return _at
