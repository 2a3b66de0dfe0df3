"""Boundary error handling — unexpected failures, unclassified errors, serialization.

Invariants:
    - An unexpected exception yields exactly one 500 with the generic body
    - The exception payload never reaches the client
    - Unclassified QuizError → 422
"""

from types import SimpleNamespace

import pytest
from httpx import ASGITransport, AsyncClient

from quiz.core.errors import StorageError


@pytest.fixture
async def lenient_client(app):
    """Client that receives the 500 response instead of re-raising app errors."""
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c


async def test_unexpected_exception_is_generic_500(lenient_client, container, monkeypatch):
    async def _boom():
        raise RuntimeError("secret connection string")

    monkeypatch.setattr(container.question_service, "find_all", _boom)

    res = await lenient_client.get("/questions")

    assert res.status_code == 500
    assert res.json() == {"error": "Internal server error", "status_code": 500}
    assert "secret" not in res.text


async def test_unclassified_error_on_read_is_422(client, container, monkeypatch):
    async def _storage_down(answer_id):
        raise StorageError("Connection or operational error", "execute")

    monkeypatch.setattr(container.answer_service, "find_one", _storage_down)

    res = await client.get("/answers/1")

    assert res.status_code == 422
    assert res.json() == {"error": "Failed to find answer with id=1", "status_code": 422}


async def test_unclassified_error_on_write_is_422(client, container, monkeypatch):
    async def _storage_down(question):
        raise StorageError("Integrity constraint violated", "commit")

    monkeypatch.setattr(container.question_service, "create", _storage_down)

    res = await client.post("/questions", json={"text": "Q"})

    assert res.status_code == 422


async def test_serialization_failure_is_500(client, container, monkeypatch):
    async def _broken(answer_id):
        return SimpleNamespace(id=answer_id)

    monkeypatch.setattr(container.answer_service, "find_one", _broken)

    res = await client.get("/answers/1")

    assert res.status_code == 500
    assert res.json()["error"] == "Failed to serialize response"


async def test_unknown_route_uses_error_envelope(client):
    res = await client.get("/nope")
    assert res.status_code == 404
    assert res.json() == {"error": "Not Found", "status_code": 404}
