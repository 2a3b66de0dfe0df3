"""FastAPI Dependencies — hand the startup-built container to routes.

Invariants:
    - Nothing is looked up globally: everything comes from app.state.container,
      assembled once in main.py's lifespan (or by tests)
"""

from typing import Annotated

from fastapi import Path, Request

from quiz.container import Container
from quiz.db.base import MAX_ID
from quiz.services.answer_service import AnswerService
from quiz.services.question_service import QuestionService

# Path ids outside the BIGINT range are rejected as malformed (400).
EntityId = Annotated[int, Path(ge=1, le=MAX_ID)]


def get_container(request: Request) -> Container:
    container = getattr(request.app.state, "container", None)
    if container is None:
        raise RuntimeError("Application not initialized")
    return container


def get_question_service(request: Request) -> QuestionService:
    return get_container(request).question_service


def get_answer_service(request: Request) -> AnswerService:
    return get_container(request).answer_service
