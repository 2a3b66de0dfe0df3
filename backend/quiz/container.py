"""Dependency Container — wires repositories and services once per process.

Invariants:
    - Repositories are stateless; one instance shared by both services
    - The same DatabaseSessionManager is the UnitOfWork for every service

Design Decisions:
    - Plain dataclass over a DI framework: three objects, built in one place
"""

import logging
from dataclasses import dataclass

from quiz.core.repository_protocols import IsolationLevel
from quiz.infrastructure.database import DatabaseSessionManager
from quiz.repositories import AnswerRepository, QuestionRepository
from quiz.services.answer_service import AnswerService
from quiz.services.question_service import QuestionService


@dataclass
class Container:
    db: DatabaseSessionManager
    question_service: QuestionService
    answer_service: AnswerService


def build_container(
    db: DatabaseSessionManager,
    isolation_level: IsolationLevel | None = IsolationLevel.READ_COMMITTED,
    logger: logging.Logger | None = None,
) -> Container:
    """Assemble repositories and services around db."""
    questions = QuestionRepository(logger)
    answers = AnswerRepository(logger)
    return Container(
        db=db,
        question_service=QuestionService(questions, db, logger),
        answer_service=AnswerService(
            answers, questions, db, logger, isolation_level=isolation_level,
        ),
    )
