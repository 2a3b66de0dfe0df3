"""Question Routes — /questions CRUD.

Invariants:
    - NotFoundError on a read → 404; delete of a missing question → 404
    - DuplicateError and unclassified QuizError → 422
    - GET /questions omits answers; GET /questions/{id} includes them, oldest first
"""

from fastapi import APIRouter, Depends, Request, status

from quiz.api.dependencies import EntityId, get_question_service
from quiz.api.responses import (
    UNPROCESSABLE, send_entities, send_entity, send_error, send_success,
)
from quiz.core.errors import DuplicateError, NotFoundError, QuizError
from quiz.models.question import Question
from quiz.schemas.question import (
    QuestionCreate, QuestionDetailResponse, QuestionResponse,
)
from quiz.services.question_service import QuestionService

router = APIRouter(prefix="/questions", tags=["questions"])


@router.get("")
async def find_all_questions(
    request: Request,
    service: QuestionService = Depends(get_question_service),
):
    """List live questions without their answers."""
    handler = "find_all_questions"
    try:
        questions = await service.find_all()
    except QuizError as e:
        return send_error(
            request, handler, "Failed to find all questions",
            UNPROCESSABLE, e,
        )
    return send_entities(
        request, handler, QuestionResponse, questions, "Found all questions",
    )


@router.post("")
async def create_question(
    body: QuestionCreate,
    request: Request,
    service: QuestionService = Depends(get_question_service),
):
    handler = "create_question"
    try:
        question = await service.create(
            Question(**body.model_dump(exclude_none=True)),
        )
    except DuplicateError as e:
        return send_error(
            request, handler,
            f"Failed to create question with id={body.id}, but already exist",
            UNPROCESSABLE, e,
        )
    except QuizError as e:
        return send_error(
            request, handler, "Failed to create question",
            UNPROCESSABLE, e,
        )
    return send_entity(
        request, handler, QuestionResponse, question,
        status.HTTP_201_CREATED, f"Question {question.id} created",
    )


@router.get("/{question_id}")
async def find_question_detailed(
    question_id: EntityId,
    request: Request,
    service: QuestionService = Depends(get_question_service),
):
    """One question with its answers ordered by creation time."""
    handler = "find_question_detailed"
    try:
        question = await service.find_one_detailed(question_id)
    except NotFoundError as e:
        return send_error(
            request, handler, f"Question with id={question_id} not found",
            status.HTTP_404_NOT_FOUND, e,
        )
    except QuizError as e:
        return send_error(
            request, handler,
            f"Failed to find question with id={question_id} and its answers",
            UNPROCESSABLE, e,
        )
    return send_entity(
        request, handler, QuestionDetailResponse, question,
        result=f"Question {question_id} found",
    )


@router.delete("/{question_id}")
async def delete_question(
    question_id: EntityId,
    request: Request,
    service: QuestionService = Depends(get_question_service),
):
    handler = "delete_question"
    try:
        deleted = await service.delete(question_id)
    except QuizError as e:
        return send_error(
            request, handler, f"Failed to delete question with id={question_id}",
            UNPROCESSABLE, e,
        )
    if not deleted:
        return send_error(
            request, handler, f"Question with id={question_id} not found",
            status.HTTP_404_NOT_FOUND,
        )
    return send_success(
        request, handler, None, status.HTTP_204_NO_CONTENT,
        f"Question {question_id} deleted",
    )
