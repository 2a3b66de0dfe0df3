"""Answer Routes — answers nested under a question, and /answers/{id}.

Invariants:
    - A body question_id that disagrees with the path id → 400 before any service call
    - NotFoundError from add_answer (missing parent) → 422, a rejected command
    - NotFoundError on a read → 404; delete of a missing answer → 404
    - DuplicateError and unclassified QuizError → 422
"""

from fastapi import APIRouter, Depends, Request, status

from quiz.api.dependencies import EntityId, get_answer_service
from quiz.api.responses import (
    UNPROCESSABLE, send_entities, send_entity, send_error, send_success,
)
from quiz.core.errors import DuplicateError, NotFoundError, QuizError
from quiz.models.answer import Answer
from quiz.schemas.answer import AnswerCreate, AnswerResponse
from quiz.services.answer_service import AnswerService

questions_router = APIRouter(prefix="/questions", tags=["answers"])
router = APIRouter(prefix="/answers", tags=["answers"])


@questions_router.post("/{question_id}/answers")
async def add_answer(
    question_id: EntityId,
    body: AnswerCreate,
    request: Request,
    service: AnswerService = Depends(get_answer_service),
):
    """Attach an answer to an existing question."""
    handler = "add_answer"
    if body.question_id and body.question_id != question_id:
        return send_error(
            request, handler,
            f"Failed to add answer to question with id={question_id}: "
            f"question_id={body.question_id} in body does not match path",
            status.HTTP_400_BAD_REQUEST,
        )
    answer = Answer(
        **body.model_dump(exclude_none=True, exclude={"question_id"}),
        question_id=question_id,
    )
    try:
        answer = await service.add_answer(answer)
    except NotFoundError as e:
        return send_error(
            request, handler,
            f"Failed to add answer to question with id={question_id}, "
            "but question not found",
            UNPROCESSABLE, e,
        )
    except DuplicateError as e:
        return send_error(
            request, handler,
            f"Failed to add answer to question with id={question_id}, "
            f"but answer with id={body.id} already exist",
            UNPROCESSABLE, e,
        )
    except QuizError as e:
        return send_error(
            request, handler,
            f"Failed to add answer to question with id={question_id}",
            UNPROCESSABLE, e,
        )
    return send_entity(
        request, handler, AnswerResponse, answer, status.HTTP_201_CREATED,
        f"Answer {answer.id} added to question {question_id}",
    )


@questions_router.get("/{question_id}/answers")
async def find_answers_by_question(
    question_id: EntityId,
    request: Request,
    service: AnswerService = Depends(get_answer_service),
):
    handler = "find_answers_by_question"
    try:
        answers = await service.find_all_by_question_id(question_id)
    except NotFoundError as e:
        return send_error(
            request, handler, f"Question with id={question_id} not found",
            status.HTTP_404_NOT_FOUND, e,
        )
    except QuizError as e:
        return send_error(
            request, handler,
            f"Failed to find answers of question with id={question_id}",
            UNPROCESSABLE, e,
        )
    return send_entities(
        request, handler, AnswerResponse, answers,
        f"Found answers of question {question_id}",
    )


@router.get("/{answer_id}")
async def find_answer(
    answer_id: EntityId,
    request: Request,
    service: AnswerService = Depends(get_answer_service),
):
    handler = "find_answer"
    try:
        answer = await service.find_one(answer_id)
    except NotFoundError as e:
        return send_error(
            request, handler, f"Answer with id={answer_id} not found",
            status.HTTP_404_NOT_FOUND, e,
        )
    except QuizError as e:
        return send_error(
            request, handler, f"Failed to find answer with id={answer_id}",
            UNPROCESSABLE, e,
        )
    return send_entity(
        request, handler, AnswerResponse, answer,
        result=f"Answer {answer_id} found",
    )


@router.delete("/{answer_id}")
async def delete_answer(
    answer_id: EntityId,
    request: Request,
    service: AnswerService = Depends(get_answer_service),
):
    handler = "delete_answer"
    try:
        deleted = await service.delete(answer_id)
    except QuizError as e:
        return send_error(
            request, handler, f"Failed to delete answer with id={answer_id}",
            UNPROCESSABLE, e,
        )
    if not deleted:
        return send_error(
            request, handler, f"Answer with id={answer_id} not found",
            status.HTTP_404_NOT_FOUND,
        )
    return send_success(
        request, handler, None, status.HTTP_204_NO_CONTENT,
        f"Answer {answer_id} deleted",
    )
