"""Error Handlers — global exception handlers for the Quiz API.

Invariants:
    - RequestValidationError (bad path parameter or body) → 400
    - QuizError that escaped a route's own mapping → 422
    - Routing HTTPException (404 unknown path, 405) → same envelope, same status
    - Exception (catch-all) → 500 generic body, never leaks internal details

Design Decisions:
    - Routes map domain errors themselves because NotFoundError is 404 on reads and
      422 on writes; these handlers are the safety net
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from quiz.api.responses import UNPROCESSABLE, send_error, send_fatal
from quiz.core.errors import QuizError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_quiz_error_handler(app)
    _register_generic_error_handler(app)


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Malformed path parameter or request body."""
        return send_error(
            request, "request_validation",
            _build_validation_message(exc), status.HTTP_400_BAD_REQUEST, exc,
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        return send_error(
            request, "routing", str(exc.detail), exc.status_code, exc,
        )


def _register_quiz_error_handler(app: FastAPI) -> None:

    @app.exception_handler(QuizError)
    async def quiz_error_handler(request: Request, exc: QuizError):
        """Domain error not mapped by its route: unprocessable."""
        return send_error(
            request, "domain", exc.message,
            UNPROCESSABLE, exc,
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all, never leaks internal details."""
        return send_fatal(request, "unhandled", exc)


def _build_validation_message(exc: RequestValidationError) -> str:
    """First validation error as 'loc: msg'."""
    errors = exc.errors()
    if not errors:
        return "Invalid request data"
    first = errors[0]
    field = ".".join(str(loc) for loc in first.get("loc", ()))
    return f"Invalid request data: {field}: {first.get('msg', 'invalid')}"
