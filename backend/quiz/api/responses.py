"""Response Construction — the only place JSON responses are built and logged.

Invariants:
    - Error body is always {"error": <message>, "status_code": <code>}
    - send_fatal never includes the exception payload in the body
    - Every helper logs the outcome with handler name, path, method, status

Design Decisions:
    - send_entity serializes through the response schema and turns a
      serialization failure into 500 (the only 500 a route produces itself)
"""

import logging
from typing import Any, Iterable

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

FATAL_MESSAGE = "Internal server error"
UNPROCESSABLE = 422


def _request_extra(request: Request, status_code: int) -> dict:
    return {
        "path": request.url.path,
        "method": request.method,
        "status_code": status_code,
    }


def send_error(
    request: Request,
    handler_name: str,
    message: str,
    status_code: int,
    exc: BaseException | None = None,
) -> JSONResponse:
    """Log and build an error response."""
    logger.error(
        f"Handler '{handler_name}' returns error: {message}"
        + (f" ({exc})" if exc is not None else ""),
        extra={
            **_request_extra(request, status_code),
            "error_code": getattr(exc, "code", None),
        },
    )
    return JSONResponse(
        status_code=status_code,
        content={"error": message, "status_code": status_code},
    )


def send_success(
    request: Request,
    handler_name: str,
    content: Any,
    status_code: int = status.HTTP_200_OK,
    result: str = "",
) -> Response:
    """Log and build a success response. content=None sends an empty body."""
    logger.info(
        f"Handler '{handler_name}' returns success: {result}",
        extra=_request_extra(request, status_code),
    )
    if content is None:
        return Response(status_code=status_code)
    return JSONResponse(status_code=status_code, content=content)


def send_fatal(
    request: Request, handler_name: str, exc: BaseException,
) -> JSONResponse:
    """Log an unexpected failure and answer with the generic 500 body."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    logger.error(
        f"Handler '{handler_name}' failed unexpectedly: {exc!r}",
        exc_info=exc,
        extra=_request_extra(request, status_code),
    )
    return JSONResponse(
        status_code=status_code,
        content={"error": FATAL_MESSAGE, "status_code": status_code},
    )


def send_entity(
    request: Request,
    handler_name: str,
    schema: type[BaseModel],
    entity: Any,
    status_code: int = status.HTTP_200_OK,
    result: str = "",
) -> Response:
    """Serialize one entity through schema and send it."""
    try:
        content = schema.model_validate(entity).model_dump(mode="json")
    except ValidationError as e:
        return send_error(
            request, handler_name, "Failed to serialize response", 500, e,
        )
    return send_success(request, handler_name, content, status_code, result)


def send_entities(
    request: Request,
    handler_name: str,
    schema: type[BaseModel],
    entities: Iterable[Any],
    result: str = "",
) -> Response:
    """Serialize a list of entities through schema and send it with 200."""
    try:
        content = [
            schema.model_validate(e).model_dump(mode="json") for e in entities
        ]
    except ValidationError as e:
        return send_error(
            request, handler_name, "Failed to serialize response", 500, e,
        )
    return send_success(request, handler_name, content, status.HTTP_200_OK, result)
