"""Error Taxonomy — the closed set of domain failure kinds.

Invariants:
    - Exactly three kinds: NotFoundError, DuplicateError, and the unclassified QuizError
    - StorageError is a QuizError flavour (unclassified), never its own status mapping
    - to_response() produces the REST error envelope {"error", "status_code"}
    - Messages never carry driver or SQL details

Design Decisions:
    - Status codes are NOT stored on errors: the same NotFoundError maps to 404 on a
      read and 422 on a write, so the boundary decides (ADR: operation-dependent mapping)
    - Duplicate classification happens once in infrastructure/db_errors.py
"""

from enum import Enum


class ErrorCategory(str, Enum):
    """High-level error categories for logging and handling."""
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


class QuizError(Exception):
    """Base exception for all Quiz errors. Raised directly for unclassified failures."""

    def __init__(
        self,
        message: str,
        code: str = "UNPROCESSABLE",
        category: ErrorCategory = ErrorCategory.INTERNAL,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category

    def to_response(self, status_code: int) -> dict:
        """Convert to the REST error envelope."""
        return {"error": self.message, "status_code": status_code}


class NotFoundError(QuizError):
    """Referenced entity does not exist or is soft-deleted."""
    def __init__(self, entity_id: int, entity: str = "Entity"):
        super().__init__(
            f"{entity} with id={entity_id} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
        )
        self.entity_id = entity_id
        self.entity = entity


class DuplicateError(QuizError):
    """Insert violated a uniqueness constraint."""
    def __init__(self, entity_id: int | None, entity: str = "Entity"):
        super().__init__(
            f"{entity} with id={entity_id} already exist",
            "DUPLICATE", ErrorCategory.CONFLICT,
        )
        self.entity_id = entity_id
        self.entity = entity


class StorageError(QuizError):
    """Database operation failed (unclassified)."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
        )
        self.operation = operation
