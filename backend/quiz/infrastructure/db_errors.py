"""Duplicate-Key Classification — recognises unique-constraint violations per backend.

Invariants:
    - Only IntegrityError can be a duplicate; anything else returns False
    - Checked once, at the repository insert, before the error reaches services

Design Decisions:
    - SQLSTATE first (asyncpg exposes .sqlstate, psycopg .pgcode), message signature
      as fallback: drivers disagree on attributes, not on message text
"""

from sqlalchemy.exc import IntegrityError

UNIQUE_VIOLATION_SQLSTATE = "23505"

_DUPLICATE_SIGNATURES = (
    "duplicate key value violates unique constraint",  # PostgreSQL
    "UNIQUE constraint failed",  # SQLite
)


def is_duplicate_key_error(exc: BaseException) -> bool:
    """True when exc reports a unique-constraint violation."""
    if not isinstance(exc, IntegrityError):
        return False
    orig = exc.orig
    for attr in ("sqlstate", "pgcode"):
        if getattr(orig, attr, None) == UNIQUE_VIOLATION_SQLSTATE:
            return True
    message = str(orig) if orig is not None else str(exc)
    return any(signature in message for signature in _DUPLICATE_SIGNATURES)
