"""SQLAlchemy Declarative Base — shared base class for all ORM models.

Invariants:
    - All models inherit from Base
    - Base is the single source of truth for table metadata (tests, Alembic)
    - Entity ids are BIGINT; MAX_ID is the largest id storage can hold

Design Decisions:
    - Separate file for Base: avoids circular imports between models
    - BigId falls back to INTEGER on SQLite, where only INTEGER PRIMARY KEY
      autoincrements
"""

from sqlalchemy import BigInteger, Integer
from sqlalchemy.orm import DeclarativeBase

MAX_ID = 2**63 - 1

BigId = BigInteger().with_variant(Integer, "sqlite")


class Base(DeclarativeBase):
    """Base class for all Quiz ORM models."""
    pass
