"""Infrastructure Layer — database engine, execution contexts, and logging.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All SQLAlchemy failures leave this layer as StorageError or DuplicateError

Design Decisions:
    - Resilient wrappers over raw clients (rollback, pre-ping, readiness wait)
"""
