"""Core Layer — error taxonomy and persistence contracts, no IO.

Invariants:
    - No module in core/ imports from services/, api/, repositories/, or infrastructure/
    - ORM and session types referenced for annotations only

Design Decisions:
    - Contracts separated from implementations (ADR: ports and adapters)
"""
