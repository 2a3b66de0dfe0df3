"""Services Layer — domain use cases over the store protocols.

Invariants:
    - Services decide when absence becomes NotFoundError
    - Services open execution contexts; repositories only run statements

Design Decisions:
    - One service per aggregate, constructed once in container.py
"""
