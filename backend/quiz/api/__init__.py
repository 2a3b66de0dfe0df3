"""API Layer — FastAPI routes, response construction, and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Routes talk to services only, never to repositories or sessions
    - All endpoints return JSON (204 responses carry no body)

Design Decisions:
    - Thin routes delegate to services and map errors to status codes
"""
