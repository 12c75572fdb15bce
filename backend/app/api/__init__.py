"""API Layer: FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All API endpoints return JSON; errors use the {"error": message} envelope
"""
