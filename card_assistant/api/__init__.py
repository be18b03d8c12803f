"""API Layer: FastAPI routes and error handlers.

Invariants:
    - All endpoints return JSON, including every error response
"""
