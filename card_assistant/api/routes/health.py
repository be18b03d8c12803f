"""Health & Readiness Probes: service description, liveness and readiness.

Invariants:
    - GET / always returns 200 with the static endpoint listing
    - GET /health always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if the row-store is unreachable (readiness)
"""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from card_assistant.infrastructure import database

logger = logging.getLogger(__name__)
router = APIRouter(tags=["health"])

SERVICE_DESCRIPTION = {
    "status": "OK",
    "message": "Hong Kong credit card assistant backend is running",
    "endpoints": {
        "cards": {
            "getAll": "GET /api/cards",
            "filter": "GET /api/cards/filter?category=dining&region=local",
            "create": "POST /api/cards",
            "update": "PUT /api/cards/:id",
            "delete": "DELETE /api/cards/:id",
        },
        "ai": {
            "chat": "POST /api/chat",
        },
    },
}


@router.get("/", status_code=status.HTTP_200_OK)
async def service_info():
    return SERVICE_DESCRIPTION


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {"status": "healthy", "service": "card-assistant-api"}


@router.get("/health/ready")
async def readiness_check():
    """Readiness probe: includes row-store connectivity."""
    manager = database.db_manager
    db_ok = await manager.health_check() if manager else False
    if not db_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
