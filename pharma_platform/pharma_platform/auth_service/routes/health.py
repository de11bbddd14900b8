"""
Health check endpoints
"""
from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from datetime import datetime, timezone
from typing import Any, Dict

from ..db import check_db_connection

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_check() -> Dict[str, Any]:
    """
    Basic health check endpoint.

    Returns:
        dict: Health status and timestamp
    """
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat()
    }


@router.get("/ready", status_code=status.HTTP_200_OK)
def readiness_check(request: Request):
    """
    Readiness check reporting which directory backs the service.

    Returns 503 when a database is configured but cannot be reached.
    """
    directory = request.app.state.auth_service.directory

    if not directory.is_persistent:
        return {"status": "ready", "storage": "ephemeral", "database": "not_configured"}

    if not check_db_connection(directory.session_factory):
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"message": "Service temporarily unavailable.", "storage": "persistent", "database": "disconnected"}
        )

    return {"status": "ready", "storage": "persistent", "database": "connected"}
