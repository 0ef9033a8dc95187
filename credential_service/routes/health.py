"""
Status and health check endpoints
"""
from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from datetime import datetime, timezone
from typing import Any, Dict

from ..db import check_db_connection

router = APIRouter(tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def root() -> Dict[str, str]:
    return {"message": "Auth Service is up and running!"}


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check() -> Dict[str, Any]:
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
    Readiness check endpoint with database status.

    Returns:
        dict: Readiness status, or a 503 response with the same shape
        when the database is unreachable
    """
    db_connected = check_db_connection(request.app.state.session_factory)

    response = {
        "status": "ready" if db_connected else "not_ready",
        "database": "connected" if db_connected else "disconnected",
        "timestamp": datetime.now(timezone.utc).isoformat()
    }

    if not db_connected:
        return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=response)

    return response
