"""
Liveness and readiness checks for the blog service.
"""
from fastapi import APIRouter, HTTPException, status
from datetime import datetime

from ..config import settings
from ..db import check_db_connection, engine

router = APIRouter(tags=["health"])


def _status_body(state: str, **fields) -> dict:
    body = {"service": settings.APP_NAME, "status": state}
    body.update(fields)
    body["timestamp"] = datetime.utcnow().isoformat()
    return body


@router.get("/health")
def health_check():
    """The process is up and serving requests."""
    return _status_body("healthy", environment=settings.ENVIRONMENT)


@router.get("/ready")
def readiness_check():
    """
    The blog store answers queries, so users, posts and comments can be served.

    Raises:
        HTTPException: 503 with the same body when the database is unreachable
    """
    if check_db_connection():
        return _status_body("ready", database="connected", backend=engine.dialect.name)

    raise HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail=_status_body("not_ready", database="disconnected", backend=engine.dialect.name)
    )
