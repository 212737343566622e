"""Health check endpoints."""
import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from board.server.db import get_db
from board.server.settings import settings

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/healthz")
async def health_check() -> Dict[str, str]:
    """Basic health check endpoint.
    
    Returns:
        Simple status response
    """
    return {"status": "ok"}


@router.get("/readyz")
async def readiness_check(session: AsyncSession = Depends(get_db)) -> Dict[str, Any]:
    """Readiness check endpoint.
    
    Checks that the database answers and a signing key is configured.
    
    Returns:
        Status response with readiness info
    """
    try:
        await session.execute(text("SELECT 1"))
        database_ok = True
    except SQLAlchemyError as exc:
        logger.warning("Database readiness check failed: %s", exc)
        database_ok = False

    checks = {
        "database": database_ok,
        "jwt_secret_key": bool(settings.JWT_SECRET_KEY),
    }
    
    ready = all(checks.values())
    
    return {
        "status": "ok" if ready else "not_ready",
        "checks": checks
    }
