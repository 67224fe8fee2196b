"""Liveness endpoint: database reachability and active email transport."""

import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from cotitra.adapters.persistence.database import get_session
from cotitra.config import settings

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(request: Request, session: AsyncSession = Depends(get_session)):
    try:
        await session.execute(text("SELECT 1"))
        database = "connected"
    except (SQLAlchemyError, OSError) as e:
        logger.warning("Health check: database unreachable: %s", e)
        database = "unreachable"

    return {
        "status": "ok" if database == "connected" else "degraded",
        "database": database,
        "email": type(request.app.state.email_transport).__name__,
        "service": settings.app_name,
    }
