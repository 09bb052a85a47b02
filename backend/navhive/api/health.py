import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from navhive.database import get_db
from navhive.services.setup_service import SetupService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health")


@router.get("")
async def health_check() -> dict[str, str]:
    return {"status": "healthy"}


@router.get("/ready")
async def readiness_check(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> dict[str, Any]:
    """Report storage reachability and whether /init has run yet."""
    try:
        await db.execute(text("SELECT 1"))
    except SQLAlchemyError:
        # Driver errors carry paths and SQL; they stay in the log
        logger.exception("Readiness check could not reach the database")
        return {
            "status": "unhealthy",
            "checks": {"database": "unhealthy", "schema": "unknown"},
        }

    initialized = await SetupService(db).is_initialized()
    return {
        "status": "healthy",
        "checks": {
            "database": "healthy",
            "schema": "initialized" if initialized else "uninitialized",
        },
    }
