from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from navhive.database import get_db
from navhive.services.setup_service import SetupService

router = APIRouter(tags=["Setup"])


class InitResponse(BaseModel):
    success: bool
    alreadyInitialized: bool
    message: str


@router.get("/init", response_model=InitResponse)
async def init_database(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> InitResponse:
    created = await SetupService(db).initialize()
    if not created:
        return InitResponse(
            success=True,
            alreadyInitialized=True,
            message="Database is already initialized",
        )
    return InitResponse(success=True, alreadyInitialized=False, message="Database initialized")
