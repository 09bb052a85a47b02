from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from navhive.database import get_db
from navhive.schemas.common import SuccessResponse
from navhive.schemas.config import ConfigValueResponse, parse_config_value
from navhive.services.config_service import ConfigService
from navhive.utils.payload import JsonBody

router = APIRouter(prefix="/configs", tags=["Configs"])


@router.get("", response_model=dict[str, str])
async def list_configs(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> dict[str, str]:
    return await ConfigService(db).get_all()


@router.get("/{key}", response_model=ConfigValueResponse)
async def get_config(
    key: str,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ConfigValueResponse:
    value = await ConfigService(db).get(key)
    return ConfigValueResponse(key=key, value=value)


@router.put("/{key}", response_model=SuccessResponse)
async def set_config(
    key: str,
    payload: JsonBody,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> SuccessResponse:
    value = parse_config_value(payload)
    await ConfigService(db).set(key, value)
    return SuccessResponse(success=True)


@router.delete("/{key}", response_model=SuccessResponse)
async def delete_config(
    key: str,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> SuccessResponse:
    deleted = await ConfigService(db).delete(key)
    return SuccessResponse(success=deleted)
