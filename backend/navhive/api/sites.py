from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from navhive.database import get_db
from navhive.schemas.common import SuccessResponse
from navhive.schemas.site import SiteCreate, SiteResponse, SiteUpdate
from navhive.services.group_service import GroupService
from navhive.services.site_service import SiteService

router = APIRouter(prefix="/sites", tags=["Sites"])


async def _ensure_group_exists(db: AsyncSession, group_id: int) -> None:
    if not await GroupService(db).get_by_id(group_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Group not found",
        )


@router.get("", response_model=list[SiteResponse])
async def list_sites(
    db: Annotated[AsyncSession, Depends(get_db)],
    group_id: int | None = Query(None, alias="groupId"),
) -> list[SiteResponse]:
    sites = await SiteService(db).get_list(group_id=group_id)
    return [SiteResponse.model_validate(site) for site in sites]


@router.post("", response_model=SiteResponse)
async def create_site(
    data: SiteCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> SiteResponse:
    await _ensure_group_exists(db, data.group_id)
    site = await SiteService(db).create(data)
    return SiteResponse.model_validate(site)


@router.get("/{site_id}", response_model=SiteResponse)
async def get_site(
    site_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> SiteResponse:
    site = await SiteService(db).get_by_id(site_id)
    if not site:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Site not found",
        )
    return SiteResponse.model_validate(site)


@router.put("/{site_id}", response_model=SiteResponse)
async def update_site(
    site_id: int,
    data: SiteUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> SiteResponse:
    site_service = SiteService(db)
    site = await site_service.get_by_id(site_id)
    if not site:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Site not found",
        )

    if data.group_id is not None and data.group_id != site.group_id:
        await _ensure_group_exists(db, data.group_id)

    site = await site_service.update(site, data)
    return SiteResponse.model_validate(site)


@router.delete("/{site_id}", response_model=SuccessResponse)
async def delete_site(
    site_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> SuccessResponse:
    deleted = await SiteService(db).delete(site_id)
    return SuccessResponse(success=deleted)
