from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from navhive.database import get_db
from navhive.schemas.common import SuccessResponse
from navhive.schemas.group import GroupCreate, GroupResponse, GroupUpdate
from navhive.services.group_service import GroupService

router = APIRouter(prefix="/groups", tags=["Groups"])


@router.get("", response_model=list[GroupResponse])
async def list_groups(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[GroupResponse]:
    groups = await GroupService(db).get_list()
    return [GroupResponse.model_validate(group) for group in groups]


@router.post("", response_model=GroupResponse)
async def create_group(
    data: GroupCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> GroupResponse:
    group = await GroupService(db).create(data)
    return GroupResponse.model_validate(group)


@router.get("/{group_id}", response_model=GroupResponse)
async def get_group(
    group_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> GroupResponse:
    group = await GroupService(db).get_by_id(group_id)
    if not group:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Group not found",
        )
    return GroupResponse.model_validate(group)


@router.put("/{group_id}", response_model=GroupResponse)
async def update_group(
    group_id: int,
    data: GroupUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> GroupResponse:
    group_service = GroupService(db)
    group = await group_service.get_by_id(group_id)
    if not group:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Group not found",
        )

    group = await group_service.update(group, data)
    return GroupResponse.model_validate(group)


@router.delete("/{group_id}", response_model=SuccessResponse)
async def delete_group(
    group_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> SuccessResponse:
    deleted = await GroupService(db).delete(group_id)
    return SuccessResponse(success=deleted)
