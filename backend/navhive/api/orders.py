from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from navhive.database import get_db
from navhive.schemas.common import SuccessResponse
from navhive.schemas.order import parse_order_payload
from navhive.services.order_service import OrderScope, OrderService
from navhive.utils.payload import JsonBody

router = APIRouter(tags=["Ordering"])


@router.put("/group-orders", response_model=SuccessResponse)
async def update_group_order(
    payload: JsonBody,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> SuccessResponse:
    items = parse_order_payload(payload)
    applied = await OrderService(db).apply(OrderScope.groups, items)
    return SuccessResponse(success=applied)


@router.put("/site-orders", response_model=SuccessResponse)
async def update_site_order(
    payload: JsonBody,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> SuccessResponse:
    items = parse_order_payload(payload)
    applied = await OrderService(db).apply(OrderScope.sites, items)
    return SuccessResponse(success=applied)
