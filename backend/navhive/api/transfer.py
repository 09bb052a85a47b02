from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from navhive.database import get_db
from navhive.schemas.common import SuccessResponse
from navhive.schemas.transfer import parse_import_payload
from navhive.services.transfer_service import TransferService
from navhive.utils.payload import JsonBody

router = APIRouter(tags=["Transfer"])

EXPORT_FILENAME = "navhive-data.json"


@router.get("/export")
async def export_data(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> JSONResponse:
    data = await TransferService(db).export_data()
    return JSONResponse(
        content=data.model_dump(mode="json", by_alias=True),
        headers={"Content-Disposition": f"attachment; filename={EXPORT_FILENAME}"},
    )


@router.post("/import", response_model=SuccessResponse)
async def import_data(
    payload: JsonBody,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> SuccessResponse:
    data = parse_import_payload(payload)
    imported = await TransferService(db).import_data(data)
    return SuccessResponse(success=imported)
