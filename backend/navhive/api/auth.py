from typing import Annotated

from fastapi import APIRouter, Depends

from navhive.schemas.auth import LoginResponse, parse_login_payload
from navhive.schemas.common import PayloadValidationError
from navhive.services.token_service import TokenService, get_token_service
from navhive.utils.payload import JsonBody

router = APIRouter(tags=["Authentication"])


@router.post("/login", response_model=LoginResponse, response_model_exclude_none=True)
async def login(
    payload: JsonBody,
    token_service: Annotated[TokenService, Depends(get_token_service)],
) -> LoginResponse:
    data = parse_login_payload(payload)

    # With auth disabled any credentials (even empty ones) get a guest token
    if token_service.config.enabled and (not data.username or not data.password):
        raise PayloadValidationError("Username and password are required")

    return token_service.login(data.username, data.password)
