import json
from typing import Annotated, Any

from fastapi import Depends, Request

from navhive.schemas.common import PayloadValidationError


async def read_json_body(request: Request) -> Any:
    """
    Raw JSON body for routes that validate their own payload.

    An empty body reads as None so the route's parser reports it. Bodies that
    are not JSON raise PayloadValidationError instead of FastAPI's 422.
    """
    raw = await request.body()
    if not raw.strip():
        return None
    try:
        return json.loads(raw)
    except ValueError:
        raise PayloadValidationError("Request body is not valid JSON") from None


JsonBody = Annotated[Any, Depends(read_json_body)]
