from typing import Any

from pydantic import BaseModel

from navhive.schemas.common import PayloadValidationError


class ConfigValueResponse(BaseModel):
    key: str
    value: str | None = None


def parse_config_value(payload: Any) -> str:
    if not isinstance(payload, dict):
        raise PayloadValidationError("Config data must be an object")
    value = payload.get("value")
    if not isinstance(value, str) or not value:
        raise PayloadValidationError("Config value must be a non-empty string")
    return value
