from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, ValidationError

from navhive.schemas.common import PayloadValidationError, describe_validation_error


class TokenClaims(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    subject: StrictStr
    issued_at: StrictInt = Field(alias="issuedAt")  # Epoch seconds
    expires_at: StrictInt = Field(alias="expiresAt")  # Epoch seconds
    # Room for future claims without loosening the fixed fields above
    extensions: dict[str, str] | None = None

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class LoginRequest(BaseModel):
    username: StrictStr | None = None
    password: StrictStr | None = None


class LoginResponse(BaseModel):
    success: bool
    token: str | None = None
    message: str | None = None


def parse_login_payload(payload: Any) -> LoginRequest:
    if payload is None:
        return LoginRequest()
    if not isinstance(payload, dict):
        raise PayloadValidationError("Login data must be an object")
    try:
        return LoginRequest.model_validate(payload)
    except ValidationError as e:
        raise PayloadValidationError(describe_validation_error(e)) from None
