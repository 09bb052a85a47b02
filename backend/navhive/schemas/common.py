from pydantic import BaseModel, ValidationError


class PayloadValidationError(Exception):
    """Request body failed a shape check; answered with 400 before any storage work."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class SuccessResponse(BaseModel):
    success: bool


def describe_validation_error(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(loc) for loc in error["loc"])
        parts.append(f"{location}: {error['msg']}" if location else error["msg"])
    return ", ".join(parts)
