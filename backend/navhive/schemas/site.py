from datetime import datetime

from pydantic import AnyUrl, BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

_url_adapter = TypeAdapter(AnyUrl)


def _check_url(value: str) -> str:
    try:
        _url_adapter.validate_python(value)
    except ValidationError:
        raise ValueError("invalid URL format") from None
    return value


class SiteBase(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    group_id: int = Field(gt=0)
    name: str = Field(min_length=1, max_length=100)
    url: str
    icon: str = ""
    description: str = Field(default="", max_length=500)
    notes: str = Field(default="", max_length=1000)
    order_num: int


class SiteCreate(SiteBase):
    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        return _check_url(v)

    @field_validator("icon")
    @classmethod
    def validate_icon(cls, v: str) -> str:
        # Empty icon means "use the site's favicon"
        return _check_url(v) if v else v


class SiteUpdate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    group_id: int | None = Field(None, gt=0)
    name: str | None = Field(None, min_length=1, max_length=100)
    url: str | None = None
    icon: str | None = None
    description: str | None = Field(None, max_length=500)
    notes: str | None = Field(None, max_length=1000)
    order_num: int | None = None

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str | None) -> str | None:
        return _check_url(v) if v is not None else v

    @field_validator("icon")
    @classmethod
    def validate_icon(cls, v: str | None) -> str | None:
        return _check_url(v) if v else v


class SiteResponse(SiteBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    icon: str | None = ""
    description: str | None = ""
    notes: str | None = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None
