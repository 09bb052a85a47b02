from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from navhive.schemas.common import PayloadValidationError, describe_validation_error

EXPORT_FORMAT_VERSION = "1.0"


class GroupRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int | None = None
    name: str
    order_num: int


class SiteRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int | None = None
    group_id: int
    name: str
    url: str
    icon: str | None = ""
    description: str | None = ""
    notes: str | None = ""
    order_num: int


class ExportData(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    groups: list[GroupRecord]
    sites: list[SiteRecord]
    configs: dict[str, str]
    version: str = EXPORT_FORMAT_VERSION
    export_date: str | None = Field(None, alias="exportDate")


_export_adapter = TypeAdapter(ExportData)


def parse_import_payload(payload: Any) -> ExportData:
    if not isinstance(payload, dict):
        raise PayloadValidationError("Import data must be an object")
    try:
        data = _export_adapter.validate_python(payload)
    except ValidationError as e:
        raise PayloadValidationError(
            "Invalid import data: " + describe_validation_error(e)
        ) from None

    group_ids = {group.id for group in data.groups if group.id is not None}
    for site in data.sites:
        if site.group_id not in group_ids:
            raise PayloadValidationError(
                f"Invalid import data: site {site.name!r} references unknown group {site.group_id}"
            )
    return data
