from typing import Any

from pydantic import BaseModel, StrictInt, TypeAdapter, ValidationError

from navhive.schemas.common import PayloadValidationError, describe_validation_error


class OrderItem(BaseModel):
    id: StrictInt
    order_num: StrictInt


_order_items_adapter = TypeAdapter(list[OrderItem])


def parse_order_payload(payload: Any) -> list[OrderItem]:
    if not isinstance(payload, list):
        raise PayloadValidationError("Order data must be an array")
    if not payload:
        raise PayloadValidationError("Order data must not be empty")

    try:
        items = _order_items_adapter.validate_python(payload)
    except ValidationError as e:
        raise PayloadValidationError(
            "Invalid order data, each item needs an integer id and order_num: "
            + describe_validation_error(e)
        ) from None

    seen: set[int] = set()
    for item in items:
        if item.id in seen:
            raise PayloadValidationError(f"Invalid order data: duplicate id {item.id}")
        seen.add(item.id)

    return items
