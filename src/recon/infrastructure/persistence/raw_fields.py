"""Helpers for reading loosely shaped JSON records.

Stored records use the back-office's camelCase field names and often
carry the same fact under more than one key (``_id`` or ``id``, a nested
``supplier`` object or a flat ``supplierName``).
"""

from __future__ import annotations

from datetime import datetime

from recon.domain.model.documents import DocumentLine
from recon.domain.model.value_objects import to_amount, to_quantity


def text(raw: dict, *keys: str) -> str:
    """First non-empty value among ``keys``, as a string."""
    for key in keys:
        value = raw.get(key)
        if value is not None and str(value) != "":
            return str(value)
    return ""


def nested(raw: dict, key: str) -> dict:
    """A nested object, tolerating lists (first element) and absence."""
    value = raw.get(key)
    if isinstance(value, list):
        value = value[0] if value else None
    return value if isinstance(value, dict) else {}


def lines_from_raw(items: list | None) -> tuple[DocumentLine, ...]:
    return tuple(
        DocumentLine(
            sku=text(item, "sku", "_id", "id"),
            quantity=to_quantity(item.get("quantity")),
            price=to_amount(item.get("price")),
        )
        for item in items or []
        if isinstance(item, dict)
    )


def lines_to_raw(lines: tuple[DocumentLine, ...]) -> list[dict]:
    return [
        {"sku": line.sku, "quantity": line.quantity, "price": str(line.price)}
        for line in lines
    ]


def datetime_to_raw(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None
