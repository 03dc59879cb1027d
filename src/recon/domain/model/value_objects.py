"""Coercion helpers shared across the domain.

Back-office records arrive with loosely typed numeric and date fields.
These helpers turn them into well-typed values without ever raising:
anything missing or malformed becomes zero (or ``None`` for dates).
"""

from __future__ import annotations

from datetime import date, datetime, time, timezone
from decimal import Decimal, InvalidOperation

ZERO = Decimal("0")
_CENTS = Decimal("0.01")


def to_amount(raw: object) -> Decimal:
    """Coerce a monetary value to Decimal; malformed input becomes 0.

    Uses ``Decimal(str(...))`` so floats keep their printed value rather
    than their binary approximation.
    """
    if raw is None or isinstance(raw, bool):
        return ZERO
    if isinstance(raw, Decimal):
        return raw if raw.is_finite() else ZERO
    try:
        value = Decimal(str(raw).strip())
    except (InvalidOperation, ValueError):
        return ZERO
    return value if value.is_finite() else ZERO


def to_optional_amount(raw: object) -> Decimal | None:
    """Like ``to_amount`` but keeps absence distinguishable from zero."""
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return None
    return to_amount(raw)


def to_quantity(raw: object) -> int:
    """Coerce a quantity to int; malformed input becomes 0.

    Fractional input is truncated toward zero.
    """
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    return int(to_amount(raw))


def to_datetime(raw: object) -> datetime | None:
    """Parse an ISO date or datetime.

    Aware datetimes are converted to naive UTC so every entry compares on
    the same clock. Returns None when the value cannot be parsed.
    """
    if raw is None:
        return None
    if isinstance(raw, datetime):
        parsed = raw
    elif isinstance(raw, date):
        return datetime.combine(raw, time.min)
    else:
        text = str(raw).strip()
        if not text:
            return None
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def format_amount(amount: Decimal) -> str:
    """Render an amount with two decimal places and thousands separators."""
    return f"{amount.quantize(_CENTS):,.2f}"
