"""Typed field accessors for raw API records.

Every accessor raises ParseError instead of returning a default, so a
malformed record never yields a half-populated model.
"""

from collections.abc import Mapping
from datetime import UTC, datetime
from decimal import Decimal, InvalidOperation
from enum import IntEnum
from typing import Any, TypeVar

from opensea_sdk.normalize.errors import ParseError

E = TypeVar("E", bound=IntEnum)

_MISSING = object()


def require(raw: Any, key: str, context: str) -> Any:
    """Return raw[key], raising ParseError when absent or null."""
    if not isinstance(raw, Mapping):
        raise ParseError(f"{context}: expected an object, got {type(raw).__name__}")
    value = raw.get(key, _MISSING)
    if value is _MISSING or value is None:
        raise ParseError(f"{context}: missing required field '{key}'", field=key)
    return value


def require_str(raw: Any, key: str, context: str) -> str:
    value = require(raw, key, context)
    if not isinstance(value, str):
        raise ParseError(
            f"{context}: field '{key}' must be a string, got {type(value).__name__}",
            field=key,
        )
    return value


def to_decimal(value: Any, key: str) -> Decimal:
    """Parse a numeric string (or JSON number) without going through float."""
    if isinstance(value, bool) or not isinstance(value, (str, int, float, Decimal)):
        raise ParseError(f"field '{key}' is not numeric: {value!r}", field=key)
    try:
        # str() keeps the JSON number's shortest repr for floats
        result = Decimal(value if isinstance(value, (str, Decimal)) else str(value))
    except InvalidOperation as e:
        raise ParseError(f"field '{key}' is not numeric: {value!r}", field=key) from e
    if not result.is_finite():
        raise ParseError(f"field '{key}' is not finite: {value!r}", field=key)
    return result


def to_int(value: Any, key: str) -> int:
    if isinstance(value, bool):
        raise ParseError(f"field '{key}' is not an integer: {value!r}", field=key)
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError as e:
            raise ParseError(
                f"field '{key}' is not an integer: {value!r}", field=key
            ) from e
    raise ParseError(f"field '{key}' is not an integer: {value!r}", field=key)


def to_enum(enum_cls: type[E], value: Any, key: str) -> E:
    """Map a wire integer onto an IntEnum. Unknown values fail fast."""
    number = to_int(value, key)
    try:
        return enum_cls(number)
    except ValueError as e:
        raise ParseError(
            f"field '{key}' has invalid {enum_cls.__name__} value {value!r}",
            field=key,
        ) from e


def to_epoch_seconds(value: str, key: str) -> int:
    """Parse an ISO timestamp; naive timestamps are UTC."""
    try:
        parsed = datetime.fromisoformat(value)
    except (TypeError, ValueError) as e:
        raise ParseError(f"field '{key}' is not a timestamp: {value!r}", field=key) from e
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return round(parsed.timestamp())


def plain_number(value: Decimal | int) -> str:
    """Render a number in plain digits, never in exponent form."""
    if isinstance(value, Decimal):
        return format(value, "f")
    return str(value)
