from __future__ import annotations

from datetime import datetime

from ..core.exceptions import MalformedInputError, ValidationError


def require_non_empty(value: object, field_name: str) -> str:
    if value is not None and not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a string")
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_max_length(value: str, field_name: str, max_len: int) -> str:
    if len(value) > max_len:
        raise ValidationError(f"{field_name} must be at most {max_len} characters")
    return value


def require_positive_id(value: object, field_name: str) -> int:
    # bool is an int subclass; JSON true must not become id 1
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise ValidationError(f"{field_name} must be an integer")
    try:
        parsed = int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError, OverflowError):
        raise ValidationError(f"{field_name} must be an integer")
    if parsed <= 0:
        raise ValidationError(f"{field_name} must be positive")
    return parsed


def require_ordered_range(date_from: datetime, date_to: datetime) -> None:
    if date_from > date_to:
        raise MalformedInputError(f"'from' ({date_from.isoformat()}) is after 'to' ({date_to.isoformat()})")
