from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..core.constants import ISO_DATETIME_FORMAT
from ..core.exceptions import ValidationError


def parse_iso_datetime(value: object, field_name: str) -> datetime:
    """Parse an ISO-8601 naive local datetime (``YYYY-MM-DDTHH:MM:SS``)."""
    if value is not None and not isinstance(value, str):
        raise ValidationError(f"{field_name} must be an ISO-8601 string")
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        raise ValidationError(f"{field_name} must be an ISO-8601 datetime, got {value!r}")
    if parsed.tzinfo is not None:
        raise ValidationError(f"{field_name} must be a local time without offset")
    return parsed



def format_iso_datetime(value: Optional[datetime]) -> Optional[str]:
    """Render a response datetime as ``YYYY-MM-DDTHH:MM:SS`` (microseconds dropped)."""
    return value.strftime(ISO_DATETIME_FORMAT) if value is not None else None
