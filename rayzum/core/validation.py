from datetime import date
from typing import Any

from rayzum.core.errors import ValidationError


def require_text(value: Any, label: str) -> str:
    """Strip a required text field; empty or non-string values are rejected."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{label} is required")
    return value.strip()


def optional_text(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, date):
        return value.isoformat()
    text = str(value).strip()
    return text or None


def date_text(value: Any, label: str) -> str:
    if isinstance(value, date):
        return value.isoformat()
    return require_text(value, label)
