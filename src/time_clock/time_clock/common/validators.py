from __future__ import annotations

from typing import Any, Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def parse_employee_id(value: Any) -> Optional[int]:
    """Coerce a client-supplied employee id to int.

    Returns None for anything that cannot be a store-assigned id, so callers
    treat malformed ids exactly like unknown ones.
    """

    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    text = str(value).strip()
    if not (text.isascii() and text.isdigit()):
        return None
    employee_id = int(text)
    return employee_id if employee_id > 0 else None
