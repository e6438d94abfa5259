from __future__ import annotations

from typing import Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError("field_required", field=field_name)
    return str(value).strip()


def optional_text(value: Optional[str]) -> Optional[str]:
    v = (value or "").strip()
    return v or None


def parse_number_in_range(value: str, field_name: str, *, low: float, high: float) -> float:
    try:
        number = float(str(value).strip())
    except (TypeError, ValueError):
        raise ValidationError("invalid_number", field=field_name)

    if number != number or not (low <= number <= high):
        raise ValidationError("out_of_range", field=field_name, low=low, high=high)
    return int(number) if number.is_integer() else number
