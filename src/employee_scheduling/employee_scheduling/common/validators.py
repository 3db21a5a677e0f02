from __future__ import annotations

import math
import re
from typing import Optional

from ..core.exceptions import ValidationError

PHONE_PATTERN = re.compile(r"^[0-9]{4}-[0-9]{4}$")


def clean_text(value: object) -> str:
    """Form values may be missing or non-string; normalize to a stripped str."""
    if not isinstance(value, str):
        return ""
    return value.strip()


def require_name(value: object) -> str:
    name = clean_text(value)
    if not name:
        raise ValidationError("Validation failed: Name must be non-empty")
    return name


def require_phone(value: object) -> str:
    phone = clean_text(value)
    if not PHONE_PATTERN.fullmatch(phone):
        raise ValidationError("Validation failed: Phone must be 4 digits, a dash, then 4 digits")
    return phone


def positive_number(value: object) -> Optional[float]:
    """Finite number > 0 (numeric strings accepted), else ``None``."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if not math.isfinite(number) or number <= 0:
        return None
    return number
