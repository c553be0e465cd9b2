from __future__ import annotations

import math
import re
from decimal import Decimal
from typing import Any, Optional

# Counters and clock fields are unsigned; a sign makes the value unparseable.
_INT_PREFIX = re.compile(r"\s*(\d+)")


def to_int(value: Any) -> int:
    """Leading-digits integer coercion; anything unparseable becomes 0."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return max(0, value)
    if not isinstance(value, str):
        return 0
    match = _INT_PREFIX.match(value)
    return int(match.group(1)) if match else 0


def to_float(value: Any) -> Optional[float]:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    if not isinstance(value, str):
        return None
    try:
        return float(value.strip())
    except ValueError:
        return None


def optional_int(value: Any) -> Optional[int]:
    if value is None or isinstance(value, (dict, list)):
        return None
    return to_int(value)


def format_number(value: Optional[float]) -> str:
    """Render a reading as a plain decimal: 345.0 -> '345', 1.30 -> '1.3', 1e-05 -> '0.00001'."""
    if value is None:
        return ""
    if not math.isfinite(value):
        return repr(value)
    rendered = format(Decimal(repr(value)), "f")
    if "." in rendered:
        rendered = rendered.rstrip("0").rstrip(".")
    return "0" if rendered in ("-0", "") else rendered
