# pietro_backend/app/dough/coercion.py
from __future__ import annotations
import math
from typing import Any, Optional

# What it does:
# Turn raw form text ("62", "2,8", " 4 ") into numbers the engines accept.
# Decimal comma and decimal point are both allowed; anything non-finite
# or unparsable is rejected (normalize) or replaced by the minimum (to_number).

def parse_number(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        x = float(value)
    else:
        s = str(value or "").strip().replace(",", ".", 1)
        if not s:
            return None
        try:
            x = float(s)
        except ValueError:
            return None
    return x if math.isfinite(x) else None

def normalize_input_value(value: str, minimum: float = 0) -> str:
    """
    Clean a raw text field while the user types.
    Blank or invalid → "", otherwise the clamped number as text.
    """
    if value is None or str(value).strip() == "":
        return ""
    x = parse_number(value)
    if x is None:
        return ""
    return _fmt(max(float(minimum), x))

def to_number_value(value: Any, minimum: float = 0) -> float:
    x = parse_number(value)
    if x is None:
        return float(minimum)
    return max(float(minimum), x)

def format_grams(value: float) -> str:
    return f"{value:.1f}"

# 62.0 → "62", 2.8 → "2.8"
def _fmt(x: float) -> str:
    return str(int(x)) if x.is_integer() and abs(x) < 1e15 else repr(x)
