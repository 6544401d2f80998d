"""Parse-and-clamp helpers for numeric user input.

Quantities and page numbers arrive as text from form fields and URLs. All
coercion rules live here so every caller agrees on them:

- ints are used as-is (booleans are not numbers here)
- floats are truncated toward zero; NaN and infinities are not numbers
- strings are read up to the first non-digit after an optional sign
  ("12abc" -> 12, "3.7" -> 3, " 5 " -> 5)
- anything else, or a string without leading digits, takes the fallback
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any

MIN_QUANTITY = 1
MAX_QUANTITY = 99

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_WHOLE_INT = re.compile(r"^\s*[+-]?\d+\s*$")


@dataclass(frozen=True, slots=True)
class ClampResult:
    value: int
    adjusted: bool = False


def parse_int(raw: Any) -> int | None:
    """Return the integer read from raw, or None when raw is not numeric."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        if math.isnan(raw) or math.isinf(raw):
            return None
        return int(raw)
    if isinstance(raw, str):
        match = _LEADING_INT.match(raw)
        if match is None:
            return None
        return int(match.group(1))
    return None


def parse_and_clamp(raw: Any, *, lower: int, upper: int, fallback: int) -> ClampResult:
    """
    Parse raw into an integer within [lower, upper].

    Non-numeric input takes the fallback. Numeric input outside the range is
    moved to the nearest bound. ``adjusted`` is True whenever the returned value
    is not exactly what the caller typed.

    Raises:
        ValueError: If the bounds are inverted or fallback is outside them
    """
    if lower > upper:
        raise ValueError("lower bound cannot be greater than upper bound")
    if not lower <= fallback <= upper:
        raise ValueError("fallback must be within bounds")

    parsed = parse_int(raw)
    if parsed is None:
        return ClampResult(value=fallback, adjusted=True)

    clamped = min(max(parsed, lower), upper)
    exact = clamped == parsed
    if isinstance(raw, float):
        exact = exact and raw.is_integer()
    elif isinstance(raw, str):
        exact = exact and _WHOLE_INT.match(raw) is not None
    return ClampResult(value=clamped, adjusted=not exact)


def parse_quantity(raw: Any) -> ClampResult:
    return parse_and_clamp(raw, lower=MIN_QUANTITY, upper=MAX_QUANTITY, fallback=MIN_QUANTITY)


def parse_page(raw: Any, max_pages: int) -> ClampResult:
    return parse_and_clamp(raw, lower=1, upper=max_pages, fallback=1)
