"""Number parsing and display formatting shared by all views."""

from __future__ import annotations

import math
from typing import Optional, Tuple, Union

from config import COLUMN_LABELS, POSITION_LABELS

PLACEHOLDER = "-"
NOT_AVAILABLE = "N/A"

Number = Union[int, float]


def parse_number(value) -> Optional[float]:
    """
    Lenient float parse for CSV cells.

    Returns None for None, empty/whitespace strings, non-numeric text, NaN and inf.
    Never raises: callers pick their own neutral default.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        num = float(value)
    else:
        text = str(value).strip()
        # float() accepts "1_000"; CSV numbers never use digit separators
        if not text or "_" in text:
            return None
        try:
            num = float(text)
        except ValueError:
            return None
    if not math.isfinite(num):
        return None
    return num


def number_or_zero(value) -> float:
    num = parse_number(value)
    return 0.0 if num is None else num


def _tiered(num: float, prefix: str) -> str:
    if num >= 1_000_000:
        return f"{prefix}{num / 1_000_000:.2f}M"
    if num >= 1_000:
        return f"{prefix}{num / 1_000:.1f}K"
    return f"{prefix}{num:.0f}"


def format_currency(value: Union[str, Number, None], missing: str = NOT_AVAILABLE) -> str:
    """
    Euro amount with M/K suffixes:
      1_000_000 → "€1.00M"
      1_500     → "€1.5K"
      500       → "€500"
    Anything that doesn't parse renders as `missing`.
    """
    num = parse_number(value)
    if num is None:
        return missing
    return _tiered(num, "€")


def format_cell_currency(value: Optional[str]) -> str:
    """Table-cell variant: empty → '-', non-numeric text passes through."""
    if not value:
        return PLACEHOLDER
    num = parse_number(value)
    if num is None:
        return str(value)
    return _tiered(num, "€")


def format_number(value: Optional[str]) -> str:
    """Same tiers as currency but without the € sign (points, games)."""
    if not value:
        return PLACEHOLDER
    num = parse_number(value)
    if num is None:
        return str(value)
    return _tiered(num, "")


def format_millions(value: Number) -> str:
    """Slider readout, e.g. 12_000_000 → '€12.0M'."""
    return f"€{value / 1_000_000:.1f}M"


def format_percentage(value: Optional[str]) -> Tuple[str, bool]:
    """
    Returns (text, non_negative). Non-negative values get an explicit '+' sign.
    Missing/unparseable values count as 0.
    """
    num = number_or_zero(value)
    non_negative = num >= 0
    sign = "+" if non_negative else ""
    return f"{sign}{num:.1f}%", non_negative


def position_label(pos: Optional[str]) -> str:
    code = (pos or "").strip()
    return POSITION_LABELS.get(code, pos or "")


def column_label(key: str) -> str:
    return COLUMN_LABELS.get(key, key)
