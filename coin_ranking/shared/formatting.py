"""
Display formatting for string-typed numeric values.
"""

import math
from enum import Enum

NOT_AVAILABLE = "N/A"


class LargeNumberUnit(Enum):
    """Magnitude units used to shorten large amounts."""

    TRILLION = (1_000_000_000_000, "T")
    BILLION = (1_000_000_000, "B")
    MILLION = (1_000_000, "M")
    NONE = (1, "")

    def __init__(self, divisor: int, suffix: str) -> None:
        self.divisor = divisor
        self.suffix = suffix


def format_large_number(value: float) -> str:
    """
    Format an amount of money, shortening it with a magnitude suffix.

    Values below one keep eight decimals so tiny prices stay readable.

    Examples:
        >>> format_large_number(0.5)
        '$ 0.50000000'
        >>> format_large_number(1_234_567_890)
        '$ 1.23B'
    """
    if value < 1.0:
        return f"$ {value:.8f}"

    unit = next(u for u in LargeNumberUnit if value >= u.divisor)
    return f"$ {value / unit.divisor:.2f}{unit.suffix}"


def formatted_value(text: str | None) -> str:
    """Format a decimal string, returning N/A when it is missing or not a number."""
    if text is None:
        return NOT_AVAILABLE
    try:
        value = float(text)
    except ValueError:
        return NOT_AVAILABLE
    if not math.isfinite(value):
        return NOT_AVAILABLE
    return format_large_number(value)
