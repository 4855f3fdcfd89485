import math
import sys
import unicodedata
from typing import Any, Optional

EPSILON = sys.float_info.epsilon


def round_half_up(value: float, decimals: int) -> float:
    """
    Round to a fixed number of decimal places, halves rounding up.
    A machine epsilon is added before scaling so that values such as 1.005,
    stored as 1.00499999..., still round to 1.01.
    Values too large to scale (and non-finite values) are returned unchanged.
    """
    factor = 10 ** decimals
    scaled = (value + EPSILON) * factor
    if not math.isfinite(scaled):
        return value
    return math.floor(scaled + 0.5) / factor


def as_finite_number(value: Any) -> Optional[float]:
    """
    Coerce a number (or numeric string) to float.
    Returns None for booleans, None, NaN, infinities and anything non-numeric.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def normalize_location(name: Any) -> str:
    """Trim and lowercase a location name for comparison."""
    if name is None:
        return ""
    return str(name).strip().lower()


def collation_key(text: str):
    """
    Sort key approximating linguistic order: accents and case are ignored at
    the first level, then accents, then case with lowercase first.
    """
    decomposed = unicodedata.normalize("NFKD", text)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return (base.casefold(), decomposed.casefold(), text.swapcase())


def f2(x: float) -> str:
    """Format a float with two decimal places."""
    return f"{x:.2f}"
