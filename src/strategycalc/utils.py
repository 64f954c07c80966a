from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable

from strategycalc.config import EMPTY_VALUES_TEXT, VALUE_SEPARATOR

PERCENT = 100.0


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer; exact .5 ties go away from zero."""
    # Decimal(float) is exact, so 12.5 stays 12.5 and is not nudged by binary error.
    # to_integral_value has no context-precision limit, unlike quantize.
    return int(Decimal(value).to_integral_value(rounding=ROUND_HALF_UP))


def apply_increase(raw: int, y_percent: float) -> int:
    """Scale a raw draw by Y percent of its magnitude: raw + |raw| * (y / 100)."""
    scaled = raw + abs(raw) * (y_percent / PERCENT)
    return round_half_away_from_zero(scaled)


def format_signed(value: int) -> str:
    """Render an integer with an explicit sign, zero included ("+0")."""
    return f"{value:+d}"


def format_values(values: Iterable[int]) -> str:
    """Join signed values for display, or a dash if there are none."""
    parts = [format_signed(v) for v in values]
    if not parts:
        return EMPTY_VALUES_TEXT
    return VALUE_SEPARATOR.join(parts)
