"""Display formatting for calculator output."""
import math
from decimal import ROUND_HALF_UP, Decimal


def _as_float(value) -> float:
    try:
        v = float(value)
    except (TypeError, ValueError):
        return 0.0
    return v if math.isfinite(v) else 0.0


def format_currency(value) -> str:
    """Whole US dollars with grouping, e.g. ``$1,234`` or ``-$50``.

    Halves round away from zero, the way browsers format ``en-US`` currency.
    """
    v = _as_float(value)
    whole = math.floor(abs(v) + 0.5)
    if whole == 0:
        return "$0"
    sign = "-" if v < 0 else ""
    return f"{sign}${whole:,d}"


def format_percent(value) -> str:
    """Percentage with two decimals, e.g. ``20.00%``.

    Halves round away from zero, so a 6.125% rate reads ``6.13%``.
    """
    rounded = Decimal(repr(_as_float(value))).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    if rounded == 0:
        return "0.00%"
    return f"{rounded}%"
