"""Display formatting for the result panel (en-US, USD)."""
from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Optional

PLACEHOLDER = "N/A"


def _is_displayable(value: Optional[float]) -> bool:
    if value is None or isinstance(value, bool):
        return False
    try:
        return math.isfinite(float(value))
    except (TypeError, ValueError):
        return False


def format_currency(amount: Optional[float]) -> str:
    """Format as whole US dollars, e.g. ``$1,044,000`` or ``-$250,000``.

    Halves round away from zero. Missing or non-finite amounts give the
    placeholder.
    """

    if not _is_displayable(amount):
        return PLACEHOLDER
    with localcontext() as ctx:
        ctx.prec = 400
        rounded = Decimal(str(float(amount))).quantize(
            Decimal("1"), rounding=ROUND_HALF_UP
        )
    if rounded == 0:
        return "$0"
    sign = "-" if rounded < 0 else ""
    return f"{sign}${abs(rounded):,.0f}"


def format_percentage(value: Optional[int], *, signed: bool = True) -> str:
    if not _is_displayable(value):
        return PLACEHOLDER
    prefix = "+" if signed and value >= 0 else ""
    return f"{prefix}{int(value)}%"


def format_months(value: Optional[int]) -> str:
    if not _is_displayable(value):
        return PLACEHOLDER
    return str(int(value))


__all__ = ["PLACEHOLDER", "format_currency", "format_months", "format_percentage"]
