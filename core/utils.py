from __future__ import annotations

import math
from typing import Union


def round_half_away(x: float) -> int:
    """Excel ROUND to a whole number: half away from zero (scalar)."""
    return int(math.copysign(math.floor(abs(x) + 0.5), x))


def format_dollars(cents: int) -> str:
    """`$20` for whole dollars, `$11.54` otherwise."""
    if cents % 100 == 0:
        return f"${cents // 100}"
    return f"${cents / 100:.2f}"


def format_currency(cents: int, decimals: int = 2) -> str:
    """Money with thousands separators, e.g. `$1,051.25` (or `$1,051` with decimals=0)."""
    return f"${cents / 100:,.{decimals}f}"


def dollars_to_cents(value: Union[str, float, int, None]) -> int:
    """
    Parse user-entered dollars into cents.
    Blank, unparseable, non-finite or negative input becomes 0.
    """
    if value is None:
        return 0
    try:
        parsed = float(str(value).strip().lstrip("$").replace(",", ""))
    except ValueError:
        return 0
    if not math.isfinite(parsed) or parsed < 0:
        return 0
    return round_half_away(parsed * 100)


def cents_to_dollars(cents: int) -> str:
    """Editor value for an amount: empty for 0 so the placeholder shows."""
    if cents == 0:
        return ""
    return f"{cents / 100:.2f}"
