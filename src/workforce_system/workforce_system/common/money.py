from __future__ import annotations

from ..core.constants import DEFAULT_MONEY_DECIMALS


def round_money(value: float, decimals: int = DEFAULT_MONEY_DECIMALS) -> float:
    """Round for presentation only; totals are summed unrounded."""
    return round(float(value), decimals)
