from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from ..core.constants import SECONDS_PER_HOUR

CENT = Decimal("0.01")


def round_money(amount: Decimal) -> Decimal:
    """Round to the currency's minor unit. Only call this at output boundaries."""
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def hours_from_seconds(seconds: int) -> Decimal:
    return round_money(Decimal(seconds) / SECONDS_PER_HOUR)
