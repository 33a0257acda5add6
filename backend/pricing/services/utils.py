from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP

TWOPLACES = Decimal("0.01")
ZERO = Decimal("0")
ONE = Decimal("1")


def d(val) -> Decimal:
    """Coerce incoming values to Decimal safely."""
    if isinstance(val, Decimal):
        return val
    return Decimal(str(val))


def round2(amount) -> Decimal:
    """Round a money amount to cents, half up (12.345 -> 12.35)."""
    return d(amount).quantize(TWOPLACES, rounding=ROUND_HALF_UP)
