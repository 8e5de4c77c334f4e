"""Dollar amount to stored cents conversion"""

from decimal import Decimal, ROUND_HALF_UP

CENTS_PER_DOLLAR = Decimal(100)


def to_cents(amount: Decimal) -> int:
    """
    Convert a dollar amount to whole cents, rounding half up.

    Example:
        Decimal("10.00") -> 1000
        Decimal("0.01") -> 1
        Decimal("19.995") -> 2000
    """
    return int((amount * CENTS_PER_DOLLAR).quantize(Decimal(1), rounding=ROUND_HALF_UP))
