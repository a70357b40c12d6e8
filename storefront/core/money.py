from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

_CENT = Decimal("0.01")


def to_cents(value: Decimal | str | int | float) -> int:
    """Converts a monetary amount in reais to integer cents (half-up rounding)."""
    amount = Decimal(str(value)).quantize(_CENT, rounding=ROUND_HALF_UP)
    return int(amount * 100)


def format_cents(cents: int | None) -> str:
    """Renders cents as a string with exactly two decimal places: 3780 -> "37.80"."""
    amount = (Decimal(int(cents or 0)) / 100).quantize(_CENT)
    return f"{amount:.2f}"
