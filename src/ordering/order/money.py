"""Decimal helpers for monetary amounts.

Amounts are kept as ``Decimal`` at scale 2 and persisted as strings, so no
binary floating point ever touches a price or a total.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

CENT = Decimal("0.01")
ZERO = Decimal("0.00")


def to_money(value) -> Decimal:
    """Coerce ``value`` to a scale-2 Decimal.

    Floats go through ``str`` first so that 9.99 stays 9.99.
    """
    if isinstance(value, float):
        value = str(value)
    try:
        amount = Decimal(value)
    except (InvalidOperation, TypeError, ValueError) as exc:
        raise ValueError(f"Invalid monetary amount: {value!r}") from exc
    if not amount.is_finite():
        raise ValueError(f"Invalid monetary amount: {value!r}")
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def line_subtotal(quantity: int, price) -> Decimal:
    return to_money(to_money(price) * quantity)


def money_sum(amounts) -> Decimal:
    return to_money(sum((to_money(a) for a in amounts), ZERO))


def format_money(value) -> str:
    return str(to_money(value))
