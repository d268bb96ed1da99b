"""Display helpers for rupee amounts."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext

from fincalc.core.validation import require_number

RUPEE = "₹"


def group_indian(digits: str) -> str:
    """Group an unsigned integer string the Indian way: 1234567 -> 12,34,567."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def format_currency(amount: float) -> str:
    """Rupee symbol plus Indian grouping, keeping at most three decimals.

    The exact binary value is rounded half away from zero, so 0.0125 (stored
    slightly above the half) shows as 0.013.

    >>> format_currency(1234567)
    '₹12,34,567'
    >>> format_currency(-1500.5)
    '₹-1,500.5'
    """
    number = require_number("amount", amount)
    with localcontext() as ctx:
        # wide enough for every finite float at three decimals
        ctx.prec = 400
        value = Decimal(number).quantize(Decimal("0.001"), rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    whole, _, fraction = f"{abs(value):f}".partition(".")
    fraction = fraction.rstrip("0")
    text = group_indian(whole)
    if fraction:
        text = f"{text}.{fraction}"
    return f"{RUPEE}{sign}{text}"
