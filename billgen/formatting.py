"""Currency formatting helpers."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

from billgen import config


def _group_digits(digits: str, grouping: str) -> str:
    if grouping == "indian":
        if len(digits) <= 3:
            return digits
        head, tail = digits[:-3], digits[-3:]
        pairs = []
        while len(head) > 2:
            pairs.insert(0, head[-2:])
            head = head[:-2]
        if head:
            pairs.insert(0, head)
        return ",".join(pairs + [tail])
    return f"{int(digits):,}"


def format_currency(
    amount: float,
    symbol: str | None = None,
    decimals: int | None = None,
    grouping: str | None = None,
) -> str:
    """Return amount with currency symbol, separators and fixed decimals."""
    symbol = config.CURRENCY_SYMBOL if symbol is None else symbol
    decimals = config.DECIMAL_PLACES if decimals is None else decimals
    grouping = grouping or config.DIGIT_GROUPING

    if not math.isfinite(amount):
        amount = 0.0

    quantum = Decimal(1).scaleb(-decimals)
    value = Decimal(str(amount))
    with localcontext() as ctx:
        # quantize needs room for every integer digit plus the decimals
        ctx.prec = max(28, value.adjusted() + decimals + 2)
        value = value.quantize(quantum, rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    integer, _, fraction = f"{value.copy_abs():f}".partition(".")

    text = _group_digits(integer, grouping)
    if decimals > 0:
        text = f"{text}.{fraction}"
    return f"{sign}{symbol}{text}"


def parse_currency(text: str, symbol: str | None = None) -> float:
    """Parse a string produced by format_currency back to a float."""
    symbol = config.CURRENCY_SYMBOL if symbol is None else symbol
    cleaned = text.strip()
    negative = cleaned.startswith("-")
    if negative:
        cleaned = cleaned[1:]
    if symbol and cleaned.startswith(symbol):
        cleaned = cleaned[len(symbol):]
    cleaned = cleaned.replace(",", "").strip()
    if not cleaned or not cleaned.replace(".", "", 1).isdigit():
        raise ValueError(f"Not a currency amount: {text!r}")
    value = float(cleaned)
    return -value if negative else value
