"""Lenient numeric parsing and the live bill total."""

from __future__ import annotations

import math
import re
from typing import Iterable, Optional

from billgen.models.item import Item

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_quantity(text: str) -> Optional[int]:
    """Parse the leading integer of text; None when there is none."""
    match = _INT_PREFIX.match(text or "")
    if not match:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        # more digits than the interpreter will convert
        return None


def parse_price(text: str) -> Optional[float]:
    """Parse the leading decimal number of text; None when there is none."""
    match = _FLOAT_PREFIX.match(text or "")
    if not match:
        return None
    return float(match.group(1))


def multiply(price: float, quantity: int) -> Optional[float]:
    """Return price x quantity in floating point; None when it is not a number."""
    try:
        count = float(quantity)
    except OverflowError:
        count = math.inf if quantity > 0 else -math.inf
    amount = price * count
    if math.isnan(amount):
        return None
    return amount


def line_amount(item: Item) -> Optional[float]:
    """Return price x quantity, or None when either field does not parse."""
    quantity = parse_quantity(item.quantity)
    price = parse_price(item.price)
    if quantity is None or price is None:
        return None
    return multiply(price, quantity)


def compute_total(items: Iterable[Item]) -> float:
    """Sum of all line amounts; rows that do not parse count as zero."""
    total = 0.0
    for item in items:
        amount = line_amount(item)
        if amount is not None:
            total += amount
    return total
