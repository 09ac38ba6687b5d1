"""Invoice data models and the builder that derives them from form items."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, List, Optional

from billgen import config
from billgen.errors import InvoiceValidationError
from billgen.models.item import Item
from billgen.totals import multiply, parse_price, parse_quantity

MISSING_CUSTOMER = "Please enter customer name."
NO_VALID_ITEMS = "Please add at least one valid item to the bill."


@dataclass
class LineItem:
    serial_number: int
    name: str
    quantity: int
    unit_price: float

    @property
    def line_total(self) -> float:
        amount = multiply(self.unit_price, self.quantity)
        return 0.0 if amount is None else amount


@dataclass
class Invoice:
    customer_name: str
    date: str
    invoice_number: str
    line_items: List[LineItem] = field(default_factory=list)

    @property
    def grand_total(self) -> float:
        return sum(item.line_total for item in self.line_items)


def format_long_date(day: date) -> str:
    """Return e.g. 'October 19, 2026'."""
    return f"{day:%B} {day.day}, {day.year}"


def generate_invoice_number(rng: Optional[random.Random] = None) -> str:
    """Return the prefix plus a random zero-padded number, e.g. 'INV-0042'."""
    rng = rng or random
    upper = 10 ** config.INVOICE_NUMBER_WIDTH - 1
    return f"{config.INVOICE_PREFIX}{rng.randint(0, upper):0{config.INVOICE_NUMBER_WIDTH}d}"


def valid_items(items: Iterable[Item]) -> List[Item]:
    """Items whose name, quantity and price are all filled in."""
    return [
        item
        for item in items
        if item.name.strip() and item.quantity.strip() and item.price.strip()
    ]


def build_invoice(
    customer_name: str,
    items: Iterable[Item],
    today: Optional[date] = None,
    rng: Optional[random.Random] = None,
) -> Invoice:
    """Build an invoice from the form contents.

    Incomplete rows and rows whose quantity or price is not a number are left
    off the bill. Raises InvoiceValidationError when the customer name is blank
    or no row survives.
    """
    customer = (customer_name or "").strip()
    if not customer:
        raise InvoiceValidationError(MISSING_CUSTOMER)

    line_items: List[LineItem] = []
    for item in valid_items(items):
        quantity = parse_quantity(item.quantity)
        unit_price = parse_price(item.price)
        if quantity is None or unit_price is None:
            continue
        if multiply(unit_price, quantity) is None:
            continue
        line_items.append(
            LineItem(
                serial_number=len(line_items) + 1,
                name=item.name.strip(),
                quantity=quantity,
                unit_price=unit_price,
            )
        )

    if not line_items:
        raise InvoiceValidationError(NO_VALID_ITEMS)

    return Invoice(
        customer_name=customer,
        date=format_long_date(today or date.today()),
        invoice_number=generate_invoice_number(rng),
        line_items=line_items,
    )
