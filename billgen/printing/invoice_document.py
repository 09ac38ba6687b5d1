"""Render invoices to printable HTML."""

from __future__ import annotations

from pathlib import Path
from typing import Final

from jinja2 import Environment, FileSystemLoader, select_autoescape

from billgen import config
from billgen.formatting import format_currency
from billgen.models.invoice import Invoice

TEMPLATE_DIR: Final = Path(__file__).parent / "templates"


class InvoiceDocumentBuilder:
    """Fill the invoice template with business details and line items."""

    def __init__(self, template_name: str = "invoice.html") -> None:
        self._env: Final = Environment(
            loader=FileSystemLoader(str(TEMPLATE_DIR)),
            autoescape=select_autoescape(["html"]),
        )
        self._env.filters["currency"] = format_currency
        self.template_name = template_name

    def render(self, invoice: Invoice) -> str:
        template = self._env.get_template(self.template_name)
        business = {
            "name": config.BUSINESS_NAME,
            "tagline": config.BUSINESS_TAGLINE,
            "proprietor": config.PROPRIETOR,
            "phone": config.PHONE,
            "address": config.ADDRESS,
            "footer": config.FOOTER_LINES,
        }
        return template.render(
            invoice=invoice,
            business=business,
            symbol=config.CURRENCY_SYMBOL,
        )


def render_invoice_html(invoice: Invoice) -> str:
    return InvoiceDocumentBuilder().render(invoice)
