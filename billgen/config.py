"""Configuration constants for the Bill Generator."""

import tempfile
from pathlib import Path
from typing import Tuple

# Business identity printed on every bill.
BUSINESS_NAME: str = "FMU Electronics"
BUSINESS_TAGLINE: str = "Your One-Stop Shop for Electronics Repair and Electrical Fittings"
PROPRIETOR: str = "Mudasir Farooq"
PHONE: str = "8899821659"
ADDRESS: str = "Jamia Qadeem Sopore"
FOOTER_LINES: Tuple[str, ...] = (
    "FMU Electronics - Your trusted partner for all kinds of electronic repairs and electrical fittings.",
    "We offer a wide range of electronic items and services. Thank you for your business!",
)

# Currency rendering. "indian" groups as 12,34,567; "western" as 1,234,567.
CURRENCY_SYMBOL: str = "₹"
DIGIT_GROUPING: str = "indian"
DECIMAL_PLACES: int = 2

INVOICE_PREFIX: str = "INV-"
INVOICE_NUMBER_WIDTH: int = 4

# Where generated PDFs are written before being handed to the desktop.
OUTPUT_DIR: Path = Path(tempfile.gettempdir()) / "billgen"
PDF_MIME_TYPE: str = "application/pdf"

WINDOW_TITLE: str = "Bill Generator"
WINDOW_SIZE: Tuple[int, int] = (720, 760)

# Delay before scrolling a freshly added row into view.
SCROLL_DELAY_MS: int = 100
