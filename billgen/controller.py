"""Form state and the submit workflow, independent of any widget toolkit."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Callable, Optional

from billgen.errors import ExportError, InvoiceValidationError
from billgen.feedback import Haptics, ImpactStyle, NotificationType
from billgen.formatting import format_currency
from billgen.logs import logger
from billgen.models.invoice import build_invoice
from billgen.models.item import Item, ItemList
from billgen.printing.invoice_document import InvoiceDocumentBuilder
from billgen.printing.pdf_exporter import InvoiceExporter
from billgen.totals import compute_total

log = logger(__name__)

# alert(level, title, message); level is "info", "warning" or "error".
AlertFn = Callable[[str, str, str], None]


class SubmitState(Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    INVALID = "invalid"
    GENERATING = "generating"
    EXPORTED = "exported"
    FAILED = "failed"


class BillFormController:
    """Owns the customer name and item list for one bill form."""

    def __init__(
        self,
        alert: AlertFn,
        exporter: Optional[InvoiceExporter] = None,
        haptics: Optional[Haptics] = None,
        document_builder: Optional[InvoiceDocumentBuilder] = None,
    ) -> None:
        self.alert = alert
        self.exporter = exporter or InvoiceExporter()
        self.haptics = haptics or Haptics()
        self.document_builder = document_builder or InvoiceDocumentBuilder()
        self.customer_name = ""
        self.items = ItemList()
        self.state = SubmitState.IDLE
        self.last_export: Optional[Path] = None

    def set_customer_name(self, name: str) -> None:
        self.customer_name = name

    def add_item(self) -> Item:
        item = self.items.add_item()
        self.haptics.impact(ImpactStyle.LIGHT)
        return item

    def update_item(self, item_id: int, field: str, value: str) -> None:
        self.items.update_item(item_id, field, value)

    def remove_item(self, item_id: int) -> bool:
        if not self.items.remove_item(item_id):
            self.alert("warning", "Cannot Remove", "You must have at least one item.")
            return False
        self.haptics.impact(ImpactStyle.MEDIUM)
        return True

    @property
    def total(self) -> float:
        return compute_total(self.items)

    @property
    def formatted_total(self) -> str:
        return format_currency(self.total)

    @property
    def busy(self) -> bool:
        return self.state is not SubmitState.IDLE

    def submit(self) -> SubmitState:
        """Validate the form, export the invoice and report the outcome."""
        if self.busy:
            log.warning("Submit ignored while %s", self.state.value)
            return self.state

        self.state = SubmitState.VALIDATING
        try:
            invoice = build_invoice(self.customer_name, self.items.snapshot())
        except InvoiceValidationError as exc:
            log.warning("Bill rejected: %s", exc)
            self.state = SubmitState.IDLE
            self.alert("warning", "Error", str(exc))
            return SubmitState.INVALID

        self.state = SubmitState.GENERATING
        try:
            markup = self.document_builder.render(invoice)
            self.last_export = self.exporter.export(markup, f"{invoice.invoice_number}.pdf")
        except ExportError:
            outcome = SubmitState.FAILED
        except Exception:  # noqa: BLE001 - a bill that cannot be laid out is a failed export
            log.exception("Rendering %s failed", invoice.invoice_number)
            outcome = SubmitState.FAILED
        else:
            outcome = SubmitState.EXPORTED
        finally:
            self.state = SubmitState.IDLE

        if outcome is SubmitState.EXPORTED:
            log.info(
                "Generated %s for %s with %d items",
                invoice.invoice_number,
                invoice.customer_name,
                len(invoice.line_items),
            )
            self.alert("info", "Success", "PDF has been generated and saved.")
            self.haptics.notification(NotificationType.SUCCESS)
        else:
            log.error("Generating %s failed", invoice.invoice_number)
            self.alert("error", "Error", "Failed to generate PDF.")
            self.haptics.notification(NotificationType.ERROR)
        return outcome
