"""Exception types raised by the Bill Generator."""


class BillError(Exception):
    """Base class for bill generation errors."""


class InvoiceValidationError(BillError, ValueError):
    """The form contents cannot be turned into an invoice."""


class ExportError(BillError, RuntimeError):
    """Rendering the PDF or handing it to the desktop failed."""
