"""PDF rendering via QTextDocument and hand-off to the desktop."""

from __future__ import annotations

from pathlib import Path

from PyQt5.QtCore import QUrl
from PyQt5.QtGui import QDesktopServices, QPageSize, QTextDocument
from PyQt5.QtPrintSupport import QPrinter

from billgen import config
from billgen.errors import ExportError
from billgen.logs import logger

log = logger(__name__)


class PdfRenderer:
    """Lay out HTML with QTextDocument and print it to a PDF file."""

    def render(self, markup: str, path: Path) -> Path:
        printer = QPrinter(QPrinter.HighResolution)
        printer.setOutputFormat(QPrinter.PdfFormat)
        printer.setPageSize(QPageSize(QPageSize.A4))
        printer.setOutputFileName(str(path))

        doc = QTextDocument()
        doc.setHtml(markup)
        doc.print_(printer)

        if not path.exists() or path.stat().st_size == 0:
            raise ExportError(f"PDF was not written to {path}")
        return path


class DesktopSharer:
    """Open a generated file with the desktop's handler for its type."""

    def share(self, path: Path, mime_type: str = config.PDF_MIME_TYPE) -> None:
        if not path.exists():
            raise ExportError(f"Nothing to share at {path}")
        log.info("Opening %s (%s)", path, mime_type)
        if not QDesktopServices.openUrl(QUrl.fromLocalFile(str(path))):
            raise ExportError(f"No application accepted {mime_type} file {path}")


class InvoiceExporter:
    """Render markup to a PDF in the output directory, then share it."""

    def __init__(
        self,
        renderer: PdfRenderer | None = None,
        sharer: DesktopSharer | None = None,
        output_dir: Path | str | None = None,
    ) -> None:
        self.renderer = renderer or PdfRenderer()
        self.sharer = sharer or DesktopSharer()
        self.output_dir: Path = Path(output_dir) if output_dir else config.OUTPUT_DIR

    def export(self, markup: str, filename: str = "invoice.pdf") -> Path:
        """Write and share the PDF; any failure is raised as ExportError."""
        path = self.output_dir / filename
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            self.renderer.render(markup, path)
        except Exception as exc:  # noqa: BLE001 - platform rendering errors vary
            log.exception("Rendering %s failed", path)
            raise ExportError(f"Failed to render PDF: {exc}") from exc

        try:
            self.sharer.share(path, config.PDF_MIME_TYPE)
        except Exception as exc:  # noqa: BLE001
            log.exception("Sharing %s failed", path)
            raise ExportError(f"Failed to share PDF: {exc}") from exc

        log.info("Exported invoice to %s", path)
        return path
