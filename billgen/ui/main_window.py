"""Main PyQt window for the Bill Generator."""

from __future__ import annotations

from typing import Dict, Optional

from PyQt5.QtCore import Qt, QTimer
from PyQt5.QtGui import QFont
from PyQt5.QtWidgets import (
    QApplication,
    QFrame,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from billgen import config
from billgen.controller import BillFormController
from billgen.feedback import Haptics
from billgen.printing.pdf_exporter import InvoiceExporter
from billgen.ui.widgets import ItemRow, LabeledInput

BUTTON_STYLE = (
    "QPushButton {{ background-color: {color}; color: #fff; font-size: 16px;"
    " font-weight: 600; padding: 14px; border: none; border-radius: 12px; }}"
    " QPushButton:disabled {{ background-color: #9e9e9e; }}"
)


class MainWindow(QMainWindow):
    """UI shell that wires customer, item rows and export to the controller."""

    def __init__(self, exporter: Optional[InvoiceExporter] = None) -> None:
        super().__init__()
        self.setWindowTitle(config.WINDOW_TITLE)
        self.resize(*config.WINDOW_SIZE)

        self.controller = BillFormController(
            alert=self._show_alert,
            exporter=exporter,
            haptics=Haptics(beep=QApplication.beep),
        )
        self.rows: Dict[int, ItemRow] = {}

        self._build_ui()
        for item in self.controller.items:
            self._append_row(item)
        self._update_total()

    def _build_ui(self) -> None:
        """Construct all widgets and layouts."""
        content = QWidget()
        layout = QVBoxLayout()
        layout.setContentsMargins(20, 20, 20, 20)

        title = QLabel(config.BUSINESS_NAME)
        title_font = QFont()
        title_font.setPointSize(24)
        title_font.setBold(True)
        title.setFont(title_font)
        title.setAlignment(Qt.AlignCenter)
        subtitle = QLabel("Bill Generator")
        subtitle.setStyleSheet("font-size: 18px; color: #4a4a4a;")
        subtitle.setAlignment(Qt.AlignCenter)
        layout.addWidget(title)
        layout.addWidget(subtitle)
        layout.addSpacing(16)

        self.customer_input = LabeledInput("Customer's Name")
        self.customer_input.text_changed.connect(self.controller.set_customer_name)
        layout.addWidget(self.customer_input)

        self.rows_layout = QVBoxLayout()
        layout.addLayout(self.rows_layout)

        separator = QFrame()
        separator.setFrameShape(QFrame.HLine)
        separator.setStyleSheet("color: #e0e0e0;")
        layout.addWidget(separator)

        total_layout = QHBoxLayout()
        total_font = QFont()
        total_font.setPointSize(16)
        total_font.setBold(True)
        total_label = QLabel("Total:")
        total_label.setFont(total_font)
        self.total_value = QLabel()
        self.total_value.setFont(total_font)
        self.total_value.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
        total_layout.addWidget(total_label)
        total_layout.addWidget(self.total_value)
        layout.addLayout(total_layout)

        self.add_button = QPushButton("Add Item")
        self.add_button.setStyleSheet(BUTTON_STYLE.format(color="#4CAF50"))
        self.add_button.clicked.connect(self._on_add_clicked)
        self.generate_button = QPushButton("Generate Bill")
        self.generate_button.setStyleSheet(BUTTON_STYLE.format(color="#2196F3"))
        self.generate_button.clicked.connect(self._on_generate_clicked)
        layout.addWidget(self.add_button)
        layout.addWidget(self.generate_button)
        layout.addStretch()

        content.setLayout(layout)
        self.scroll_area = QScrollArea()
        self.scroll_area.setWidgetResizable(True)
        self.scroll_area.setWidget(content)
        self.setCentralWidget(self.scroll_area)

    def _append_row(self, item) -> ItemRow:
        row = ItemRow(item, serial_number=len(self.rows) + 1)
        row.field_changed.connect(self._on_field_changed)
        row.remove_requested.connect(self._on_remove_requested)
        self.rows[item.id] = row
        self.rows_layout.addWidget(row)
        return row

    def _renumber_rows(self) -> None:
        for serial, row in enumerate(self.rows.values(), start=1):
            row.set_serial_number(serial)

    def _update_total(self) -> None:
        self.total_value.setText(self.controller.formatted_total)

    def _scroll_to_end(self) -> None:
        bar = self.scroll_area.verticalScrollBar()
        bar.setValue(bar.maximum())

    def _on_add_clicked(self) -> None:
        item = self.controller.add_item()
        self._append_row(item)
        self._update_total()
        QTimer.singleShot(config.SCROLL_DELAY_MS, self._scroll_to_end)

    def _on_field_changed(self, item_id: int, field: str, value: str) -> None:
        self.controller.update_item(item_id, field, value)
        self._update_total()

    def _on_remove_requested(self, item_id: int) -> None:
        if not self.controller.remove_item(item_id):
            return
        row = self.rows.pop(item_id)
        self.rows_layout.removeWidget(row)
        row.deleteLater()
        self._renumber_rows()
        self._update_total()

    def _on_generate_clicked(self) -> None:
        if self.controller.busy:
            return
        self.generate_button.setEnabled(False)
        try:
            self.controller.submit()
        finally:
            self.generate_button.setEnabled(True)

    def _show_alert(self, level: str, title: str, message: str) -> None:
        if level == "error":
            QMessageBox.critical(self, title, message)
        elif level == "warning":
            QMessageBox.warning(self, title, message)
        else:
            QMessageBox.information(self, title, message)
