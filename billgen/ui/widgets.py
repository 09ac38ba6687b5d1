"""Reusable form widgets: captioned inputs and item rows."""

from __future__ import annotations

from typing import Dict

from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from billgen import config
from billgen.models.item import Item

INPUT_STYLE = (
    "QLineEdit { min-height: 36px; border: 1px solid #e0e0e0; border-radius: 12px;"
    " padding: 0 12px; font-size: 15px; color: #1a1a1a; background: #fff; }"
)
CAPTION_STYLE = "font-size: 13px; font-weight: 600; color: #4a4a4a;"


class LabeledInput(QWidget):
    """Caption above a line edit; the caption doubles as placeholder."""

    text_changed = pyqtSignal(str)

    def __init__(self, label: str, numeric: bool = False, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QVBoxLayout()
        layout.setContentsMargins(0, 0, 0, 6)
        layout.setSpacing(4)

        self.caption = QLabel(label)
        self.caption.setStyleSheet(CAPTION_STYLE)
        self.edit = QLineEdit()
        self.edit.setPlaceholderText(label)
        self.edit.setStyleSheet(INPUT_STYLE)
        if numeric:
            self.edit.setInputMethodHints(Qt.ImhFormattedNumbersOnly)
        self.edit.textChanged.connect(self.text_changed)

        layout.addWidget(self.caption)
        layout.addWidget(self.edit)
        self.setLayout(layout)

    def set_label(self, label: str) -> None:
        self.caption.setText(label)
        self.edit.setPlaceholderText(label)

    def text(self) -> str:
        return self.edit.text()

    def set_text(self, text: str) -> None:
        self.edit.setText(text)


class ItemRow(QWidget):
    """Name, quantity and price inputs for one item plus a remove button."""

    field_changed = pyqtSignal(int, str, str)
    remove_requested = pyqtSignal(int)

    def __init__(self, item: Item, serial_number: int, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.item_id = item.id

        layout = QHBoxLayout()
        layout.setContentsMargins(0, 0, 0, 0)

        self.name_input = LabeledInput(f"Item {serial_number}")
        self.quantity_input = LabeledInput("Qty", numeric=True)
        self.price_input = LabeledInput(f"Price ({config.CURRENCY_SYMBOL})", numeric=True)
        self.inputs: Dict[str, LabeledInput] = {
            "name": self.name_input,
            "quantity": self.quantity_input,
            "price": self.price_input,
        }
        for field, widget in self.inputs.items():
            widget.set_text(getattr(item, field))
            widget.text_changed.connect(
                lambda text, field=field: self.field_changed.emit(self.item_id, field, text)
            )

        self.remove_button = QPushButton("✕")
        self.remove_button.setToolTip("Remove item")
        self.remove_button.setFixedWidth(40)
        self.remove_button.setStyleSheet(
            "QPushButton { color: #FF3B30; background: rgba(255, 59, 48, 0.1);"
            " border: none; border-radius: 12px; padding: 10px; }"
        )
        self.remove_button.clicked.connect(lambda: self.remove_requested.emit(self.item_id))

        layout.addWidget(self.name_input, 2)
        layout.addWidget(self.quantity_input, 1)
        layout.addWidget(self.price_input, 1)
        layout.addWidget(self.remove_button, 0, Qt.AlignBottom)
        self.setLayout(layout)

    def set_serial_number(self, serial_number: int) -> None:
        self.name_input.set_label(f"Item {serial_number}")
