import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt5.QtWidgets import QApplication  # noqa: E402

from billgen.models.item import Item  # noqa: E402


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


def make_item(item_id: int, name: str = "", quantity: str = "", price: str = "") -> Item:
    return Item(id=item_id, name=name, quantity=quantity, price=price)


@pytest.fixture
def item_factory():
    return make_item
