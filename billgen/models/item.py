"""Editable bill line items and the ordered list that holds them."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, replace
from typing import Dict, Iterator, Tuple

from billgen.logs import logger

log = logger(__name__)

EDITABLE_FIELDS = ("name", "quantity", "price")


@dataclass
class Item:
    """One row of the form. Quantity and price stay raw text while editing."""

    id: int
    name: str = ""
    quantity: str = ""
    price: str = ""


class ItemList:
    """Ordered, non-empty collection of items with stable ids."""

    def __init__(self) -> None:
        self._ids = itertools.count(1)
        self._items: Dict[int, Item] = {}
        self.add_item()

    def __iter__(self) -> Iterator[Item]:
        return iter(list(self._items.values()))

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def get(self, item_id: int) -> Item:
        try:
            return self._items[item_id]
        except KeyError:
            raise KeyError(f"Item {item_id} not found.") from None

    def snapshot(self) -> Tuple[Item, ...]:
        """Return copies of the items in display order."""
        return tuple(replace(item) for item in self._items.values())

    def add_item(self) -> Item:
        """Append an empty item with a fresh id."""
        item = Item(id=next(self._ids))
        self._items[item.id] = item
        log.debug("Added item %s (%d items)", item.id, len(self._items))
        return item

    def update_item(self, item_id: int, field: str, value: str) -> Item:
        """Replace one editable field of an item; the value is not validated."""
        if field not in EDITABLE_FIELDS:
            raise ValueError(f"Unknown item field '{field}'.")
        item = self.get(item_id)
        setattr(item, field, value)
        return item

    def remove_item(self, item_id: int) -> bool:
        """Remove an item. Refused (returns False) when it is the last one."""
        self.get(item_id)
        if len(self._items) <= 1:
            log.warning("Refused to remove item %s: at least one item is required", item_id)
            return False
        del self._items[item_id]
        log.debug("Removed item %s (%d items)", item_id, len(self._items))
        return True
