"""Player inventory."""
from __future__ import annotations

from typing import Iterator, Mapping

from playa_craft.items import ItemType


class Inventory:
    """Multiset of item types owned by one player.

    A quantity of zero is the same as absence: empty entries are dropped, so
    iteration only ever yields held items.

    Args:
        items: Initial quantities. Zero entries are ignored.
        item_types: When given, the closed set of item types this inventory
            accepts; adding anything else raises ``ValueError``.
    """

    def __init__(
        self,
        items: Mapping[ItemType, int] | None = None,
        item_types: frozenset[ItemType] | None = None,
    ) -> None:
        self._items: dict[ItemType, int] = {}
        self._item_types = item_types
        for item, quantity in (items or {}).items():
            self.add(item, quantity)

    def add(self, item: ItemType, quantity: int = 1) -> int:
        """Add ``quantity`` of ``item``. Returns the amount added."""
        if quantity < 0:
            raise ValueError(f"quantity must be >= 0, got {quantity}")
        if not self.accepts(item):
            raise ValueError(f"unknown item type {item!r}")
        if quantity == 0:
            return 0
        self._items[item] = self._items.get(item, 0) + quantity
        return quantity

    def remove(self, item: ItemType, quantity: int = 1) -> int:
        """Remove ``quantity`` of ``item``.

        Does nothing and returns 0 when fewer than ``quantity`` are held, so
        a quantity can never go negative.
        """
        if quantity < 0:
            raise ValueError(f"quantity must be >= 0, got {quantity}")
        current = self._items.get(item, 0)
        if quantity == 0 or current < quantity:
            return 0
        remaining = current - quantity
        if remaining == 0:
            del self._items[item]
        else:
            self._items[item] = remaining
        return quantity

    def accepts(self, item: ItemType) -> bool:
        """True when ``add`` would take ``item``."""
        return self._item_types is None or item in self._item_types

    def quantity_of(self, item: ItemType) -> int:
        return self._items.get(item, 0)

    def has_all(self, requirements: Mapping[ItemType, int]) -> bool:
        """Check every ``item -> quantity`` requirement is met."""
        for item, needed in requirements.items():
            if self._items.get(item, 0) < needed:
                return False
        return True

    def items(self) -> dict[ItemType, int]:
        """Copy of the held quantities."""
        return dict(self._items)

    def total(self) -> int:
        return sum(self._items.values())

    def clear(self) -> None:
        self._items.clear()

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __iter__(self) -> Iterator[ItemType]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Inventory):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"Inventory({self._items!r})"
