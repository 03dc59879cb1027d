"""InventoryItem: on-hand stock per SKU.

Inventory rows are snapshots. The quantity ledger never edits a row in
place; it hands back a copy carrying the new stock figure.
"""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class InventoryItem:
    """A catalog row with its current on-hand stock.

    Invariant: ``stock`` is never pushed below zero by a return; any
    shortfall is absorbed.
    """

    sku: str
    name: str = ""
    stock: int = 0
    min_stock: int = 0
    max_stock: int = 0

    @property
    def is_below_minimum(self) -> bool:
        return self.stock < self.min_stock

    def with_stock(self, stock: int) -> InventoryItem:
        return replace(self, stock=stock)
