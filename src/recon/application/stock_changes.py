"""Shared helper: diff two inventory snapshots for display."""

from __future__ import annotations

from recon.application.dto import StockChangeDTO
from recon.domain.model.inventory import InventoryItem


def stock_changes(
    before: list[InventoryItem], after: list[InventoryItem]
) -> list[StockChangeDTO]:
    """Rows whose stock differs, in snapshot order."""
    previous = {item.sku: item.stock for item in before}
    return [
        StockChangeDTO(sku=item.sku, before=previous[item.sku], after=item.stock)
        for item in after
        if item.sku in previous and previous[item.sku] != item.stock
    ]
