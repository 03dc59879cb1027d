"""Application service: Show Inventory use case (query)."""

from __future__ import annotations

from dataclasses import dataclass

from recon.domain.repository.inventory_repository import InventoryRepository


@dataclass(frozen=True)
class InventoryLineDTO:
    sku: str
    name: str
    stock: int
    min_stock: int
    max_stock: int
    below_minimum: bool


class ShowInventoryHandler:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def handle(self) -> list[InventoryLineDTO]:
        items = self._inventory_repo.list_all()
        return [
            InventoryLineDTO(
                sku=item.sku,
                name=item.name,
                stock=item.stock,
                min_stock=item.min_stock,
                max_stock=item.max_stock,
                below_minimum=item.is_below_minimum,
            )
            for item in items
        ]
