"""Abstract repository for InventoryItem snapshots."""

from __future__ import annotations

from abc import ABC, abstractmethod

from recon.domain.model.inventory import InventoryItem


class InventoryRepository(ABC):

    @abstractmethod
    def get_by_sku(self, sku: str) -> InventoryItem | None:
        """Return the inventory row for a SKU, or None."""

    @abstractmethod
    def list_all(self) -> list[InventoryItem]:
        """Return every inventory row."""

    @abstractmethod
    def save_all(self, items: list[InventoryItem]) -> None:
        """Persist new or updated inventory rows in one step."""
