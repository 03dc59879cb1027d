"""JSON-file-backed implementation of InventoryRepository."""

from __future__ import annotations

from pathlib import Path

from recon.domain.model.inventory import InventoryItem
from recon.domain.model.value_objects import to_quantity
from recon.domain.repository.inventory_repository import InventoryRepository
from recon.infrastructure.persistence.json_file import JsonFile
from recon.infrastructure.persistence.raw_fields import text


class JsonInventoryRepository(InventoryRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- InventoryRepository interface ----------------------------------------

    def get_by_sku(self, sku: str) -> InventoryItem | None:
        for raw in self._file.load():
            if text(raw, "sku") == sku:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[InventoryItem]:
        return [self._to_domain(raw) for raw in self._file.load()]

    def save_all(self, items: list[InventoryItem]) -> None:
        records = self._file.load()
        pending = {item.sku: item for item in items}
        for i, raw in enumerate(records):
            sku = text(raw, "sku")
            if sku in pending:
                # Keep fields this engine does not manage (unit, location, ...)
                records[i] = {**raw, **self._to_raw(pending.pop(sku))}
        records.extend(self._to_raw(item) for item in pending.values())
        self._file.persist(records)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(item: InventoryItem) -> dict:
        return {
            "sku": item.sku,
            "name": item.name,
            "stock": item.stock,
            "minStock": item.min_stock,
            "maxStock": item.max_stock,
        }

    @staticmethod
    def _to_domain(raw: dict) -> InventoryItem:
        return InventoryItem(
            sku=text(raw, "sku"),
            name=text(raw, "name"),
            stock=to_quantity(raw.get("stock")),
            min_stock=to_quantity(raw.get("minStock")),
            max_stock=to_quantity(raw.get("maxStock")),
        )
