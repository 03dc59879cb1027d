"""JSON-file-backed implementation of PurchaseOrderRepository."""

from __future__ import annotations

from pathlib import Path

from recon.domain.model.purchase_order import PurchaseOrder, PurchaseOrderLine
from recon.domain.model.value_objects import to_amount, to_datetime, to_quantity
from recon.domain.repository.purchase_order_repository import PurchaseOrderRepository
from recon.infrastructure.persistence.json_file import JsonFile
from recon.infrastructure.persistence.raw_fields import datetime_to_raw, nested, text


class JsonPurchaseOrderRepository(PurchaseOrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- PurchaseOrderRepository interface ------------------------------------

    def get_by_id(self, po_id: str) -> PurchaseOrder | None:
        for raw in self._file.load():
            if text(raw, "id", "_id") == str(po_id):
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[PurchaseOrder]:
        return [self._to_domain(raw) for raw in self._file.load()]

    def save(self, po: PurchaseOrder) -> None:
        records = self._file.load()

        # Upsert: replace if exists, otherwise append
        replaced = False
        for i, raw in enumerate(records):
            if text(raw, "id", "_id") == po.id:
                records[i] = {**raw, **self._to_raw(po)}
                replaced = True
                break
        if not replaced:
            records.append(self._to_raw(po))

        self._file.persist(records)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(po: PurchaseOrder) -> dict:
        return {
            "id": po.id,
            "supplierId": po.supplier_id,
            "supplierName": po.supplier_name,
            "date": datetime_to_raw(po.date),
            "fulfillmentStatus": po.fulfillment_status.value,
            "items": [
                {
                    "sku": line.sku,
                    "name": line.name,
                    "quantity": line.quantity,
                    "received": line.received,
                    "price": str(line.price),
                }
                for line in po.lines
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> PurchaseOrder:
        supplier = nested(raw, "supplier")
        lines = [
            PurchaseOrderLine(
                sku=text(item, "sku", "id"),
                name=text(item, "name", "productName"),
                quantity=to_quantity(item.get("quantity")),
                received=max(0, to_quantity(item.get("received"))),
                price=to_amount(item.get("price")),
            )
            for item in raw.get("items") or raw.get("products") or []
        ]
        # Status is always re-derived; the stored value is for other readers.
        return PurchaseOrder.create(
            id=text(raw, "id", "_id"),
            lines=lines,
            supplier_id=text(raw, "supplierId") or text(supplier, "_id", "id"),
            supplier_name=text(raw, "supplierName") or text(supplier, "name"),
            date=to_datetime(raw.get("date")),
        )
