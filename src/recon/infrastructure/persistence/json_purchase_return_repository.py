"""JSON-file-backed implementation of PurchaseReturnRepository."""

from __future__ import annotations

from pathlib import Path

from recon.domain.model.documents import PurchaseReturn
from recon.domain.model.value_objects import to_datetime, to_optional_amount
from recon.domain.repository.purchase_return_repository import (
    PurchaseReturnRepository,
)
from recon.infrastructure.persistence.json_file import JsonFile
from recon.infrastructure.persistence.raw_fields import (
    datetime_to_raw,
    lines_from_raw,
    lines_to_raw,
    nested,
    text,
)


class JsonPurchaseReturnRepository(PurchaseReturnRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- PurchaseReturnRepository interface -----------------------------------

    def find_by_identity(
        self, return_id: str, return_number: str
    ) -> PurchaseReturn | None:
        index = self._index()
        for key in (return_id, return_number):
            if key and key in index:
                return index[key]
        return None

    def list_all(self) -> list[PurchaseReturn]:
        return [self._to_domain(raw) for raw in self._file.load()]

    def save(self, ret: PurchaseReturn) -> None:
        keys = set(ret.identity_keys())
        records = [
            raw for raw in self._file.load()
            if not keys & set(self._to_domain(raw).identity_keys())
        ]
        records.append(self._to_raw(ret))
        self._file.persist(records)

    # --- Serialization --------------------------------------------------------

    def _index(self) -> dict[str, PurchaseReturn]:
        index: dict[str, PurchaseReturn] = {}
        for raw in self._file.load():
            ret = self._to_domain(raw)
            for key in ret.identity_keys():
                index[key] = ret
        return index

    @staticmethod
    def _to_raw(ret: PurchaseReturn) -> dict:
        return {
            "id": ret.id,
            "returnNumber": ret.return_number,
            "linkedPoId": ret.linked_po_id,
            "supplierId": ret.supplier_id,
            "supplier": ret.supplier_name,
            "returnDate": datetime_to_raw(ret.return_date),
            "items": lines_to_raw(ret.lines),
            "subtotal": str(ret.subtotal) if ret.subtotal is not None else None,
            "totalAmount": str(ret.total_amount) if ret.total_amount is not None else None,
            "processed": ret.processed,
        }

    @staticmethod
    def _to_domain(raw: dict) -> PurchaseReturn:
        supplier_name = text(raw, "supplierName")
        if not supplier_name and isinstance(raw.get("supplier"), (dict, list)):
            supplier_name = text(nested(raw, "supplier"), "name")
        elif not supplier_name:
            supplier_name = text(raw, "supplier")
        return PurchaseReturn(
            id=text(raw, "id", "_id"),
            return_number=text(raw, "returnNumber"),
            lines=lines_from_raw(raw.get("items")),
            linked_po_id=text(raw, "linkedPoId") or None,
            supplier_id=text(raw, "supplierId"),
            supplier_name=supplier_name,
            return_date=to_datetime(raw.get("returnDate")),
            subtotal=to_optional_amount(raw.get("subtotal")),
            total_amount=to_optional_amount(raw.get("totalAmount")),
            processed=bool(raw.get("processed", False)),
        )
