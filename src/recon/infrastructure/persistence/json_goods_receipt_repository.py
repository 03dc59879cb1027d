"""JSON-file-backed implementation of GoodsReceiptRepository."""

from __future__ import annotations

from pathlib import Path

from recon.domain.model.documents import GoodsReceipt
from recon.domain.model.value_objects import to_datetime
from recon.domain.repository.goods_receipt_repository import GoodsReceiptRepository
from recon.infrastructure.persistence.json_file import JsonFile
from recon.infrastructure.persistence.raw_fields import (
    datetime_to_raw,
    lines_from_raw,
    lines_to_raw,
    text,
)


class JsonGoodsReceiptRepository(GoodsReceiptRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    def get_by_id(self, receipt_id: str) -> GoodsReceipt | None:
        for raw in self._file.load():
            if text(raw, "id", "_id") == receipt_id:
                return self._to_domain(raw)
        return None

    def add(self, receipt: GoodsReceipt) -> None:
        records = self._file.load()
        records.append(self._to_raw(receipt))
        self._file.persist(records)

    @staticmethod
    def _to_raw(receipt: GoodsReceipt) -> dict:
        return {
            "id": receipt.id,
            "grnNumber": receipt.grn_number,
            "linkedPoId": receipt.linked_po_id,
            "date": datetime_to_raw(receipt.date),
            "items": lines_to_raw(receipt.lines),
        }

    @staticmethod
    def _to_domain(raw: dict) -> GoodsReceipt:
        return GoodsReceipt(
            id=text(raw, "id", "_id"),
            grn_number=text(raw, "grnNumber"),
            linked_po_id=text(raw, "linkedPoId") or None,
            date=to_datetime(raw.get("date") or raw.get("grnDate")),
            lines=lines_from_raw(raw.get("items")),
        )
