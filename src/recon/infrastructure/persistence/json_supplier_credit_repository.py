"""JSON-file-backed implementation of SupplierCreditRepository."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from recon.domain.model.documents import SupplierCredit
from recon.domain.model.value_objects import to_amount, to_datetime
from recon.domain.repository.supplier_credit_repository import (
    SupplierCreditRepository,
)
from recon.infrastructure.persistence.json_file import JsonFile
from recon.infrastructure.persistence.raw_fields import datetime_to_raw, text


class JsonSupplierCreditRepository(SupplierCreditRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    def list_all(self) -> list[SupplierCredit]:
        return [self._to_domain(raw) for raw in self._file.load()]

    def add(self, credit: SupplierCredit) -> None:
        records = self._file.load()
        records.append(self._to_raw(credit))
        self._file.persist(records)

    @staticmethod
    def _to_raw(credit: SupplierCredit) -> dict:
        return {
            "id": credit.id,
            "supplierId": credit.supplier_id,
            "supplierName": credit.supplier_name,
            "amount": str(credit.amount),
            "date": datetime_to_raw(credit.date),
            "note": credit.note,
        }

    @staticmethod
    def _to_domain(raw: dict) -> SupplierCredit:
        return SupplierCredit(
            id=text(raw, "id"),
            supplier_id=text(raw, "supplierId"),
            supplier_name=text(raw, "supplierName"),
            amount=to_amount(raw.get("amount")),
            date=to_datetime(raw.get("date")) or datetime.min,
            note=text(raw, "note"),
        )
