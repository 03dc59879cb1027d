"""JSON-file-backed implementation of AccountRepository.

Reads ``accounts.json``; each record is a customer or supplier with its
opening balance (``openingBalance``, or ``openingAmount`` on older
customer records).
"""

from __future__ import annotations

from pathlib import Path

from recon.domain.model.documents import Account, AccountKind
from recon.domain.model.value_objects import to_amount
from recon.domain.repository.account_repository import AccountRepository
from recon.infrastructure.persistence.json_file import JsonFile
from recon.infrastructure.persistence.raw_fields import text


class JsonAccountRepository(AccountRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    def get_by_id(self, account_id: str) -> Account | None:
        for account in self.list_all():
            if account.id == account_id:
                return account
        return None

    def get_by_name(self, name: str) -> Account | None:
        target = name.strip().lower()
        for account in self.list_all():
            if account.name.strip().lower() == target:
                return account
        return None

    def list_all(self) -> list[Account]:
        return [self._to_domain(raw) for raw in self._file.load()]

    @staticmethod
    def _to_domain(raw: dict) -> Account:
        kind = text(raw, "kind", "type").lower()
        opening = raw.get("openingBalance", raw.get("openingAmount"))
        return Account(
            id=text(raw, "id", "_id"),
            name=text(raw, "name"),
            kind=AccountKind.CUSTOMER if kind == "customer" else AccountKind.SUPPLIER,
            opening_balance=to_amount(opening),
        )
