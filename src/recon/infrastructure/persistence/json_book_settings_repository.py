"""JSON-file-backed implementation of BookSettingsRepository.

``books.json`` is an object mapping book name to its opening balance.
"""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from recon.domain.model.value_objects import to_amount
from recon.domain.repository.book_settings_repository import BookSettingsRepository
from recon.infrastructure.persistence.json_file import JsonFile


class JsonBookSettingsRepository(BookSettingsRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, empty="{}")

    def get_opening_balance(self, book: str) -> Decimal:
        return to_amount(self._file.load().get(book))

    def set_opening_balance(self, book: str, amount: Decimal) -> None:
        data = self._file.load()
        data[book] = str(amount)
        self._file.persist(data)
