"""Application services: Cash Book / Bank Book query and opening balance."""

from __future__ import annotations

from datetime import date
from decimal import Decimal, InvalidOperation

from recon.application.dto import BookDTO, BookLineDTO, format_date
from recon.domain.exceptions import ValidationError
from recon.domain.model.value_objects import format_amount
from recon.domain.repository.book_settings_repository import BookSettingsRepository
from recon.domain.repository.source_document_repository import (
    SourceDocumentRepository,
)
from recon.domain.service.book_builder import BookBuilder


class ShowBookHandler:

    def __init__(
        self,
        source_repo: SourceDocumentRepository,
        settings_repo: BookSettingsRepository,
        builders: dict[str, BookBuilder],
    ) -> None:
        self._source_repo = source_repo
        self._settings_repo = settings_repo
        self._builders = builders

    def handle(
        self,
        book: str,
        date_from: date | None = None,
        date_to: date | None = None,
        search: str | None = None,
    ) -> BookDTO:
        builder = self._builders.get(book)
        if builder is None:
            raise ValidationError(f"Unknown book '{book}'")

        result = builder.build(
            self._source_repo.load(),
            opening_balance=self._settings_repo.get_opening_balance(book),
            date_from=date_from,
            date_to=date_to,
            search=search,
        )
        return BookDTO(
            name=result.name,
            lines=[
                BookLineDTO(
                    date=format_date(entry.date),
                    document_type=entry.document_type.value,
                    reference=entry.reference,
                    particulars=entry.particulars,
                    receipt=format_amount(entry.receipt),
                    payment=format_amount(entry.payment),
                    balance=format_amount(entry.balance),
                )
                for entry in result.entries
            ],
            opening_balance=format_amount(result.totals.opening_balance),
            total_receipt=format_amount(result.totals.total_receipt),
            total_payment=format_amount(result.totals.total_payment),
            closing_balance=format_amount(result.totals.closing_balance),
        )


class SetOpeningBalanceHandler:

    def __init__(
        self, settings_repo: BookSettingsRepository, books: frozenset[str]
    ) -> None:
        self._settings_repo = settings_repo
        self._books = books

    def handle(self, book: str, amount: str) -> None:
        """Set the operator-entered opening balance for a book."""
        if book not in self._books:
            raise ValidationError(f"Unknown book '{book}'")
        try:
            value = Decimal(str(amount).strip())
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid opening balance: {amount!r}") from exc
        if not value.is_finite():
            raise ValidationError(f"Invalid opening balance: {amount!r}")
        self._settings_repo.set_opening_balance(book, value)
