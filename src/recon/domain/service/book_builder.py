"""Domain service: Cash Book and Bank Book.

A book is the journal ledger narrowed to one set of payment modes and
shown as money in (``receipt``) and money out (``payment``) rather than
debit and credit. Expenses appear here even though the journal ledger
leaves them out.

The opening balance is whatever the operator sets for the book; it is
not derived from any account.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import date
from decimal import Decimal
from typing import Iterable

from recon.domain.model.ledger import (
    INFLOW_TYPES,
    Book,
    BookEntry,
    BookTotals,
    LedgerEntry,
)
from recon.domain.model.sources import SourceDocuments
from recon.domain.model.value_objects import ZERO
from recon.domain.service.ledger_builder import LedgerFilter
from recon.domain.service.transaction_normalizer import TransactionNormalizer

CASH_BOOK = "cash"
BANK_BOOK = "bank"

CASH_MODES = frozenset({"cash"})
BANK_MODES = frozenset({"bank", "online", "card", "upi", "cheque", "bank/online"})


def normalize_mode(mode: str | None) -> str:
    return (mode or "").strip().lower()


class BookBuilder:

    def __init__(
        self,
        name: str,
        modes: Iterable[str],
        normalizer: TransactionNormalizer | None = None,
    ) -> None:
        self.name = name
        self.modes = frozenset(normalize_mode(m) for m in modes)
        self._normalizer = normalizer or TransactionNormalizer()

    @classmethod
    def cash_book(cls, modes: Iterable[str] = CASH_MODES) -> BookBuilder:
        return cls(CASH_BOOK, modes)

    @classmethod
    def bank_book(cls, modes: Iterable[str] = BANK_MODES) -> BookBuilder:
        return cls(BANK_BOOK, modes)

    def accepts(self, mode: str | None) -> bool:
        return normalize_mode(mode) in self.modes

    def build(
        self,
        sources: SourceDocuments,
        opening_balance: Decimal = ZERO,
        date_from: date | None = None,
        date_to: date | None = None,
        search: str | None = None,
    ) -> Book:
        """Build the book from every source paid through one of ``modes``."""
        n = self._normalizer
        seen: set[str] = set()
        entries = [
            *n.sales((s for s in sources.sales if self.accepts(s.payment_method)), seen),
            *n.purchase_invoices(
                (p for p in sources.purchase_invoices if self.accepts(p.payment_mode)), seen
            ),
            *n.receipts((r for r in sources.receipts if self.accepts(r.payment_mode)), seen),
            *n.payments((p for p in sources.payments if self.accepts(p.payment_mode)), seen),
            *n.expenses((e for e in sources.expenses if self.accepts(e.payment_method)), seen),
        ]

        window = LedgerFilter(date_from=date_from, date_to=date_to, search=search)
        selected = sorted(
            (e for e in entries if window.matches(e)), key=LedgerEntry.sort_key
        )

        rows = []
        balance = opening_balance
        for entry in selected:
            row = _to_book_entry(entry)
            balance = balance + row.receipt - row.payment
            rows.append(replace(row, balance=balance))

        return Book(
            name=self.name,
            entries=rows,
            totals=BookTotals(
                total_receipt=sum((r.receipt for r in rows), ZERO),
                total_payment=sum((r.payment for r in rows), ZERO),
                opening_balance=opening_balance,
                closing_balance=balance,
            ),
        )


def _to_book_entry(entry: LedgerEntry) -> BookEntry:
    inflow = entry.document_type in INFLOW_TYPES
    return BookEntry(
        id=entry.id,
        date=entry.date,
        document_type=entry.document_type,
        reference=entry.document_number,
        particulars=entry.particulars,
        receipt=entry.amount if inflow else ZERO,
        payment=ZERO if inflow else entry.amount,
    )
