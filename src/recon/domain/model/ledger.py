"""Derived ledger shapes: journal entries and cash/bank book rows.

Nothing here is persisted. Entries are rebuilt from the source documents
on every query and receive their running balance only after sorting.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from decimal import Decimal
from enum import Enum

from recon.domain.model.value_objects import ZERO


class DocumentType(Enum):
    SALE_INVOICE = "Sale Invoice"
    PURCHASE_INVOICE = "Purchase Invoice"
    RECEIPT = "Receipt"
    PAYMENT = "Payment"
    EXPENSE = "Expense"


class PartyKind(Enum):
    CUSTOMERS = "customers"
    SUPPLIERS = "suppliers"


# Document types shown under each party tab of the journal ledger.
PARTY_DOCUMENT_TYPES: dict[PartyKind, frozenset[DocumentType]] = {
    PartyKind.CUSTOMERS: frozenset({DocumentType.SALE_INVOICE, DocumentType.RECEIPT}),
    PartyKind.SUPPLIERS: frozenset({DocumentType.PURCHASE_INVOICE, DocumentType.PAYMENT}),
}

# Money coming in; everything else is money going out.
INFLOW_TYPES = frozenset({DocumentType.SALE_INVOICE, DocumentType.RECEIPT})


@dataclass(frozen=True)
class LedgerEntry:
    """One source record as a journal line.

    Exactly one of ``debit`` / ``credit`` is non-zero.
    """

    id: str
    date: datetime | None
    document_type: DocumentType
    document_number: str
    particulars: str
    debit: Decimal = ZERO
    credit: Decimal = ZERO
    counterparty_id: str = ""
    counterparty_name: str = ""
    balance: Decimal = ZERO

    @property
    def amount(self) -> Decimal:
        return self.debit + self.credit

    def sort_key(self) -> tuple[datetime, str, str]:
        # Undated entries sort ahead of everything else.
        return (self.date or datetime.min, self.document_type.value, self.id)

    def with_balance(self, balance: Decimal) -> LedgerEntry:
        return replace(self, balance=balance)


@dataclass(frozen=True)
class LedgerTotals:
    total_debit: Decimal
    total_credit: Decimal
    opening_balance: Decimal
    closing_balance: Decimal


@dataclass(frozen=True)
class Ledger:
    entries: list[LedgerEntry]
    totals: LedgerTotals


@dataclass(frozen=True)
class BookEntry:
    """A cash or bank book row: money in under ``receipt``, out under ``payment``."""

    id: str
    date: datetime | None
    document_type: DocumentType
    reference: str
    particulars: str
    receipt: Decimal = ZERO
    payment: Decimal = ZERO
    balance: Decimal = ZERO


@dataclass(frozen=True)
class BookTotals:
    total_receipt: Decimal
    total_payment: Decimal
    opening_balance: Decimal
    closing_balance: Decimal


@dataclass(frozen=True)
class Book:
    name: str
    entries: list[BookEntry]
    totals: BookTotals
