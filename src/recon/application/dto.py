"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world. Amounts are
pre-formatted strings, dates are ``YYYY-MM-DD``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


def format_date(value: datetime | None) -> str:
    return value.strftime("%Y-%m-%d") if value is not None else ""


@dataclass(frozen=True)
class LineSpec:
    """Input: one SKU line of a receipt or return as typed by the operator."""

    sku: str
    quantity: int
    price: str = "0"


@dataclass(frozen=True)
class StockChangeDTO:
    sku: str
    before: int
    after: int


@dataclass(frozen=True)
class ReceiptOutcomeDTO:
    applied: bool
    receipt_id: str
    stock_changes: list[StockChangeDTO] = field(default_factory=list)
    po_id: str | None = None
    po_status: str | None = None
    message: str | None = None


@dataclass(frozen=True)
class SupplierCreditDTO:
    id: str
    supplier_name: str
    amount: str
    date: str
    note: str


@dataclass(frozen=True)
class ReturnOutcomeDTO:
    applied: bool
    return_reference: str
    stock_changes: list[StockChangeDTO] = field(default_factory=list)
    po_id: str | None = None
    po_status: str | None = None
    credit: SupplierCreditDTO | None = None
    message: str | None = None


@dataclass(frozen=True)
class LedgerLineDTO:
    date: str
    document_type: str
    document_number: str
    particulars: str
    counterparty: str
    debit: str
    credit: str
    balance: str


@dataclass(frozen=True)
class LedgerDTO:
    lines: list[LedgerLineDTO]
    opening_balance: str
    total_debit: str
    total_credit: str
    closing_balance: str


@dataclass(frozen=True)
class BookLineDTO:
    date: str
    document_type: str
    reference: str
    particulars: str
    receipt: str
    payment: str
    balance: str


@dataclass(frozen=True)
class BookDTO:
    name: str
    lines: list[BookLineDTO]
    opening_balance: str
    total_receipt: str
    total_payment: str
    closing_balance: str


@dataclass(frozen=True)
class PurchaseOrderLineDTO:
    sku: str
    ordered: int
    received: int
    outstanding: int


@dataclass(frozen=True)
class PurchaseOrderDTO:
    id: str
    supplier_name: str
    status: str
    lines: list[PurchaseOrderLineDTO]
