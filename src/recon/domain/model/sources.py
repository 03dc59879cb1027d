"""Source documents feeding the journal ledger and the cash/bank books.

Each type mirrors what the back-office actually stores, including the
overlapping amount fields different screens fill in. Amount fields are
``None`` when absent so the normalizer can walk its fallback chains.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class SaleInvoice:
    id: str
    invoice_number: str = ""
    invoice_date: datetime | None = None
    customer_id: str = ""
    customer_name: str = ""
    total_net_amount: Decimal | None = None
    total_gross_amount: Decimal | None = None
    sub_total: Decimal | None = None
    payment_method: str = ""


@dataclass(frozen=True)
class PurchaseInvoiceLine:
    quantity: int = 0
    rate: Decimal | None = None
    amount: Decimal | None = None


@dataclass(frozen=True)
class PurchaseInvoice:
    id: str
    purchase_invoice_number: str = ""
    invoice_date: datetime | None = None
    supplier_id: str = ""
    supplier_name: str = ""
    total: Decimal | None = None
    total_net_amount: Decimal | None = None
    sub_total: Decimal | None = None
    lines: tuple[PurchaseInvoiceLine, ...] = field(default_factory=tuple)
    payment_mode: str = ""


@dataclass(frozen=True)
class ReceiptVoucher:
    """Money received, usually from a customer."""

    id: str
    voucher_number: str = ""
    voucher_date: datetime | None = None
    received_from: str = ""
    account_id: str = ""
    amount: Decimal | None = None
    payment_mode: str = ""


@dataclass(frozen=True)
class PaymentVoucher:
    """Money paid out, usually to a supplier."""

    id: str
    voucher_number: str = ""
    voucher_date: datetime | None = None
    paid_to: str = ""
    account_id: str = ""
    amount: Decimal | None = None
    payment_mode: str = ""


@dataclass(frozen=True)
class Expense:
    """Operating expense; appears in the cash and bank books only."""

    id: str
    expense_number: str = ""
    date: datetime | None = None
    category_type: str = ""
    description: str = ""
    amount: Decimal | None = None
    payment_method: str = ""


@dataclass(frozen=True)
class SourceDocuments:
    """Every transaction stream the ledgers are built from."""

    sales: tuple[SaleInvoice, ...] = ()
    purchase_invoices: tuple[PurchaseInvoice, ...] = ()
    receipts: tuple[ReceiptVoucher, ...] = ()
    payments: tuple[PaymentVoucher, ...] = ()
    expenses: tuple[Expense, ...] = ()
