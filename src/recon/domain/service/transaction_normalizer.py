"""Domain service: Transaction Normalizer.

Maps the heterogeneous source documents onto one ``LedgerEntry`` shape.
Every record contributes exactly one entry with either a debit or a
credit, never both:

    Sale invoice      debit    "Sale to {customer}"
    Purchase invoice  credit   "Purchase from {supplier}"
    Receipt voucher   credit   "Receipt from {payer}"
    Payment voucher   debit    "Payment to {payee}"
    Expense           debit    "{category} Expense: {description}"

Amount fields overlap between screens, so each source type declares its
fallback chain once, below, instead of scattering ``or`` chains around.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Iterable

from recon.domain.model.ledger import DocumentType, LedgerEntry
from recon.domain.model.sources import (
    Expense,
    PaymentVoucher,
    PurchaseInvoice,
    ReceiptVoucher,
    SaleInvoice,
    SourceDocuments,
)
from recon.domain.model.value_objects import ZERO

logger = logging.getLogger(__name__)

# --- Fallback chains ----------------------------------------------------------

# Sales take the first non-zero figure: a zero net amount means "not filled in".
SALE_AMOUNT_CHAIN = ("total_net_amount", "total_gross_amount", "sub_total")

# Purchase invoices take the first figure present, then fall back to the
# line items when that figure is zero.
PURCHASE_AMOUNT_CHAIN = ("total", "total_net_amount", "sub_total")

UNKNOWN_CUSTOMER = "Unknown Customer"
UNKNOWN_SUPPLIER = "Unknown Supplier"

# Composite-key prefixes, one per source stream.
SALE_KEY = "sale"
PURCHASE_INVOICE_KEY = "purchase-invoice"
RECEIPT_KEY = "receipt"
PAYMENT_KEY = "payment"
EXPENSE_KEY = "expense"


def first_non_zero(record: object, chain: tuple[str, ...]) -> Decimal:
    for name in chain:
        value = getattr(record, name)
        if value:
            return value
    return ZERO


def first_present(record: object, chain: tuple[str, ...]) -> Decimal:
    for name in chain:
        value = getattr(record, name)
        if value is not None:
            return value
    return ZERO


def sale_amount(sale: SaleInvoice) -> Decimal:
    return first_non_zero(sale, SALE_AMOUNT_CHAIN)


def purchase_amount(purchase: PurchaseInvoice) -> Decimal:
    amount = first_present(purchase, PURCHASE_AMOUNT_CHAIN)
    if amount:
        return amount
    total = ZERO
    for line in purchase.lines:
        if line.amount is not None:
            total += line.amount
        elif line.quantity and line.rate:
            total += line.rate * line.quantity
    return total


class TransactionNormalizer:
    """Turns source documents into ledger entries, one per record.

    Entry ids are ``{source}-{source id}``. A seen-set drops records whose
    composite key was already emitted during the same call, so a source
    list carrying logical duplicates still yields one entry per record.
    """

    def normalize(self, sources: SourceDocuments) -> list[LedgerEntry]:
        """Normalize sales, purchase invoices, receipts and payments."""
        seen: set[str] = set()
        entries: list[LedgerEntry] = []
        entries.extend(self.sales(sources.sales, seen))
        entries.extend(self.purchase_invoices(sources.purchase_invoices, seen))
        entries.extend(self.receipts(sources.receipts, seen))
        entries.extend(self.payments(sources.payments, seen))
        return entries

    # --- Per-source mapping ---------------------------------------------------

    def sales(
        self, sales: Iterable[SaleInvoice], seen: set[str] | None = None
    ) -> list[LedgerEntry]:
        seen = set() if seen is None else seen
        entries = []
        for index, sale in enumerate(sales):
            key = _claim(seen, SALE_KEY, sale.id or sale.invoice_number, index)
            if key is None:
                continue
            name = sale.customer_name or UNKNOWN_CUSTOMER
            entries.append(
                LedgerEntry(
                    id=key,
                    date=sale.invoice_date,
                    document_type=DocumentType.SALE_INVOICE,
                    document_number=sale.invoice_number or sale.id,
                    particulars=f"Sale to {name}",
                    debit=sale_amount(sale),
                    counterparty_id=sale.customer_id,
                    counterparty_name=name,
                )
            )
        return entries

    def purchase_invoices(
        self, invoices: Iterable[PurchaseInvoice], seen: set[str] | None = None
    ) -> list[LedgerEntry]:
        seen = set() if seen is None else seen
        entries = []
        for index, invoice in enumerate(invoices):
            key = _claim(
                seen,
                PURCHASE_INVOICE_KEY,
                invoice.id or invoice.purchase_invoice_number,
                index,
            )
            if key is None:
                continue
            name = invoice.supplier_name or UNKNOWN_SUPPLIER
            entries.append(
                LedgerEntry(
                    id=key,
                    date=invoice.invoice_date,
                    document_type=DocumentType.PURCHASE_INVOICE,
                    document_number=invoice.purchase_invoice_number or invoice.id,
                    particulars=f"Purchase from {name}",
                    credit=purchase_amount(invoice),
                    counterparty_id=invoice.supplier_id,
                    counterparty_name=name,
                )
            )
        return entries

    def receipts(
        self, receipts: Iterable[ReceiptVoucher], seen: set[str] | None = None
    ) -> list[LedgerEntry]:
        seen = set() if seen is None else seen
        entries = []
        for index, receipt in enumerate(receipts):
            key = _claim(seen, RECEIPT_KEY, receipt.id or receipt.voucher_number, index)
            if key is None:
                continue
            entries.append(
                LedgerEntry(
                    id=key,
                    date=receipt.voucher_date,
                    document_type=DocumentType.RECEIPT,
                    document_number=receipt.voucher_number or receipt.id,
                    particulars=f"Receipt from {receipt.received_from}",
                    credit=receipt.amount or ZERO,
                    counterparty_id=receipt.account_id,
                    counterparty_name=receipt.received_from,
                )
            )
        return entries

    def payments(
        self, payments: Iterable[PaymentVoucher], seen: set[str] | None = None
    ) -> list[LedgerEntry]:
        seen = set() if seen is None else seen
        entries = []
        for index, payment in enumerate(payments):
            key = _claim(seen, PAYMENT_KEY, payment.id or payment.voucher_number, index)
            if key is None:
                continue
            entries.append(
                LedgerEntry(
                    id=key,
                    date=payment.voucher_date,
                    document_type=DocumentType.PAYMENT,
                    document_number=payment.voucher_number or payment.id,
                    particulars=f"Payment to {payment.paid_to}",
                    debit=payment.amount or ZERO,
                    counterparty_id=payment.account_id,
                    counterparty_name=payment.paid_to,
                )
            )
        return entries

    def expenses(
        self, expenses: Iterable[Expense], seen: set[str] | None = None
    ) -> list[LedgerEntry]:
        seen = set() if seen is None else seen
        entries = []
        for index, expense in enumerate(expenses):
            key = _claim(seen, EXPENSE_KEY, expense.id or expense.expense_number, index)
            if key is None:
                continue
            entries.append(
                LedgerEntry(
                    id=key,
                    date=expense.date,
                    document_type=DocumentType.EXPENSE,
                    document_number=expense.expense_number or expense.id,
                    particulars=_expense_particulars(expense),
                    debit=expense.amount or ZERO,
                )
            )
        return entries


# --- Internal helpers ---------------------------------------------------------


def _claim(seen: set[str], prefix: str, source_id: str, index: int) -> str | None:
    """Reserve ``{prefix}-{source_id}``; None if it was already emitted.

    Records with no identity get a positional key so they are never
    collapsed into each other.
    """
    key = f"{prefix}-{source_id}" if source_id else f"{prefix}-#{index}"
    if key in seen:
        logger.debug("Duplicate source record %s skipped", key)
        return None
    seen.add(key)
    return key


def _expense_particulars(expense: Expense) -> str:
    if expense.category_type:
        suffix = f": {expense.description}" if expense.description else ""
        return f"{expense.category_type} Expense{suffix}"
    return expense.description or "Expense"
