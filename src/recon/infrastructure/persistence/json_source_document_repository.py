"""JSON-file-backed implementation of SourceDocumentRepository.

One file per stream in the data directory: ``sales.json``,
``purchase_invoices.json``, ``receipt_vouchers.json``,
``payment_vouchers.json`` and ``expenses.json``. Records keep the
back-office's field names; amounts stay ``None`` when absent so the
normalizer can apply its fallback chains.
"""

from __future__ import annotations

from pathlib import Path

from recon.domain.model.sources import (
    Expense,
    PaymentVoucher,
    PurchaseInvoice,
    PurchaseInvoiceLine,
    ReceiptVoucher,
    SaleInvoice,
    SourceDocuments,
)
from recon.domain.model.value_objects import (
    to_datetime,
    to_optional_amount,
    to_quantity,
)
from recon.domain.repository.source_document_repository import (
    SourceDocumentRepository,
)
from recon.infrastructure.persistence.json_file import JsonFile
from recon.infrastructure.persistence.raw_fields import nested, text


class JsonSourceDocumentRepository(SourceDocumentRepository):

    def __init__(self, data_dir: Path) -> None:
        self._sales = JsonFile(data_dir / "sales.json")
        self._purchase_invoices = JsonFile(data_dir / "purchase_invoices.json")
        self._receipts = JsonFile(data_dir / "receipt_vouchers.json")
        self._payments = JsonFile(data_dir / "payment_vouchers.json")
        self._expenses = JsonFile(data_dir / "expenses.json")

    def load(self) -> SourceDocuments:
        return SourceDocuments(
            sales=tuple(self._sale(raw) for raw in self._sales.load()),
            purchase_invoices=tuple(
                self._purchase_invoice(raw) for raw in self._purchase_invoices.load()
            ),
            receipts=tuple(self._receipt(raw) for raw in self._receipts.load()),
            payments=tuple(self._payment(raw) for raw in self._payments.load()),
            expenses=tuple(self._expense(raw) for raw in self._expenses.load()),
        )

    # --- Deserialization ------------------------------------------------------

    @staticmethod
    def _sale(raw: dict) -> SaleInvoice:
        customer = nested(raw, "customer")
        return SaleInvoice(
            id=text(raw, "id", "_id"),
            invoice_number=text(raw, "invoiceNumber"),
            invoice_date=to_datetime(raw.get("invoiceDate") or raw.get("date")),
            customer_id=text(customer, "_id", "id") or text(raw, "customerId"),
            customer_name=text(customer, "name") or text(raw, "customerName"),
            total_net_amount=to_optional_amount(raw.get("totalNetAmount")),
            total_gross_amount=to_optional_amount(raw.get("totalGrossAmount")),
            sub_total=to_optional_amount(raw.get("subTotal")),
            payment_method=text(raw, "paymentMethod"),
        )

    @staticmethod
    def _purchase_invoice(raw: dict) -> PurchaseInvoice:
        supplier = nested(raw, "supplier")
        return PurchaseInvoice(
            id=text(raw, "_id", "id"),
            purchase_invoice_number=text(raw, "purchaseInvoiceNumber"),
            invoice_date=to_datetime(raw.get("invoiceDate")),
            supplier_id=text(supplier, "_id", "id") or text(raw, "supplierId"),
            supplier_name=text(supplier, "name") or text(raw, "supplierName"),
            total=to_optional_amount(raw.get("total")),
            total_net_amount=to_optional_amount(raw.get("totalNetAmount")),
            sub_total=to_optional_amount(raw.get("subTotal")),
            lines=tuple(
                PurchaseInvoiceLine(
                    quantity=to_quantity(item.get("quantity")),
                    rate=to_optional_amount(item.get("rate")),
                    amount=to_optional_amount(item.get("amount")),
                )
                for item in raw.get("products") or []
                if isinstance(item, dict)
            ),
            payment_mode=text(raw, "paymentMode"),
        )

    @staticmethod
    def _receipt(raw: dict) -> ReceiptVoucher:
        return ReceiptVoucher(
            id=text(raw, "id", "_id"),
            voucher_number=text(raw, "voucherNumber"),
            voucher_date=to_datetime(raw.get("voucherDate")),
            received_from=text(raw, "receivedFrom"),
            account_id=text(raw, "accountId", "customerId"),
            amount=to_optional_amount(raw.get("amount")),
            payment_mode=text(raw, "paymentMode"),
        )

    @staticmethod
    def _payment(raw: dict) -> PaymentVoucher:
        return PaymentVoucher(
            id=text(raw, "id", "_id"),
            voucher_number=text(raw, "voucherNumber"),
            voucher_date=to_datetime(raw.get("voucherDate")),
            paid_to=text(raw, "paidTo"),
            account_id=text(raw, "accountId", "supplierId"),
            amount=to_optional_amount(raw.get("amount")),
            payment_mode=text(raw, "paymentMode"),
        )

    @staticmethod
    def _expense(raw: dict) -> Expense:
        return Expense(
            id=text(raw, "id", "_id"),
            expense_number=text(raw, "expenseNumber"),
            date=to_datetime(raw.get("date")),
            category_type=text(raw, "categoryType"),
            description=text(raw, "description"),
            amount=to_optional_amount(raw.get("amount")),
            payment_method=text(raw, "paymentMethod"),
        )
