"""Unit tests for the transaction normalizer and its fallback chains."""

from datetime import datetime
from decimal import Decimal

from recon.domain.model.ledger import DocumentType
from recon.domain.model.sources import (
    Expense,
    PaymentVoucher,
    PurchaseInvoice,
    PurchaseInvoiceLine,
    ReceiptVoucher,
    SaleInvoice,
    SourceDocuments,
)
from recon.domain.service.transaction_normalizer import (
    TransactionNormalizer,
    purchase_amount,
    sale_amount,
)

D = Decimal


class TestSaleAmountChain:

    def test_prefers_net(self):
        sale = SaleInvoice("1", total_net_amount=D("90"), total_gross_amount=D("100"))
        assert sale_amount(sale) == D("90")

    def test_zero_net_falls_to_gross_then_subtotal(self):
        assert sale_amount(SaleInvoice("1", total_net_amount=D("0"), total_gross_amount=D("100"))) == D("100")
        assert sale_amount(SaleInvoice("1", sub_total=D("70"))) == D("70")

    def test_nothing_is_zero(self):
        assert sale_amount(SaleInvoice("1")) == D("0")


class TestPurchaseAmountChain:

    def test_prefers_total(self):
        inv = PurchaseInvoice("1", total=D("400"), total_net_amount=D("380"))
        assert purchase_amount(inv) == D("400")

    def test_falls_back_in_order(self):
        assert purchase_amount(PurchaseInvoice("1", total_net_amount=D("380"), sub_total=D("1"))) == D("380")
        assert purchase_amount(PurchaseInvoice("1", sub_total=D("350"))) == D("350")

    def test_line_items_last_resort(self):
        inv = PurchaseInvoice(
            "1",
            total=D("0"),
            lines=(
                PurchaseInvoiceLine(quantity=2, rate=D("10")),
                PurchaseInvoiceLine(quantity=1, rate=D("5"), amount=D("7")),
                PurchaseInvoiceLine(quantity=3),
            ),
        )
        assert purchase_amount(inv) == D("27")


class TestNormalize:

    def _sources(self):
        return SourceDocuments(
            sales=(SaleInvoice("s1", "INV-1", datetime(2024, 1, 1), "c1", "Bob", total_net_amount=D("1000")),),
            purchase_invoices=(PurchaseInvoice("p1", "PI-1", datetime(2024, 1, 2), "v1", "Acme", total=D("400")),),
            receipts=(ReceiptVoucher("rv1", "RV-1", datetime(2024, 1, 3), "Bob", "c1", D("200")),),
            payments=(PaymentVoucher("pv1", "PV-1", datetime(2024, 1, 4), "Acme", "v1", D("150")),),
        )

    def test_one_entry_per_record_with_one_side(self):
        entries = TransactionNormalizer().normalize(self._sources())
        assert [e.id for e in entries] == [
            "sale-s1", "purchase-invoice-p1", "receipt-rv1", "payment-pv1"
        ]
        for entry in entries:
            assert (entry.debit == 0) != (entry.credit == 0)

    def test_sides_and_particulars(self):
        sale, purchase, receipt, payment = TransactionNormalizer().normalize(self._sources())
        assert (sale.debit, sale.particulars) == (D("1000"), "Sale to Bob")
        assert (purchase.credit, purchase.particulars) == (D("400"), "Purchase from Acme")
        assert (receipt.credit, receipt.particulars) == (D("200"), "Receipt from Bob")
        assert (payment.debit, payment.particulars) == (D("150"), "Payment to Acme")
        assert sale.document_type == DocumentType.SALE_INVOICE

    def test_duplicates_in_source_list_collapse(self):
        sale = SaleInvoice("s1", total_net_amount=D("5"))
        entries = TransactionNormalizer().normalize(SourceDocuments(sales=(sale, sale)))
        assert len(entries) == 1

    def test_repeated_calls_are_identical(self):
        normalizer = TransactionNormalizer()
        assert normalizer.normalize(self._sources()) == normalizer.normalize(self._sources())

    def test_unknown_names_and_missing_ids(self):
        entries = TransactionNormalizer().normalize(
            SourceDocuments(sales=(SaleInvoice(""), SaleInvoice(""))),
        )
        assert [e.id for e in entries] == ["sale-#0", "sale-#1"]
        assert entries[0].particulars == "Sale to Unknown Customer"

    def test_document_number_falls_back_to_id(self):
        entries = TransactionNormalizer().normalize(
            SourceDocuments(receipts=(ReceiptVoucher("rv9", amount=D("1")),))
        )
        assert entries[0].document_number == "rv9"

    def test_expense_particulars(self):
        entries = TransactionNormalizer().expenses(
            [Expense("e1", category_type="Rent", description="March", amount=D("50"))]
        )
        assert entries[0].particulars == "Rent Expense: March"
        assert entries[0].debit == D("50")
        assert entries[0].document_type == DocumentType.EXPENSE
