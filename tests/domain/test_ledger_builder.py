"""Unit tests for the journal ledger: filters, ordering and running balance."""

from datetime import date, datetime
from decimal import Decimal

import pytest

from recon.domain.model.ledger import DocumentType, LedgerEntry, PartyKind
from recon.domain.model.sources import (
    PaymentVoucher,
    PurchaseInvoice,
    ReceiptVoucher,
    SaleInvoice,
    SourceDocuments,
)
from recon.domain.service.ledger_builder import (
    LedgerBuilder,
    LedgerFilter,
    in_date_range,
    running_balance,
)

D = Decimal


@pytest.fixture
def sources() -> SourceDocuments:
    return SourceDocuments(
        sales=(
            SaleInvoice("s1", "INV-1", datetime(2024, 1, 1), "c1", "Bob", total_net_amount=D("1000")),
            SaleInvoice("s2", "INV-2", datetime(2024, 2, 10), "c2", "Carol", total_net_amount=D("300")),
        ),
        purchase_invoices=(
            PurchaseInvoice("p1", "PI-1", datetime(2024, 1, 2), "v1", "Acme", total=D("400")),
        ),
        receipts=(
            ReceiptVoucher("rv1", "RV-1", datetime(2024, 1, 3), "Bob", "c1", D("200")),
        ),
        payments=(
            PaymentVoucher("pv1", "PV-1", datetime(2024, 1, 4), "Acme", "v1", D("150")),
        ),
    )


class TestOrderingAndBalance:

    def test_reference_scenario(self):
        sources = SourceDocuments(
            sales=(SaleInvoice("s1", "INV-1", datetime(2024, 1, 1), total_net_amount=D("1000")),),
            purchase_invoices=(PurchaseInvoice("p1", "PI-1", datetime(2024, 1, 2), total=D("400")),),
            receipts=(ReceiptVoucher("rv1", "RV-1", datetime(2024, 1, 3), amount=D("200")),),
            payments=(PaymentVoucher("pv1", "PV-1", datetime(2024, 1, 4), amount=D("150")),),
        )
        ledger = LedgerBuilder().build(sources)
        assert [e.balance for e in ledger.entries] == [D("1000"), D("600"), D("400"), D("550")]
        assert ledger.totals.closing_balance == D("550")

    def test_sorted_by_date(self, sources):
        ledger = LedgerBuilder().build(sources)
        dates = [e.date for e in ledger.entries]
        assert dates == sorted(dates)

    def test_ties_break_on_type_then_id(self):
        day = datetime(2024, 1, 1)
        sources = SourceDocuments(
            sales=(
                SaleInvoice("b", "INV-B", day, total_net_amount=D("1")),
                SaleInvoice("a", "INV-A", day, total_net_amount=D("1")),
            ),
            receipts=(ReceiptVoucher("r", "RV", day, amount=D("1")),),
        )
        ids = [e.id for e in LedgerBuilder().build(sources).entries]
        assert ids == ["receipt-r", "sale-a", "sale-b"]

    def test_undated_sorts_first(self):
        sources = SourceDocuments(
            sales=(
                SaleInvoice("s1", invoice_date=datetime(2024, 1, 1), total_net_amount=D("1")),
                SaleInvoice("s2", total_net_amount=D("1")),
            )
        )
        ids = [e.id for e in LedgerBuilder().build(sources).entries]
        assert ids == ["sale-s2", "sale-s1"]

    def test_closing_balance_identity(self, sources):
        opening = D("75")
        ledger = LedgerBuilder().build(sources, opening_balance=opening)
        totals = ledger.totals
        assert totals.closing_balance == opening + totals.total_debit - totals.total_credit

    def test_every_balance_is_a_prefix_sum(self, sources):
        ledger = LedgerBuilder().build(sources, opening_balance=D("10"))
        running = D("10")
        for entry in ledger.entries:
            running += entry.debit - entry.credit
            assert entry.balance == running

    def test_empty_ledger_closes_at_opening(self):
        ledger = LedgerBuilder().build(SourceDocuments(), opening_balance=D("42"))
        assert ledger.entries == []
        assert ledger.totals.closing_balance == D("42")

    def test_deterministic(self, sources):
        assert LedgerBuilder().build(sources) == LedgerBuilder().build(sources)


class TestFilters:

    def test_counterparty_by_id(self, sources):
        ledger = LedgerBuilder().build(sources, LedgerFilter(counterparty_id="c1"))
        assert [e.id for e in ledger.entries] == ["sale-s1", "receipt-rv1"]

    def test_counterparty_by_name_is_case_insensitive(self, sources):
        ledger = LedgerBuilder().build(sources, LedgerFilter(counterparty_name="  acme "))
        assert [e.id for e in ledger.entries] == ["purchase-invoice-p1", "payment-pv1"]

    def test_name_matches_when_entry_has_no_id(self):
        sources = SourceDocuments(
            receipts=(ReceiptVoucher("rv1", received_from="Bob", amount=D("5")),)
        )
        ledger = LedgerBuilder().build(
            sources, LedgerFilter(counterparty_id="c1", counterparty_name="Bob")
        )
        assert len(ledger.entries) == 1

    def test_party_kind(self, sources):
        ledger = LedgerBuilder().build(sources, LedgerFilter(party_kind=PartyKind.SUPPLIERS))
        assert {e.document_type for e in ledger.entries} == {
            DocumentType.PURCHASE_INVOICE,
            DocumentType.PAYMENT,
        }

    def test_document_types(self, sources):
        ledger = LedgerBuilder().build(
            sources, LedgerFilter(document_types=frozenset({DocumentType.RECEIPT}))
        )
        assert [e.id for e in ledger.entries] == ["receipt-rv1"]

    def test_date_range_is_inclusive(self, sources):
        ledger = LedgerBuilder().build(
            sources, LedgerFilter(date_from=date(2024, 1, 2), date_to=date(2024, 1, 3))
        )
        assert [e.id for e in ledger.entries] == ["purchase-invoice-p1", "receipt-rv1"]

    def test_search(self, sources):
        ledger = LedgerBuilder().build(sources, LedgerFilter(search="carol"))
        assert [e.id for e in ledger.entries] == ["sale-s2"]

    def test_filters_commute(self, sources):
        entries = LedgerBuilder().build(sources).entries
        f = LedgerFilter(
            counterparty_name="bob",
            date_from=date(2024, 1, 1),
            document_types=frozenset({DocumentType.SALE_INVOICE, DocumentType.RECEIPT}),
        )
        checks = f.predicates()
        forward = [e for e in entries if all(c(e) for c in checks)]
        backward = [e for e in entries if all(c(e) for c in reversed(checks))]
        assert forward == backward == [e for e in entries if f.matches(e)]

    def test_balance_runs_over_selection_only(self, sources):
        ledger = LedgerBuilder().build(
            sources, LedgerFilter(counterparty_id="c1"), opening_balance=D("100")
        )
        assert [e.balance for e in ledger.entries] == [D("1100"), D("900")]


class TestHelpers:

    def test_undated_excluded_from_range(self):
        assert in_date_range(None, date(2024, 1, 1), None) is False

    def test_date_to_covers_whole_day(self):
        assert in_date_range(datetime(2024, 1, 3, 23, 59), None, date(2024, 1, 3))

    def test_running_balance_fold(self):
        entries = [
            LedgerEntry("a", None, DocumentType.SALE_INVOICE, "1", "x", debit=D("5")),
            LedgerEntry("b", None, DocumentType.RECEIPT, "2", "y", credit=D("2")),
        ]
        assert [e.balance for e in running_balance(entries, D("1"))] == [D("6"), D("4")]
