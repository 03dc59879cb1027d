"""Integration tests for the ShowLedger use case."""

from datetime import datetime
from decimal import Decimal

from recon.application.show_ledger import ShowLedgerHandler
from recon.domain.model.documents import Account, AccountKind
from recon.domain.model.sources import ReceiptVoucher, SaleInvoice, SourceDocuments
from recon.domain.service.ledger_builder import LedgerFilter
from tests.fakes import FakeAccountRepository, FakeSourceDocumentRepository


def _handler():
    sources = SourceDocuments(
        sales=(
            SaleInvoice("s1", "INV-1", datetime(2024, 1, 1), "c1", "Bob",
                        total_net_amount=Decimal("1234.5")),
        ),
        receipts=(
            ReceiptVoucher("rv1", "RV-1", datetime(2024, 1, 3), "Bob", "c1", Decimal("200")),
        ),
    )
    accounts = [Account("c1", "Bob", AccountKind.CUSTOMER, opening_balance=Decimal("100"))]
    return ShowLedgerHandler(
        FakeSourceDocumentRepository(sources), FakeAccountRepository(accounts)
    )


class TestShowLedger:

    def test_no_counterparty_starts_at_zero(self):
        dto = _handler().handle()
        assert dto.opening_balance == "0.00"
        assert [line.balance for line in dto.lines] == ["1,234.50", "1,034.50"]
        assert dto.closing_balance == "1,034.50"

    def test_counterparty_uses_account_opening_balance(self):
        dto = _handler().handle(LedgerFilter(counterparty_id="c1"))
        assert dto.opening_balance == "100.00"
        assert dto.closing_balance == "1,134.50"

    def test_opening_balance_found_by_name(self):
        dto = _handler().handle(LedgerFilter(counterparty_name="bob"))
        assert dto.opening_balance == "100.00"

    def test_line_formatting(self):
        first = _handler().handle().lines[0]
        assert first.date == "2024-01-01"
        assert first.document_type == "Sale Invoice"
        assert first.debit == "1,234.50"
        assert first.credit == "0.00"
        assert first.counterparty == "Bob"
