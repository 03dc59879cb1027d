"""Application service: Show Journal Ledger use case (query).

When a counterparty is selected, the running balance starts from that
account's stored opening balance; otherwise it starts at zero.
"""

from __future__ import annotations

from decimal import Decimal

from recon.application.dto import LedgerDTO, LedgerLineDTO, format_date
from recon.domain.model.ledger import Ledger
from recon.domain.model.value_objects import ZERO, format_amount
from recon.domain.repository.account_repository import AccountRepository
from recon.domain.repository.source_document_repository import (
    SourceDocumentRepository,
)
from recon.domain.service.ledger_builder import LedgerBuilder, LedgerFilter


class ShowLedgerHandler:

    def __init__(
        self,
        source_repo: SourceDocumentRepository,
        account_repo: AccountRepository,
        builder: LedgerBuilder | None = None,
    ) -> None:
        self._source_repo = source_repo
        self._account_repo = account_repo
        self._builder = builder or LedgerBuilder()

    def handle(self, filters: LedgerFilter | None = None) -> LedgerDTO:
        filters = filters or LedgerFilter()
        ledger = self._builder.build(
            self._source_repo.load(),
            filters,
            opening_balance=self._opening_balance(filters),
        )
        return self._to_dto(ledger)

    def _opening_balance(self, filters: LedgerFilter) -> Decimal:
        if not filters.selects_counterparty:
            return ZERO
        account = None
        if filters.counterparty_id:
            account = self._account_repo.get_by_id(filters.counterparty_id)
        if account is None and filters.counterparty_name:
            account = self._account_repo.get_by_name(filters.counterparty_name)
        return account.opening_balance if account is not None else ZERO

    @staticmethod
    def _to_dto(ledger: Ledger) -> LedgerDTO:
        return LedgerDTO(
            lines=[
                LedgerLineDTO(
                    date=format_date(entry.date),
                    document_type=entry.document_type.value,
                    document_number=entry.document_number,
                    particulars=entry.particulars,
                    counterparty=entry.counterparty_name,
                    debit=format_amount(entry.debit),
                    credit=format_amount(entry.credit),
                    balance=format_amount(entry.balance),
                )
                for entry in ledger.entries
            ],
            opening_balance=format_amount(ledger.totals.opening_balance),
            total_debit=format_amount(ledger.totals.total_debit),
            total_credit=format_amount(ledger.totals.total_credit),
            closing_balance=format_amount(ledger.totals.closing_balance),
        )
