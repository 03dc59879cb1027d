"""Domain service: Ledger Builder.

Pipeline: normalize -> filter -> sort -> running-balance fold.

Filters are independent predicates combined with AND, so applying them
in any order gives the same entries. Sorting on ``(date, document type,
id)`` gives a total order, which makes the running balance deterministic
for a given entry set and opening balance.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Callable, Iterable

from recon.domain.model.ledger import (
    PARTY_DOCUMENT_TYPES,
    DocumentType,
    Ledger,
    LedgerEntry,
    LedgerTotals,
    PartyKind,
)
from recon.domain.model.sources import SourceDocuments
from recon.domain.model.value_objects import ZERO
from recon.domain.service.transaction_normalizer import TransactionNormalizer


@dataclass(frozen=True)
class LedgerFilter:
    """Optional, composable ledger filters. Unset fields match everything."""

    counterparty_id: str | None = None
    counterparty_name: str | None = None
    party_kind: PartyKind | None = None
    document_types: frozenset[DocumentType] = frozenset()
    date_from: date | None = None
    date_to: date | None = None
    search: str | None = None

    @property
    def selects_counterparty(self) -> bool:
        return bool(self.counterparty_id or self.counterparty_name)

    def predicates(self) -> list[Callable[[LedgerEntry], bool]]:
        checks: list[Callable[[LedgerEntry], bool]] = []
        if self.selects_counterparty:
            checks.append(self._matches_counterparty)
        if self.party_kind is not None:
            kinds = PARTY_DOCUMENT_TYPES[self.party_kind]
            checks.append(lambda e: e.document_type in kinds)
        if self.document_types:
            checks.append(lambda e: e.document_type in self.document_types)
        if self.date_from is not None or self.date_to is not None:
            checks.append(lambda e: in_date_range(e.date, self.date_from, self.date_to))
        if self.search:
            term = self.search.strip().lower()
            checks.append(
                lambda e: term in e.document_number.lower()
                or term in e.particulars.lower()
                or term in e.counterparty_name.lower()
            )
        return checks

    def matches(self, entry: LedgerEntry) -> bool:
        return all(check(entry) for check in self.predicates())

    def _matches_counterparty(self, entry: LedgerEntry) -> bool:
        # Explicit id when both sides have one, otherwise normalised name.
        if self.counterparty_id and entry.counterparty_id:
            if str(entry.counterparty_id) == str(self.counterparty_id):
                return True
        target = (self.counterparty_name or "").strip().lower()
        name = entry.counterparty_name.strip().lower()
        return bool(target) and name == target


def in_date_range(
    value: datetime | None, date_from: date | None, date_to: date | None
) -> bool:
    """Inclusive day-granular range check; ``date_to`` covers the whole day."""
    if value is None:
        return False
    day = value.date()
    if date_from is not None and day < date_from:
        return False
    if date_to is not None and day > date_to:
        return False
    return True


def running_balance(
    entries: Iterable[LedgerEntry], opening_balance: Decimal
) -> list[LedgerEntry]:
    """Left fold: each balance is the previous one plus debit minus credit."""
    balance = opening_balance
    result = []
    for entry in entries:
        balance = balance + entry.debit - entry.credit
        result.append(entry.with_balance(balance))
    return result


class LedgerBuilder:

    def __init__(self, normalizer: TransactionNormalizer | None = None) -> None:
        self._normalizer = normalizer or TransactionNormalizer()

    def build(
        self,
        sources: SourceDocuments,
        filters: LedgerFilter | None = None,
        opening_balance: Decimal = ZERO,
    ) -> Ledger:
        """Build the journal ledger for the given filters.

        ``opening_balance`` is the selected counterparty's carried-forward
        balance; callers pass zero when no counterparty is selected.
        """
        filters = filters or LedgerFilter()
        entries = self._normalizer.normalize(sources)
        checks = filters.predicates()
        selected = [e for e in entries if all(check(e) for check in checks)]
        selected.sort(key=LedgerEntry.sort_key)
        with_balance = running_balance(selected, opening_balance)

        total_debit = sum((e.debit for e in with_balance), ZERO)
        total_credit = sum((e.credit for e in with_balance), ZERO)
        closing = with_balance[-1].balance if with_balance else opening_balance
        return Ledger(
            entries=with_balance,
            totals=LedgerTotals(
                total_debit=total_debit,
                total_credit=total_credit,
                opening_balance=opening_balance,
                closing_balance=closing,
            ),
        )
