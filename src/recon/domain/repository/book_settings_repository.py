"""Abstract repository for operator-set cash/bank book opening balances."""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal


class BookSettingsRepository(ABC):

    @abstractmethod
    def get_opening_balance(self, book: str) -> Decimal:
        """Return the opening balance for a book, 0 if never set."""

    @abstractmethod
    def set_opening_balance(self, book: str, amount: Decimal) -> None:
        """Store the opening balance for a book."""
