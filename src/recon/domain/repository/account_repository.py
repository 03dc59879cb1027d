"""Abstract repository for the customer/supplier account directory."""

from __future__ import annotations

from abc import ABC, abstractmethod

from recon.domain.model.documents import Account


class AccountRepository(ABC):

    @abstractmethod
    def get_by_id(self, account_id: str) -> Account | None:
        """Return an account by its ID, or None if not found."""

    @abstractmethod
    def get_by_name(self, name: str) -> Account | None:
        """Return an account by case-insensitive name, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Account]:
        """Return every account."""
