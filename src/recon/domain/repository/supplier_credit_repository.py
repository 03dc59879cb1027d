"""Abstract repository for supplier credit notes."""

from __future__ import annotations

from abc import ABC, abstractmethod

from recon.domain.model.documents import SupplierCredit


class SupplierCreditRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[SupplierCredit]:
        """Return every credit note."""

    @abstractmethod
    def add(self, credit: SupplierCredit) -> None:
        """Record a new credit note. Credits are never updated."""
