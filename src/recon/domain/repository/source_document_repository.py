"""Abstract read-side repository for ledger source documents."""

from __future__ import annotations

from abc import ABC, abstractmethod

from recon.domain.model.sources import SourceDocuments


class SourceDocumentRepository(ABC):

    @abstractmethod
    def load(self) -> SourceDocuments:
        """Return sales, purchase invoices, vouchers and expenses."""
