"""Abstract repository for recorded goods receipts."""

from __future__ import annotations

from abc import ABC, abstractmethod

from recon.domain.model.documents import GoodsReceipt


class GoodsReceiptRepository(ABC):

    @abstractmethod
    def get_by_id(self, receipt_id: str) -> GoodsReceipt | None:
        """Return a recorded goods receipt, or None."""

    @abstractmethod
    def add(self, receipt: GoodsReceipt) -> None:
        """Record a goods receipt. Receipts are immutable once added."""
