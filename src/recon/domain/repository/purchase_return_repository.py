"""Abstract repository for purchase returns.

Returns are keyed by both ``id`` and ``return_number`` so a lookup by
either identity is a single dictionary access.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from recon.domain.model.documents import PurchaseReturn


class PurchaseReturnRepository(ABC):

    @abstractmethod
    def find_by_identity(self, return_id: str, return_number: str) -> PurchaseReturn | None:
        """Return the stored return matching either identity key, or None."""

    @abstractmethod
    def list_all(self) -> list[PurchaseReturn]:
        """Return every stored return."""

    @abstractmethod
    def save(self, ret: PurchaseReturn) -> None:
        """Persist a return, replacing any record that shares an identity key."""
