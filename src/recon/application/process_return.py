"""Application service: Process Purchase Return use case.

Hosts the idempotent return processor. Calls for the same return
identity are serialised with per-identity locks so two concurrent
submissions cannot both pass the "already processed" check.

Commit order: inventory rows, purchase order, credit note, and only
then the processed return. If any earlier write fails the return stays
unprocessed and a retry applies it again.
"""

from __future__ import annotations

import threading
from contextlib import ExitStack

from recon.application.dto import ReturnOutcomeDTO, SupplierCreditDTO, format_date
from recon.application.stock_changes import stock_changes
from recon.domain.model.documents import PurchaseReturn, SupplierCredit
from recon.domain.model.value_objects import format_amount
from recon.domain.repository.account_repository import AccountRepository
from recon.domain.repository.inventory_repository import InventoryRepository
from recon.domain.repository.purchase_order_repository import PurchaseOrderRepository
from recon.domain.repository.purchase_return_repository import (
    PurchaseReturnRepository,
)
from recon.domain.repository.supplier_credit_repository import (
    SupplierCreditRepository,
)
from recon.domain.service.return_processor import ReturnProcessor


class _KeyLock:

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.holders = 0


class IdentityLocks:
    """One lock per identity key, kept only while some caller needs it."""

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[str, _KeyLock] = {}

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)

    def hold(self, keys: tuple[str, ...]) -> ExitStack:
        """Acquire every key's lock in sorted order; release on exit."""
        ordered = sorted(set(keys))
        with self._guard:
            entries = [self._locks.setdefault(k, _KeyLock()) for k in ordered]
            for entry in entries:
                entry.holders += 1
        stack = ExitStack()
        for key, entry in zip(ordered, entries):
            entry.lock.acquire()
            stack.callback(self._release, key, entry)
        return stack

    def _release(self, key: str, entry: _KeyLock) -> None:
        entry.lock.release()
        with self._guard:
            entry.holders -= 1
            if entry.holders == 0:
                del self._locks[key]


class ProcessReturnHandler:

    def __init__(
        self,
        return_repo: PurchaseReturnRepository,
        inventory_repo: InventoryRepository,
        po_repo: PurchaseOrderRepository,
        credit_repo: SupplierCreditRepository,
        account_repo: AccountRepository,
        locks: IdentityLocks | None = None,
    ) -> None:
        self._inventory_repo = inventory_repo
        self._po_repo = po_repo
        self._credit_repo = credit_repo
        self._processor = ReturnProcessor(return_repo, account_repo)
        self._locks = locks if locks is not None else IdentityLocks()

    def handle(self, ret: PurchaseReturn) -> ReturnOutcomeDTO:
        with self._locks.hold(ret.identity_keys()):
            inventory = self._inventory_repo.list_all()
            orders = []
            if ret.linked_po_id:
                po = self._po_repo.get_by_id(ret.linked_po_id)
                if po is not None:
                    orders.append(po)

            outcome = self._processor.process(ret, inventory, orders)
            reference = ret.return_number or ret.id
            if not outcome.applied:
                return ReturnOutcomeDTO(
                    applied=False, return_reference=reference, message=outcome.message
                )

            changes = stock_changes(inventory, outcome.inventory)
            changed_skus = {c.sku for c in changes}
            self._inventory_repo.save_all(
                [item for item in outcome.inventory if item.sku in changed_skus]
            )
            updated_po = None
            for po in outcome.purchase_orders:
                if po.id in outcome.changed_po_ids:
                    self._po_repo.save(po)
                    updated_po = po
            if outcome.credit is not None:
                self._credit_repo.add(outcome.credit)
            self._processor.record_processed(outcome)

        return ReturnOutcomeDTO(
            applied=True,
            return_reference=reference,
            stock_changes=changes,
            po_id=updated_po.id if updated_po is not None else None,
            po_status=(
                updated_po.fulfillment_status.value if updated_po is not None else None
            ),
            credit=self._credit_dto(outcome.credit),
        )

    @staticmethod
    def _credit_dto(credit: SupplierCredit | None) -> SupplierCreditDTO | None:
        if credit is None:
            return None
        return SupplierCreditDTO(
            id=credit.id,
            supplier_name=credit.supplier_name,
            amount=format_amount(credit.amount),
            date=format_date(credit.date),
            note=credit.note,
        )
