"""Domain service: Idempotent Return Processor.

A purchase return is applied at most once per identity. Identity is the
pair ``(id, return_number)`` and either field alone recognises a
resubmission (a retried request, a duplicated form post).

Two states per identity: unprocessed and processed. Processed is
terminal; resubmitting is a reported no-op, not a transition.

``process`` only computes: new inventory, new purchase orders, the
credit note and the processed return record. The caller commits those
effects and then calls ``record_processed`` as its final write. A
failure before that write leaves the return unprocessed, so a retry
applies it again in full. Callers running several threads must
serialise calls for the same identity; the check-then-mark sequence is
not atomic on its own.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone

from recon.domain.exceptions import MissingIdentityError
from recon.domain.model.documents import PurchaseReturn, SupplierCredit
from recon.domain.model.inventory import InventoryItem
from recon.domain.model.purchase_order import PurchaseOrder
from recon.domain.repository.account_repository import AccountRepository
from recon.domain.repository.purchase_return_repository import (
    PurchaseReturnRepository,
)
from recon.domain.service.quantity_ledger import (
    apply_return_to_inventory,
    apply_return_to_purchase_order,
)

logger = logging.getLogger(__name__)

ALREADY_PROCESSED = "Return already processed"


@dataclass(frozen=True)
class ReturnOutcome:
    """Result of ``ReturnProcessor.process``.

    When ``applied`` is False the snapshots are the caller's originals
    and ``credit`` is None.
    """

    applied: bool
    inventory: list[InventoryItem]
    purchase_orders: list[PurchaseOrder]
    credit: SupplierCredit | None = None
    purchase_return: PurchaseReturn | None = None
    message: str | None = None
    changed_po_ids: frozenset[str] = field(default_factory=frozenset)


class ReturnProcessor:

    def __init__(
        self,
        return_repo: PurchaseReturnRepository,
        account_repo: AccountRepository,
    ) -> None:
        self._return_repo = return_repo
        self._account_repo = account_repo

    def process(
        self,
        ret: PurchaseReturn,
        inventory: list[InventoryItem],
        purchase_orders: list[PurchaseOrder],
    ) -> ReturnOutcome:
        """Compute the effects of applying a purchase return once.

        Steps:
        1. Look up a stored return sharing ``id`` or ``return_number``.
        2. Already processed -> no-op outcome with the inputs unchanged.
        3. Otherwise compute new inventory, new POs, the credit note and
           the processed return record. Nothing is written here.

        Raises MissingIdentityError if the return has no identity at all.
        """
        if not ret.identity_keys():
            raise MissingIdentityError(
                "Purchase return needs an id or a return number"
            )

        existing = self._return_repo.find_by_identity(ret.id, ret.return_number)
        if existing is not None and existing.processed:
            logger.info(
                "Return %s already processed, skipping", ret.return_number or ret.id
            )
            return ReturnOutcome(
                applied=False,
                inventory=inventory,
                purchase_orders=purchase_orders,
                message=ALREADY_PROCESSED,
            )

        new_inventory = apply_return_to_inventory(inventory, ret)
        new_orders = [apply_return_to_purchase_order(po, ret) for po in purchase_orders]
        changed = frozenset(
            new.id for old, new in zip(purchase_orders, new_orders) if new is not old
        )
        if ret.linked_po_id and not changed:
            logger.info(
                "Return %s links to unknown PO %s; inventory only",
                ret.return_number or ret.id,
                ret.linked_po_id,
            )
        credit = self._build_credit(ret)
        return ReturnOutcome(
            applied=True,
            inventory=new_inventory,
            purchase_orders=new_orders,
            credit=credit,
            purchase_return=ret.mark_processed(),
            changed_po_ids=changed,
        )

    def record_processed(self, outcome: ReturnOutcome) -> None:
        """Mark an applied return processed. Must be the caller's last write.

        Replaces any unprocessed record sharing the return's identity.
        """
        if not outcome.applied or outcome.purchase_return is None:
            return
        self._return_repo.save(outcome.purchase_return)
        ret = outcome.purchase_return
        logger.info("Return %s recorded as processed", ret.return_number or ret.id)

    # --- Internal helpers -----------------------------------------------------

    def _build_credit(self, ret: PurchaseReturn) -> SupplierCredit:
        reference = ret.return_number or ret.id
        return SupplierCredit(
            id=f"SC-{reference}",
            supplier_id=ret.supplier_id,
            supplier_name=self._resolve_supplier_name(ret),
            amount=ret.credit_amount,
            date=ret.return_date or datetime.now(timezone.utc).replace(tzinfo=None),
            note=f"Credit for purchase return {reference}",
        )

    def _resolve_supplier_name(self, ret: PurchaseReturn) -> str:
        """Prefer the directory name for ``supplier_id``; fall back to free text.

        A disagreement between the two is logged, and the directory wins.
        """
        account = self._account_repo.get_by_id(ret.supplier_id) if ret.supplier_id else None
        if account is None:
            return ret.supplier_name
        free_text = ret.supplier_name.strip()
        if free_text and free_text.lower() != account.name.strip().lower():
            logger.warning(
                "Return %s: supplier name %r does not match account %s (%r)",
                ret.return_number or ret.id,
                free_text,
                account.id,
                account.name,
            )
        return account.name
