"""Application service: Apply Goods Receipt use case.

Records a GRN once, adds its quantities to inventory and, when the GRN
links to a known purchase order, to that order's received figures.
A link to an unknown order is skipped; inventory is still updated.
The GRN itself is recorded last, so a failed write leaves it retryable.
"""

from __future__ import annotations

import logging

from recon.application.dto import ReceiptOutcomeDTO
from recon.application.stock_changes import stock_changes
from recon.domain.model.documents import GoodsReceipt
from recon.domain.repository.goods_receipt_repository import GoodsReceiptRepository
from recon.domain.repository.inventory_repository import InventoryRepository
from recon.domain.repository.purchase_order_repository import PurchaseOrderRepository
from recon.domain.service.quantity_ledger import apply_receipt

logger = logging.getLogger(__name__)

ALREADY_APPLIED = "Goods receipt already applied"


class ApplyReceiptHandler:

    def __init__(
        self,
        receipt_repo: GoodsReceiptRepository,
        inventory_repo: InventoryRepository,
        po_repo: PurchaseOrderRepository,
    ) -> None:
        self._receipt_repo = receipt_repo
        self._inventory_repo = inventory_repo
        self._po_repo = po_repo

    def handle(self, receipt: GoodsReceipt) -> ReceiptOutcomeDTO:
        if self._receipt_repo.get_by_id(receipt.id) is not None:
            logger.info("GRN %s already applied, skipping", receipt.id)
            return ReceiptOutcomeDTO(
                applied=False, receipt_id=receipt.id, message=ALREADY_APPLIED
            )

        po = None
        if receipt.linked_po_id:
            po = self._po_repo.get_by_id(receipt.linked_po_id)
            if po is None:
                logger.info(
                    "GRN %s links to unknown PO %s; inventory only",
                    receipt.id,
                    receipt.linked_po_id,
                )

        inventory = self._inventory_repo.list_all()
        new_inventory, new_po = apply_receipt(inventory, po, receipt)
        changes = stock_changes(inventory, new_inventory)
        changed_skus = {c.sku for c in changes}

        self._inventory_repo.save_all(
            [item for item in new_inventory if item.sku in changed_skus]
        )
        if new_po is not None:
            self._po_repo.save(new_po)
        self._receipt_repo.add(receipt)

        return ReceiptOutcomeDTO(
            applied=True,
            receipt_id=receipt.id,
            stock_changes=changes,
            po_id=new_po.id if new_po is not None else None,
            po_status=new_po.fulfillment_status.value if new_po is not None else None,
        )
