"""Application service: Show Purchase Order use case (query)."""

from __future__ import annotations

from recon.application.dto import PurchaseOrderDTO, PurchaseOrderLineDTO
from recon.domain.exceptions import EntityNotFoundError
from recon.domain.model.purchase_order import PurchaseOrder
from recon.domain.repository.purchase_order_repository import PurchaseOrderRepository


class ShowPurchaseOrderHandler:

    def __init__(self, po_repo: PurchaseOrderRepository) -> None:
        self._po_repo = po_repo

    def handle(self, po_id: str) -> PurchaseOrderDTO:
        po = self._po_repo.get_by_id(po_id)
        if po is None:
            raise EntityNotFoundError(f"Purchase order '{po_id}' not found")
        return self._to_dto(po)

    @staticmethod
    def _to_dto(po: PurchaseOrder) -> PurchaseOrderDTO:
        return PurchaseOrderDTO(
            id=po.id,
            supplier_name=po.supplier_name,
            status=po.fulfillment_status.value,
            lines=[
                PurchaseOrderLineDTO(
                    sku=line.sku,
                    ordered=line.quantity,
                    received=line.received,
                    outstanding=line.outstanding,
                )
                for line in po.lines
            ],
        )
