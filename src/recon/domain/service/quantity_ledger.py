"""Domain service: Quantity Ledger.

Pure functions that apply goods-receipt and purchase-return quantities
to inventory and purchase order snapshots. Inputs are never mutated;
every function returns a new snapshot.

Unresolvable references are tolerated: a line whose SKU matches no
inventory row or PO line is skipped, and a document that does not link
to the given PO leaves that PO untouched.
"""

from __future__ import annotations

import logging

from recon.domain.model.documents import (
    DocumentLine,
    GoodsReceipt,
    PurchaseReturn,
    quantities_by_sku,
)
from recon.domain.model.inventory import InventoryItem
from recon.domain.model.purchase_order import PurchaseOrder

logger = logging.getLogger(__name__)


# --- Inventory ----------------------------------------------------------------


def apply_receipt_to_inventory(
    inventory: list[InventoryItem], receipt: GoodsReceipt
) -> list[InventoryItem]:
    """Add received quantities to matching stock rows."""
    deltas = _deltas(receipt.lines, inventory, receipt.id)
    return [
        item.with_stock(max(0, item.stock + deltas[item.sku]))
        if item.sku in deltas
        else item
        for item in inventory
    ]


def apply_return_to_inventory(
    inventory: list[InventoryItem], ret: PurchaseReturn
) -> list[InventoryItem]:
    """Remove returned quantities from stock, clamping at zero."""
    deltas = _deltas(ret.lines, inventory, ret.id or ret.return_number)
    return [
        item.with_stock(max(0, item.stock - deltas[item.sku]))
        if item.sku in deltas
        else item
        for item in inventory
    ]


# --- Purchase orders ----------------------------------------------------------


def apply_receipt_to_purchase_order(
    po: PurchaseOrder, receipt: GoodsReceipt
) -> PurchaseOrder:
    """Add received quantities to the linked PO's lines.

    ``received`` is capped at the ordered quantity; over-deliveries still
    count toward inventory but not toward the order.
    """
    if not _links_to(receipt.linked_po_id, po):
        return po
    deltas = quantities_by_sku(receipt.lines)
    lines = [
        line.with_received(
            max(0, min(line.quantity, line.received + deltas[line.sku]))
        )
        if line.sku in deltas
        else line
        for line in po.lines
    ]
    return po.with_lines(lines)


def apply_return_to_purchase_order(
    po: PurchaseOrder, ret: PurchaseReturn
) -> PurchaseOrder:
    """Subtract returned quantities from the linked PO's lines, flooring at zero."""
    if not _links_to(ret.linked_po_id, po):
        return po
    deltas = quantities_by_sku(ret.lines)
    lines = [
        line.with_received(max(0, line.received - deltas[line.sku]))
        if line.sku in deltas
        else line
        for line in po.lines
    ]
    return po.with_lines(lines)


def apply_receipt(
    inventory: list[InventoryItem],
    po: PurchaseOrder | None,
    receipt: GoodsReceipt,
) -> tuple[list[InventoryItem], PurchaseOrder | None]:
    """Apply a goods receipt to inventory and, when given, its purchase order."""
    new_inventory = apply_receipt_to_inventory(inventory, receipt)
    new_po = apply_receipt_to_purchase_order(po, receipt) if po is not None else None
    return new_inventory, new_po


# --- Internal helpers ---------------------------------------------------------


def _links_to(linked_po_id: str | None, po: PurchaseOrder) -> bool:
    return bool(linked_po_id) and str(linked_po_id) == str(po.id)


def _deltas(
    lines: tuple[DocumentLine, ...],
    inventory: list[InventoryItem],
    document_id: str,
) -> dict[str, int]:
    deltas = quantities_by_sku(lines)
    known = {item.sku for item in inventory}
    for sku in deltas.keys() - known:
        logger.debug("Document %s: SKU %r not in inventory, skipped", document_id, sku)
    return deltas
