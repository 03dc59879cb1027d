"""PurchaseOrder aggregate and its fulfillment status.

A purchase order owns its lines. Each line tracks how much of the ordered
quantity has been received so far, net of returns. The order's
fulfillment status is always derived from those figures, never set by hand.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from decimal import Decimal
from enum import Enum

from recon.domain.model.value_objects import ZERO


class FulfillmentStatus(Enum):
    OPEN = "open"
    PARTIALLY_RECEIVED = "partially_received"
    RECEIVED = "received"


@dataclass(frozen=True)
class PurchaseOrderLine:
    """One ordered SKU.

    ``received`` stays within ``[0, quantity]``; receipts cap at the
    ordered quantity and returns floor at zero.
    """

    sku: str
    quantity: int
    received: int = 0
    price: Decimal = ZERO
    name: str = ""

    @property
    def outstanding(self) -> int:
        return max(0, self.quantity - self.received)

    def with_received(self, received: int) -> PurchaseOrderLine:
        return replace(self, received=received)


def derive_fulfillment_status(lines: list[PurchaseOrderLine]) -> FulfillmentStatus:
    """Derive the status from total received vs. total ordered."""
    total_ordered = sum(line.quantity for line in lines)
    total_received = sum(line.received for line in lines)
    if total_received <= 0:
        return FulfillmentStatus.OPEN
    if total_received < total_ordered:
        return FulfillmentStatus.PARTIALLY_RECEIVED
    return FulfillmentStatus.RECEIVED


@dataclass(frozen=True)
class PurchaseOrder:
    """Aggregate root for purchase orders.

    Use ``with_lines()`` to obtain an updated snapshot; it recomputes
    ``fulfillment_status`` so the two can never drift apart.
    """

    id: str
    lines: tuple[PurchaseOrderLine, ...] = field(default_factory=tuple)
    supplier_id: str = ""
    supplier_name: str = ""
    date: datetime | None = None
    fulfillment_status: FulfillmentStatus = FulfillmentStatus.OPEN

    @staticmethod
    def create(
        id: str,
        lines: list[PurchaseOrderLine],
        supplier_id: str = "",
        supplier_name: str = "",
        date: datetime | None = None,
    ) -> PurchaseOrder:
        """Build a purchase order with a status consistent with its lines."""
        return PurchaseOrder(
            id=id,
            lines=tuple(lines),
            supplier_id=supplier_id,
            supplier_name=supplier_name,
            date=date,
            fulfillment_status=derive_fulfillment_status(list(lines)),
        )

    @property
    def total_ordered(self) -> int:
        return sum(line.quantity for line in self.lines)

    @property
    def total_received(self) -> int:
        return sum(line.received for line in self.lines)

    def with_lines(self, lines: list[PurchaseOrderLine]) -> PurchaseOrder:
        return replace(
            self,
            lines=tuple(lines),
            fulfillment_status=derive_fulfillment_status(lines),
        )

    def find_line(self, sku: str) -> PurchaseOrderLine | None:
        for line in self.lines:
            if line.sku == sku:
                return line
        return None
