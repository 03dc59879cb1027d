"""Purchasing documents that move stock, plus the account directory.

Goods receipts and purchase returns are the only documents that change
inventory and purchase order figures. A supplier credit is the financial
side effect of an applied return.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from decimal import Decimal
from enum import Enum

from recon.domain.model.value_objects import ZERO


@dataclass(frozen=True)
class DocumentLine:
    """A SKU and quantity on a receipt or return."""

    sku: str
    quantity: int = 0
    price: Decimal = ZERO

    @property
    def line_total(self) -> Decimal:
        return self.price * self.quantity


def quantities_by_sku(lines: tuple[DocumentLine, ...]) -> dict[str, int]:
    """Sum quantities per SKU so duplicate lines apply once, combined.

    A negative line quantity is malformed and counts as zero.
    """
    totals: dict[str, int] = {}
    for line in lines:
        totals[line.sku] = totals.get(line.sku, 0) + max(0, line.quantity)
    return totals


@dataclass(frozen=True)
class GoodsReceipt:
    """Goods Receipt Note: goods physically received, optionally against a PO."""

    id: str
    lines: tuple[DocumentLine, ...] = field(default_factory=tuple)
    grn_number: str = ""
    linked_po_id: str | None = None
    date: datetime | None = None


@dataclass(frozen=True)
class PurchaseReturn:
    """Goods sent back to a supplier.

    Identified by ``id`` and, alternately, by ``return_number``; either
    one is enough to recognise a resubmission.
    """

    id: str
    return_number: str = ""
    lines: tuple[DocumentLine, ...] = field(default_factory=tuple)
    linked_po_id: str | None = None
    supplier_id: str = ""
    supplier_name: str = ""
    return_date: datetime | None = None
    subtotal: Decimal | None = None
    total_amount: Decimal | None = None
    processed: bool = False

    def identity_keys(self) -> tuple[str, ...]:
        return tuple(key for key in (self.id, self.return_number) if key)

    @property
    def credit_amount(self) -> Decimal:
        """Value credited to the supplier.

        Falls back from ``total_amount`` to ``subtotal`` to the sum of
        the line totals.
        """
        if self.total_amount is not None:
            return self.total_amount
        if self.subtotal is not None:
            return self.subtotal
        return sum((line.line_total for line in self.lines), ZERO)

    def mark_processed(self) -> PurchaseReturn:
        return replace(self, processed=True)


@dataclass(frozen=True)
class SupplierCredit:
    """Credit note owed by a supplier for returned goods. Never mutated."""

    id: str
    supplier_id: str
    supplier_name: str
    amount: Decimal
    date: datetime
    note: str = ""


class AccountKind(Enum):
    CUSTOMER = "customer"
    SUPPLIER = "supplier"


@dataclass(frozen=True)
class Account:
    """Customer or supplier directory entry with its carried-forward balance."""

    id: str
    name: str
    kind: AccountKind
    opening_balance: Decimal = ZERO
