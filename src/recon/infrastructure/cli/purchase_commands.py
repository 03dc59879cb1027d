"""CLI commands for purchase orders, goods receipts and purchase returns."""

from __future__ import annotations

from datetime import datetime

import click

from recon.application.apply_receipt import ApplyReceiptHandler
from recon.application.dto import LineSpec, StockChangeDTO
from recon.application.process_return import ProcessReturnHandler
from recon.application.show_purchase_order import ShowPurchaseOrderHandler
from recon.domain.exceptions import DomainException
from recon.domain.model.documents import DocumentLine, GoodsReceipt, PurchaseReturn
from recon.domain.model.value_objects import to_amount, to_optional_amount
from recon.infrastructure.bootstrap import (
    account_repository,
    goods_receipt_repository,
    inventory_repository,
    purchase_order_repository,
    purchase_return_repository,
    supplier_credit_repository,
)


def _parse_items(raw: str) -> list[LineSpec]:
    """Parse 'A-100:3,B-200:5:12.50' into LineSpec list."""
    specs: list[LineSpec] = []
    for chunk in raw.split(","):
        chunk = chunk.strip()
        parts = chunk.split(":")
        if len(parts) not in (2, 3) or not parts[0].strip():
            raise click.BadParameter(
                f"Invalid item format '{chunk}'. Expected 'SKU:Quantity[:Price]'."
            )
        sku, qty_str = parts[0].strip(), parts[1]
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(f"Invalid quantity '{qty_str}' for SKU '{sku}'.")
        if qty <= 0:
            raise click.BadParameter(f"Quantity for SKU '{sku}' must be positive.")
        price = parts[2] if len(parts) == 3 else "0"
        specs.append(LineSpec(sku=sku, quantity=qty, price=price))
    return specs


def _lines(specs: list[LineSpec]) -> tuple[DocumentLine, ...]:
    return tuple(
        DocumentLine(sku=s.sku, quantity=s.quantity, price=to_amount(s.price))
        for s in specs
    )


def _echo_stock_changes(changes: list[StockChangeDTO]) -> None:
    for change in changes:
        click.echo(f"  {change.sku:<12} {change.before:>6} -> {change.after:<6}")


@click.command("show")
@click.option("--id", "po_id", required=True, help="Purchase order ID.")
def po_show(po_id: str) -> None:
    """Show a purchase order with received quantities."""
    handler = ShowPurchaseOrderHandler(po_repo=purchase_order_repository())

    try:
        dto = handler.handle(po_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Purchase order {dto.id}  (status={dto.status})")
    click.echo(f"Supplier: {dto.supplier_name}")
    click.echo()
    click.echo(f"  {'SKU':<12} {'Ordered':>8} {'Received':>9} {'Outstanding':>12}")
    click.echo(f"  {'-'*44}")
    for line in dto.lines:
        click.echo(
            f"  {line.sku:<12} {line.ordered:>8} {line.received:>9} {line.outstanding:>12}"
        )


@click.command("apply")
@click.option("--id", "grn_id", required=True, help="GRN ID.")
@click.option("--number", default="", help="GRN number.")
@click.option("--po", "po_id", default=None, help="Linked purchase order ID.")
@click.option("--items", required=True, help="Items as 'SKU:Qty[:Price],...'.")
def grn_apply(grn_id: str, number: str, po_id: str | None, items: str) -> None:
    """Apply a goods receipt to inventory and its purchase order."""
    receipt = GoodsReceipt(
        id=grn_id,
        grn_number=number,
        linked_po_id=po_id,
        date=datetime.now(),
        lines=_lines(_parse_items(items)),
    )
    handler = ApplyReceiptHandler(
        receipt_repo=goods_receipt_repository(),
        inventory_repo=inventory_repository(),
        po_repo=purchase_order_repository(),
    )

    try:
        outcome = handler.handle(receipt)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not outcome.applied:
        click.echo(f"GRN {grn_id}: {outcome.message}")
        return
    click.echo(f"GRN {grn_id} applied.")
    _echo_stock_changes(outcome.stock_changes)
    if outcome.po_id:
        click.echo(f"Purchase order {outcome.po_id} is now {outcome.po_status}.")


@click.command("process")
@click.option("--id", "return_id", default="", help="Return ID.")
@click.option("--number", "return_number", default="", help="Return number.")
@click.option("--po", "po_id", default=None, help="Linked purchase order ID.")
@click.option("--supplier-id", default="", help="Supplier account ID.")
@click.option("--supplier", "supplier_name", default="", help="Supplier name.")
@click.option("--items", required=True, help="Items as 'SKU:Qty[:Price],...'.")
@click.option("--total", default=None, help="Return total amount.")
def return_process(
    return_id: str,
    return_number: str,
    po_id: str | None,
    supplier_id: str,
    supplier_name: str,
    items: str,
    total: str | None,
) -> None:
    """Process a purchase return once and issue a supplier credit."""
    ret = PurchaseReturn(
        id=return_id,
        return_number=return_number,
        linked_po_id=po_id,
        supplier_id=supplier_id,
        supplier_name=supplier_name,
        return_date=datetime.now(),
        lines=_lines(_parse_items(items)),
        total_amount=to_optional_amount(total),
    )
    handler = ProcessReturnHandler(
        return_repo=purchase_return_repository(),
        inventory_repo=inventory_repository(),
        po_repo=purchase_order_repository(),
        credit_repo=supplier_credit_repository(),
        account_repo=account_repository(),
    )

    try:
        outcome = handler.handle(ret)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not outcome.applied:
        click.echo(f"Return {outcome.return_reference}: {outcome.message}")
        return
    click.echo(f"Return {outcome.return_reference} applied.")
    _echo_stock_changes(outcome.stock_changes)
    if outcome.po_id:
        click.echo(f"Purchase order {outcome.po_id} is now {outcome.po_status}.")
    if outcome.credit is not None:
        click.echo(
            f"Credit {outcome.credit.id}: {outcome.credit.amount} "
            f"for {outcome.credit.supplier_name or 'unknown supplier'}"
        )
