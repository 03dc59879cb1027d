"""CLI commands for inventory."""

from __future__ import annotations

import click

from recon.application.show_inventory import ShowInventoryHandler
from recon.infrastructure.bootstrap import inventory_repository


@click.command("show")
def inventory_show() -> None:
    """Show current stock levels."""
    handler = ShowInventoryHandler(inventory_repo=inventory_repository())
    lines = handler.handle()

    if not lines:
        click.echo("No inventory records found.")
        return

    click.echo(f"{'SKU':<12} {'Name':<20} {'Stock':>8} {'Min':>6} {'Max':>6}")
    click.echo("-" * 56)
    for line in lines:
        flag = "  (low)" if line.below_minimum else ""
        click.echo(
            f"{line.sku:<12} {line.name:<20} {line.stock:>8} "
            f"{line.min_stock:>6} {line.max_stock:>6}{flag}"
        )
