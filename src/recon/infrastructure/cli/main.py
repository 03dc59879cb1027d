import click

from recon.infrastructure.cli.book_commands import book_set_opening, book_show
from recon.infrastructure.cli.inventory_commands import inventory_show
from recon.infrastructure.cli.ledger_commands import ledger_show
from recon.infrastructure.cli.purchase_commands import grn_apply, po_show, return_process
from recon.infrastructure.logging_config import configure_logging


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug output.")
def cli(verbose: bool) -> None:
    """Recon: inventory and ledger reconciliation."""
    configure_logging(verbose)


@cli.group()
def inventory() -> None:
    """Inspect inventory."""


@cli.group()
def po() -> None:
    """Inspect purchase orders."""


@cli.group()
def grn() -> None:
    """Apply goods receipts."""


@cli.group("return")
def return_() -> None:
    """Process purchase returns."""


@cli.group()
def ledger() -> None:
    """Journal ledger."""


@cli.group()
def book() -> None:
    """Cash and bank books."""


# Register subcommands
inventory.add_command(inventory_show)
po.add_command(po_show)
grn.add_command(grn_apply)
return_.add_command(return_process)
ledger.add_command(ledger_show)
book.add_command(book_show)
book.add_command(book_set_opening)
