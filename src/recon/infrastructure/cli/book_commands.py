"""CLI commands for the cash and bank books."""

from __future__ import annotations

import click

from recon.application.show_book import SetOpeningBalanceHandler, ShowBookHandler
from recon.domain.exceptions import DomainException
from recon.domain.service.book_builder import BANK_BOOK, CASH_BOOK
from recon.infrastructure.bootstrap import (
    book_builders,
    book_settings_repository,
    source_document_repository,
)

BOOK_CHOICE = click.Choice([CASH_BOOK, BANK_BOOK])


@click.command("show")
@click.option("--book", "book_name", required=True, type=BOOK_CHOICE)
@click.option("--from", "date_from", type=click.DateTime(["%Y-%m-%d"]), default=None)
@click.option("--to", "date_to", type=click.DateTime(["%Y-%m-%d"]), default=None)
@click.option("--search", default=None, help="Text to find in reference or particulars.")
def book_show(book_name, date_from, date_to, search) -> None:
    """Show the cash or bank book with running balance."""
    handler = ShowBookHandler(
        source_repo=source_document_repository(),
        settings_repo=book_settings_repository(),
        builders=book_builders(),
    )

    try:
        dto = handler.handle(
            book_name,
            date_from=date_from.date() if date_from else None,
            date_to=date_to.date() if date_to else None,
            search=search,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{dto.name.title()} book  (opening balance {dto.opening_balance})")
    click.echo(
        f"{'Date':<10} {'Reference':<12} {'Particulars':<30} "
        f"{'Receipt':>12} {'Payment':>12} {'Balance':>12}"
    )
    click.echo("-" * 93)
    for line in dto.lines:
        click.echo(
            f"{line.date:<10} {line.reference:<12} {line.particulars[:30]:<30} "
            f"{line.receipt:>12} {line.payment:>12} {line.balance:>12}"
        )
    click.echo("-" * 93)
    click.echo(
        f"{'Totals':<54} {dto.total_receipt:>12} {dto.total_payment:>12} "
        f"{dto.closing_balance:>12}"
    )


@click.command("set-opening")
@click.option("--book", "book_name", required=True, type=BOOK_CHOICE)
@click.option("--amount", required=True, help="Opening balance (e.g. 2500.00).")
def book_set_opening(book_name: str, amount: str) -> None:
    """Set a book's opening balance."""
    handler = SetOpeningBalanceHandler(
        settings_repo=book_settings_repository(),
        books=frozenset(book_builders()),
    )

    try:
        handler.handle(book_name, amount)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{book_name.title()} book opening balance set to {amount}")
