"""CLI commands for the journal ledger."""

from __future__ import annotations

import click

from recon.application.show_ledger import ShowLedgerHandler
from recon.domain.exceptions import DomainException
from recon.domain.model.ledger import DocumentType, PartyKind
from recon.domain.service.ledger_builder import LedgerFilter
from recon.infrastructure.bootstrap import account_repository, source_document_repository

DOCUMENT_TYPE_CHOICES = {t.value.lower().replace(" ", "-"): t for t in DocumentType}


@click.command("show")
@click.option("--party-id", default=None, help="Customer or supplier account ID.")
@click.option("--party", "party_name", default=None, help="Customer or supplier name.")
@click.option(
    "--kind",
    type=click.Choice([k.value for k in PartyKind]),
    default=None,
    help="Only customer or only supplier documents.",
)
@click.option(
    "--type",
    "doc_types",
    multiple=True,
    type=click.Choice(sorted(DOCUMENT_TYPE_CHOICES)),
    help="Document type (repeatable).",
)
@click.option("--from", "date_from", type=click.DateTime(["%Y-%m-%d"]), default=None)
@click.option("--to", "date_to", type=click.DateTime(["%Y-%m-%d"]), default=None)
@click.option("--search", default=None, help="Text to find in number, particulars or party.")
def ledger_show(party_id, party_name, kind, doc_types, date_from, date_to, search) -> None:
    """Show the journal ledger with running balance."""
    filters = LedgerFilter(
        counterparty_id=party_id,
        counterparty_name=party_name,
        party_kind=PartyKind(kind) if kind else None,
        document_types=frozenset(DOCUMENT_TYPE_CHOICES[t] for t in doc_types),
        date_from=date_from.date() if date_from else None,
        date_to=date_to.date() if date_to else None,
        search=search,
    )
    handler = ShowLedgerHandler(
        source_repo=source_document_repository(),
        account_repo=account_repository(),
    )

    try:
        dto = handler.handle(filters)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Opening balance: {dto.opening_balance}")
    click.echo(
        f"{'Date':<10} {'Type':<16} {'Number':<12} {'Particulars':<30} "
        f"{'Debit':>12} {'Credit':>12} {'Balance':>12}"
    )
    click.echo("-" * 110)
    for line in dto.lines:
        click.echo(
            f"{line.date:<10} {line.document_type:<16} {line.document_number:<12} "
            f"{line.particulars[:30]:<30} {line.debit:>12} {line.credit:>12} {line.balance:>12}"
        )
    click.echo("-" * 110)
    click.echo(
        f"{'Totals':<70} {dto.total_debit:>12} {dto.total_credit:>12} "
        f"{dto.closing_balance:>12}"
    )
