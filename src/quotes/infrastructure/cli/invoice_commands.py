"""CLI commands for invoices."""

from __future__ import annotations

import click

from quotes.config.settings import Settings
from quotes.infrastructure.bootstrap import prepare_invoice_handler
from quotes.infrastructure.cli.formatting import display_totals, echo_json


@click.command("total")
@click.option("--subtotal", required=True, help="Invoice subtotal before discount and tax.")
@click.option("--tax-rate", default=None, help="Tax rate in percent (default from settings).")
@click.option("--discount", default="0", help="Flat discount amount.")
@click.option("--client", default="", help="Client name.")
@click.option("--due-date", type=click.DateTime(formats=["%Y-%m-%d"]), default=None,
              help="Due date (YYYY-MM-DD).")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print JSON instead of a table.")
@click.pass_obj
def invoice_total(
    settings: Settings,
    subtotal: str,
    tax_rate: str | None,
    discount: str,
    client: str,
    due_date,
    as_json: bool,
) -> None:
    """Number a new invoice and compute its total."""
    handler = prepare_invoice_handler()
    dto = handler.handle(
        subtotal=subtotal,
        client_name=client,
        tax_rate=tax_rate,
        discount=discount,
        due_date=due_date.date() if due_date else None,
    )

    if as_json:
        echo_json(dto)
        return

    click.echo(f"Invoice {dto.invoice_number}  (status={dto.status})")
    if dto.client_name:
        click.echo(f"Client:   {dto.client_name}")
    if dto.due_date:
        click.echo(f"Due:      {dto.due_date}")
    click.echo()
    display_totals(dto.totals, settings.currency_symbol)
