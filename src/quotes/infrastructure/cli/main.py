import click

from quotes.infrastructure.bootstrap import init_app
from quotes.infrastructure.cli.invoice_commands import invoice_total
from quotes.infrastructure.cli.quotation_commands import (
    quote_apply_template,
    quote_finalize,
    quote_price,
    quote_show,
)
from quotes.infrastructure.cli.template_commands import template_list


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Quotes: quotation and invoice pricing"""
    ctx.obj = init_app()


@cli.group()
def quote() -> None:
    """Price and finalize quotations."""


@cli.group()
def template() -> None:
    """Browse quotation templates."""


@cli.group()
def invoice() -> None:
    """Compute invoice totals."""


# Register subcommands
quote.add_command(quote_apply_template)
quote.add_command(quote_finalize)
quote.add_command(quote_price)
quote.add_command(quote_show)
template.add_command(template_list)
invoice.add_command(invoice_total)
