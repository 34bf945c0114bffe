"""CLI commands for quotations."""

from __future__ import annotations

from pathlib import Path

import click

from quotes.application.dto import LineItemSpec, quotation_to_dto
from quotes.config.settings import Settings
from quotes.domain.exceptions import DomainException
from quotes.infrastructure.bootstrap import (
    apply_template_handler,
    finalize_quotation_handler,
    price_quotation_handler,
    quotation_document,
)
from quotes.infrastructure.cli.formatting import display_quotation, echo_json

_DOCUMENT = click.Path(exists=True, dir_okay=False, path_type=Path)
_OUTPUT = click.Path(dir_okay=False, writable=True, path_type=Path)


def _parse_items(raw_items: tuple[str, ...]) -> list[LineItemSpec]:
    """Parse 'Design:10:500' or 'Dev:20:750:5' into LineItemSpec list.

    Numbers are passed through as typed; unreadable ones price as zero.
    """
    specs: list[LineItemSpec] = []
    for raw in raw_items:
        parts = raw.split(":")
        if len(parts) not in (3, 4):
            raise click.BadParameter(
                f"Invalid item format '{raw}'. Expected 'Name:Qty:Price[:Discount%]'.",
                param_hint="--item",
            )
        name, quantity, unit_price = parts[:3]
        discount_percent = parts[3] if len(parts) == 4 else "0"
        specs.append(
            LineItemSpec(
                name=name.strip(),
                quantity=quantity,
                unit_price=unit_price,
                discount_percent=discount_percent,
            )
        )
    return specs


@click.command("price")
@click.option("--item", "-i", "items", multiple=True, required=True,
              help="Line as 'Name:Qty:Price[:Discount%]'. Repeatable.")
@click.option("--tax-rate", default=None, help="Tax rate in percent (default from settings).")
@click.option("--discount", default="0", help="Flat discount on the whole quotation.")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print JSON instead of a table.")
@click.pass_obj
def quote_price(
    settings: Settings,
    items: tuple[str, ...],
    tax_rate: str | None,
    discount: str,
    as_json: bool,
) -> None:
    """Price line items without saving anything."""
    specs = _parse_items(items)
    handler = price_quotation_handler()
    dto = handler.handle(item_specs=specs, tax_rate=tax_rate, discount=discount)

    if as_json:
        echo_json(dto)
    else:
        display_quotation(dto, settings.currency_symbol)


@click.command("show")
@click.argument("document", type=_DOCUMENT)
@click.option("--json", "as_json", is_flag=True, default=False, help="Print JSON instead of a table.")
@click.pass_obj
def quote_show(settings: Settings, document: Path, as_json: bool) -> None:
    """Show a quotation document with freshly computed totals."""
    try:
        quotation = quotation_document(document).load()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    dto = quotation_to_dto(quotation)
    if as_json:
        echo_json(dto)
    else:
        display_quotation(dto, settings.currency_symbol)


@click.command("finalize")
@click.argument("document", type=_DOCUMENT)
@click.option("--output", "-o", type=_OUTPUT, default=None,
              help="Write the finalized document here instead of printing it.")
def quote_finalize(document: Path, output: Path | None) -> None:
    """Validate a quotation and write it in its saved form."""
    source = quotation_document(document)
    handler = finalize_quotation_handler()

    try:
        quotation = source.load()
        dto = handler.handle(quotation)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if output is None:
        click.echo(source.dumps(quotation), nl=False)
        return

    quotation_document(output).save(quotation)
    click.echo(
        f"Quotation {dto.quote_number} finalized — total {dto.totals.total_amount} "
        f"written to {output}",
        err=True,
    )


@click.command("apply-template")
@click.argument("document", type=_DOCUMENT)
@click.option("--templates", "templates_path", required=True, type=_DOCUMENT,
              help="JSON template catalog.")
@click.option("--template-id", required=True, help="Template to apply.")
@click.option("--output", "-o", type=_OUTPUT, default=None,
              help="Write the updated document here instead of printing it.")
def quote_apply_template(
    document: Path,
    templates_path: Path,
    template_id: str,
    output: Path | None,
) -> None:
    """Fill a quotation's lines, tax rate and terms from a template."""
    source = quotation_document(document)
    handler = apply_template_handler(templates_path)

    try:
        quotation = source.load()
        handler.handle(quotation, template_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if output is None:
        click.echo(source.dumps(quotation), nl=False)
        return

    quotation_document(output).save(quotation)
    click.echo(f"Template '{template_id}' applied — written to {output}", err=True)
