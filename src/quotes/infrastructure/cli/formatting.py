"""Table rendering shared by the CLI commands."""

from __future__ import annotations

import dataclasses
import json
from decimal import Decimal

import click

from quotes.application.dto import QuotationDTO, TotalsDTO
from quotes.domain.model.value_objects import format_amount


def money(amount: str, symbol: str) -> str:
    return format_amount(Decimal(amount), symbol)


def echo_json(dto: object) -> None:
    click.echo(json.dumps(dataclasses.asdict(dto), indent=2, ensure_ascii=False))


def display_totals(totals: TotalsDTO, symbol: str, width: int = 67) -> None:
    rows = [
        ("Subtotal", totals.subtotal),
        ("Discount", totals.discount),
        ("After discount", totals.subtotal_after_discount),
        (f"Tax ({totals.tax_rate}%)", totals.tax_amount),
    ]
    for label, amount in rows:
        click.echo(f"  {label:<27} {money(amount, symbol):>{width - 28}}")
    click.echo(f"  {'-' * width}")
    click.echo(f"  {'Total':<27} {money(totals.total_amount, symbol):>{width - 28}}")


def display_quotation(dto: QuotationDTO, symbol: str) -> None:
    """Shared formatting for displaying a quotation."""
    heading = dto.quote_number or "Quotation (unsaved)"
    click.echo(f"{heading}  (status={dto.status})")
    if dto.title:
        click.echo(f"Title:    {dto.title}")
    if dto.client_name:
        click.echo(f"Client:   {dto.client_name}")
    if dto.valid_until:
        click.echo(f"Valid to: {dto.valid_until}")
    click.echo()

    click.echo(
        f"  {'Item':<20} {'Qty':>8} {'Price':>12} {'Disc %':>7} {'Total':>15}"
    )
    click.echo(f"  {'-' * 67}")
    for item in dto.items:
        marker = "" if item.name.strip() else "  (not counted)"
        click.echo(
            f"  {item.name or '-':<20} {item.quantity:>8} "
            f"{money(item.unit_price, symbol):>12} {item.discount_percent:>7} "
            f"{money(item.line_total, symbol):>15}{marker}"
        )
    click.echo(f"  {'-' * 67}")
    display_totals(dto.totals, symbol)
