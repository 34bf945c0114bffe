"""CLI commands for quotation templates."""

from __future__ import annotations

from pathlib import Path

import click

from quotes.domain.exceptions import DomainException
from quotes.infrastructure.bootstrap import template_repository


@click.command("list")
@click.option("--templates", "templates_path", required=True,
              type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help="JSON template catalog.")
def template_list(templates_path: Path) -> None:
    """List the templates in a catalog."""
    try:
        templates = template_repository(templates_path).list_all()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not templates:
        click.echo("No templates found.")
        return

    click.echo(f"{'ID':<12} {'Name':<24} {'Lines':>5} {'Tax %':>6}")
    click.echo("-" * 50)
    for t in templates:
        click.echo(f"{t.id:<12} {t.name:<24} {len(t.line_items):>5} {str(t.tax_rate):>6}")
