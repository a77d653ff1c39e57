"""CLI commands for brands."""

from __future__ import annotations

import click

from catalog.application.add_brand import AddBrandHandler, ListBrandsHandler
from catalog.domain.exceptions import DomainException
from catalog.infrastructure.bootstrap import brand_repository


@click.command("add")
@click.option("--name", required=True, help="Brand name.")
def brand_add(name: str) -> None:
    """Add a new brand."""
    try:
        dto = AddBrandHandler(brand_repo=brand_repository()).handle(name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Brand #{dto.id} '{dto.name}' added")


@click.command("list")
def brand_list() -> None:
    """List all brands."""
    try:
        brands = ListBrandsHandler(brand_repo=brand_repository()).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not brands:
        click.echo("No brands found.")
        return

    click.echo(f"{'ID':<6} {'Name':<30}")
    click.echo("-" * 37)
    for b in brands:
        click.echo(f"{b.id:<6} {b.name:<30}")
