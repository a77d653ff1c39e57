"""CLI commands for categories."""

from __future__ import annotations

import click

from catalog.application.add_category import AddCategoryHandler, ListCategoriesHandler
from catalog.domain.exceptions import DomainException
from catalog.infrastructure.bootstrap import category_repository


@click.command("add")
@click.option("--name", required=True, help="Category name.")
def category_add(name: str) -> None:
    """Add a new category."""
    try:
        dto = AddCategoryHandler(category_repo=category_repository()).handle(name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Category #{dto.id} '{dto.name}' added")


@click.command("list")
def category_list() -> None:
    """List all categories."""
    try:
        categories = ListCategoriesHandler(category_repo=category_repository()).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not categories:
        click.echo("No categories found.")
        return

    click.echo(f"{'ID':<6} {'Name':<30}")
    click.echo("-" * 37)
    for c in categories:
        click.echo(f"{c.id:<6} {c.name:<30}")
