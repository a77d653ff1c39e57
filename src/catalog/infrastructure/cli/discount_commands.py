"""CLI commands for promotional discounts."""

from __future__ import annotations

from datetime import datetime, timezone

import click

from catalog.application.add_discount import AddDiscountHandler
from catalog.application.show_active_discount import ShowActiveDiscountHandler
from catalog.domain.exceptions import DomainException
from catalog.infrastructure.bootstrap import clock, product_repository

# Naive inputs are read as UTC.
INSTANT = click.DateTime(formats=["%Y-%m-%d", "%Y-%m-%dT%H:%M", "%Y-%m-%dT%H:%M:%S"])


def _as_utc(value: datetime) -> datetime:
    return value.replace(tzinfo=timezone.utc)


@click.command("add")
@click.option("--product-id", required=True, type=int, help="Product ID.")
@click.option("--start", required=True, type=INSTANT, help="Start instant (UTC).")
@click.option("--end", required=True, type=INSTANT, help="End instant (UTC).")
@click.option("--type", "discount_type", required=True, help="PERCENT or FIXED.")
@click.option("--value", required=True, help="Percentage or fixed amount.")
def discount_add(
    product_id: int,
    start: datetime,
    end: datetime,
    discount_type: str,
    value: str,
) -> None:
    """Attach a promotional discount to a product."""
    handler = AddDiscountHandler(product_repo=product_repository())

    try:
        dto = handler.handle(product_id, _as_utc(start), _as_utc(end), discount_type, value)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"{dto.discount_type} discount of {dto.value} added to product #{product_id} "
        f"({dto.start_date} -> {dto.end_date})"
    )


@click.command("active")
@click.option("--product-id", required=True, type=int, help="Product ID.")
def discount_active(product_id: int) -> None:
    """Show the promotional discount running right now, if any."""
    handler = ShowActiveDiscountHandler(product_repo=product_repository(), clock=clock())

    try:
        dto = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if dto is None:
        click.echo(f"No active discount for product #{product_id}.")
        return

    click.echo(
        f"{dto.discount_type} {dto.value}  ({dto.start_date} -> {dto.end_date})"
    )
