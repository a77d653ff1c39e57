"""CLI commands for the Product aggregate."""

from __future__ import annotations

from datetime import datetime

import click

from catalog.application.create_product import CreateProductHandler
from catalog.application.delete_product import DeleteProductHandler
from catalog.application.dto import ProductCreationDTO, ProductDTO
from catalog.application.quote_order import QuoteOrderHandler
from catalog.application.search_products import SearchProductsHandler
from catalog.application.show_product import ListProductsHandler, ShowProductHandler
from catalog.application.update_product import UpdateProductHandler
from catalog.domain.exceptions import DomainException
from catalog.infrastructure.bootstrap import (
    brand_repository,
    category_repository,
    clock,
    product_repository,
)

DATE = click.DateTime(formats=["%Y-%m-%d"])


def _product_fields(func):
    """Options shared by `add` and `update` (update is a full overwrite)."""
    options = [
        click.option("--name", required=True, help="Product name."),
        click.option("--price", required=True, help="Unit price (e.g. 15.00)."),
        click.option("--stock", "stock_quantity", required=True, type=int, help="Units in stock."),
        click.option("--unit", "unit_of_measure", default="pcs", show_default=True, help="Unit of measure."),
        click.option("--brand-id", required=True, type=int, help="Brand ID."),
        click.option("--category-id", required=True, type=int, help="Category ID."),
        click.option("--expires", type=DATE, default=None, help="Expiration date (YYYY-MM-DD)."),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _creation_dto(
    name: str,
    price: str,
    stock_quantity: int,
    unit_of_measure: str,
    brand_id: int,
    category_id: int,
    expires: datetime | None,
) -> ProductCreationDTO:
    return ProductCreationDTO(
        name=name,
        price=price,
        stock_quantity=stock_quantity,
        unit_of_measure=unit_of_measure,
        brand_id=brand_id,
        category_id=category_id,
        expiration_date=expires.date() if expires else None,
    )


def _display_table(products: list[ProductDTO], with_current_price: bool = False) -> None:
    if not products:
        click.echo("No products found.")
        return

    header = (
        f"{'ID':<5} {'Name':<20} {'Brand':<12} {'Category':<12} "
        f"{'Price':>10} {'Stock':>6} {'Critical':>8} {'Expires':>11}"
    )
    if with_current_price:
        header += f" {'Current':>10}"
    click.echo(header)
    click.echo("-" * len(header))
    for p in products:
        line = (
            f"{p.id:<5} {p.name:<20} {p.brand_name:<12} {p.category_name:<12} "
            f"{p.price:>10} {p.stock_quantity:>6} {p.near_expiry_quantity:>8} "
            f"{p.expiration_date or '-':>11}"
        )
        if with_current_price:
            marker = "*" if p.has_active_discount else ""
            line += f" {p.current_price + marker:>10}"
        click.echo(line)


@click.command("add")
@_product_fields
def product_add(**fields) -> None:
    """Add a new product to the catalog."""
    handler = CreateProductHandler(
        product_repo=product_repository(),
        brand_repo=brand_repository(),
        category_repo=category_repository(),
    )

    try:
        dto = handler.handle(_creation_dto(**fields))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{dto.id} '{dto.name}' added at {dto.price}")


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@_product_fields
def product_update(product_id: int, **fields) -> None:
    """Overwrite an existing product."""
    handler = UpdateProductHandler(
        product_repo=product_repository(),
        brand_repo=brand_repository(),
        category_repo=category_repository(),
    )

    try:
        dto = handler.handle(product_id, _creation_dto(**fields))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{dto.id} '{dto.name}' updated")


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_delete(product_id: int) -> None:
    """Remove a product from the catalog."""
    handler = DeleteProductHandler(product_repo=product_repository())

    try:
        dto = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{dto.id} '{dto.name}' deleted")


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_show(product_id: int) -> None:
    """Show a product with today's price."""
    handler = ShowProductHandler(product_repo=product_repository(), clock=clock())

    try:
        p = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{p.id}  {p.name}")
    click.echo(f"Brand:     {p.brand_name} (#{p.brand_id})")
    click.echo(f"Category:  {p.category_name} (#{p.category_id})")
    click.echo(f"Stock:     {p.stock_quantity} {p.unit_of_measure}")
    click.echo(f"Expires:   {p.expiration_date or 'never'}")
    click.echo(f"Critical:  {p.near_expiry_quantity}")
    click.echo(f"Price:     {p.price}")
    click.echo(f"Current:   {p.current_price}" + ("  (discounted)" if p.has_active_discount else ""))


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    handler = ListProductsHandler(product_repo=product_repository(), clock=clock())

    try:
        products = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_table(products, with_current_price=True)


@click.command("expiring")
@click.option("--before", required=True, type=DATE, help="Cutoff date (YYYY-MM-DD).")
def product_expiring(before: datetime) -> None:
    """List products expiring before a date."""
    handler = SearchProductsHandler(product_repo=product_repository())

    try:
        products = handler.expiring_before(before.date())
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_table(products)


@click.command("by-brand")
@click.option("--name", required=True, help="Brand name.")
def product_by_brand(name: str) -> None:
    """List products of a brand."""
    handler = SearchProductsHandler(product_repo=product_repository())

    try:
        products = handler.by_brand_name(name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_table(products)


@click.command("by-category")
@click.option("--name", required=True, help="Category name.")
def product_by_category(name: str) -> None:
    """List products in a category."""
    handler = SearchProductsHandler(product_repo=product_repository())

    try:
        products = handler.by_category_name(name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_table(products)


@click.command("quote")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Units requested.")
@click.option("--date", "on", type=DATE, default=None, help="Price as of this date (default: today).")
def product_quote(product_id: int, quantity: int, on: datetime | None) -> None:
    """Price a quantity of a product, splitting critical and full-price units."""
    handler = QuoteOrderHandler(product_repo=product_repository(), clock=clock())

    try:
        quote = handler.handle(product_id, quantity, on.date() if on else None)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{quote.quantity} x {quote.product_name}")
    click.echo(f"  Unit price:     {quote.unit_price:>10}")
    click.echo(f"  Critical price: {quote.current_price:>10}")
    click.echo(f"  Total:          {quote.total:>10}")
