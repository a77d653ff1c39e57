import click

from catalog.infrastructure.cli.brand_commands import brand_add, brand_list
from catalog.infrastructure.cli.category_commands import category_add, category_list
from catalog.infrastructure.cli.discount_commands import discount_active, discount_add
from catalog.infrastructure.cli.product_commands import (
    product_add,
    product_by_brand,
    product_by_category,
    product_delete,
    product_expiring,
    product_list,
    product_quote,
    product_show,
    product_update,
)
from catalog.infrastructure.cli.sweep_commands import sweep_run, sweep_schedule
from catalog.infrastructure.logging_config import setup_logging


@click.group()
def cli() -> None:
    """Catalog: products, brands, categories and expiry pricing"""
    setup_logging()


@cli.group()
def brand() -> None:
    """Manage brands."""


@cli.group()
def category() -> None:
    """Manage categories."""


@cli.group()
def product() -> None:
    """Manage products."""


@product.group()
def discount() -> None:
    """Manage promotional discounts."""


@cli.group()
def sweep() -> None:
    """Daily lot sweep."""


# Register subcommands
brand.add_command(brand_add)
brand.add_command(brand_list)
category.add_command(category_add)
category.add_command(category_list)
product.add_command(product_add)
product.add_command(product_by_brand)
product.add_command(product_by_category)
product.add_command(product_delete)
product.add_command(product_expiring)
product.add_command(product_list)
product.add_command(product_quote)
product.add_command(product_show)
product.add_command(product_update)
discount.add_command(discount_add)
discount.add_command(discount_active)
sweep.add_command(sweep_run)
sweep.add_command(sweep_schedule)
