"""Small factory for test products."""

from __future__ import annotations

from datetime import date

from catalog.domain.model.brand import Brand
from catalog.domain.model.category import Category
from catalog.domain.model.discount import Discount
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Money

DAIRY = Category(id=1, name="Dairy")
BAKERY = Category(id=2, name="Bakery")
ACME = Brand(id=1, name="Acme")
FARMCO = Brand(id=2, name="FarmCo")


def make_product(
    id: int | None = 1,
    name: str = "Milk",
    price: str = "10.00",
    stock_quantity: int = 10,
    expiration_date: date | None = None,
    near_expiry_quantity: int = 0,
    brand: Brand = ACME,
    category: Category = DAIRY,
    discounts: list[Discount] | None = None,
) -> Product:
    return Product(
        id=id,
        name=name,
        price=Money.of(price),
        stock_quantity=stock_quantity,
        unit_of_measure="pcs",
        brand=brand,
        category=category,
        expiration_date=expiration_date,
        near_expiry_quantity=near_expiry_quantity,
        discounts=list(discounts or []),
    )
