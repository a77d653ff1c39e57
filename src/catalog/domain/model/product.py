"""Product aggregate.

A product belongs to one brand and one category, carries its own stock
level and, for perishable goods, an expiration date. The near-expiry
quantity is the slice of stock that qualifies for the expiry discount;
only the daily lot sweep moves it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.brand import Brand
from catalog.domain.model.category import Category
from catalog.domain.model.discount import Discount
from catalog.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog.

    Use ``Product.create()`` for new products; it enforces the
    business rules. The ``__init__`` stays simple so repositories can
    reconstitute persisted products without re-validating.

    Invariant: ``0 <= near_expiry_quantity <= stock_quantity``.
    """

    id: int | None
    name: str
    price: Money
    stock_quantity: int
    unit_of_measure: str
    brand: Brand
    category: Category
    expiration_date: date | None = None
    near_expiry_quantity: int = 0
    discounts: list[Discount] = field(default_factory=list)

    # --- Factory (used for NEW products only) ---------------------------------

    @staticmethod
    def create(
        name: str,
        price: Money,
        stock_quantity: int,
        unit_of_measure: str,
        brand: Brand,
        category: Category,
        expiration_date: date | None = None,
    ) -> Product:
        _validate_details(name, price, stock_quantity)
        return Product(
            id=None,
            name=name.strip(),
            price=price,
            stock_quantity=stock_quantity,
            unit_of_measure=unit_of_measure.strip(),
            brand=brand,
            category=category,
            expiration_date=expiration_date,
        )

    # --- Mutations ------------------------------------------------------------

    def update_details(
        self,
        name: str,
        price: Money,
        stock_quantity: int,
        unit_of_measure: str,
        expiration_date: date | None,
    ) -> None:
        """Overwrite the plain fields of the product.

        Brand and category are handled separately by the caller since
        they need to be resolved through their repositories. A new
        expiration date starts a new lot, so the near-expiry latch is
        cleared for the sweep to fire again.
        """
        _validate_details(name, price, stock_quantity)
        self.name = name.strip()
        self.price = price
        self.stock_quantity = stock_quantity
        self.unit_of_measure = unit_of_measure.strip()
        if expiration_date != self.expiration_date:
            self.near_expiry_quantity = 0
        self.expiration_date = expiration_date
        self.near_expiry_quantity = min(self.near_expiry_quantity, stock_quantity)

    def add_discount(self, discount: Discount) -> None:
        self.discounts.append(discount)

    # --- Lot transitions (driven by the daily sweep) --------------------------

    def days_to_expiry(self, today: date) -> int | None:
        """Whole days until expiration; negative once expired, None if it never expires."""
        if self.expiration_date is None:
            return None
        return (self.expiration_date - today).days

    def mark_near_expiry(self) -> None:
        """Flag the whole current stock as critical."""
        self.near_expiry_quantity = self.stock_quantity

    def remove_expired_unit(self) -> None:
        """Take one spoiled unit off the shelf."""
        if self.stock_quantity <= 0:
            raise ValidationError(f"No stock left to remove for {self.name}")
        self.stock_quantity -= 1
        if self.near_expiry_quantity > 0:
            self.near_expiry_quantity -= 1


def _validate_details(name: str, price: Money, stock_quantity: int) -> None:
    if not name or not name.strip():
        raise ValidationError("Product name is required")
    if price.amount <= 0:
        raise ValidationError("Product price must be greater than zero")
    if stock_quantity < 0:
        raise ValidationError(
            f"Stock quantity cannot be negative, got {stock_quantity}"
        )
