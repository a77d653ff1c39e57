"""Domain service: expiry pricing and promotional discounts.

Two independent mechanisms live here:

* Expiry pricing: a tiered multiplier driven by days to expiration,
  applied only to the slice of stock the lot sweep flagged as critical.
* Promotional discounts: time-boxed ``Discount`` records attached to a
  product, looked up and applied on their own.

No caller combines the two. Every function is pure: no I/O and no
mutation, so they are safe to call concurrently.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from decimal import Decimal

from catalog.domain.model.discount import Discount, DiscountType
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Money

logger = logging.getLogger(__name__)

NO_DISCOUNT = Decimal("1")


def expiry_multiplier(days_to_expiry: int) -> Decimal:
    """Price multiplier for a product *days_to_expiry* days from expiring.

    Tiers, first match wins:
      < 1 day (including already expired) -> 0.25
      1-3 days                            -> 0.50
      4-7 days                            -> 0.80
      more than 7 days                    -> 1
    """
    if days_to_expiry < 1:
        return Decimal("0.25")
    if days_to_expiry <= 3:
        return Decimal("0.50")
    if days_to_expiry <= 7:
        return Decimal("0.80")
    return NO_DISCOUNT


def discounted_unit_price(product: Product, today: date) -> Money:
    """Price of one critical unit of *product* on *today*.

    Products without an expiration date are never discounted.
    """
    days = product.days_to_expiry(today)
    if days is None:
        return product.price

    multiplier = expiry_multiplier(days)
    if multiplier == NO_DISCOUNT:
        return product.price
    return product.price * multiplier


def compute_order_price(product: Product, requested_qty: int, today: date) -> Money:
    """Total price for *requested_qty* units of *product* on *today*.

    Only the units already flagged near-expiry are sold at the
    discounted price; anything beyond that is billed at full price.
    Quantities are not validated here.
    """
    if product.stock_quantity <= 0:
        return Money.zero(product.price.currency)

    discounted = discounted_unit_price(product, today)

    if discounted == product.price or product.near_expiry_quantity <= 0:
        return product.price * requested_qty

    qty_at_discount = min(requested_qty, product.near_expiry_quantity)
    qty_at_full_price = max(0, requested_qty - qty_at_discount)

    total = discounted * qty_at_discount + product.price * qty_at_full_price

    logger.info(
        "Blended price for %s: %d unit(s) at %s, %d at full price %s",
        product.name,
        qty_at_discount,
        discounted,
        qty_at_full_price,
        product.price,
    )
    return total


def find_active_discount(product: Product, now: datetime) -> Discount | None:
    """First discount, in collection order, whose window strictly contains *now*."""
    for discount in product.discounts:
        if discount.is_active_at(now):
            return discount
    return None


def apply_discount(
    original_price: Decimal,
    value: Decimal,
    discount_type: str,
) -> Decimal:
    """Apply a promotional reduction to *original_price*.

    ``PERCENT`` takes *value* percent off; ``FIXED`` subtracts *value*
    and never goes below zero. Any other type leaves the price as is.
    """
    kind = discount_type.upper()
    if kind == DiscountType.PERCENT.value:
        return original_price * (1 - value / 100)
    if kind == DiscountType.FIXED.value:
        return max(original_price - value, Decimal("0"))
    return original_price
