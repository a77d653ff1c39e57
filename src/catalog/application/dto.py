"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class ProductCreationDTO:
    """Input: fields needed to create or fully update a product."""

    name: str
    price: str  # e.g. "15.00"
    stock_quantity: int
    unit_of_measure: str
    brand_id: int
    category_id: int
    expiration_date: date | None = None


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product as displayed to the user.

    ``current_price`` and ``has_active_discount`` are only filled in by
    the single-product and list views.
    """

    id: int
    name: str
    price: str  # formatted, e.g. "$15.00"
    stock_quantity: int
    unit_of_measure: str
    brand_id: int
    brand_name: str
    category_id: int
    category_name: str
    expiration_date: str | None
    near_expiry_quantity: int
    current_price: str | None = None
    has_active_discount: bool | None = None


@dataclass(frozen=True)
class BrandDTO:
    id: int
    name: str


@dataclass(frozen=True)
class CategoryDTO:
    id: int
    name: str


@dataclass(frozen=True)
class DiscountDTO:
    start_date: str  # ISO-8601, UTC
    end_date: str
    discount_type: str
    value: str


@dataclass(frozen=True)
class OrderQuoteDTO:
    """Output: what a requested quantity of a product would cost today."""

    product_id: int
    product_name: str
    quantity: int
    unit_price: str
    current_price: str
    total: str
