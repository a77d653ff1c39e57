"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from catalog.infrastructure.config import settings
from catalog.infrastructure.persistence.json_brand_repository import (
    JsonBrandRepository,
)
from catalog.infrastructure.persistence.json_category_repository import (
    JsonCategoryRepository,
)
from catalog.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from catalog.infrastructure.system_clock import SystemClock


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(settings.DATA_DIR / "products.json")


def brand_repository() -> JsonBrandRepository:
    return JsonBrandRepository(settings.DATA_DIR / "brands.json")


def category_repository() -> JsonCategoryRepository:
    return JsonCategoryRepository(settings.DATA_DIR / "categories.json")


def clock() -> SystemClock:
    return SystemClock(settings.SWEEP_TIMEZONE or None)
