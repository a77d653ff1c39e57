"""Application service: Show / List Products use cases (queries).

Both views enrich the plain DTO with today's expiry price and whether
the product is currently selling at a discount.
"""

from __future__ import annotations

from dataclasses import replace

from catalog.application.dto import ProductDTO
from catalog.application.product_mapper import ProductMapper
from catalog.domain.clock import Clock
from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.service.pricing import discounted_unit_price


def enrich(product: Product, clock: Clock) -> ProductDTO:
    current_price = discounted_unit_price(product, clock.today())
    return replace(
        ProductMapper.to_dto(product),
        current_price=str(current_price),
        has_active_discount=(
            current_price < product.price and product.near_expiry_quantity > 0
        ),
    )


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository, clock: Clock) -> None:
        self._product_repo = product_repo
        self._clock = clock

    def handle(self, product_id: int) -> ProductDTO:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product not found with id: {product_id}")
        return enrich(product, self._clock)


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository, clock: Clock) -> None:
        self._product_repo = product_repo
        self._clock = clock

    def handle(self) -> list[ProductDTO]:
        return [enrich(p, self._clock) for p in self._product_repo.list_all()]
