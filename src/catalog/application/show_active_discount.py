"""Application service: Show Active Discount use case (query)."""

from __future__ import annotations

from catalog.application.dto import DiscountDTO
from catalog.application.product_mapper import ProductMapper
from catalog.domain.clock import Clock
from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.service.pricing import find_active_discount


class ShowActiveDiscountHandler:

    def __init__(self, product_repo: ProductRepository, clock: Clock) -> None:
        self._product_repo = product_repo
        self._clock = clock

    def handle(self, product_id: int) -> DiscountDTO | None:
        """Return the promotion running right now for a product, if any."""
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product not found with id: {product_id}")

        discount = find_active_discount(product, self._clock.now())
        if discount is None:
            return None
        return ProductMapper.discount_to_dto(discount)
