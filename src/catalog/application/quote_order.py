"""Application service: Quote Order use case (query).

Prices a requested quantity of one product for a given day, using the
blended expiry pricing. Nothing is reserved or persisted.
"""

from __future__ import annotations

from datetime import date

from catalog.application.dto import OrderQuoteDTO
from catalog.domain.clock import Clock
from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.model.value_objects import Quantity
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.service.pricing import compute_order_price, discounted_unit_price


class QuoteOrderHandler:

    def __init__(self, product_repo: ProductRepository, clock: Clock) -> None:
        self._product_repo = product_repo
        self._clock = clock

    def handle(self, product_id: int, quantity: int, on: date | None = None) -> OrderQuoteDTO:
        qty = Quantity(quantity)

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product not found with id: {product_id}")

        today = on or self._clock.today()
        total = compute_order_price(product, qty.value, today)

        return OrderQuoteDTO(
            product_id=product.id,  # type: ignore[arg-type]
            product_name=product.name,
            quantity=qty.value,
            unit_price=str(product.price),
            current_price=str(discounted_unit_price(product, today)),
            total=str(total),
        )
