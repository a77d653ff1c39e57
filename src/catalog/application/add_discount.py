"""Application service: Add Discount use case.

Attaches a promotional discount window to a product. The discount type
is stored as given; types other than PERCENT and FIXED are accepted and
simply have no effect when applied.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal, InvalidOperation

from catalog.application.dto import DiscountDTO
from catalog.application.product_mapper import ProductMapper
from catalog.domain.exceptions import EntityNotFoundError, ValidationError
from catalog.domain.model.discount import Discount
from catalog.domain.repository.product_repository import ProductRepository


class AddDiscountHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: int,
        start_date: datetime,
        end_date: datetime,
        discount_type: str,
        value: str,
    ) -> DiscountDTO:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product not found with id: {product_id}")

        try:
            amount = Decimal(value)
        except InvalidOperation as exc:
            raise ValidationError(f"Invalid discount value: {value!r}") from exc

        discount = Discount.create(start_date, end_date, discount_type, amount)
        product.add_discount(discount)
        self._product_repo.save(product)
        return ProductMapper.discount_to_dto(discount)
