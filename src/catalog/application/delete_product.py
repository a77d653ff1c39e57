"""Application service: Delete Product use case."""

from __future__ import annotations

from catalog.application.dto import ProductDTO
from catalog.application.product_mapper import ProductMapper
from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.repository.product_repository import ProductRepository


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int) -> ProductDTO:
        """Delete a product and return it as confirmation."""
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product not found with id: {product_id}")

        self._product_repo.delete(product)
        return ProductMapper.to_dto(product)
