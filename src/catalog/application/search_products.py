"""Application service: product search queries.

Each query returns plain DTOs and an empty list when nothing matches.
"""

from __future__ import annotations

from datetime import date

from catalog.application.dto import ProductDTO
from catalog.application.product_mapper import ProductMapper
from catalog.domain.repository.product_repository import ProductRepository


class SearchProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def expiring_before(self, cutoff: date) -> list[ProductDTO]:
        """Products that expire before *cutoff*: candidates for clearance."""
        return ProductMapper.to_dto_list(self._product_repo.list_expiring_before(cutoff))

    def by_brand_name(self, brand_name: str) -> list[ProductDTO]:
        return ProductMapper.to_dto_list(self._product_repo.list_by_brand_name(brand_name))

    def by_category_name(self, category_name: str) -> list[ProductDTO]:
        return ProductMapper.to_dto_list(
            self._product_repo.list_by_category_name(category_name)
        )
