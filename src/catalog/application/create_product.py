"""Application service: Create Product use case.

Resolves the brand and category foreign keys before the product is
built; a missing one aborts the creation.
"""

from __future__ import annotations

from catalog.application.dto import ProductCreationDTO, ProductDTO
from catalog.application.product_mapper import ProductMapper
from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.repository.brand_repository import BrandRepository
from catalog.domain.repository.category_repository import CategoryRepository
from catalog.domain.repository.product_repository import ProductRepository


class CreateProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        brand_repo: BrandRepository,
        category_repo: CategoryRepository,
    ) -> None:
        self._product_repo = product_repo
        self._brand_repo = brand_repo
        self._category_repo = category_repo

    def handle(self, creation: ProductCreationDTO) -> ProductDTO:
        brand = self._brand_repo.get_by_id(creation.brand_id)
        if brand is None:
            raise EntityNotFoundError(f"Brand not found with id: {creation.brand_id}")

        category = self._category_repo.get_by_id(creation.category_id)
        if category is None:
            raise EntityNotFoundError(
                f"Category not found with id: {creation.category_id}"
            )

        product = ProductMapper.to_entity(creation, brand, category)
        self._product_repo.save(product)
        return ProductMapper.to_dto(product)
