"""Application service: Update Product use case."""

from __future__ import annotations

from catalog.application.dto import ProductCreationDTO, ProductDTO
from catalog.application.product_mapper import ProductMapper
from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.model.value_objects import Money
from catalog.domain.repository.brand_repository import BrandRepository
from catalog.domain.repository.category_repository import CategoryRepository
from catalog.domain.repository.product_repository import ProductRepository


class UpdateProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        brand_repo: BrandRepository,
        category_repo: CategoryRepository,
    ) -> None:
        self._product_repo = product_repo
        self._brand_repo = brand_repo
        self._category_repo = category_repo

    def handle(self, product_id: int, update: ProductCreationDTO) -> ProductDTO:
        """Overwrite an existing product with the fields in *update*.

        Brand and category are only looked up again when their ID
        actually changed. Foreign keys are resolved before anything on
        the product is touched.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(
                f"Product not found for update with id: {product_id}"
            )

        brand = product.brand
        if brand.id != update.brand_id:
            brand = self._brand_repo.get_by_id(update.brand_id)
            if brand is None:
                raise EntityNotFoundError(f"Brand not found with id: {update.brand_id}")

        category = product.category
        if category.id != update.category_id:
            category = self._category_repo.get_by_id(update.category_id)
            if category is None:
                raise EntityNotFoundError(
                    f"Category not found with id: {update.category_id}"
                )

        product.update_details(
            name=update.name,
            price=Money.of(update.price),
            stock_quantity=update.stock_quantity,
            unit_of_measure=update.unit_of_measure,
            expiration_date=update.expiration_date,
        )
        product.brand = brand
        product.category = category

        self._product_repo.save(product)
        return ProductMapper.to_dto(product)
