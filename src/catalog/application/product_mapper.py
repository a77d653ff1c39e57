"""Mapping between Product entities and their DTOs (field copy only)."""

from __future__ import annotations

from catalog.application.dto import DiscountDTO, ProductCreationDTO, ProductDTO
from catalog.domain.model.brand import Brand
from catalog.domain.model.category import Category
from catalog.domain.model.discount import Discount
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Money


class ProductMapper:

    @staticmethod
    def to_entity(dto: ProductCreationDTO, brand: Brand, category: Category) -> Product:
        return Product.create(
            name=dto.name,
            price=Money.of(dto.price),
            stock_quantity=dto.stock_quantity,
            unit_of_measure=dto.unit_of_measure,
            brand=brand,
            category=category,
            expiration_date=dto.expiration_date,
        )

    @staticmethod
    def to_dto(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,  # type: ignore[arg-type]
            name=product.name,
            price=str(product.price),
            stock_quantity=product.stock_quantity,
            unit_of_measure=product.unit_of_measure,
            brand_id=product.brand.id,  # type: ignore[arg-type]
            brand_name=product.brand.name,
            category_id=product.category.id,  # type: ignore[arg-type]
            category_name=product.category.name,
            expiration_date=(
                product.expiration_date.isoformat() if product.expiration_date else None
            ),
            near_expiry_quantity=product.near_expiry_quantity,
        )

    @classmethod
    def to_dto_list(cls, products: list[Product]) -> list[ProductDTO]:
        return [cls.to_dto(p) for p in products]

    @staticmethod
    def discount_to_dto(discount: Discount) -> DiscountDTO:
        return DiscountDTO(
            start_date=discount.start_date.isoformat(),
            end_date=discount.end_date.isoformat(),
            discount_type=discount.discount_type,
            value=str(discount.value),
        )
