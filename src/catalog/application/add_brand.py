"""Application service: Add Brand use case."""

from __future__ import annotations

from catalog.application.dto import BrandDTO
from catalog.domain.exceptions import ValidationError
from catalog.domain.model.brand import Brand
from catalog.domain.repository.brand_repository import BrandRepository


class AddBrandHandler:

    def __init__(self, brand_repo: BrandRepository) -> None:
        self._brand_repo = brand_repo

    def handle(self, name: str) -> BrandDTO:
        brand = Brand.create(name)

        if self._brand_repo.get_by_name(brand.name) is not None:
            raise ValidationError(f"Brand '{brand.name}' already exists")

        self._brand_repo.save(brand)
        return BrandDTO(id=brand.id, name=brand.name)  # type: ignore[arg-type]


class ListBrandsHandler:

    def __init__(self, brand_repo: BrandRepository) -> None:
        self._brand_repo = brand_repo

    def handle(self) -> list[BrandDTO]:
        return [BrandDTO(id=b.id, name=b.name) for b in self._brand_repo.list_all()]  # type: ignore[arg-type]
