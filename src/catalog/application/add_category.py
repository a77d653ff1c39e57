"""Application service: Add Category use case."""

from __future__ import annotations

from catalog.application.dto import CategoryDTO
from catalog.domain.exceptions import ValidationError
from catalog.domain.model.category import Category
from catalog.domain.repository.category_repository import CategoryRepository


class AddCategoryHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def handle(self, name: str) -> CategoryDTO:
        category = Category.create(name)

        if self._category_repo.get_by_name(category.name) is not None:
            raise ValidationError(f"Category '{category.name}' already exists")

        self._category_repo.save(category)
        return CategoryDTO(id=category.id, name=category.name)  # type: ignore[arg-type]


class ListCategoriesHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def handle(self) -> list[CategoryDTO]:
        return [
            CategoryDTO(id=c.id, name=c.name)  # type: ignore[arg-type]
            for c in self._category_repo.list_all()
        ]
