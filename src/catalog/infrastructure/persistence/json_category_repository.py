"""JSON-file-backed implementation of CategoryRepository."""

from __future__ import annotations

from pathlib import Path

from catalog.domain.model.category import Category
from catalog.domain.repository.category_repository import CategoryRepository
from catalog.infrastructure.persistence.json_file import JsonFile


class JsonCategoryRepository(CategoryRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    def get_by_id(self, category_id: int) -> Category | None:
        for raw in self._file.load():
            if raw["id"] == category_id:
                return Category(id=raw["id"], name=raw["name"])
        return None

    def get_by_name(self, name: str) -> Category | None:
        for raw in self._file.load():
            if raw["name"].lower() == name.lower():
                return Category(id=raw["id"], name=raw["name"])
        return None

    def list_all(self) -> list[Category]:
        return [Category(id=raw["id"], name=raw["name"]) for raw in self._file.load()]

    def save(self, category: Category) -> None:
        if category.id is None:
            category.id = self._file.next_id()
        self._file.upsert({"id": category.id, "name": category.name})
