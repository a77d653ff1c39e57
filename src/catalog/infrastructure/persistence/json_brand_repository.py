"""JSON-file-backed implementation of BrandRepository."""

from __future__ import annotations

from pathlib import Path

from catalog.domain.model.brand import Brand
from catalog.domain.repository.brand_repository import BrandRepository
from catalog.infrastructure.persistence.json_file import JsonFile


class JsonBrandRepository(BrandRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    def get_by_id(self, brand_id: int) -> Brand | None:
        for raw in self._file.load():
            if raw["id"] == brand_id:
                return Brand(id=raw["id"], name=raw["name"])
        return None

    def get_by_name(self, name: str) -> Brand | None:
        for raw in self._file.load():
            if raw["name"].lower() == name.lower():
                return Brand(id=raw["id"], name=raw["name"])
        return None

    def list_all(self) -> list[Brand]:
        return [Brand(id=raw["id"], name=raw["name"]) for raw in self._file.load()]

    def save(self, brand: Brand) -> None:
        if brand.id is None:
            brand.id = self._file.next_id()
        self._file.upsert({"id": brand.id, "name": brand.name})
