"""Brand entity, a foreign-key target for products."""

from __future__ import annotations

from dataclasses import dataclass

from catalog.domain.exceptions import ValidationError


@dataclass
class Brand:

    id: int | None
    name: str

    @staticmethod
    def create(name: str) -> Brand:
        if not name or not name.strip():
            raise ValidationError("Brand name is required")
        return Brand(id=None, name=name.strip())
