"""Abstract repository for Brand entities."""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.brand import Brand


class BrandRepository(ABC):

    @abstractmethod
    def get_by_id(self, brand_id: int) -> Brand | None:
        """Return a brand by its ID, or None if not found."""

    @abstractmethod
    def get_by_name(self, name: str) -> Brand | None:
        """Return a brand by its name (case-insensitive), or None."""

    @abstractmethod
    def list_all(self) -> list[Brand]:
        """Return every brand."""

    @abstractmethod
    def save(self, brand: Brand) -> None:
        """Persist a new or updated brand, assigning an ID if it has none."""
