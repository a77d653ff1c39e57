"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.

Lookups by id return None when nothing matches; list queries return
an empty list, never None.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date

from catalog.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Generate the next unique product ID."""

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def list_expiring_before(self, cutoff: date) -> list[Product]:
        """Return products whose expiration date is strictly before *cutoff*."""

    @abstractmethod
    def list_by_brand_name(self, brand_name: str) -> list[Product]:
        """Return products of the named brand."""

    @abstractmethod
    def list_by_category_name(self, category_name: str) -> list[Product]:
        """Return products in the named category."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product, assigning an ID if it has none."""

    @abstractmethod
    def delete(self, product: Product) -> None:
        """Remove a product from the catalog."""
