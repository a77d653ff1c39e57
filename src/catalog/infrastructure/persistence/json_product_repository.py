"""JSON-file-backed implementation of ProductRepository.

Brand and category are stored inline as ``{"id", "name"}`` snapshots so
the name-based queries need no join.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from pathlib import Path

from catalog.domain.exceptions import CatalogPersistenceError, ValidationError
from catalog.domain.model.brand import Brand
from catalog.domain.model.category import Category
from catalog.domain.model.discount import Discount
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Money
from catalog.domain.repository.product_repository import ProductRepository
from catalog.infrastructure.persistence.json_file import JsonFile


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- ProductRepository interface ------------------------------------------

    def next_id(self) -> int:
        return self._file.next_id()

    def get_by_id(self, product_id: int) -> Product | None:
        for raw in self._file.load():
            if raw["id"] == product_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._file.load()]

    def list_expiring_before(self, cutoff: date) -> list[Product]:
        return [
            p for p in self.list_all()
            if p.expiration_date is not None and p.expiration_date < cutoff
        ]

    def list_by_brand_name(self, brand_name: str) -> list[Product]:
        return [p for p in self.list_all() if p.brand.name.lower() == brand_name.lower()]

    def list_by_category_name(self, category_name: str) -> list[Product]:
        return [
            p for p in self.list_all()
            if p.category.name.lower() == category_name.lower()
        ]

    def save(self, product: Product) -> None:
        if product.id is None:
            product.id = self.next_id()
        self._file.upsert(self._to_raw(product))

    def delete(self, product: Product) -> None:
        records = self._file.load()
        remaining = [raw for raw in records if raw["id"] != product.id]
        if len(remaining) != len(records):
            self._file.persist(remaining)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "price": str(product.price.amount),
            "currency": product.price.currency,
            "stock_quantity": product.stock_quantity,
            "unit_of_measure": product.unit_of_measure,
            "brand": {"id": product.brand.id, "name": product.brand.name},
            "category": {"id": product.category.id, "name": product.category.name},
            "expiration_date": (
                product.expiration_date.isoformat() if product.expiration_date else None
            ),
            "near_expiry_quantity": product.near_expiry_quantity,
            "discounts": [
                {
                    "start_date": d.start_date.isoformat(),
                    "end_date": d.end_date.isoformat(),
                    "discount_type": d.discount_type,
                    "value": str(d.value),
                }
                for d in product.discounts
            ],
        }

    def _to_domain(self, raw: dict) -> Product:
        try:
            expiration = raw.get("expiration_date")
            return Product(
                id=raw["id"],
                name=raw["name"],
                price=Money(Decimal(raw["price"]), raw.get("currency", "USD")),
                stock_quantity=raw["stock_quantity"],
                unit_of_measure=raw.get("unit_of_measure", ""),
                brand=Brand(id=raw["brand"]["id"], name=raw["brand"]["name"]),
                category=Category(id=raw["category"]["id"], name=raw["category"]["name"]),
                expiration_date=date.fromisoformat(expiration) if expiration else None,
                near_expiry_quantity=raw.get("near_expiry_quantity", 0),
                discounts=[
                    Discount(
                        start_date=datetime.fromisoformat(d["start_date"]),
                        end_date=datetime.fromisoformat(d["end_date"]),
                        discount_type=d["discount_type"],
                        value=Decimal(d["value"]),
                    )
                    for d in raw.get("discounts", [])
                ],
            )
        except (KeyError, TypeError, ValueError, ArithmeticError, ValidationError) as exc:
            raise CatalogPersistenceError(
                f"Corrupt product record in {self._file.path}", exc
            ) from exc
