"""Integration tests for the UpdateProduct and DeleteProduct use cases."""

from datetime import date

import pytest

from catalog.application.delete_product import DeleteProductHandler
from catalog.application.dto import ProductCreationDTO
from catalog.application.update_product import UpdateProductHandler
from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.model.brand import Brand
from catalog.domain.model.category import Category
from catalog.domain.model.value_objects import Money
from tests.builders import ACME, BAKERY, DAIRY, FARMCO, make_product
from tests.fakes import FakeBrandRepository, FakeCategoryRepository, FakeProductRepository


class CountingBrandRepository(FakeBrandRepository):

    def __init__(self, brands: list[Brand]) -> None:
        super().__init__(brands)
        self.lookups = 0

    def get_by_id(self, brand_id: int) -> Brand | None:
        self.lookups += 1
        return super().get_by_id(brand_id)


class CountingCategoryRepository(FakeCategoryRepository):

    def __init__(self, categories: list[Category]) -> None:
        super().__init__(categories)
        self.lookups = 0

    def get_by_id(self, category_id: int) -> Category | None:
        self.lookups += 1
        return super().get_by_id(category_id)


def _setup():
    product_repo = FakeProductRepository([make_product(id=1, stock_quantity=10, near_expiry_quantity=6)])
    brand_repo = CountingBrandRepository([ACME, FARMCO])
    category_repo = CountingCategoryRepository([DAIRY, BAKERY])
    handler = UpdateProductHandler(product_repo, brand_repo, category_repo)
    return handler, product_repo, brand_repo, category_repo


def _update(**overrides) -> ProductCreationDTO:
    fields = dict(
        name="Organic Milk",
        price="4.10",
        stock_quantity=8,
        unit_of_measure="l",
        brand_id=ACME.id,
        category_id=DAIRY.id,
        expiration_date=date(2026, 11, 2),
    )
    fields.update(overrides)
    return ProductCreationDTO(**fields)


class TestUpdateProduct:

    def test_overwrites_plain_fields(self):
        handler, product_repo, _, _ = _setup()
        dto = handler.handle(1, _update())
        saved = product_repo.get_by_id(1)
        assert dto.name == "Organic Milk"
        assert saved.price == Money.of("4.10")
        assert saved.stock_quantity == 8
        assert saved.unit_of_measure == "l"
        assert saved.expiration_date == date(2026, 11, 2)

    def test_unchanged_relations_are_not_looked_up(self):
        handler, _, brand_repo, category_repo = _setup()
        handler.handle(1, _update())
        assert brand_repo.lookups == 0
        assert category_repo.lookups == 0

    def test_changed_relations_are_resolved(self):
        handler, product_repo, brand_repo, category_repo = _setup()
        dto = handler.handle(1, _update(brand_id=FARMCO.id, category_id=BAKERY.id))
        assert dto.brand_name == "FarmCo"
        assert dto.category_name == "Bakery"
        assert brand_repo.lookups == 1
        assert category_repo.lookups == 1
        assert product_repo.get_by_id(1).brand == FARMCO

    def test_missing_product(self):
        handler, _, _, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Product not found for update with id: 7"):
            handler.handle(7, _update())

    def test_missing_brand_leaves_product_untouched(self):
        handler, product_repo, _, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Brand not found with id: 99"):
            handler.handle(1, _update(brand_id=99))
        assert product_repo.get_by_id(1).name == "Milk"

    def test_missing_category(self):
        handler, _, _, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Category not found with id: 99"):
            handler.handle(1, _update(category_id=99))


class TestDeleteProduct:

    def test_deletes_and_returns_product(self):
        repo = FakeProductRepository([make_product(id=3, name="Bread")])
        dto = DeleteProductHandler(repo).handle(3)
        assert dto.id == 3
        assert dto.name == "Bread"
        assert repo.get_by_id(3) is None

    def test_missing_product(self):
        with pytest.raises(EntityNotFoundError, match="Product not found with id: 3"):
            DeleteProductHandler(FakeProductRepository()).handle(3)
