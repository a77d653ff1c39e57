"""Integration tests for the AddDiscount and ShowActiveDiscount use cases."""

from datetime import date, datetime, timezone

import pytest

from catalog.application.add_discount import AddDiscountHandler
from catalog.application.show_active_discount import ShowActiveDiscountHandler
from catalog.domain.exceptions import EntityNotFoundError, ValidationError
from tests.builders import make_product
from tests.fakes import FakeProductRepository, FixedClock

START = datetime(2026, 10, 10, tzinfo=timezone.utc)
END = datetime(2026, 10, 20, tzinfo=timezone.utc)


def _setup():
    repo = FakeProductRepository([make_product(id=1)])
    return AddDiscountHandler(repo), repo


class TestAddDiscount:

    def test_appends_discount(self):
        handler, repo = _setup()
        dto = handler.handle(1, START, END, "percent", "15")
        assert dto.discount_type == "PERCENT"
        assert dto.value == "15"
        assert dto.start_date == "2026-10-10T00:00:00+00:00"
        assert len(repo.get_by_id(1).discounts) == 1

    def test_keeps_insertion_order(self):
        handler, repo = _setup()
        handler.handle(1, START, END, "PERCENT", "10")
        handler.handle(1, START, END, "FIXED", "2")
        assert [d.discount_type for d in repo.get_by_id(1).discounts] == ["PERCENT", "FIXED"]

    def test_unknown_type_is_stored(self):
        handler, repo = _setup()
        handler.handle(1, START, END, "mystery", "5")
        assert repo.get_by_id(1).discounts[0].discount_type == "MYSTERY"

    def test_invalid_value_rejected(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError, match="Invalid discount value"):
            handler.handle(1, START, END, "FIXED", "lots")

    def test_missing_product(self):
        handler, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            handler.handle(5, START, END, "FIXED", "1")


class TestShowActiveDiscount:

    def test_active_discount_returned(self):
        handler, repo = _setup()
        handler.handle(1, START, END, "FIXED", "1.50")
        clock = FixedClock(date(2026, 10, 17))
        dto = ShowActiveDiscountHandler(repo, clock).handle(1)
        assert dto is not None
        assert dto.value == "1.50"

    def test_none_outside_window(self):
        handler, repo = _setup()
        handler.handle(1, START, END, "FIXED", "1.50")
        clock = FixedClock(date(2026, 10, 25))
        assert ShowActiveDiscountHandler(repo, clock).handle(1) is None

    def test_missing_product(self):
        with pytest.raises(EntityNotFoundError):
            ShowActiveDiscountHandler(FakeProductRepository(), FixedClock(date(2026, 10, 17))).handle(1)
