"""Unit tests for the Product aggregate and its FK targets."""

from datetime import date, datetime, timezone
from decimal import Decimal

import pytest

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.brand import Brand
from catalog.domain.model.category import Category
from catalog.domain.model.discount import Discount
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Money
from tests.builders import ACME, DAIRY, make_product


class TestProductCreate:

    def test_create_strips_and_starts_unflagged(self):
        p = Product.create(
            name="  Yogurt ",
            price=Money.of("2.50"),
            stock_quantity=12,
            unit_of_measure=" pcs ",
            brand=ACME,
            category=DAIRY,
            expiration_date=date(2026, 10, 30),
        )
        assert p.id is None
        assert p.name == "Yogurt"
        assert p.unit_of_measure == "pcs"
        assert p.near_expiry_quantity == 0
        assert p.discounts == []

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            Product.create("  ", Money.of("1"), 1, "pcs", ACME, DAIRY)

    def test_zero_price_rejected(self):
        with pytest.raises(ValidationError, match="greater than zero"):
            Product.create("Milk", Money.of("0"), 1, "pcs", ACME, DAIRY)

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Product.create("Milk", Money.of("1"), -1, "pcs", ACME, DAIRY)


class TestProductUpdate:

    def test_update_details_overwrites_fields(self):
        p = make_product()
        p.update_details("Whole Milk", Money.of("12"), 4, "l", date(2027, 1, 1))
        assert p.name == "Whole Milk"
        assert p.price == Money.of("12")
        assert p.stock_quantity == 4
        assert p.unit_of_measure == "l"
        assert p.expiration_date == date(2027, 1, 1)

    def test_update_details_clamps_near_expiry_to_new_stock(self):
        p = make_product(stock_quantity=10, near_expiry_quantity=8)
        p.update_details("Milk", Money.of("10"), 3, "pcs", None)
        assert p.near_expiry_quantity == 3

    def test_new_expiration_date_clears_near_expiry_latch(self):
        p = make_product(stock_quantity=10, near_expiry_quantity=10,
                         expiration_date=date(2026, 10, 20))
        p.update_details("Milk", Money.of("10"), 50, "pcs", date(2026, 11, 16))
        assert p.near_expiry_quantity == 0

    def test_same_expiration_date_keeps_near_expiry(self):
        p = make_product(stock_quantity=10, near_expiry_quantity=10,
                         expiration_date=date(2026, 10, 20))
        p.update_details("Milk", Money.of("10"), 50, "pcs", date(2026, 10, 20))
        assert p.near_expiry_quantity == 10


class TestLotTransitions:

    def test_days_to_expiry(self):
        p = make_product(expiration_date=date(2026, 10, 20))
        assert p.days_to_expiry(date(2026, 10, 17)) == 3
        assert p.days_to_expiry(date(2026, 10, 21)) == -1

    def test_days_to_expiry_none_without_date(self):
        assert make_product().days_to_expiry(date(2026, 10, 17)) is None

    def test_mark_near_expiry_flags_whole_stock(self):
        p = make_product(stock_quantity=7)
        p.mark_near_expiry()
        assert p.near_expiry_quantity == 7

    def test_remove_expired_unit_moves_both_counters(self):
        p = make_product(stock_quantity=5, near_expiry_quantity=2)
        p.remove_expired_unit()
        assert (p.stock_quantity, p.near_expiry_quantity) == (4, 1)

    def test_remove_expired_unit_leaves_zero_near_expiry(self):
        p = make_product(stock_quantity=5, near_expiry_quantity=0)
        p.remove_expired_unit()
        assert (p.stock_quantity, p.near_expiry_quantity) == (4, 0)

    def test_remove_expired_unit_without_stock_rejected(self):
        with pytest.raises(ValidationError, match="No stock left"):
            make_product(stock_quantity=0).remove_expired_unit()


class TestDiscountCreate:

    START = datetime(2026, 10, 1, tzinfo=timezone.utc)
    END = datetime(2026, 10, 31, tzinfo=timezone.utc)

    def test_type_is_normalised(self):
        d = Discount.create(self.START, self.END, " percent ", Decimal("10"))
        assert d.discount_type == "PERCENT"

    def test_unknown_type_is_accepted(self):
        d = Discount.create(self.START, self.END, "bogo", Decimal("1"))
        assert d.discount_type == "BOGO"

    def test_end_before_start_rejected(self):
        with pytest.raises(ValidationError, match="after its start"):
            Discount.create(self.END, self.START, "FIXED", Decimal("1"))

    def test_naive_dates_rejected(self):
        with pytest.raises(ValidationError, match="timezone-aware"):
            Discount.create(datetime(2026, 10, 1), datetime(2026, 10, 2), "FIXED", Decimal("1"))

    def test_negative_value_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Discount.create(self.START, self.END, "FIXED", Decimal("-5"))


class TestBrandAndCategory:

    def test_brand_name_required(self):
        with pytest.raises(ValidationError, match="Brand name is required"):
            Brand.create("")

    def test_category_name_stripped(self):
        assert Category.create(" Dairy ").name == "Dairy"
