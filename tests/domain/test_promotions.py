"""Unit tests for promotional discount lookup and application."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

from catalog.domain.model.discount import Discount
from catalog.domain.service.pricing import apply_discount, find_active_discount
from tests.builders import make_product

NOW = datetime(2026, 10, 17, 12, 0, tzinfo=timezone.utc)


def _window(start_offset_h: int, end_offset_h: int, kind: str = "PERCENT", value: str = "10") -> Discount:
    return Discount(
        start_date=NOW + timedelta(hours=start_offset_h),
        end_date=NOW + timedelta(hours=end_offset_h),
        discount_type=kind,
        value=Decimal(value),
    )


class TestFindActiveDiscount:

    def test_none_for_empty_collection(self):
        assert find_active_discount(make_product(discounts=[]), NOW) is None

    def test_none_when_no_window_contains_now(self):
        p = make_product(discounts=[_window(-48, -24), _window(1, 24)])
        assert find_active_discount(p, NOW) is None

    def test_returns_the_active_one(self):
        active = _window(-1, 1, value="15")
        p = make_product(discounts=[_window(-48, -24), active])
        assert find_active_discount(p, NOW) is active

    def test_first_match_wins_when_windows_overlap(self):
        first = _window(-5, 5, value="10")
        second = _window(-1, 1, value="50")
        p = make_product(discounts=[first, second])
        assert find_active_discount(p, NOW) is first

    def test_bounds_are_exclusive(self):
        starts_now = Discount(NOW, NOW + timedelta(days=1), "PERCENT", Decimal("10"))
        ends_now = Discount(NOW - timedelta(days=1), NOW, "PERCENT", Decimal("10"))
        p = make_product(discounts=[starts_now, ends_now])
        assert find_active_discount(p, NOW) is None


class TestApplyDiscount:

    def test_percent(self):
        assert apply_discount(Decimal("100"), Decimal("20"), "PERCENT") == Decimal("80")

    def test_percent_is_case_insensitive(self):
        assert apply_discount(Decimal("50"), Decimal("10"), "percent") == Decimal("45")

    def test_fixed(self):
        assert apply_discount(Decimal("100"), Decimal("30"), "FIXED") == Decimal("70")

    def test_fixed_is_floored_at_zero(self):
        assert apply_discount(Decimal("100"), Decimal("150"), "FIXED") == Decimal("0")

    def test_unknown_type_is_a_no_op(self):
        assert apply_discount(Decimal("100"), Decimal("20"), "UNKNOWN") == Decimal("100")
