"""Promotional discounts attached to a product.

A discount is a time window with a reduction rule. It is independent of
the expiry-driven pricing in ``catalog.domain.service.pricing``; nothing
composes the two.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum

from catalog.domain.exceptions import ValidationError


class DiscountType(Enum):
    PERCENT = "PERCENT"
    FIXED = "FIXED"


@dataclass(frozen=True)
class Discount:
    """A promotional reduction active strictly between two instants.

    ``discount_type`` is kept as a plain string rather than a
    ``DiscountType`` so that unknown types survive persistence and are
    treated as a no-op when applied.
    """

    start_date: datetime
    end_date: datetime
    discount_type: str
    value: Decimal

    @staticmethod
    def create(
        start_date: datetime,
        end_date: datetime,
        discount_type: str,
        value: Decimal,
    ) -> Discount:
        if start_date.tzinfo is None or end_date.tzinfo is None:
            raise ValidationError("Discount dates must be timezone-aware")
        if end_date <= start_date:
            raise ValidationError("Discount end date must be after its start date")
        if value < Decimal("0"):
            raise ValidationError(f"Discount value cannot be negative, got {value}")
        return Discount(
            start_date=start_date,
            end_date=end_date,
            discount_type=discount_type.strip().upper(),
            value=value,
        )

    def is_active_at(self, now: datetime) -> bool:
        # Both bounds are exclusive.
        return self.start_date < now < self.end_date
