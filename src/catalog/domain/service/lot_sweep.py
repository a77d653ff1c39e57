"""Domain service: daily lot-criticality sweep.

Run once per day over the whole catalog. For each product with an
expiration date, two transitions are checked:

  Activation  within 0..7 days of expiry and not yet flagged, with stock on
              hand, so the whole stock becomes near-expiry. Fires once per
              expiration cycle.
  Decay       past expiry with stock left, so one unit is removed,
              and one near-expiry unit with it if any remain.

A product can only match one of them in a given run.

The sweep is split in two phases: ``sweep_lots`` computes and applies
the transitions in memory, then ``LotSweepService`` persists each
changed product on its own. Persistence is best-effort per product:
a failed save is logged and reported, and the loop moves on.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from enum import Enum

from catalog.domain.exceptions import CatalogPersistenceError
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)

NEAR_EXPIRY_WINDOW_DAYS = 7


class LotChange(Enum):
    ACTIVATED = "ACTIVATED"
    DECAYED = "DECAYED"


@dataclass(frozen=True)
class LotTransition:
    product: Product
    change: LotChange


@dataclass
class SweepReport:
    """Outcome of one sweep run, as lists of product IDs."""

    run_date: date
    activated: list[int] = field(default_factory=list)
    decayed: list[int] = field(default_factory=list)
    saved: list[int] = field(default_factory=list)
    failed: list[int] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return not self.failed


def sweep_lots(products: list[Product], today: date) -> list[LotTransition]:
    """Apply the daily lot transitions to *products* in memory.

    Returns one transition per product that changed; untouched products
    are left out.
    """
    transitions: list[LotTransition] = []

    for product in products:
        days = product.days_to_expiry(today)
        if days is None:
            continue

        if (
            0 <= days <= NEAR_EXPIRY_WINDOW_DAYS
            and product.near_expiry_quantity == 0
            and product.stock_quantity > 0
        ):
            product.mark_near_expiry()
            logger.warning(
                "Critical lot activated: %s now has %d unit(s) at expiry discount",
                product.name,
                product.near_expiry_quantity,
            )
            transitions.append(LotTransition(product, LotChange.ACTIVATED))

        if days < 0 and product.stock_quantity > 0:
            product.remove_expired_unit()
            logger.debug(
                "Expired unit removed from %s (stock=%d, near-expiry=%d)",
                product.name,
                product.stock_quantity,
                product.near_expiry_quantity,
            )
            transitions.append(LotTransition(product, LotChange.DECAYED))

    return transitions


class LotSweepService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def run(self, today: date) -> SweepReport:
        """Sweep the whole catalog for *today* and persist what changed."""
        logger.info("Running lot sweep for %s", today.isoformat())
        report = SweepReport(run_date=today)

        transitions = sweep_lots(self._product_repo.list_all(), today)

        for transition in transitions:
            product = transition.product
            if transition.change is LotChange.ACTIVATED:
                report.activated.append(product.id)
            else:
                report.decayed.append(product.id)

            try:
                self._product_repo.save(product)
            except CatalogPersistenceError as exc:
                logger.error("Could not save product #%s (%s): %s", product.id, product.name, exc)
                report.failed.append(product.id)
                continue
            report.saved.append(product.id)

        logger.info(
            "Lot sweep finished: %d activated, %d decayed, %d saved, %d failed",
            len(report.activated),
            len(report.decayed),
            len(report.saved),
            len(report.failed),
        )
        return report
