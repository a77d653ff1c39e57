"""Application service: Run Lot Sweep use case.

The daily trigger lives outside this handler (``catalog sweep
schedule`` or any external timer); this is just the call it makes.
"""

from __future__ import annotations

from datetime import date

from catalog.domain.clock import Clock
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.service.lot_sweep import LotSweepService, SweepReport


class RunLotSweepHandler:

    def __init__(self, product_repo: ProductRepository, clock: Clock) -> None:
        self._product_repo = product_repo
        self._clock = clock

    def handle(self, on: date | None = None) -> SweepReport:
        svc = LotSweepService(self._product_repo)
        return svc.run(on or self._clock.today())
