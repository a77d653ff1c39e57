"""CLI commands for the daily lot sweep."""

from __future__ import annotations

import logging
import time
from datetime import datetime

import click
import schedule

from catalog.application.run_lot_sweep import RunLotSweepHandler
from catalog.domain.exceptions import DomainException
from catalog.domain.service.lot_sweep import SweepReport
from catalog.infrastructure.bootstrap import clock, product_repository
from catalog.infrastructure.config import settings

logger = logging.getLogger(__name__)

POLL_SECONDS = 30


def _run_sweep(on: datetime | None = None) -> SweepReport:
    handler = RunLotSweepHandler(product_repo=product_repository(), clock=clock())
    return handler.handle(on.date() if on else None)


@click.command("run")
@click.option("--date", "on", type=click.DateTime(formats=["%Y-%m-%d"]), default=None,
              help="Sweep as of this date (default: today).")
def sweep_run(on: datetime | None) -> None:
    """Run the lot sweep once."""
    try:
        report = _run_sweep(on)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Lot sweep for {report.run_date.isoformat()}")
    click.echo(f"  Activated: {len(report.activated)}")
    click.echo(f"  Decayed:   {len(report.decayed)}")
    click.echo(f"  Saved:     {len(report.saved)}")

    if report.failed:
        ids = ", ".join(f"#{pid}" for pid in report.failed)
        raise click.ClickException(f"{len(report.failed)} product(s) could not be saved: {ids}")


def _scheduled_job() -> None:
    try:
        _run_sweep()
    except DomainException:
        logger.exception("Scheduled lot sweep failed")


@click.command("schedule")
def sweep_schedule() -> None:
    """Run the lot sweep every day at SWEEP_AT until interrupted."""
    tz = settings.SWEEP_TIMEZONE or None
    schedule.every().day.at(settings.SWEEP_AT, tz).do(_scheduled_job)
    logger.info("Lot sweep scheduled daily at %s (%s)", settings.SWEEP_AT, tz or "server time")

    try:
        while True:
            schedule.run_pending()
            time.sleep(POLL_SECONDS)
    except KeyboardInterrupt:
        logger.info("Scheduler stopped")
