"""Wall-clock implementation of the domain Clock."""

from __future__ import annotations

from datetime import date, datetime, timezone

import pytz

from catalog.domain.clock import Clock
from catalog.domain.exceptions import ValidationError


class SystemClock(Clock):
    """Reads the real time.

    ``today()`` is evaluated in *timezone_name* when one is given, so the
    sweep rolls over at the business's midnight rather than the server's.
    """

    def __init__(self, timezone_name: str | None = None) -> None:
        self._tz = None
        if timezone_name:
            try:
                self._tz = pytz.timezone(timezone_name)
            except pytz.UnknownTimeZoneError as exc:
                raise ValidationError(f"Unknown timezone: {timezone_name!r}") from exc

    def today(self) -> date:
        if self._tz is None:
            return date.today()
        return datetime.now(self._tz).date()

    def now(self) -> datetime:
        return datetime.now(timezone.utc)
