"""Clock interface.

Pricing and the lot sweep depend on "today" and "now"; both are read
through this abstraction so tests can pin them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date, datetime


class Clock(ABC):

    @abstractmethod
    def today(self) -> date:
        """Current calendar date in the catalog's business timezone."""

    @abstractmethod
    def now(self) -> datetime:
        """Current instant as a timezone-aware UTC datetime."""
