"""Date/time rendering for ``{strftime, epoch}`` arguments."""

import time
from abc import ABC, abstractmethod


class Clock(ABC):
    """Formats a timestamp with a strftime-style format string."""

    @abstractmethod
    def format(self, spec: str, timestamp: int) -> str:
        """Render ``timestamp`` (seconds since the epoch) using ``spec``."""


class LocalTimeClock(Clock):
    """Renders timestamps in the local time zone.

    Month and weekday names follow the process locale, which the caller
    selects with ``locale.setlocale(locale.LC_TIME, ...)``.
    """

    def format(self, spec: str, timestamp: int) -> str:
        return time.strftime(spec, time.localtime(timestamp))


class UTCClock(Clock):
    """Renders timestamps in UTC."""

    def format(self, spec: str, timestamp: int) -> str:
        return time.strftime(spec, time.gmtime(timestamp))
