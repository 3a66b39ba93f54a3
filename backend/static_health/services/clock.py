"""Process clock used for uptime and timestamps."""

from __future__ import annotations

import time
from datetime import datetime, timezone
from typing import Callable


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """Render ``moment`` as ISO-8601 UTC with millisecond precision and a ``Z`` suffix."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.replace(tzinfo=None).isoformat(timespec="milliseconds") + "Z"


class ProcessClock:
    """Remembers when the process started and reports elapsed time."""

    def __init__(
        self,
        monotonic: Callable[[], float] = time.monotonic,
        wall: Callable[[], datetime] = utc_now,
    ) -> None:
        self._monotonic = monotonic
        self._wall = wall
        self.started_at = monotonic()

    def uptime(self) -> float:
        """Seconds elapsed since the clock was created."""
        return max(self._monotonic() - self.started_at, 0.0)

    def now(self) -> datetime:
        return self._wall()
