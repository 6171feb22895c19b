"""
Service layer for the time log.

Each call to ``log_current_time`` reads the current time in the
configured zone, appends it to the log as ``YYYY-MM-DD HH:MM:SS`` and
returns the aware ``datetime`` so the endpoint can render it as
RFC 3339.
"""

from __future__ import annotations

import logging
from datetime import datetime, tzinfo
from typing import Callable, List, Optional
from zoneinfo import ZoneInfo

from products_api.app.core.store import AppendLog

logger = logging.getLogger(__name__)

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


class ClockService:
    def __init__(
        self,
        log: AppendLog[str],
        time_zone: str,
        clock: Callable[[Optional[tzinfo]], datetime] = datetime.now,
    ) -> None:
        self.log = log
        self.time_zone = time_zone
        self.clock = clock

    def log_current_time(self) -> datetime:
        """Record and return the current time.

        Raises ``zoneinfo.ZoneInfoNotFoundError`` when the configured
        zone is unknown; nothing is logged in that case.
        """
        now = self.clock(ZoneInfo(self.time_zone))
        self.log.append(now.strftime(TIME_FORMAT))
        logger.debug("Logged time %s", now.isoformat())
        return now

    def logged_times(self) -> List[str]:
        return self.log.entries()
