"""
Service layer for the visit log.

Clients post free‑form JSON objects describing a visit (typically the
caller's IP address and whatever else the front end collected).  The
service stamps each document with the server time under ``time`` and
appends it to an in‑memory ``AppendLog``.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, List

from products_api.app.core.store import AppendLog, VisitDocument

logger = logging.getLogger(__name__)

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


class VisitService:
    def __init__(
        self,
        log: AppendLog[VisitDocument],
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.log = log
        self.clock = clock

    def record_visit(self, document: VisitDocument) -> VisitDocument:
        """Store a copy of ``document`` with a ``time`` field added.

        A ``time`` supplied by the caller is overwritten.
        """
        stamped = dict(document)
        stamped["time"] = self.clock().strftime(TIME_FORMAT)
        self.log.append(stamped)
        logger.info("Recorded visit from %s", stamped.get("ip", "unknown address"))
        return stamped

    def list_visits(self) -> List[VisitDocument]:
        return self.log.entries()
