"""
Time log endpoints for API v1.

``GET /current-time`` records the current time in the configured zone
and returns it as RFC 3339.  ``GET /logged-times`` lists every time
recorded so far.
"""

import logging
from zoneinfo import ZoneInfoNotFoundError

from fastapi import APIRouter, Depends, HTTPException, status

from products_api.app.api.deps import get_clock_service
from products_api.app.schemas.clock import CurrentTime, LoggedTimes
from products_api.app.services.clock_service import ClockService

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/current-time", response_model=CurrentTime)
def current_time(service: ClockService = Depends(get_clock_service)) -> CurrentTime:
    logger.info("Received request at /current-time endpoint")
    try:
        now = service.log_current_time()
    except (ZoneInfoNotFoundError, ValueError) as e:
        logger.error("Error loading timezone %r: %s", service.time_zone, e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to load timezone",
        ) from e
    return CurrentTime(current_time=now.isoformat(timespec="seconds"))


@router.get("/logged-times", response_model=LoggedTimes)
def logged_times(service: ClockService = Depends(get_clock_service)) -> LoggedTimes:
    logger.info("Received request at /logged-times endpoint")
    return LoggedTimes(timestamps=service.logged_times())
