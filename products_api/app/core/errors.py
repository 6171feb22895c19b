"""
Plain‑text error responses.

Every failure the API reports is a short ``text/plain`` message with
the matching status code:

* 400 for a malformed product id or a malformed request body,
* 404 for an unknown product or path,
* 405 for an unsupported method on a known path,
* 500 when the clock endpoint cannot load its time zone.

Handlers raise ``HTTPException``; FastAPI's request validation
errors are turned into 400 responses here.
"""

import logging
import re
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

INVALID_PRODUCT_ID = "Invalid product ID"
INVALID_BODY = "Error parsing request body"
INVALID_METHOD = "Invalid request method"
PRODUCT_NOT_FOUND = "Product not found"

_PRODUCT_ID_RE = re.compile(r"[+-]?[0-9]+")

logger = logging.getLogger(__name__)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        message = INVALID_METHOD
    else:
        message = str(exc.detail)
    return PlainTextResponse(message, status_code=exc.status_code, headers=getattr(exc, "headers", None))


def parse_product_id(raw: str) -> Optional[int]:
    """Return the id encoded in a path suffix, or ``None`` if it is not one.

    Only an optional sign followed by ASCII digits is accepted, so
    ``1.0``, `` 1`` and ``1/x`` are rejected.  Ids start at 1.
    """
    if not _PRODUCT_ID_RE.fullmatch(raw):
        return None
    product_id = int(raw)
    return product_id if product_id >= 1 else None


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> PlainTextResponse:
    # A bad path id wins over a bad body.  Syntactically broken JSON is
    # rejected before the id dependency runs, so the raw id is checked
    # here as well.
    errors = exc.errors()
    raw_id = request.path_params.get("product_id")
    if any(error.get("loc", ("",))[0] == "path" for error in errors) or (
        raw_id is not None and parse_product_id(raw_id) is None
    ):
        message = INVALID_PRODUCT_ID
    else:
        message = INVALID_BODY
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, errors)
    return PlainTextResponse(message, status_code=status.HTTP_400_BAD_REQUEST)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the plain‑text handlers to ``app``."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
