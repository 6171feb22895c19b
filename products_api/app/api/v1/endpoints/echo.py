"""
Echo endpoints for API v1.

``GET /echo`` answers with a plain‑text greeting and ``POST /echo``
sends the posted message straight back.  They are handy smoke tests
for clients and load balancers.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from products_api.app.schemas.echo import Message

router = APIRouter()

GREETING = "Welcome to the Products API!"


@router.get("", response_class=PlainTextResponse)
def greet() -> str:
    return GREETING


@router.post("", response_model=Message)
def echo(message: Message) -> Message:
    """Return the posted ``{name, content}`` message unchanged."""
    return message
