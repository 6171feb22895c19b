"""
FastAPI dependencies that hand services and parsed path ids to the
endpoints.

The services are created once by ``create_app`` and kept on
``app.state``; handlers receive them through ``Depends`` instead of
importing module‑level singletons.
"""

from fastapi import HTTPException, Request, status

from products_api.app.core.errors import INVALID_PRODUCT_ID, parse_product_id
from products_api.app.services.clock_service import ClockService
from products_api.app.services.product_service import ProductService
from products_api.app.services.visit_service import VisitService


def get_product_service(request: Request) -> ProductService:
    return request.app.state.product_service


def get_visit_service(request: Request) -> VisitService:
    return request.app.state.visit_service


def get_clock_service(request: Request) -> ClockService:
    return request.app.state.clock_service


def get_product_id(product_id: str) -> int:
    """Parse the ``/products/{product_id}`` suffix.

    The route captures the whole remainder of the path, so an empty or
    multi‑segment suffix lands here too and is rejected with 400.
    """
    parsed = parse_product_id(product_id)
    if parsed is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_PRODUCT_ID)
    return parsed
