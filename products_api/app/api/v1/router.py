"""
Top‑level router for version 1 of the API.

This router aggregates the domain routers.  When new domains are
introduced, update this file to include their routers.
"""

from fastapi import APIRouter

from .endpoints import clock, echo, products, visits

router = APIRouter()

router.include_router(products.router, prefix="/products", tags=["products"])
router.include_router(echo.router, prefix="/echo", tags=["echo"])
router.include_router(visits.router, prefix="/visits", tags=["visits"])
# The clock router defines its own top-level paths.
router.include_router(clock.router, tags=["clock"])
