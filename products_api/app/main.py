"""
Main entrypoint for the Products API.

This module assembles the FastAPI application, sets up logging,
creates the in‑memory stores and includes the versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn products_api.app.main:app --port 8080

Routes are mounted at the root so the catalog lives at ``/products``.
"""

from typing import Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.store import AppendLog, ProductStore
from .services.clock_service import ClockService
from .services.product_service import ProductService
from .services.visit_service import VisitService


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Every call builds fresh, empty stores, so separate apps never
    share state.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use instead of the module‑level ``settings``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings

    # Initialise logging before anything else so that the code below
    # can safely log messages.
    setup_logging(settings)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.settings = settings
    app.state.product_service = ProductService(ProductStore())
    app.state.visit_service = VisitService(AppendLog())
    app.state.clock_service = ClockService(AppendLog(), time_zone=settings.time_zone)

    register_exception_handlers(app)
    app.include_router(v1_router)

    @app.get("/health", tags=["health"])
    def health() -> dict:
        return {"status": "ok"}

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
