"""
Application package initializer.

The application is split into small pieces: configuration and the
in‑memory stores live in ``core``, request and response models in
``schemas``, business logic in ``services`` and the HTTP routes in
``api/v1/endpoints``.
"""

from .main import app  # noqa: F401
