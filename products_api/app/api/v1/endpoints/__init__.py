"""
Endpoint subpackage for API v1.

Each module defines an APIRouter for one domain (products, echo,
visits, clock).  The routers are aggregated in ``router.py``.
"""
