"""
Visit log endpoints for API v1.

``POST /visits`` accepts any JSON object (usually ``{"ip": ...}`` plus
whatever the front end gathered), stamps it with the server time and
stores it.  ``GET /visits`` returns every stored document in the
order it arrived.  Bodies that are not JSON objects are rejected with
400.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, status

from products_api.app.api.deps import get_visit_service
from products_api.app.services.visit_service import VisitService

router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED)
def record_visit(
    document: Dict[str, Any] = Body(...),
    service: VisitService = Depends(get_visit_service),
) -> Dict[str, Any]:
    return service.record_visit(document)


@router.get("")
def list_visits(service: VisitService = Depends(get_visit_service)) -> List[Dict[str, Any]]:
    return service.list_visits()
