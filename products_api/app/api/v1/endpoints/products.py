"""
Product endpoints for API v1.

These routes expose CRUD operations on the in‑memory catalog:

* ``POST /products`` creates a product and returns it with its new id,
* ``GET /products`` lists every product ordered by id,
* ``GET``, ``PUT`` and ``DELETE`` on ``/products/{id}`` read, replace
  and remove a single product.

Handlers are plain ``def`` functions, so the server runs each request
on a worker thread; the store's lock keeps every operation atomic.
Item routes capture the whole path suffix, so ``/products/``,
``/products/1.0`` and ``/products/1/x`` all reach ``get_product_id`` and
are rejected with 400.  Malformed bodies are reported as 400 by the
validation handler in ``core.errors``.
"""

from typing import Annotated, List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from products_api.app.api.deps import get_product_id, get_product_service
from products_api.app.core.errors import PRODUCT_NOT_FOUND
from products_api.app.schemas.product import ProductRead, ProductWrite
from products_api.app.services.product_service import ProductService

router = APIRouter()

ProductId = Annotated[int, Depends(get_product_id)]


@router.get("", response_model=List[ProductRead])
def list_products(service: ProductService = Depends(get_product_service)) -> List[ProductRead]:
    """Return all products; an empty catalog yields ``[]``."""
    return service.list_products()


@router.post("", response_model=ProductRead, status_code=status.HTTP_201_CREATED)
def create_product(
    product_in: ProductWrite,
    service: ProductService = Depends(get_product_service),
) -> ProductRead:
    """Create a product.  Any ``id`` in the body is ignored."""
    return service.create_product(product_in)


@router.get("/{product_id:path}", response_model=ProductRead)
def get_product(
    product_id: ProductId,
    service: ProductService = Depends(get_product_service),
) -> ProductRead:
    product = service.get_product(product_id)
    if product is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=PRODUCT_NOT_FOUND)
    return product


@router.put("/{product_id:path}", response_model=ProductRead)
def update_product(
    product_id: ProductId,
    product_in: ProductWrite,
    service: ProductService = Depends(get_product_service),
) -> ProductRead:
    """Replace a product.  The id always comes from the path."""
    product = service.update_product(product_id, product_in)
    if product is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=PRODUCT_NOT_FOUND)
    return product


@router.delete("/{product_id:path}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_product(
    product_id: ProductId,
    service: ProductService = Depends(get_product_service),
) -> Response:
    if not service.delete_product(product_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=PRODUCT_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
