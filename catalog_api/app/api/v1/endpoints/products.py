"""
Product endpoints for API v1.

The collection route supports listing with price/name filters and
sorting, and creating products.  The by‑id route only supports GET and
DELETE; any other method is answered with HTTP 405 and an ``Allow``
header.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, Request, Response, status

from catalog_api.app.api.v1.dependencies import get_product_service
from catalog_api.app.core.errors import MethodNotAllowedError
from catalog_api.app.schemas.product import ProductDeleted, ProductList, ProductRead
from catalog_api.app.services.product_service import ProductService

router = APIRouter()


@router.get("", response_model=ProductList)
async def list_products(
    min_price: Optional[str] = Query(None, alias="minPrice", description="Lowest price to include"),
    max_price: Optional[str] = Query(None, alias="maxPrice", description="Highest price to include"),
    name: Optional[str] = Query(None, description="Case-insensitive substring of the name"),
    sort_by: Optional[str] = Query(None, alias="sortBy", description="One of price, name, id"),
    order: Optional[str] = Query(None, description="asc (default) or desc"),
    service: ProductService = Depends(get_product_service),
) -> ProductList:
    """Return products matching the given filters, plus listing metadata.

    Filters combine with AND.  Malformed price bounds are ignored rather
    than rejected; the ``metadata.filters`` object shows what was applied.
    """
    return await service.list_products(
        min_price=min_price,
        max_price=max_price,
        name=name,
        sort_by=sort_by,
        order=order,
    )


@router.post("", response_model=ProductRead, status_code=status.HTTP_201_CREATED)
async def create_product(
    request: Request,
    response: Response,
    body: Dict[str, Any] = Body(...),
    service: ProductService = Depends(get_product_service),
) -> ProductRead:
    """Create a product from ``{"name": str, "price": number}``."""
    product = await service.create_product(body)
    response.headers["Location"] = str(request.app.url_path_for("get_product", product_id=str(product.id)))
    return product


@router.get("/{product_id}", response_model=ProductRead)
async def get_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
) -> ProductRead:
    """Retrieve a single product; 400 for a non‑numeric id, 404 if absent."""
    return await service.get_product(product_id)


@router.delete("/{product_id}", response_model=ProductDeleted)
async def delete_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
) -> ProductDeleted:
    """Delete a product and report how many remain."""
    return await service.delete_product(product_id)


@router.api_route(
    "/{product_id}",
    methods=["POST", "PUT", "PATCH", "OPTIONS", "TRACE"],
    include_in_schema=False,
)
async def product_method_not_allowed(product_id: str) -> None:
    raise MethodNotAllowedError(["GET", "DELETE"])
