"""Product catalog API endpoints.

- GET /api/products - list products with reviews
- POST /api/products - add a product
- PUT /api/products/{id} - replace product fields
- DELETE /api/products/{id} - delete a product
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from showroom.api.errors import to_http_exception
from showroom.api.schemas import (
    DeleteResponse,
    ErrorResponse,
    ProductCreateRequest,
    ProductResponse,
    ProductUpdateRequest,
)
from showroom.application.catalog_service import CatalogService, get_catalog_service
from showroom.domain.entities import Product
from showroom.domain.exceptions import DomainError

router = APIRouter(prefix="/api/products", tags=["Products"])


def product_to_response(product: Product) -> ProductResponse:
    """Convert Product entity to response schema."""
    return ProductResponse(**product.to_dict())


@router.get(
    "",
    response_model=list[ProductResponse],
    summary="List products",
)
async def list_products(
    service: Annotated[CatalogService, Depends(get_catalog_service)],
) -> list[ProductResponse]:
    """List every product in the catalog."""
    try:
        products = await service.list_products()
    except DomainError as e:
        raise to_http_exception(e) from e
    return [product_to_response(p) for p in products]


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_200_OK,
    responses={
        400: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Add product",
)
async def add_product(
    request: ProductCreateRequest,
    service: Annotated[CatalogService, Depends(get_catalog_service)],
) -> ProductResponse:
    """Add a product. The id is assigned by the store."""
    try:
        product = await service.add_product(request.model_dump(exclude_unset=True))
    except DomainError as e:
        raise to_http_exception(e) from e
    return product_to_response(product)


@router.put(
    "/{product_id}",
    response_model=ProductResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Update product",
)
async def update_product(
    product_id: int,
    request: ProductUpdateRequest,
    service: Annotated[CatalogService, Depends(get_catalog_service)],
) -> ProductResponse:
    """Replace the catalog fields present in the body."""
    try:
        product = await service.update_product(
            product_id, request.model_dump(exclude_unset=True)
        )
    except DomainError as e:
        raise to_http_exception(e) from e
    return product_to_response(product)


@router.delete(
    "/{product_id}",
    response_model=DeleteResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Delete product",
)
async def delete_product(
    product_id: int,
    service: Annotated[CatalogService, Depends(get_catalog_service)],
) -> DeleteResponse:
    """Delete a product together with its reviews and review tokens."""
    try:
        await service.delete_product(product_id)
    except DomainError as e:
        raise to_http_exception(e) from e
    return DeleteResponse()
