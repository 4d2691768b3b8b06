"""Catalog API endpoints.

Provides product listing with filters and pagination, and product detail
with variant price inheritance.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.api.schemas import (
    ErrorResponse,
    ProductDetailResponse,
    ProductListResponse,
    ProductSchema,
)
from catalog_api.catalog.repository import ProductProvider, ProductRepository
from catalog_api.catalog.service import CatalogService
from catalog_api.domain.exceptions import CatalogStoreError, ProductNotFoundError
from catalog_api.domain.value_objects import CatalogQuery
from catalog_api.infrastructure.database import get_session

router = APIRouter(prefix="/catalog", tags=["Catalog"])


# ============================================================================
# Dependencies
# ============================================================================


def get_product_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> ProductProvider:
    """Get product store bound to the request session."""
    return ProductRepository(session)


def get_service(
    products: Annotated[ProductProvider, Depends(get_product_repository)],
) -> CatalogService:
    """Get catalog service."""
    return CatalogService(products)


# ============================================================================
# Endpoints
# ============================================================================


@router.get(
    "",
    response_model=ProductListResponse,
    responses={500: {"model": ErrorResponse}},
    summary="List products",
    description="List products filtered by category and price, paginated by offset/limit.",
)
async def list_products(
    service: Annotated[CatalogService, Depends(get_service)],
    offset: Annotated[str | None, Query(description="Items to skip (default 0)")] = None,
    limit: Annotated[str | None, Query(description="Page size, 1-100 (default 10)")] = None,
    category: Annotated[str | None, Query(description="Category code")] = None,
    price_lt: Annotated[str | None, Query(description="Strict upper price bound")] = None,
) -> ProductListResponse:
    """List products.

    Malformed query values fall back to their defaults instead of
    failing the request.

    Args:
        service: Catalog service.
        offset: Raw offset.
        limit: Raw limit.
        category: Category code filter.
        price_lt: Price filter.

    Returns:
        Total match count and the requested page.

    Raises:
        HTTPException: If the store fails.
    """
    query = CatalogQuery.from_query(
        offset=offset,
        limit=limit,
        category=category,
        price_lt=price_lt,
    )

    try:
        result = await service.list_products(query)
    except CatalogStoreError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="failed to get products",
        )

    return ProductListResponse(
        total=result.total,
        products=[ProductSchema.model_validate(p) for p in result.items],
    )


@router.get(
    "/{code}",
    response_model=ProductDetailResponse,
    responses={
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Get product details",
    description="Get a product with its category and variants.",
)
async def get_product(
    code: str,
    service: Annotated[CatalogService, Depends(get_service)],
) -> ProductDetailResponse:
    """Get a product by code.

    Variants without their own price are returned with the product price.

    Args:
        code: Product code.
        service: Catalog service.

    Returns:
        Product details.

    Raises:
        HTTPException: If the product is not found or the store fails.
    """
    try:
        detail = await service.get_product(code)
    except ProductNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Product not found",
        )
    except CatalogStoreError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve product",
        )

    return ProductDetailResponse.model_validate(detail)
