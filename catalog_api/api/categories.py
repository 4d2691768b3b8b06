"""Category API endpoints.

Provides endpoints for listing and creating categories.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.api.schemas import (
    CategoryCreateRequest,
    CategorySchema,
    ErrorResponse,
    MessageResponse,
)
from catalog_api.catalog.repository import CategoryProvider, CategoryRepository
from catalog_api.catalog.service import CategoryService
from catalog_api.domain.exceptions import CatalogStoreError
from catalog_api.infrastructure.database import get_session

router = APIRouter(prefix="/categories", tags=["Categories"])


# ============================================================================
# Dependencies
# ============================================================================


def get_category_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> CategoryProvider:
    """Get category store bound to the request session."""
    return CategoryRepository(session)


def get_service(
    categories: Annotated[CategoryProvider, Depends(get_category_repository)],
) -> CategoryService:
    """Get category service."""
    return CategoryService(categories)


# ============================================================================
# Endpoints
# ============================================================================


@router.get(
    "",
    response_model=list[CategorySchema],
    responses={500: {"model": ErrorResponse}},
    summary="List categories",
)
async def list_categories(
    service: Annotated[CategoryService, Depends(get_service)],
) -> list[CategorySchema]:
    """List all categories.

    Raises:
        HTTPException: If the store fails.
    """
    try:
        categories = await service.list_categories()
    except CatalogStoreError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="failed to fetch categories",
        )

    return [CategorySchema.model_validate(c) for c in categories]


@router.post(
    "",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Create category",
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": CategoryCreateRequest.model_json_schema()},
            },
        },
    },
)
async def create_category(
    request: Request,
    service: Annotated[CategoryService, Depends(get_service)],
) -> MessageResponse:
    """Create a category from a JSON body ``{"code": ..., "name": ...}``.

    The body is decoded by hand so that malformed JSON and missing
    fields get distinct 400 messages.

    Args:
        request: Incoming request.
        service: Category service.

    Returns:
        Confirmation message.

    Raises:
        HTTPException: If the body is invalid or the store fails.
    """
    try:
        payload = CategoryCreateRequest.model_validate_json(await request.body())
    except ValidationError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid JSON body",
        )

    if not payload.is_complete:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing code or name",
        )

    try:
        await service.create_category(code=payload.code, name=payload.name)
    except CatalogStoreError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create category",
        )

    return MessageResponse(message="Category created successfully")
