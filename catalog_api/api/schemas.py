"""API schemas for the Catalog API.

Pydantic models for request/response validation and serialization.
"""

from decimal import Decimal
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, model_validator

# Exact decimal internally, JSON number on the wire.
Price = Annotated[
    Decimal,
    PlainSerializer(float, return_type=float, when_used="json"),
]


# ============================================================================
# Common Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response.

    All API errors follow this format for consistency.
    """

    error: str = Field(..., description="Human-readable error message")


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str


# ============================================================================
# Category Schemas
# ============================================================================


class CategorySchema(BaseModel):
    """Category representation."""

    model_config = ConfigDict(from_attributes=True)

    code: str = Field(..., description="Unique category code")
    name: str = Field(..., description="Display name")


class CategoryCreateRequest(BaseModel):
    """Request to create a category.

    Both fields are optional at the schema level so that a missing field
    is reported as "Missing code or name" rather than a validation error.
    """

    code: str | None = None
    name: str | None = None

    @model_validator(mode="before")
    @classmethod
    def null_body_has_no_fields(cls, data: Any) -> Any:
        """Treat a JSON null body as an empty object."""
        return {} if data is None else data

    @property
    def is_complete(self) -> bool:
        """Check that both code and name are non-empty."""
        return bool(self.code) and bool(self.name)


# ============================================================================
# Product Schemas
# ============================================================================


class ProductSchema(BaseModel):
    """Product entry of a catalog listing."""

    model_config = ConfigDict(from_attributes=True)

    code: str
    price: Price
    category: CategorySchema


class ProductListResponse(BaseModel):
    """Paginated product listing."""

    total: int = Field(..., description="Matches before pagination")
    products: list[ProductSchema]


class VariantSchema(BaseModel):
    """Variant with its effective price."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    sku: str
    price: Price


class ProductDetailResponse(BaseModel):
    """Single product with variants."""

    model_config = ConfigDict(from_attributes=True)

    code: str
    price: Price
    category: CategorySchema
    variants: list[VariantSchema]
