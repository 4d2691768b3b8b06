"""Domain layer module.

Contains query value objects and domain exceptions.
"""

from catalog_api.domain.exceptions import (
    CatalogStoreError,
    DomainError,
    ProductNotFoundError,
)
from catalog_api.domain.value_objects import (
    DEFAULT_LIMIT,
    MAX_LIMIT,
    MIN_LIMIT,
    CatalogQuery,
    Pagination,
    ProductFilters,
)

__all__ = [
    # Exceptions
    "CatalogStoreError",
    "DomainError",
    "ProductNotFoundError",
    # Value objects
    "CatalogQuery",
    "Pagination",
    "ProductFilters",
    "DEFAULT_LIMIT",
    "MAX_LIMIT",
    "MIN_LIMIT",
]
