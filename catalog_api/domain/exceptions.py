"""Domain exceptions.

Errors raised by the catalog stores and services. The HTTP layer maps
them to status codes with fixed, client-safe messages.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching domain-specific errors at the application layer.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# Catalog Errors
# ============================================================================


class ProductNotFoundError(DomainError):
    """Raised when no product exists for the requested code."""

    def __init__(self, code: str) -> None:
        """Initialize product not found error.

        Args:
            code: Requested product code.
        """
        super().__init__(
            f"Product {code!r} not found",
            details={"code": code},
        )


class CatalogStoreError(DomainError):
    """Raised when the backing store fails to answer a query.

    Wraps driver errors so callers never see storage specifics.
    """

    def __init__(self, operation: str, reason: str | None = None) -> None:
        """Initialize store error.

        Args:
            operation: Store operation that failed (e.g. "get_by_code").
            reason: Optional underlying error description, for logs only.
        """
        super().__init__(
            f"Catalog store operation '{operation}' failed",
            details={"operation": operation, "reason": reason},
        )
        self.operation = operation
