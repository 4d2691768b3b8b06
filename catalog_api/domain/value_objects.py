"""Value objects for catalog queries.

Normalizes raw query-string values into pagination and filter parameters.
Malformed input never raises: every value degrades to its default.
"""

import re
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Self

DEFAULT_OFFSET = 0
DEFAULT_LIMIT = 10
MIN_LIMIT = 1
MAX_LIMIT = 100

# Signed 64-bit range accepted for integer query values
INT_MIN = -(2**63)
INT_MAX = 2**63 - 1

# Decimal exponents representable as a double; larger values overflow,
# smaller ones round to zero.
MAX_PRICE_EXPONENT = 308
MIN_PRICE_EXPONENT = -324

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_DECIMAL_PATTERN = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|[+-]?(?:inf|infinity|nan)",
    re.IGNORECASE,
)


def parse_int(raw: str | None) -> int | None:
    """Parse an optional integer string.

    Only ASCII digits with an optional sign are accepted: no whitespace,
    underscores or non-ASCII digits.

    Args:
        raw: Raw query-string value.

    Returns:
        Parsed integer, or None if missing, not an integer or outside
        the signed 64-bit range.
    """
    if not raw or not _INT_PATTERN.fullmatch(raw):
        return None
    value = int(raw)
    if not INT_MIN <= value <= INT_MAX:
        return None
    return value


def parse_decimal(raw: str | None) -> Decimal | None:
    """Parse an optional decimal string.

    Non-finite values (NaN, Infinity) and values too large for a double
    are rejected. Values too small for a double become zero.

    Args:
        raw: Raw query-string value.

    Returns:
        Parsed decimal, or None if missing or unparsable.
    """
    if not raw or not _DECIMAL_PATTERN.fullmatch(raw):
        return None
    try:
        value = Decimal(raw)
    except (InvalidOperation, ValueError):
        return None
    if not value.is_finite():
        return None
    if value.is_zero():
        return value
    if value.adjusted() > MAX_PRICE_EXPONENT:
        return None
    if value.adjusted() < MIN_PRICE_EXPONENT:
        return Decimal(0)
    return value


@dataclass(frozen=True)
class Pagination:
    """Offset/limit window over a result set.

    Attributes:
        offset: Number of items to skip (never negative).
        limit: Maximum items to return, within [MIN_LIMIT, MAX_LIMIT].
    """

    offset: int = DEFAULT_OFFSET
    limit: int = DEFAULT_LIMIT

    @classmethod
    def from_query(cls, offset: str | None = None, limit: str | None = None) -> Self:
        """Build pagination from raw query-string values.

        Args:
            offset: Raw offset; missing, non-numeric or negative means 0.
            limit: Raw limit; missing or non-numeric means 10, otherwise
                clamped to [1, 100].

        Returns:
            Normalized Pagination.
        """
        parsed_offset = parse_int(offset)
        if parsed_offset is None or parsed_offset < 0:
            parsed_offset = DEFAULT_OFFSET

        parsed_limit = parse_int(limit)
        if parsed_limit is None:
            parsed_limit = DEFAULT_LIMIT
        parsed_limit = max(MIN_LIMIT, min(parsed_limit, MAX_LIMIT))

        return cls(offset=parsed_offset, limit=parsed_limit)


@dataclass(frozen=True)
class ProductFilters:
    """Conjunctive product filters.

    Attributes:
        category_code: Exact category code, or None for any category.
        price_less_than: Strict upper bound on product price, or None.
    """

    category_code: str | None = None
    price_less_than: Decimal | None = None

    @classmethod
    def from_query(
        cls,
        category: str | None = None,
        price_lt: str | None = None,
    ) -> Self:
        """Build filters from raw query-string values.

        Args:
            category: Raw category code; empty means no filter.
            price_lt: Raw price bound; unparsable means no filter.

        Returns:
            Normalized ProductFilters.
        """
        return cls(
            category_code=category or None,
            price_less_than=parse_decimal(price_lt),
        )

    def matches(self, category_code: str, price: Decimal) -> bool:
        """Check whether a product satisfies every active filter."""
        if self.category_code is not None and category_code != self.category_code:
            return False
        if self.price_less_than is not None and not price < self.price_less_than:
            return False
        return True


@dataclass(frozen=True)
class CatalogQuery:
    """A normalized catalog listing request."""

    pagination: Pagination = field(default_factory=Pagination)
    filters: ProductFilters = field(default_factory=ProductFilters)

    @classmethod
    def from_query(
        cls,
        offset: str | None = None,
        limit: str | None = None,
        category: str | None = None,
        price_lt: str | None = None,
    ) -> Self:
        """Build a catalog query from raw query-string values."""
        return cls(
            pagination=Pagination.from_query(offset, limit),
            filters=ProductFilters.from_query(category, price_lt),
        )
