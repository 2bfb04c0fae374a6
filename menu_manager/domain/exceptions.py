"""Domain exceptions.

All domain-level errors raised by the catalog store. The store raises
these at its public boundary; the API layer maps them to HTTP responses.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching domain-specific errors at the application layer.
    """

    error_code = "DOMAIN_ERROR"

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
# Not Found Errors
# ============================================================================


class NotFoundError(DomainError):
    """Base class for unknown-identifier errors."""

    error_code = "NOT_FOUND"


class ProductNotFoundError(NotFoundError):
    """Raised when a product id does not exist in the catalog."""

    error_code = "PRODUCT_NOT_FOUND"

    def __init__(self, product_id: str) -> None:
        """Initialize product not found error.

        Args:
            product_id: The unknown product id.
        """
        super().__init__(
            f"Product not found: {product_id}",
            details={"product_id": product_id},
        )


class CategoryNotFoundError(NotFoundError):
    """Raised when a category id or name does not exist."""

    error_code = "CATEGORY_NOT_FOUND"

    def __init__(self, category: str) -> None:
        """Initialize category not found error.

        Args:
            category: The unknown category id or name.
        """
        super().__init__(
            f"Category not found: {category}",
            details={"category": category},
        )


# ============================================================================
# Validation Errors
# ============================================================================


class ValidationError(DomainError):
    """Raised when input fails a boundary check.

    Only raised for values supplied by a caller. Values derived
    internally (bulk arithmetic, stock floors) are not re-validated.
    """

    error_code = "VALIDATION_ERROR"

    def __init__(self, field: str, reason: str, value: Any = None) -> None:
        """Initialize validation error.

        Args:
            field: Name of the offending field.
            reason: Explanation of why the value is invalid.
            value: The rejected value.
        """
        super().__init__(
            f"Invalid {field}: {reason}",
            details={"field": field, "reason": reason, "value": _printable(value)},
        )
        self.field = field
        self.reason = reason


def _printable(value: Any) -> Any:
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    return str(value)
