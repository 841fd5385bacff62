"""Domain exceptions for the shop admin service.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class ShopAdminException(Exception):
    """Base exception for all shop admin errors.

    Presentation layer maps these to HTTP responses using message,
    error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON error body used by the exception handlers."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(ShopAdminException):
    """Raised when input validation fails (e.g. invalid format or range)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class ResourceNotFoundException(ShopAdminException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str | int) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'user', 'address').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": str(resource_id)},
        )


class RoleNotFoundException(ShopAdminException):
    """Raised when one or more submitted role ids do not resolve to a role."""

    def __init__(self, role_ids: list[str]) -> None:
        """Initialize with every role id that failed to resolve.

        Args:
            role_ids: Submitted ids (as given) with no matching role.
        """
        super().__init__(
            f"Role not found: {', '.join(role_ids)}",
            "ROLE_NOT_FOUND",
            {"role_ids": role_ids},
        )


class UserHasOrdersException(ShopAdminException):
    """Raised when deleting a user who still owns orders."""

    def __init__(self, user_id: int, order_count: int) -> None:
        super().__init__(
            "Cannot delete a user with orders",
            "USER_HAS_ORDERS",
            {"user_id": user_id, "order_count": order_count},
        )


class DuplicateEmailException(ShopAdminException):
    """Raised when creating or updating a user to an email that is already registered."""

    def __init__(self) -> None:
        super().__init__(
            "Email is already registered",
            "DUPLICATE_EMAIL",
            {"field": "email"},
        )


class SqlNotConfiguredException(ShopAdminException):
    """Raised when an operation requires Postgres but DATABASE_URL is not set."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
