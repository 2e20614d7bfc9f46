"""
Custom Exceptions

Application-specific exceptions with HTTP status codes and error codes.

Exception Hierarchy:
====================
    PhotopinException (base)
       │
       ├── AuthenticationError (401)        ← Missing or invalid bearer token
       │
       ├── ValidationError (400)            ← Malformed arguments, raised before storage
       │      ├── ArgumentTypeError         ← Wrong type
       │      ├── RequirementError          ← Missing / None
       │      ├── ArgumentValueError        ← Empty or not allowed
       │      └── FormatError               ← Malformed email
       │
       └── LogicError (409)                 ← Any domain rule violation
              ├── NotFoundError (404)       ← User / map / collection / pin missing
              ├── OwnershipError (403)      ← Requester is not the author
              ├── DuplicateResourceError (409)
              ├── CredentialsError (401)    ← Unknown email or wrong password
              └── StorageError (500)        ← Unexpected database failure

Usage:
======
    from photopin.shared.core.exceptions import NotFoundError, OwnershipError

    raise NotFoundError("Map", map_id)
    # Results in: {"error": {"code": "NOT_FOUND", "message": "Map with id 'abc' not found"}}

    raise OwnershipError(f"map {map_id} is not from user {user_id}")

Exception Handling:
===================
    Exceptions are caught by the error handler middleware and converted to JSON:
    {
        "error": {
            "code": "NOT_FOUND",
            "message": "Map with id 'abc-123' not found",
            "details": {}
        }
    }
"""

from typing import Any, Optional


class PhotopinException(Exception):
    """
    Base exception for all PhotoPin application errors.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (default 500)
        error_code: Machine-readable error code
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.error_code = error_code or "INTERNAL_ERROR"
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to dictionary for API response.

        Returns:
            Dictionary with error details for JSON response
        """
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
            }
        }


# ═══════════════════════════════════════════════════════════════════════════════
# AUTHENTICATION ERRORS (401)
# ═══════════════════════════════════════════════════════════════════════════════


class AuthenticationError(PhotopinException):
    """
    Authentication failed error (401 Unauthorized).

    Raised by the API layer when the bearer token is missing, expired or malformed.
    """

    def __init__(
        self,
        message: str = "Authentication failed",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=401,
            error_code="AUTHENTICATION_ERROR",
            details=details,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# VALIDATION ERRORS (400)
# ═══════════════════════════════════════════════════════════════════════════════


class ValidationError(PhotopinException):
    """
    Validation error (400 Bad Request).

    Raised for malformed or missing arguments before any storage access.
    The offending argument name is kept in ``details["field"]``.
    """

    error_code = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        extra_details = details or {}
        if field:
            extra_details["field"] = field
        super().__init__(
            message=message,
            status_code=400,
            error_code=type(self).error_code,
            details=extra_details,
        )


class ArgumentTypeError(ValidationError):
    """Argument has the wrong type."""

    error_code = "TYPE_ERROR"


class RequirementError(ValidationError):
    """Required argument is missing."""

    error_code = "REQUIREMENT_ERROR"


class ArgumentValueError(ValidationError):
    """Argument is empty or holds a value that is not allowed."""

    error_code = "VALUE_ERROR"


class FormatError(ValidationError):
    """Argument is not in the expected format (e.g. email)."""

    error_code = "FORMAT_ERROR"


# ═══════════════════════════════════════════════════════════════════════════════
# LOGIC ERRORS (401, 403, 404, 409, 500)
# ═══════════════════════════════════════════════════════════════════════════════


class LogicError(PhotopinException):
    """
    Domain rule violation.

    Every failure of the domain logic that is not an argument validation
    problem is a LogicError; subclasses only refine the HTTP status.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 409,
        error_code: str = "LOGIC_ERROR",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=status_code,
            error_code=error_code,
            details=details,
        )


class NotFoundError(LogicError):
    """
    Resource not found error (404 Not Found).

    Example:
        raise NotFoundError("Map", map_id)
        # Message: "Map with id 'abc-123' not found"

        raise NotFoundError("Collection", message="collection Trips not found")
    """

    def __init__(
        self,
        resource: str,
        resource_id: Optional[str] = None,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        if message is None:
            message = f"{resource} not found"
            if resource_id:
                message = f"{resource} with id '{resource_id}' not found"
        extra_details = details or {}
        extra_details["resource"] = resource
        super().__init__(
            message=message,
            status_code=404,
            error_code="NOT_FOUND",
            details=extra_details,
        )


class OwnershipError(LogicError):
    """Requester is not the author of the resource (403 Forbidden)."""

    def __init__(
        self,
        message: str = "Access denied",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=403,
            error_code="OWNERSHIP_ERROR",
            details=details,
        )


class DuplicateResourceError(LogicError):
    """
    Duplicate resource error (409 Conflict).

    Example:
        raise DuplicateResourceError(f"user with email {email} already exists")
    """

    def __init__(
        self,
        message: str = "Resource already exists",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=409,
            error_code="CONFLICT",
            details=details,
        )


class CredentialsError(LogicError):
    """Unknown email or wrong password (401 Unauthorized)."""

    def __init__(
        self,
        message: str = "wrong credentials",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=401,
            error_code="CREDENTIALS_ERROR",
            details=details,
        )


class StorageError(LogicError):
    """
    Unexpected database failure (500).

    The driver error is logged by the service but not exposed.
    For multi-step operations ``details["step"]`` names the failing step.
    """

    def __init__(
        self,
        message: str,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=500,
            error_code="STORAGE_ERROR",
            details=details,
        )
