"""Custom exceptions for the Omedeto API."""
from typing import Any, Dict, Optional


class OmedetoException(Exception):
    """Base exception for the Omedeto API."""

    def __init__(
        self,
        message: str,
        error_code: str = "INTERNAL_ERROR",
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class DatabaseError(OmedetoException):
    """Storage connectivity or query errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code="STORAGE_ERROR",
            status_code=500,
            details=details,
        )


class ConfigurationError(OmedetoException):
    """Configuration-related errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code="CONFIGURATION_ERROR",
            status_code=500,
            details=details,
        )


class AuthenticationError(OmedetoException):
    """No bearer token was presented."""

    def __init__(
        self,
        message: str = "Authentication required",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            error_code="UNAUTHENTICATED",
            status_code=401,
            details=details,
        )


class InvalidCredentialsError(OmedetoException):
    """Login credentials did not match the admin account."""

    def __init__(
        self,
        message: str = "Invalid credentials",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            error_code="INVALID_CREDENTIALS",
            status_code=401,
            details=details,
        )


class AuthorizationError(OmedetoException):
    """Token present but invalid, expired or not an admin token."""

    def __init__(
        self, message: str = "Invalid token", details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            error_code="FORBIDDEN",
            status_code=403,
            details=details,
        )


class ValidationError(OmedetoException):
    """Input validation errors."""

    def __init__(
        self,
        message: str,
        field: str = None,
        error_code: str = "MISSING_FIELDS",
        details: Optional[Dict[str, Any]] = None,
    ):
        error_details = details or {}
        if field:
            error_details["field"] = field

        super().__init__(
            message=message,
            error_code=error_code,
            status_code=400,
            details=error_details,
        )


class NotFoundError(OmedetoException):
    """Resource not found errors."""

    def __init__(
        self,
        resource: str,
        identifier: str = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        message = f"{resource} not found"
        if identifier:
            message += f": {identifier}"

        error_details = details or {}
        error_details["resource"] = resource
        if identifier:
            error_details["identifier"] = identifier

        super().__init__(
            message=message,
            error_code="NOT_FOUND",
            status_code=404,
            details=error_details,
        )
