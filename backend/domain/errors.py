"""
Custom domain exceptions for consistent error handling.

These exceptions are mapped to HTTP status codes by the exception handlers
in main.py. Every error renders as { "success": false, "message": ... };
there is no machine-readable error code.
"""
from fastapi import HTTPException, status

from domain.constants import GENERIC_FAILURE_MESSAGE


class DomainError(HTTPException):
    """Base class for all domain-specific errors."""
    def __init__(self, message: str, status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(status_code=status_code, detail=message)
        self.message = message


class NotFoundError(DomainError):
    """Resource not found (404)."""
    def __init__(self, message: str):
        super().__init__(message, status_code=status.HTTP_404_NOT_FOUND)


class ValidationError(DomainError):
    """Validation error (400)."""
    def __init__(self, message: str, field: str | None = None):
        if field:
            message = f"Validation error on {field}: {message}"
        super().__init__(message, status_code=status.HTTP_400_BAD_REQUEST)


class PaymentVerificationError(ValidationError):
    """Payment signature missing or does not match (400)."""
    def __init__(self, message: str = "Payment verification failed"):
        super().__init__(message)


class ServiceError(DomainError):
    """Upstream or unexpected failure (500). The cause is logged, never returned."""
    def __init__(self, message: str = GENERIC_FAILURE_MESSAGE):
        super().__init__(message, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
