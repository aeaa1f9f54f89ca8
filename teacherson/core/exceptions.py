"""
Application exception hierarchy.

Every error raised on purpose by the API derives from BaseAppException so the
registered handlers can render it in one consistent format.
"""

from typing import Any, Dict, Optional

from fastapi import HTTPException, status


class BaseAppException(HTTPException):
    """Base exception for all application errors."""

    def __init__(
        self,
        detail: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        headers: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None,
    ):
        super().__init__(status_code=status_code, detail=detail, headers=headers)
        self.error_code = error_code or self.__class__.__name__


class AuthenticationError(BaseAppException):
    """Raised when a request carries no valid access token."""

    def __init__(self, detail: str = "Could not validate credentials", error_code: Optional[str] = None):
        super().__init__(
            detail,
            status.HTTP_401_UNAUTHORIZED,
            headers={"WWW-Authenticate": "Bearer"},
            error_code=error_code or "AUTH_ERROR",
        )


class PermissionDeniedError(BaseAppException):
    """Raised when the current user may not act on a resource."""

    def __init__(self, detail: str = "Not allowed"):
        super().__init__(detail, status.HTTP_403_FORBIDDEN, error_code="PERMISSION_DENIED")


class ResourceNotFoundError(BaseAppException):
    """Raised when a resource is not found."""

    def __init__(self, resource_type: str, resource_id: str):
        detail = f"{resource_type} with ID '{resource_id}' not found"
        super().__init__(detail, status.HTTP_404_NOT_FOUND, error_code="RESOURCE_NOT_FOUND")


class ResourceAlreadyExistsError(BaseAppException):
    """Raised when attempting to create a duplicate resource."""

    def __init__(self, resource_type: str, identifier: str):
        detail = f"{resource_type} with identifier '{identifier}' already exists"
        super().__init__(detail, status.HTTP_409_CONFLICT, error_code="RESOURCE_EXISTS")


class ValidationError(BaseAppException):
    """Raised when request data breaks a business rule."""

    def __init__(self, detail: str, field: Optional[str] = None):
        error_code = f"VALIDATION_ERROR_{field.upper()}" if field else "VALIDATION_ERROR"
        super().__init__(detail, status.HTTP_400_BAD_REQUEST, error_code=error_code)
