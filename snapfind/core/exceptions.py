"""
Exception hierarchy for the SnapFind service layer.

Every error carries a technical message for the logs and a short
user-facing message that the app can show as an alert.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Dict, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class SnapFindError(Exception):
    """Base exception for all SnapFind errors."""

    def __init__(
        self,
        message: str,
        user_message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.user_message = user_message or "An error occurred. Please try again."
        self.details = details or {}


# -----------------------------------------------------------------------------
# Input / identity
# -----------------------------------------------------------------------------


class ValidationError(SnapFindError):
    """Raised when input validation fails."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("user_message", message)
        super().__init__(message, **kwargs)


class AuthenticationError(SnapFindError):
    """Raised when no usable owner id is available for an operation."""

    def __init__(self, message: str = "No authenticated user", **kwargs):
        kwargs.setdefault("user_message", "Please sign in to continue.")
        super().__init__(message, **kwargs)


class NotFoundError(SnapFindError):
    """Raised when a picture or object does not exist for the owner."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("user_message", message)
        super().__init__(message, **kwargs)


# -----------------------------------------------------------------------------
# Stores
# -----------------------------------------------------------------------------


class RemoteStoreError(SnapFindError):
    """Raised when a remote table read or write fails."""

    def __init__(self, message: str, operation: Optional[str] = None, **kwargs):
        kwargs.setdefault("user_message", "Could not reach the server. Please try again.")
        super().__init__(message, **kwargs)
        self.operation = operation


class LocalCacheError(SnapFindError):
    """Raised when the on-device cache cannot be read or written."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("user_message", "Local storage is unavailable.")
        super().__init__(message, **kwargs)


# -----------------------------------------------------------------------------
# External services
# -----------------------------------------------------------------------------


class ExternalServiceError(SnapFindError):
    """Base exception for external service errors."""

    def __init__(
        self,
        message: str,
        service_name: Optional[str] = None,
        **kwargs,
    ):
        super().__init__(message, **kwargs)
        self.service_name = service_name


class StorageServiceError(ExternalServiceError):
    """Raised when object storage operations fail."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("user_message", f"Storage error: {message}")
        super().__init__(message, service_name="Storage", **kwargs)


class VisionServiceError(ExternalServiceError):
    """Raised when the vision API cannot be used."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("user_message", "Image analysis is unavailable right now.")
        super().__init__(message, service_name="Vision", **kwargs)


# -----------------------------------------------------------------------------
# Safe user-facing message
# -----------------------------------------------------------------------------

def get_user_message(exc: BaseException) -> str:
    """
    Return a safe, user-facing message for any exception.
    Use this at API/use-case boundaries so internal details are never exposed.
    """
    if isinstance(exc, SnapFindError) and getattr(exc, "user_message", None):
        return exc.user_message
    return "Something went wrong. Please try again."
