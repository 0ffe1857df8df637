"""
Error taxonomy for the social posts backend.

Use cases raise these; the API boundary maps each kind to its HTTP status
through ``status_code``. Every error carries a human-readable message that is
safe to return to the caller.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Dict, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class SocialBackendError(Exception):
    """Base exception for all domain errors."""

    status_code: int = 500

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}


# -----------------------------------------------------------------------------
# Client errors
# -----------------------------------------------------------------------------


class InvalidInputError(SocialBackendError):
    """Raised when request fields are missing or malformed."""
    status_code = 400


class UnauthenticatedError(SocialBackendError):
    """Raised when no credentials were presented or they do not match."""
    status_code = 401


class ForbiddenError(SocialBackendError):
    """Raised when a token is rejected or an identity lacks permission."""
    status_code = 403


class NotFoundError(SocialBackendError):
    """Raised when a referenced entity does not exist."""
    status_code = 404


class ConflictError(SocialBackendError):
    """Raised on a uniqueness violation."""
    status_code = 409


# -----------------------------------------------------------------------------
# Server errors
# -----------------------------------------------------------------------------


class InternalError(SocialBackendError):
    """Raised on store or unexpected failures."""
    status_code = 500


class RepositoryError(InternalError):
    """Raised when the persistent store fails."""

    def __init__(self, message: str, operation: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.operation = operation


class ExternalServiceError(InternalError):
    """Raised when an external collaborator (renderer, mail relay) fails."""

    def __init__(self, message: str, service_name: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.service_name = service_name
