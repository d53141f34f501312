# src/spacedash/exceptions.py

"""Custom exception hierarchy for SpaceDash.

This module provides a structured exception hierarchy that enables:
1. Proper HTTP status code mapping in API endpoints
2. Detailed error context for logging and debugging
3. Clear distinction between client errors and collaborator failures

Malformed fields inside stored records are deliberately absent from this
hierarchy: the record normalizer absorbs them by falling back to defaults.
"""

from __future__ import annotations


class SpaceDashError(Exception):
    """Base exception for all SpaceDash errors.

    Attributes:
        message: Human-readable error description
        details: Optional dict with additional context for logging/debugging
    """

    def __init__(self, message: str, details: dict | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)


# =============================================================================
# Validation Errors (HTTP 400)
# =============================================================================


class ValidationError(SpaceDashError):
    """Base class for request validation errors."""

    pass


class MissingParameterError(ValidationError):
    """Raised when a required identifier is absent from the request."""

    def __init__(self, parameter: str) -> None:
        super().__init__(
            message=f"Missing required parameter: {parameter}",
            details={"parameter": parameter},
        )


# =============================================================================
# Resource Not Found Errors (HTTP 404)
# =============================================================================


class ResourceNotFoundError(SpaceDashError):
    """Base class for resource not found errors."""

    pass


class PlayerStatsNotFoundError(ResourceNotFoundError):
    """Raised when no stats record exists for a username."""

    def __init__(self, username: str) -> None:
        super().__init__(
            message=f"Player stats for '{username}' not found",
            details={"username": username},
        )


class UserNotFoundError(ResourceNotFoundError):
    """Raised when no user account exists for a username."""

    def __init__(self, username: str) -> None:
        super().__init__(
            message=f"User '{username}' not found",
            details={"username": username},
        )


class AssetNotFoundError(ResourceNotFoundError):
    """Raised when a character asset cannot be located in the catalog."""

    def __init__(self, message: str, prefix: str, colour: str | None = None) -> None:
        details: dict = {"prefix": prefix}
        if colour is not None:
            details["colour"] = colour
        super().__init__(message=message, details=details)


# =============================================================================
# Collaborator Errors (HTTP 503)
# =============================================================================


class StoreUnavailableError(SpaceDashError):
    """Raised when the record store or object listing call fails.

    Not retried here; retry policy belongs to the caller.
    """

    def __init__(self, operation: str, reason: str) -> None:
        super().__init__(
            message=f"Store operation '{operation}' failed",
            details={"operation": operation, "reason": reason},
        )
