"""
Error types for staging repository operations.

The hierarchy separates the four ways a staging operation can fail:
transport (I/O), protocol (non-success HTTP status), contract (success
status but an unusable body) and configuration (no matching profile).
"""

from typing import Optional


class StagingError(RuntimeError):
    """Base class for all staging failures."""


class StagingTransportError(StagingError):
    """Raised when the HTTP request could not be completed."""

    def __init__(self, action: str, cause: BaseException) -> None:
        super().__init__(f"Failed to {action}: {cause}")
        self.action = action
        self.cause = cause


class StagingRequestError(StagingError):
    """Raised when the server answers with a non-success status code."""

    def __init__(self, action: str, status_code: int, body: Optional[str] = None) -> None:
        message = f"Failed to {action}, server responded with status code {status_code}"
        if body:
            message += f", body: {body}"
        super().__init__(message)
        self.action = action
        self.status_code = status_code
        self.body = body


class StagingContractError(StagingError):
    """Raised when a successful response lacks a required field."""


class StagingProfileNotFoundError(StagingError):
    """Raised when no staging profile matches the requested package group."""

    def __init__(self, package_group: str) -> None:
        super().__init__(f"Failed to find staging profile for package group: {package_group}")
        self.package_group = package_group


__all__ = [
    "StagingError",
    "StagingTransportError",
    "StagingRequestError",
    "StagingContractError",
    "StagingProfileNotFoundError",
]
