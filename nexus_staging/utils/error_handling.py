"""
Error handling utilities for standardized error logging and handling.

These helpers are used at the command line boundary; the client and the
coordinator propagate their exceptions unchanged.
"""

import logging
import sys
import traceback
from functools import wraps
from typing import Any, Callable, TypeVar

from ..exceptions import (
    StagingError,
    StagingProfileNotFoundError,
    StagingRequestError,
    StagingTransportError,
)


# Type variable for generic function decorators
F = TypeVar("F", bound=Callable[..., Any])


def handle_staging_error(error: StagingError, operation: str, *, log_traceback: bool = True) -> None:
    """
    Handle staging errors with standardized logging.

    Args:
        error: The staging error to handle
        operation: Description of the operation that failed
        log_traceback: Whether to log the full traceback
    """
    if isinstance(error, StagingRequestError):
        if error.status_code == 401:
            logging.error(
                "Authentication failed during %s: Invalid credentials. "
                "Please check the username and password in the configuration file.",
                operation,
            )
        elif error.status_code == 403:
            logging.error(
                "Authentication failed during %s: You don't have permission to access this resource. "
                "Please check that the user may stage for this profile.",
                operation,
            )
        elif error.status_code == 404:
            logging.error("Resource not found during %s (is the server URL correct?)", operation)
        elif error.status_code >= 500:
            logging.error("Server error during %s", operation)
        logging.error("%s", error)
    elif isinstance(error, StagingTransportError):
        logging.error("Could not reach the server during %s: %s", operation, error.cause)
    elif isinstance(error, StagingProfileNotFoundError):
        logging.error(
            "Configuration error during %s: %s. Set the staging profile id or fix the package group.",
            operation,
            error,
        )
    else:
        logging.error("Staging error during %s: %s", operation, error)

    if log_traceback:
        logging.debug("Traceback: %s", traceback.format_exc())


def handle_generic_error(error: Exception, operation: str, *, log_traceback: bool = True) -> None:
    """
    Handle generic errors with standardized logging.

    Args:
        error: The exception to handle
        operation: Description of the operation that failed
        log_traceback: Whether to log the full traceback
    """
    logging.error("Unexpected error during %s: %s", operation, error)

    if log_traceback:
        logging.error("Traceback: %s", traceback.format_exc())


def with_error_handling(
    operation: str, *, exit_on_error: bool = False, exit_code: int = 1, reraise: bool = True
) -> Callable[[F], F]:
    """
    Decorator to wrap functions with consistent error handling.

    Args:
        operation: Description of the operation for logging
        exit_on_error: If True, call sys.exit on error
        exit_code: Exit code to use if exit_on_error is True
        reraise: If True, reraise the exception after logging (unless exiting)

    Returns:
        Decorator function

    Example:
        @with_error_handling("list staging profiles", exit_on_error=True)
        def list_profiles():
            ...
    """

    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except StagingError as e:
                handle_staging_error(e, operation)
                if exit_on_error:
                    sys.exit(exit_code)
                if reraise:
                    raise
            except Exception as e:
                handle_generic_error(e, operation)
                if exit_on_error:
                    sys.exit(exit_code)
                if reraise:
                    raise
            return None

        return wrapper  # type: ignore[return-value]

    return decorator


def log_and_exit(message: str, exit_code: int = 1) -> None:
    """
    Log an error message and exit the program.

    Args:
        message: Error message to log
        exit_code: Exit code (default: 1)
    """
    logging.error(message)
    sys.exit(exit_code)


__all__ = [
    "handle_staging_error",
    "handle_generic_error",
    "with_error_handling",
    "log_and_exit",
]
