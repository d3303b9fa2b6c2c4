"""
Logging configuration for the nexus-staging package.

The library itself only emits records through the standard ``logging``
module; this setup is applied by the command line entry point.
"""

import logging

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def setup_logging(verbosity: int = 0) -> None:
    """
    Setup logging configuration with multi-level verbosity.

    Args:
        verbosity: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG, 3+=DEBUG with HTTP logs)

    Example:
        >>> from nexus_staging.utils import setup_logging
        >>> setup_logging(1)  # INFO level
    """
    if verbosity <= 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    logging.basicConfig(level=level, format=LOG_FORMAT)

    # httpx logs every request at INFO level
    http_level = logging.DEBUG if verbosity >= 3 else logging.WARNING
    logging.getLogger("httpx").setLevel(http_level)
    logging.getLogger("httpcore").setLevel(http_level)


__all__ = ["setup_logging"]
