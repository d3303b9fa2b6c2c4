"""
Session utilities for Nexus operations.

This module provides a factory for the httpx clients used to talk to
the staging API.
"""

from typing import Optional

import httpx
from httpx import HTTPTransport

from .constants import DEFAULT_TIMEOUT


def create_session(auth: Optional[httpx.Auth] = None, timeout: float = DEFAULT_TIMEOUT) -> httpx.Client:
    """
    Create an httpx client for the staging API.

    Args:
        auth: Optional authentication flow applied to every request
        timeout: Connect, read, write and pool timeout in seconds (default: 60.0)

    Returns:
        Configured httpx.Client object with:
        - JSON accept header
        - The same timeout for every phase of a request
        - No transport-level retries, so each call is exactly one round trip

    Example:
        >>> client = create_session()
        >>> response = client.get("https://nexus.example.com/service/local/staging/profiles")
    """
    transport = HTTPTransport(retries=0)

    return httpx.Client(
        transport=transport,
        auth=auth,
        timeout=httpx.Timeout(timeout),
        follow_redirects=True,
        headers={"Accept": "application/json"},
    )


__all__ = ["create_session"]
