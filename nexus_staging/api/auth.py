"""
HTTP Basic authentication for the Nexus staging API.

Credentials are attached by an ``httpx.Auth`` flow that rewrites the
outgoing request, so the client only needs to be built with it once.
"""

# Standard library imports
import base64
import logging
from typing import Generator, Optional

# Third-party imports
import httpx


class NexusBasicAuth(httpx.Auth):
    """
    HTTP Basic authentication flow.

    A missing username or password is sent as an empty string rather
    than omitting the header.
    """

    def __init__(self, username: Optional[str], password: Optional[str]):
        """
        Initialize Basic authentication.

        Args:
            username: Username, or None for an empty username
            password: Password, or None for an empty password
        """
        self._username = username or ""
        self._password = password or ""

    @classmethod
    def from_credentials(cls, username: Optional[str], password: Optional[str]) -> Optional["NexusBasicAuth"]:
        """
        Build an auth flow only when at least one credential is given.

        Returns:
            NexusBasicAuth instance, or None when both values are None
        """
        if username is None and password is None:
            return None
        return cls(username, password)

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        """Add the Authorization header and send the request once."""
        request.headers["Authorization"] = self.authorization_header

        response = yield request

        if response.status_code == 401:
            logging.debug("Server rejected credentials for user '%s'", self._username)

    @property
    def authorization_header(self) -> str:
        """The ``Basic`` Authorization header value for these credentials."""
        token = base64.b64encode(f"{self._username}:{self._password}".encode("latin-1")).decode("ascii")
        return f"Basic {token}"

    @property
    def username(self) -> str:
        """Get the username (for debugging/inspection)."""
        return self._username


__all__ = ["NexusBasicAuth"]
