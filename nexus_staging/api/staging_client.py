"""
Nexus staging API client.

This module provides the StagingClient class, which talks to the staging
endpoints of one Nexus server on behalf of one set of credentials:

    - find_staging_profile_id: resolve a staging profile from a package group
    - create_staging_repository: open a staging repository under a profile
    - get_staging_repository_uri: derive the upload URL of a repository

Each network operation performs exactly one HTTP round trip. Failures are
reported through the exceptions in :mod:`nexus_staging.exceptions`; the
client never retries.
"""

# Standard library imports
import logging
from typing import Any, List, Optional
from urllib.parse import quote

# Third-party imports
import httpx

# Local imports
from ..exceptions import StagingContractError, StagingRequestError, StagingTransportError
from ..models.nexus_api import Description, StagingProfile, StagingProfileList, StagingRepository
from ..utils import create_session
from ..utils.constants import (
    DEFAULT_TIMEOUT,
    DEPLOY_BY_REPOSITORY_ID_PATH,
    MAX_LOGGED_BODY_LENGTH,
    SENSITIVE_HEADERS,
    STAGING_PROFILES_ENDPOINT,
    START_STAGING_REPOSITORY_ENDPOINT,
)
from .auth import NexusBasicAuth
from .codec import decode_response, encode_json


class StagingClient:
    """
    A client for the staging endpoints of a Nexus repository manager.

    API documentation:
    - https://oss.sonatype.org/nexus-staging-plugin/default/docs/index.html

    The base URL is the REST root of the server, e.g.
    ``https://oss.sonatype.org/service/local/``. Endpoint paths are
    appended to it after removing a single trailing slash.
    """

    def __init__(
        self,
        base_url: str,
        username: Optional[str] = None,
        password: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize the staging client.

        Args:
            base_url: Base URL of the Nexus REST API
            username: Optional username for HTTP Basic authentication
            password: Optional password for HTTP Basic authentication
            timeout: Connect, read and write timeout in seconds
        """
        self.base_url = base_url
        self.timeout = timeout
        self._auth = NexusBasicAuth.from_credentials(username, password)
        self.session = self._create_session()

    def _create_session(self) -> httpx.Client:
        """Create the httpx client, with Basic auth when credentials are set."""
        return create_session(auth=self._auth, timeout=self.timeout)

    def close(self) -> None:
        """Close the session and release all connections."""
        if self.session:
            self.session.close()
            logging.debug("StagingClient session closed and connections released")

    def __enter__(self) -> "StagingClient":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type: Optional[type], exc_val: Optional[BaseException], exc_tb: Optional[Any]) -> None:
        """Context manager exit - ensures session is closed."""
        self.close()

    @property
    def auth(self) -> Optional[NexusBasicAuth]:
        """
        Get authentication credentials.

        Returns:
            NexusBasicAuth instance, or None when no credentials are configured
        """
        return self._auth

    def _base_url(self) -> str:
        """Return the base URL with a single trailing slash removed."""
        return self.base_url.removesuffix("/")

    def _url(self, endpoint: str) -> str:
        """
        Build a fully qualified URL for a given API endpoint.

        Args:
            endpoint: API endpoint path relative to the REST root (e.g., "staging/profiles")

        Returns:
            Complete URL including base URL and endpoint
        """
        return f"{self._base_url()}/{endpoint}"

    # ============================================================================
    # Staging Operations
    # ============================================================================

    def list_staging_profiles(self) -> List[StagingProfile]:
        """
        Load all staging profiles visible to the configured user.

        Returns:
            Profiles in the order the server listed them; empty when the server returned no body

        Raises:
            StagingTransportError: If the request could not be completed
            StagingRequestError: If the server responded with a non-success status
            StagingContractError: If the profile list could not be decoded
        """
        action = "load staging profiles"
        response = self._send("GET", STAGING_PROFILES_ENDPOINT, action)
        self._check_response(response, action)

        profiles = decode_response(StagingProfileList, response, action)
        if profiles is None:
            logging.debug("Server returned no staging profiles")
            return []

        logging.debug("Loaded %d staging profiles from %s", len(profiles.root), self.base_url)
        return profiles.root

    def find_staging_profile_id(self, package_group: str) -> Optional[str]:
        """
        Find the id of the staging profile whose name equals the package group.

        Args:
            package_group: Group to match exactly against profile names

        Returns:
            Id of the first matching profile in list order, or None if no profile matches
        """
        profile_id = StagingProfileList(self.list_staging_profiles()).find_id(package_group)
        if profile_id is None:
            logging.debug("No staging profile named '%s'", package_group)
        return profile_id

    def create_staging_repository(self, staging_profile_id: str, description: str) -> str:
        """
        Open a new staging repository under a staging profile.

        Args:
            staging_profile_id: Id of a staging profile on this server
            description: Free text describing why the repository was opened

        Returns:
            Id of the staging repository assigned by the server

        Raises:
            StagingTransportError: If the request could not be completed
            StagingRequestError: If the server responded with a non-success status
            StagingContractError: If a successful response lacks the repository id
        """
        action = "create staging repository"
        endpoint = START_STAGING_REPOSITORY_ENDPOINT.format(staging_profile_id=quote(staging_profile_id, safe=""))
        response = self._send(
            "POST",
            endpoint,
            action,
            content=encode_json(Description(description=description)),
            headers={"Content-Type": "application/json"},
        )
        self._check_response(response, action)

        repository = decode_response(StagingRepository, response, action)
        if repository is None:
            raise StagingContractError(f"No response body in response to {action}")

        logging.debug("Server opened staging repository %s", repository.staged_repository_id)
        return repository.staged_repository_id

    def get_staging_repository_uri(self, staging_repository_id: str) -> str:
        """
        Derive the URL that artifacts of a staging repository are uploaded to.

        Args:
            staging_repository_id: Id returned by create_staging_repository

        Returns:
            Upload URL of the staging repository
        """
        return self._base_url() + DEPLOY_BY_REPOSITORY_ID_PATH.format(staging_repository_id=staging_repository_id)

    # ============================================================================
    # Request Helpers
    # ============================================================================

    def _send(self, method: str, endpoint: str, action: str, **kwargs: Any) -> httpx.Response:
        """Send one request, converting I/O failures into StagingTransportError."""
        url = self._url(endpoint)
        logging.debug("%s %s", method, url)
        try:
            return self.session.request(method, url, **kwargs)
        except httpx.RequestError as e:
            logging.debug("Request to %s failed: %s", url, e)
            raise StagingTransportError(action, e) from e

    def _log_server_error(self, response: httpx.Response, action: str) -> None:
        """Log detailed information for server errors (5xx)."""
        logging.error("=" * 80)
        logging.error("SERVER ERROR (%s) during %s", response.status_code, action)
        logging.error("=" * 80)

        request = response.request
        logging.error("REQUEST DETAILS:")
        logging.error("  Method: %s", request.method)
        logging.error("  URL: %s", request.url)
        safe_headers = {
            key: ("[REDACTED]" if key.lower() in SENSITIVE_HEADERS else value) for key, value in request.headers.items()
        }
        logging.error("  Request Headers: %s", safe_headers)

        logging.error("RESPONSE DETAILS:")
        logging.error("  Status Code: %s", response.status_code)
        logging.error("  Response Headers: %s", dict(response.headers))
        if len(response.text) > MAX_LOGGED_BODY_LENGTH:
            logging.error("  Response Body (truncated): %s...", response.text[:MAX_LOGGED_BODY_LENGTH])
        else:
            logging.error("  Response Body: %s", response.text)

        logging.error("=" * 80)

    def _check_response(self, response: httpx.Response, action: str) -> None:
        """Check if a response is successful, raise StagingRequestError if not."""
        if response.is_success:
            return

        if response.status_code >= 500:
            self._log_server_error(response, action)
        else:
            logging.debug("Client error during %s: %s - %s", action, response.status_code, response.text)

        raise StagingRequestError(action, response.status_code, response.text or None)


__all__ = ["StagingClient"]
