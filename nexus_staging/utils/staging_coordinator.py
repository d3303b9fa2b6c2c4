"""
Staging repository coordination for one build session.

Several projects of one build usually publish to the same Nexus server and
must end up in the same staging repository. StagingCoordinator makes sure
the profile lookup and repository creation run at most once per server URL
per build session, no matter how many threads ask for the repository.
"""

import logging
import threading
from contextlib import contextmanager
from typing import Callable, Dict, Iterator, Optional

from ..api.staging_client import StagingClient
from ..exceptions import StagingProfileNotFoundError
from .constants import DEFAULT_DESCRIPTION


class _CacheEntry:
    """A computation shared by every caller asking for the same key."""

    def __init__(self) -> None:
        self._done = threading.Event()
        self._value: Optional[str] = None
        self._error: Optional[BaseException] = None

    @property
    def done(self) -> bool:
        return self._done.is_set()

    @property
    def succeeded(self) -> bool:
        return self._done.is_set() and self._error is None

    def set_result(self, value: str) -> None:
        self._value = value
        self._done.set()

    def set_error(self, error: BaseException) -> None:
        self._error = error
        self._done.set()

    def result(self) -> str:
        """Block until the computation finishes and return or raise its outcome."""
        self._done.wait()
        if self._error is not None:
            raise self._error
        return self._value  # type: ignore[return-value]


class StagingRepositoryCache:
    """
    Maps server URLs to staging repository URLs for one build session.

    The lock only guards the dictionary itself. Computations run outside of
    it, so a slow creation for one server never blocks callers for another.
    """

    def __init__(self) -> None:
        """Initialize an empty cache."""
        self._lock = threading.Lock()
        self._entries: Dict[str, _CacheEntry] = {}

    def get(self, key: str) -> Optional[str]:
        """
        Return the completed URL for a key without waiting.

        Returns:
            Cached URL, or None when the key is absent or still being computed
        """
        with self._lock:
            entry = self._entries.get(key)
        if entry is not None and entry.succeeded:
            return entry.result()
        return None

    def get_or_compute(self, key: str, compute: Callable[[], str]) -> str:
        """
        Return the URL for a key, computing it if no other caller has.

        The first caller for a key runs ``compute``; concurrent callers for
        the same key wait for that run and receive its result or its
        exception. A failed entry is dropped so a later call can try again.

        Args:
            key: Server URL
            compute: Function producing the staging repository URL

        Returns:
            Staging repository URL
        """
        with self._lock:
            entry = self._entries.get(key)
            owner = entry is None
            if owner:
                entry = self._entries[key] = _CacheEntry()

        if not owner:
            if not entry.done:
                logging.debug("Waiting for staging repository creation in progress for %s", key)
            return entry.result()

        try:
            value = compute()
        except BaseException as e:
            with self._lock:
                if self._entries.get(key) is entry:
                    del self._entries[key]
            entry.set_error(e)
            raise

        entry.set_result(value)
        return value

    def reset(self) -> None:
        """Drop every entry; callers already waiting still get their result."""
        with self._lock:
            size = len(self._entries)
            self._entries.clear()
        logging.debug("Cleared staging repository cache (%d entries)", size)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


class StagingCoordinator:
    """
    Hands out one staging repository URL per server URL per build session.

    The cache is owned by whoever creates the coordinator; the host signals
    the end of a build with session_ended() (or wraps the build in
    build_session()) to start the next build with an empty cache.
    """

    def __init__(
        self,
        cache: Optional[StagingRepositoryCache] = None,
        client_factory: Callable[..., StagingClient] = StagingClient,
    ) -> None:
        """
        Initialize the coordinator.

        Args:
            cache: Cache shared by every consumer of this build session
            client_factory: Callable building a client from (server_url, username=, password=)
        """
        self.cache = cache if cache is not None else StagingRepositoryCache()
        self._client_factory = client_factory

    def get_or_create_staging_repository_url(
        self,
        server_url: str,
        package_group: Optional[str],
        *,
        username: Optional[str] = None,
        password: Optional[str] = None,
        description: str = DEFAULT_DESCRIPTION,
        staging_profile_id: Optional[str] = None,
    ) -> str:
        """
        Get the staging repository URL for a server, creating the repository once.

        Args:
            server_url: Base URL of the Nexus REST API; the cache key
            package_group: Group matched against staging profile names
            username: Optional username for HTTP Basic authentication
            password: Optional password for HTTP Basic authentication
            description: Text sent when opening the staging repository
            staging_profile_id: Known profile id; skips the profile lookup when set

        Returns:
            Upload URL of the staging repository for this server

        Raises:
            StagingProfileNotFoundError: If no profile matches the package group
            StagingError: If talking to the server fails
        """
        cached = self.cache.get(server_url)
        if cached is not None:
            logging.debug("Reusing staging repository %s for %s", cached, server_url)
            return cached

        return self.cache.get_or_compute(
            server_url,
            lambda: self._create_staging_repository(
                server_url,
                package_group,
                username=username,
                password=password,
                description=description,
                staging_profile_id=staging_profile_id,
            ),
        )

    def _create_staging_repository(
        self,
        server_url: str,
        package_group: Optional[str],
        *,
        username: Optional[str],
        password: Optional[str],
        description: str,
        staging_profile_id: Optional[str],
    ) -> str:
        """Resolve the profile, open a staging repository and return its URL."""
        with self._client_factory(server_url, username=username, password=password) as client:
            profile_id = self._determine_staging_profile_id(client, package_group, staging_profile_id)
            logging.info("Creating staging repository for staging profile '%s'", profile_id)
            repository_id = client.create_staging_repository(profile_id, description)
            url = client.get_staging_repository_uri(repository_id)
        logging.info("Created staging repository %s at %s", repository_id, url)
        return url

    def _determine_staging_profile_id(
        self, client: StagingClient, package_group: Optional[str], staging_profile_id: Optional[str]
    ) -> str:
        if staging_profile_id:
            return staging_profile_id
        if not package_group:
            raise ValueError("Either a package group or a staging profile id is required")

        logging.debug("No staging profile id set, querying for package group '%s'", package_group)
        profile_id = client.find_staging_profile_id(package_group)
        if profile_id is None:
            raise StagingProfileNotFoundError(package_group)
        return profile_id

    # ============================================================================
    # Build Session Lifecycle
    # ============================================================================

    def session_started(self) -> None:
        """Signal the start of a build session."""
        logging.debug("Build session started")

    def session_ended(self) -> None:
        """Signal the end of a build session; forgets every staging repository."""
        self.cache.reset()
        logging.debug("Build session ended")

    @contextmanager
    def build_session(self) -> Iterator["StagingCoordinator"]:
        """Run a build session, clearing the cache when it ends, successfully or not."""
        self.session_started()
        try:
            yield self
        finally:
            self.session_ended()


__all__ = ["StagingRepositoryCache", "StagingCoordinator"]
