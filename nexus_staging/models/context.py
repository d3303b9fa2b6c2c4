"""Publish settings for staging repository resolution."""

from typing import Optional

from pydantic import Field, field_validator

from ..utils.constants import (
    DEFAULT_DESCRIPTION,
    DEFAULT_REPOSITORY_NAME,
    DEFAULT_SERVER_URL,
    DEFAULT_SNAPSHOT_REPOSITORY_URL,
    SNAPSHOT_VERSION_SUFFIX,
)
from .base import NexusBaseModel


class PublishSettings(NexusBaseModel):
    """
    Settings describing where one project publishes its artifacts.

    Attributes:
        server_url: Base URL of the Nexus REST API used for staging
        snapshot_repository_url: Repository URL used when staging is disabled
        version: Project version; a -SNAPSHOT version disables staging by default
        use_staging: Explicit staging switch; derived from version when None
        package_group: Group matched against staging profile names
        staging_profile_id: Known profile id; skips the profile lookup when set
        username: Optional username for HTTP Basic authentication
        password: Optional password for HTTP Basic authentication
        repository_name: Name of the publishing repository
        description: Text sent when opening a staging repository
    """

    server_url: str = DEFAULT_SERVER_URL
    snapshot_repository_url: str = DEFAULT_SNAPSHOT_REPOSITORY_URL
    version: Optional[str] = None
    use_staging: Optional[bool] = None
    package_group: Optional[str] = None
    staging_profile_id: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = Field(default=None, repr=False)
    repository_name: str = DEFAULT_REPOSITORY_NAME
    description: str = DEFAULT_DESCRIPTION

    @field_validator("server_url", "snapshot_repository_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate that repository URLs are absolute http(s) URLs."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Invalid URL (must start with http:// or https://): {v}")
        return v

    @property
    def staging_enabled(self) -> bool:
        """Whether artifacts go to a staging repository rather than the snapshot repository."""
        if self.use_staging is not None:
            return self.use_staging
        return not (self.version or "").endswith(SNAPSHOT_VERSION_SUFFIX)


__all__ = ["PublishSettings"]
