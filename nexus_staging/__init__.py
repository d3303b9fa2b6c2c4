"""
nexus-staging - staging repository client for Nexus repository managers.

This package opens staging repositories on a Nexus server and works out the
URL a build should upload its artifacts to, creating at most one staging
repository per server within a build session.
"""

from ._version import __version__

__author__ = "Nexus Staging Developers"

# Import main classes and functions for easy access
from .api import StagingClient, NexusBasicAuth
from .exceptions import (
    StagingError,
    StagingTransportError,
    StagingRequestError,
    StagingContractError,
    StagingProfileNotFoundError,
)
from .models import PublishSettings
from .utils import setup_logging, create_session
from .utils.publish_helper import PublishHelper
from .utils.staging_coordinator import StagingCoordinator, StagingRepositoryCache
from .cli import main as cli_main, cli as cli_group

__all__ = [
    "__version__",
    "StagingClient",
    "NexusBasicAuth",
    "StagingError",
    "StagingTransportError",
    "StagingRequestError",
    "StagingContractError",
    "StagingProfileNotFoundError",
    "PublishSettings",
    "PublishHelper",
    "StagingCoordinator",
    "StagingRepositoryCache",
    "setup_logging",
    "create_session",
    "cli_main",
    "cli_group",
]
