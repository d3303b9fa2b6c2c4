"""
Utility modules for nexus-staging operations.

The coordinator and publish helper live in :mod:`.staging_coordinator` and
:mod:`.publish_helper`; they depend on the API client and are imported from
there directly.
"""

from .logger import setup_logging
from .session import create_session
from .config_manager import ConfigManager

from . import constants
from . import error_handling

__all__ = [
    "setup_logging",
    "create_session",
    "ConfigManager",
    "constants",
    "error_handling",
]
