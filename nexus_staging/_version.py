"""Version information for nexus-staging."""

__version__ = "0.1.0"
