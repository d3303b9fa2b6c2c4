"""
Central constants for the nexus-staging package.

This module consolidates all constants used throughout the codebase
to eliminate magic numbers and strings.
"""

# ============================================================================
# Server Defaults
# ============================================================================

# Sonatype OSSRH endpoints used when nothing else is configured
DEFAULT_SERVER_URL = "https://oss.sonatype.org/service/local/"
DEFAULT_SNAPSHOT_REPOSITORY_URL = "https://oss.sonatype.org/content/repositories/snapshots/"

# Name of the publishing repository that receives the staging URL
DEFAULT_REPOSITORY_NAME = "nexus"

# Text sent when opening a staging repository
DEFAULT_DESCRIPTION = "Created by nexus-staging"

# Versions with this suffix publish to the snapshot repository
SNAPSHOT_VERSION_SUFFIX = "-SNAPSHOT"

# ============================================================================
# API and Network Constants
# ============================================================================

# Timeout for connecting, reading and writing (seconds)
DEFAULT_TIMEOUT = 60.0

STAGING_PROFILES_ENDPOINT = "staging/profiles"
START_STAGING_REPOSITORY_ENDPOINT = "staging/profiles/{staging_profile_id}/start"
DEPLOY_BY_REPOSITORY_ID_PATH = "/staging/deployByRepositoryId/{staging_repository_id}"

# Envelope key for wrapped payloads
ENVELOPE_KEY = "data"

# Default number of concurrent workers when resolving several projects
DEFAULT_MAX_WORKERS = 4

# ============================================================================
# Configuration Constants
# ============================================================================

DEFAULT_CONFIG_PATH = "~/.config/nexus/staging.toml"

# TOML section holding the server settings
CONFIG_SECTION = "nexus"

# ============================================================================
# Logging Constants
# ============================================================================

# Headers that are never written to the log
SENSITIVE_HEADERS = ["authorization", "cookie", "x-api-key"]

# Maximum characters of a response body included in log output
MAX_LOGGED_BODY_LENGTH = 500
