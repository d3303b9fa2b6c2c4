"""
Nexus staging API client modules.

This package provides:
- HTTP Basic authentication
- The JSON codec for staging payloads
- The staging client for profile lookup and repository creation
"""

from .auth import NexusBasicAuth
from .codec import decode_payload, decode_response, encode_json, encode_payload
from .staging_client import StagingClient

# Import Nexus API models for convenience
from ..models.nexus_api import (
    Description,
    StagingProfile,
    StagingRepository,
)

__all__ = [
    "NexusBasicAuth",
    "StagingClient",
    "decode_payload",
    "decode_response",
    "encode_json",
    "encode_payload",
    # API Models
    "Description",
    "StagingProfile",
    "StagingRepository",
]
