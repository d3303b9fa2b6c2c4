"""
Pydantic models for nexus-staging.

This package contains all Pydantic models used in the application:
- nexus_api: Payloads exchanged with the Nexus staging REST API
- base, context: Domain models
"""

# Nexus API Models
from .nexus_api import (
    NexusPayloadModel,
    StagingProfile,
    StagingProfileList,
    Description,
    StagingRepository,
)

# Domain Models
from .base import NexusBaseModel
from .context import PublishSettings

__all__ = [
    # Nexus API Models
    "NexusPayloadModel",
    "StagingProfile",
    "StagingProfileList",
    "Description",
    "StagingRepository",
    # Domain Models
    "NexusBaseModel",
    "PublishSettings",
]
