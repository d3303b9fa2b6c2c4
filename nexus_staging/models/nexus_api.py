"""
Pydantic models for the Nexus staging REST API.

These models describe the payloads exchanged with the
``staging/profiles`` endpoints. Payload types that the server expects
nested under a ``"data"`` key declare ``wrap_in_envelope = True``; the
codec in :mod:`nexus_staging.api.codec` checks that flag when encoding
and decoding.
"""

from typing import ClassVar, List, Optional

from pydantic import BaseModel, ConfigDict, Field, RootModel


# ============================================================================
# Base Models
# ============================================================================


class NexusPayloadModel(BaseModel):
    """Base model for all Nexus API payloads."""

    model_config = ConfigDict(
        extra="allow",  # Allow extra fields from API
        populate_by_name=True,
        coerce_numbers_to_str=True,  # Ids may arrive as JSON numbers
    )

    # Whether the payload travels as {"data": <object>} on the wire
    wrap_in_envelope: ClassVar[bool] = False


# ============================================================================
# Staging Profile Models
# ============================================================================


class StagingProfile(NexusPayloadModel):
    """A staging profile as returned by ``GET staging/profiles``."""

    id: str
    name: str


class StagingProfileList(RootModel[List[StagingProfile]]):
    """Response for ``GET staging/profiles``: a bare JSON array."""

    wrap_in_envelope: ClassVar[bool] = False

    def find_id(self, name: str) -> Optional[str]:
        """Return the id of the first profile named ``name``, or None."""
        return next((profile.id for profile in self.root if profile.name == name), None)


# ============================================================================
# Staging Repository Models
# ============================================================================


class Description(NexusPayloadModel):
    """Request body for opening a staging repository."""

    model_config = ConfigDict(extra="ignore")

    wrap_in_envelope: ClassVar[bool] = True

    description: str


class StagingRepository(NexusPayloadModel):
    """Response for ``POST staging/profiles/{id}/start``."""

    staged_repository_id: str = Field(alias="stagedRepositoryId", min_length=1)


__all__ = [
    "NexusPayloadModel",
    "StagingProfile",
    "StagingProfileList",
    "Description",
    "StagingRepository",
]
