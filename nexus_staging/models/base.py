"""Base models for nexus-staging."""

from pydantic import BaseModel, ConfigDict


class NexusBaseModel(BaseModel):
    """Base model for all nexus-staging domain models."""

    model_config = ConfigDict(
        extra="forbid",  # Don't allow extra fields
        frozen=False,
        validate_assignment=True,  # Validate on attribute assignment
    )


__all__ = ["NexusBaseModel"]
