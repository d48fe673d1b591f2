"""
Base Pydantic models for repodesc.

Provides common configuration and base classes for all repodesc models.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class RepodescBaseModel(BaseModel):
    """Base model for all repodesc Pydantic models.

    Configuration:
        - strict: Strict type coercion (no implicit conversions)
        - validate_assignment: Validate on attribute assignment
        - extra: Reject unknown fields
        - populate_by_name: Allow field aliases
    """

    model_config = ConfigDict(
        strict=True,
        validate_assignment=True,
        extra="forbid",
        populate_by_name=True,
    )


class ImmutableModel(RepodescBaseModel):
    """Immutable base model for records that should not change after creation."""

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        extra="forbid",
        populate_by_name=True,
    )
