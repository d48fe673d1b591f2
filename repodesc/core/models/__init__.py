"""
Domain models for repodesc.

Pydantic models for configuration and the repository descriptor, plus the
``Resolved`` / ``Fallback`` result types used while deriving it.
"""

from .base import ImmutableModel, RepodescBaseModel
from .config import (
    DEFAULT_CI_REF_ENV_VAR,
    DEFAULT_DIRTY_STRING,
    DEFAULT_FALLBACKS,
    ConfigBaseModel,
    DescriptorConfig,
    DescriptorTokens,
    LoggingConfig,
    LogLevel,
    RepodescConfig,
)
from .descriptor import DESCRIPTOR_FIELDS, RepositoryDescriptor, Stage
from .resolution import Fallback, FieldResult, Resolved, first_resolved

__all__ = [
    "DEFAULT_CI_REF_ENV_VAR",
    "DEFAULT_DIRTY_STRING",
    "DEFAULT_FALLBACKS",
    "DESCRIPTOR_FIELDS",
    "ConfigBaseModel",
    "DescriptorConfig",
    "DescriptorTokens",
    "Fallback",
    "FieldResult",
    "ImmutableModel",
    "LogLevel",
    "LoggingConfig",
    "RepodescBaseModel",
    "RepodescConfig",
    "RepositoryDescriptor",
    "Resolved",
    "Stage",
    "first_resolved",
]
