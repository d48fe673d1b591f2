"""
Configuration models.

Provides Pydantic models for repodesc configuration with validation.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from .base import RepodescBaseModel

# Type aliases
LogLevel = Literal["debug", "info", "warning", "error"]
Token = Annotated[str, Field(min_length=1)]

DEFAULT_DIRTY_STRING = "-dirty"
DEFAULT_CI_REF_ENV_VAR = "CI_COMMIT_REF_NAME"

# Fallback token per descriptor field, keyed by config name
DEFAULT_FALLBACKS: dict[str, str] = {
    "no_branch_fallback": "no_branch",
    "no_commit_fallback": "no_commit",
    "no_count_fallback": "no_count",
    "no_remote_fallback": "no_remote",
    "no_semver_fallback": "no_semver",
    "no_stage_fallback": "no_stage",
    "no_status_fallback": "no_status",
    "no_tag_fallback": "no_tag",
    "no_version_fallback": "no_version",
}


class ConfigBaseModel(RepodescBaseModel):
    """Base model for config sections with relaxed strict mode for TOML loading."""

    model_config = ConfigDict(
        strict=False,  # Allow coercion from TOML types
        validate_assignment=True,
        extra="ignore",  # Ignore unknown fields in config files
        populate_by_name=True,
    )


class LoggingConfig(ConfigBaseModel):
    """Logging configuration section."""

    level: LogLevel = "warning"
    console: bool = True
    file: bool = False


class DescriptorTokens(BaseModel):
    """Field definitions shared by the config model and the settings loader.

    Every value must be non-empty so a descriptor field can never end up
    blank, whichever data source is missing.
    """

    dirty_string: Token = Field(
        DEFAULT_DIRTY_STRING,
        description="Suffix appended to the version of a dirty working tree",
    )
    no_branch_fallback: Token = Field(
        DEFAULT_FALLBACKS["no_branch_fallback"],
        description="Branch value when the current branch cannot be determined",
    )
    no_commit_fallback: Token = Field(
        DEFAULT_FALLBACKS["no_commit_fallback"],
        description="Commit value when no abbreviated hash is available",
    )
    no_count_fallback: Token = Field(
        DEFAULT_FALLBACKS["no_count_fallback"],
        description="Commit count used in the version when counting fails",
    )
    no_remote_fallback: Token = Field(
        DEFAULT_FALLBACKS["no_remote_fallback"],
        description="Remote value when 'origin' is not configured",
    )
    no_semver_fallback: Token = Field(
        DEFAULT_FALLBACKS["no_semver_fallback"],
        description="Semver value when neither release branch nor tag provides one",
    )
    no_stage_fallback: Token = Field(
        DEFAULT_FALLBACKS["no_stage_fallback"],
        description="Stage value for unknown or unrecognized branches",
    )
    no_status_fallback: Token = Field(
        DEFAULT_FALLBACKS["no_status_fallback"],
        description="is_dirty value when working tree status cannot be read",
    )
    no_tag_fallback: Token = Field(
        DEFAULT_FALLBACKS["no_tag_fallback"],
        description="Tag name used to build the version when no semver tag exists",
    )
    no_version_fallback: Token = Field(
        DEFAULT_FALLBACKS["no_version_fallback"],
        description="Version value when the repository cannot be described",
    )
    ci_ref_env_var: Token = Field(
        DEFAULT_CI_REF_ENV_VAR,
        description="Environment variable naming the branch for a detached HEAD",
    )


class DescriptorConfig(ConfigBaseModel, DescriptorTokens):
    """Tokens the resolver needs: the dirty marker and one fallback per field."""

    model_config = ConfigDict(
        strict=False,
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )


class RepodescConfig(DescriptorConfig):
    """Complete repodesc configuration.

    Descriptor tokens at the top level plus the ``[logging]`` section.
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def get(self, key: str, default: Any = None) -> Any:
        """Get config value by dot-notation key.

        Args:
            key: Dot-notation key (e.g., 'logging.level', 'dirty_string')
            default: Default value if key not found

        Returns:
            Config value or default
        """
        obj: Any = self
        for part in key.split("."):
            if isinstance(obj, dict) and part in obj:
                obj = obj[part]
            elif not isinstance(obj, dict) and part in type(obj).model_fields:
                obj = getattr(obj, part)
            else:
                return default
        return obj

    def descriptor_config(self) -> DescriptorConfig:
        """Extract the tokens the resolver consumes."""
        return DescriptorConfig.model_validate(self.model_dump(exclude={"logging"}))
