"""Configuration key catalogue and lookup for repodesc."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from .core.models.config import DescriptorTokens, LoggingConfig
from .core.settings import load_settings

_LOGGING_DESCRIPTIONS = {
    "level": "Log level (debug, info, warning, error)",
    "console": "Output diagnostics to stderr",
    "file": "Output diagnostics to ~/.repodesc/repodesc.log",
}


def _catalogue() -> dict[str, dict[str, Any]]:
    keys: dict[str, dict[str, Any]] = {}
    for name, field in DescriptorTokens.model_fields.items():
        keys[name] = {"type": str, "default": field.default, "description": field.description}
    for name, field in LoggingConfig.model_fields.items():
        default = field.default
        keys[f"logging.{name}"] = {
            "type": type(default),
            "default": default,
            "description": _LOGGING_DESCRIPTIONS[name],
        }
    return keys


# Config keys understood in .repodesc/config.toml / [tool.repodesc]
CONFIGURABLE_KEYS: dict[str, dict[str, Any]] = _catalogue()


def config_get(key: str, config_path: Path | None = None, start_dir: str | None = None) -> Any:
    """Get an effective config value by dot-notation key, or None if unknown."""
    return load_settings(config_path=config_path, start_dir=start_dir).config.get(key)


def config_list() -> dict[str, dict[str, Any]]:
    """List all configurable keys with descriptions."""
    return CONFIGURABLE_KEYS


__all__ = [
    "CONFIGURABLE_KEYS",
    "config_get",
    "config_list",
]
