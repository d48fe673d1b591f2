"""
Pydantic Settings for repodesc configuration.

Provides settings loading from TOML files, environment variables, and defaults.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib

from pydantic import ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from .exceptions import ConfigFileError, ConfigValidationError
from .models.config import DescriptorTokens, LoggingConfig, RepodescConfig

CONFIG_DIR_NAME = ".repodesc"
CONFIG_FILE_NAME = "config.toml"
PYPROJECT_TABLE = "repodesc"


def _get_logger():
    from ..services.logging import NullLogger
    from .di import resolve_or_default
    from .interfaces.logger import ILogger

    return resolve_or_default(ILogger, NullLogger)


def find_config_file(start_dir: str | None = None) -> Path | None:
    """
    Find .repodesc/config.toml by walking up from start_dir (or cwd).

    A pyproject.toml with a [tool.repodesc] table counts as well.

    Returns:
        Path to config file, or None if not found.
    """
    start = Path(start_dir).resolve() if start_dir else Path.cwd()

    for parent in [start, *list(start.parents)]:
        config_path = parent / CONFIG_DIR_NAME / CONFIG_FILE_NAME
        if config_path.is_file():
            return config_path

        pyproject = parent / "pyproject.toml"
        if pyproject.is_file():
            try:
                with open(pyproject, "rb") as f:
                    data = tomllib.load(f)
                if PYPROJECT_TABLE in data.get("tool", {}):
                    return pyproject
            except tomllib.TOMLDecodeError as e:
                _get_logger().debug("Failed to parse pyproject.toml at %s: %s", pyproject, e)
            except OSError as e:
                _get_logger().debug("Failed to read pyproject.toml at %s: %s", pyproject, e)

    return None


def check_config_path(config_path: Path) -> None:
    """
    Validate an explicitly requested config file.

    Raises:
        ConfigFileError: If the path is missing, not a file, or unreadable
    """
    if not config_path.exists():
        raise ConfigFileError("Path not found", file_path=str(config_path))
    if not config_path.is_file():
        raise ConfigFileError("Path is not a file", file_path=str(config_path))
    if not os.access(config_path, os.R_OK):
        raise ConfigFileError("File is not readable", file_path=str(config_path))


class TomlConfigSource(PydanticBaseSettingsSource):
    """Custom settings source that loads from TOML config files.

    With ``strict`` set (explicit ``--config``), read and parse errors raise
    ConfigFileError. Otherwise they are logged and the file is ignored.
    """

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        config_path: Path | None = None,
        start_dir: str | None = None,
        strict: bool = False,
    ):
        super().__init__(settings_cls)
        self._config_path = config_path
        self._start_dir = start_dir
        self._strict = strict
        self._data: dict[str, Any] | None = None
        self.loaded_from: Path | None = None
        self.error: str | None = None

    def _load_toml(self) -> dict[str, Any]:
        """Load and cache TOML data."""
        if self._data is not None:
            return self._data

        self._data = {}

        path = self._config_path
        if path is None:
            path = find_config_file(self._start_dir)

        if path is None:
            return self._data

        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            if self._strict:
                raise ConfigFileError(
                    f"Failed to parse config file: {e}", file_path=str(path), cause=e
                ) from e
            _get_logger().warning("Failed to parse config file %s: %s", path, e)
            self.error = f"Failed to parse config file: {e}"
            return self._data
        except OSError as e:
            if self._strict:
                raise ConfigFileError(
                    f"Failed to read config file: {e}", file_path=str(path), cause=e
                ) from e
            _get_logger().warning("Failed to read config file %s: %s", path, e)
            self.error = f"Failed to read config file: {e}"
            return self._data

        if path.name == "pyproject.toml":
            data = data.get("tool", {}).get(PYPROJECT_TABLE, {})

        self._data = data
        self.loaded_from = path
        return self._data

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Get field value from TOML data."""
        data = self._load_toml()
        return data.get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return all TOML data for settings initialization."""
        return self._load_toml()


class RepodescSettings(BaseSettings, DescriptorTokens):
    """repodesc configuration settings with TOML and environment variable support.

    Priority (highest to lowest):
    1. Explicit init values
    2. Environment variables (REPODESC_<KEY>, REPODESC_<section>__<field>)
    3. TOML config file (.repodesc/config.toml or pyproject.toml [tool.repodesc])
    4. Model defaults

    The descriptor token fields are inherited from DescriptorTokens.
    """

    model_config = {
        "env_prefix": "REPODESC_",
        "env_nested_delimiter": "__",
        "extra": "ignore",
    }

    logging: LoggingConfig = LoggingConfig()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources to add TOML loading.

        The TOML source is prepared by load_settings() and handed over
        through a module-level variable.
        """
        sources: tuple[PydanticBaseSettingsSource, ...] = (init_settings, env_settings)
        if _current_toml_source is not None:
            sources += (_current_toml_source,)
        return sources

    def to_config(self) -> RepodescConfig:
        """Convert settings to the plain configuration model."""
        return RepodescConfig.model_validate(self.model_dump())


class LoadedSettings:
    """Result of load_settings(): the merged config and where it came from."""

    def __init__(
        self,
        config: RepodescConfig,
        config_file: Path | None = None,
        config_error: str | None = None,
    ) -> None:
        self.config = config
        self.config_file = config_file
        self.config_error = config_error


# Module-level variable for passing to settings_customise_sources
_current_toml_source: TomlConfigSource | None = None


def load_settings(
    config_path: Path | None = None,
    start_dir: str | None = None,
    **overrides: Any,
) -> LoadedSettings:
    """Load repodesc settings from config file and environment.

    Args:
        config_path: Explicit path to config file (errors are fatal)
        start_dir: Directory to start searching from (if config_path not given)
        **overrides: Explicit values taking precedence over every source

    Returns:
        LoadedSettings with all sources merged

    Raises:
        ConfigFileError: If an explicit config file cannot be used
        ConfigValidationError: If a merged value is invalid
    """
    global _current_toml_source

    if config_path is not None:
        check_config_path(config_path)

    toml_source = TomlConfigSource(
        RepodescSettings,
        config_path=config_path,
        start_dir=start_dir,
        strict=config_path is not None,
    )
    # Parse eagerly so strict-mode errors surface as ConfigFileError
    toml_source()

    _current_toml_source = toml_source
    try:
        settings = RepodescSettings(**overrides)
    except ValidationError as e:
        first = e.errors()[0]
        key = ".".join(str(part) for part in first["loc"])
        raise ConfigValidationError(
            f"Invalid configuration value: {first['msg']}",
            key=key,
            value=str(first.get("input")),
            cause=e,
        ) from e
    finally:
        _current_toml_source = None

    return LoadedSettings(
        config=settings.to_config(),
        config_file=toml_source.loaded_from,
        config_error=toml_source.error,
    )
