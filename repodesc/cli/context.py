"""
Click context extension for repodesc CLI.

Provides RepodescContext dataclass that holds repodesc-specific data
passed through the Click command chain via ctx.obj.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from ..core.settings import LoadedSettings, load_settings

if TYPE_CHECKING:
    from ..core.interfaces.logger import ILogger
    from ..core.interfaces.vcs import IVCSProvider
    from ..services.resolution import DescriptorResolver


@dataclass
class RepodescContext:
    """Extended context passed through Click command chain.

    Created once at CLI startup from the group options. Settings are loaded
    per command because the config file search starts at the inspected
    repository path.

    Attributes:
        config_path: Explicit config file (--config), or None to search
        log_level: Log level override (--log-level), or None
        vcs: VCS provider override; the registered 'git' provider if None
    """

    config_path: Path | None = None
    log_level: str | None = None
    vcs: IVCSProvider | None = None

    def load_settings(self, start_dir: Path | str | None = None) -> LoadedSettings:
        """Load settings, searching for a config file from start_dir."""
        return load_settings(
            config_path=self.config_path,
            start_dir=str(start_dir) if start_dir is not None else None,
        )

    def create_resolver(self, start_dir: Path) -> tuple[DescriptorResolver, LoadedSettings]:
        """Bootstrap services and build a resolver for the repository at start_dir.

        Returns:
            The resolver and the settings it was built from
        """
        from ..core.bootstrap import bootstrap
        from ..core.interfaces.logger import ILogger
        from ..services.resolution import DescriptorResolver

        loaded = self.load_settings(start_dir)
        container = bootstrap(loaded.config.logging)

        logger: ILogger = container.resolve(ILogger)  # type: ignore[type-abstract]
        if self.log_level:
            logger.set_level(self.log_level)
        if loaded.config_file:
            logger.debug("Using config file %s", loaded.config_file)

        vcs = self.vcs or container.get_vcs_provider("git")
        if not vcs.is_available():
            logger.warning("%s executable not found; repository queries will fall back", vcs.name)

        resolver = DescriptorResolver(vcs, loaded.config.descriptor_config(), logger)
        return resolver, loaded
