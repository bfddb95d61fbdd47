"""Configuration manager: global settings plus the active project."""

import logging
from pathlib import Path
from typing import Any

import yaml

from .exceptions import ConfigFileError
from .exceptions import StateError
from .models import AssetKind
from .models import ConfigPaths
from .models import EffectiveConfig
from .models import FolderOptions
from .models import GlobalConfig
from .models import ProjectConfig
from .models import VariantOverrides
from .models import VariantPlan
from .planner import plan
from .project import ProjectContext
from .project import template_for
from .resolver import resolve
from .templates import build_path

logger = logging.getLogger(__name__)


class ConfigManager:
    """Manages the global configuration and the active project.

    Resolution order for versioning fields (highest to lowest priority):
    1. Per-call overrides (see plan_variants)
    2. Active project
    3. Global configuration
    4. Hard defaults

    Args:
        global_config: Validated global configuration
        project: Project to activate immediately (optional)
    """

    def __init__(self, global_config: GlobalConfig, project: ProjectConfig | None = None):
        self.global_config = global_config
        self.context = ProjectContext()
        if project is not None:
            self.context.set_project(project)

    @classmethod
    def from_paths(cls, paths: ConfigPaths) -> "ConfigManager":
        """Create a manager from YAML settings files.

        Args:
            paths: ConfigPaths defining where settings files are located

        Raises:
            ConfigFileError: If the settings file is missing or unreadable
            ValidationError: If the settings are invalid
        """
        settings = cls._read_yaml(paths.settings)
        if settings is None:
            raise ConfigFileError(f"Settings file not found: {paths.settings}")

        manager = cls(GlobalConfig.from_dict(settings))
        logger.info(f"Loaded settings from {paths.settings}")

        if paths.project is not None:
            manager.load_project(paths.project)
        return manager

    # ===== Project Management =====

    def set_project(self, project: ProjectConfig) -> None:
        """Activate a project (replaces any active project)."""
        self.context.set_project(project)

    def get_project(self) -> ProjectConfig | None:
        """Get the active project or None."""
        return self.context.get_project()

    def load_project(self, path: Path) -> ProjectConfig:
        """Read a project file and activate it.

        Raises:
            ConfigFileError: If the file is missing or unreadable
        """
        data = self._read_yaml(path)
        if data is None:
            raise ConfigFileError(f"Project file not found: {path}")
        project = ProjectConfig.from_dict(data)
        self.context.set_project(project)
        return project

    def save_project(self, path: Path) -> None:
        """Write the active project to a YAML file.

        Raises:
            StateError: If no project is active
            ConfigFileError: If write fails
        """
        project = self.context.get_project()
        if project is None:
            raise StateError("No project set. Call set_project() first.")
        self._write_yaml(path, project.to_dict())
        logger.info(f"Saved project '{project.name}' to {path}")

    # ===== Resolution =====

    def get_global_config(self) -> GlobalConfig:
        return self.global_config

    def get_effective_config(self) -> EffectiveConfig:
        """Merge global and active project settings."""
        return resolve(self.global_config, self.context.get_project())

    def build_folder(self, options: FolderOptions) -> str:
        """Destination folder for the given options.

        With an active project the path is placed under its root folder and
        built from its structure template for ``options.type``. Without one,
        the path is built from the options alone.
        """
        project = self.context.get_project()
        if project is None:
            return build_path("", None, options)

        return build_path(project.root_folder, template_for(project, options.type), options)

    def plan_variants(
        self,
        kind: AssetKind = AssetKind.IMAGE,
        overrides: VariantOverrides | None = None,
    ) -> VariantPlan:
        """Variant plan for one upload under the current configuration."""
        return plan(self.get_effective_config(), kind, overrides)

    # ===== Private Helpers =====

    @staticmethod
    def _read_yaml(path: Path) -> dict[str, Any] | None:
        """Read YAML file.

        Args:
            path: Path to YAML file

        Returns:
            Dictionary from YAML or None if file doesn't exist

        Raises:
            ConfigFileError: If the file cannot be parsed
        """
        path = Path(path)
        if not path.exists():
            return None

        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigFileError(f"Failed to read configuration from {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigFileError(f"Configuration in {path} must be a mapping")
        return data

    @staticmethod
    def _write_yaml(path: Path, data: dict[str, Any]) -> None:
        """Write YAML file.

        Args:
            path: Path to YAML file
            data: Dictionary to write

        Raises:
            ConfigFileError: If write fails
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        try:
            with open(path, "w") as f:
                yaml.dump(data, f, default_flow_style=False, sort_keys=False)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigFileError(f"Failed to write configuration to {path}: {e}") from e
