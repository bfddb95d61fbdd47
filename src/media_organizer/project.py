"""Active project slot and project-relative path building."""

import logging
import re
import threading

from .exceptions import StateError
from .models import FolderOptions
from .models import ProjectConfig
from .templates import build_path

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*[+-]?\d+")


def template_for(project: ProjectConfig, asset_type: str | None) -> str | None:
    """Per-type template, else the "template" fallback, else None."""
    structure = project.structure
    if asset_type and structure.get(asset_type):
        return structure[asset_type]
    return structure.get("template") or None


def _parse_int(value: str) -> int | None:
    """Leading integer of a segment ("2024abc" -> 2024); None when absent or zero."""
    match = _LEADING_INT.match(value or "")
    if match is None:
        return None
    return int(match.group(0)) or None


class ProjectContext:
    """Holds at most one active project.

    The slot is replaced atomically under a lock; readers receive the
    immutable ProjectConfig itself, so they always see either the previous
    project or the new one in full.
    """

    def __init__(self, project: ProjectConfig | None = None):
        self._lock = threading.Lock()
        self._project = project

    # ===== Active Project =====

    def set_project(self, project: ProjectConfig) -> None:
        """Activate a project, replacing any previous one.

        Args:
            project: Project configuration to activate
        """
        with self._lock:
            previous = self._project
            self._project = project
        if previous is not None and previous.name != project.name:
            logger.info(f"Replaced active project '{previous.name}' with '{project.name}'")
        else:
            logger.info(f"Set active project to '{project.name}'")

    def get_project(self) -> ProjectConfig | None:
        """Snapshot of the active project, or None when inactive."""
        with self._lock:
            return self._project

    @property
    def is_active(self) -> bool:
        return self.get_project() is not None

    def _require_project(self) -> ProjectConfig:
        project = self.get_project()
        if project is None:
            raise StateError("No project set. Call set_project() first.")
        return project

    # ===== Paths =====

    def get_root_folder(self) -> str:
        """Root folder of the active project.

        Raises:
            StateError: If no project is active
        """
        return self._require_project().root_folder

    def get_structure_template(self, asset_type: str) -> str | None:
        """Template for an asset type.

        Returns the project's template for ``asset_type``, else its
        "template" fallback, else None. None means "build the path without a
        template", not an error.

        Raises:
            StateError: If no project is active
        """
        return template_for(self._require_project(), asset_type)

    def get_project_path(self, asset_type: str, *segments: str) -> str:
        """Folder path for an asset type inside the active project.

        Positional segments map to year, month, category; any further
        segments become custom values "segment3", "segment4", ... Year and
        month segments that are not positive integers are dropped.

        Example:
            With root "projects/x" and no structure,
            get_project_path("artworks", "2024", "3") gives
            "projects/x/artworks/2024/03".
        """
        project = self._require_project()
        template = template_for(project, asset_type)

        custom = {f"segment{index}": value for index, value in enumerate(segments) if index > 2}
        options = FolderOptions(
            type=asset_type,
            year=_parse_int(segments[0]) if len(segments) > 0 else None,
            month=_parse_int(segments[1]) if len(segments) > 1 else None,
            category=segments[2] if len(segments) > 2 else None,
            custom=custom,
        )
        return build_path(project.root_folder, template, options)

    def build_folder_options(
        self,
        asset_type: str,
        year: int | None = None,
        month: int | None = None,
        category: str | None = None,
        custom: dict[str, str] | None = None,
    ) -> FolderOptions:
        """Folder options for an asset type, ready for build_path()."""
        return FolderOptions(type=asset_type, year=year, month=month, category=category, custom=dict(custom or {}))
