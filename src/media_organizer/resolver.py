"""Merge the global and project layers into an effective configuration."""

from . import defaults
from .models import EffectiveConfig
from .models import EffectiveFolder
from .models import EffectiveVersioning
from .models import GlobalConfig
from .models import ProjectConfig
from .models import VersioningConfig
from .utils import first_set


def resolve_versioning(project: VersioningConfig | None, global_: VersioningConfig | None) -> EffectiveVersioning:
    """Resolve each versioning field independently.

    Resolution order per field (highest to lowest priority):
    1. Project layer
    2. Global layer
    3. Hard default

    A project that sets only one field keeps every other field from the
    global layer.
    """
    project = project or VersioningConfig()
    global_ = global_ or VersioningConfig()

    return EffectiveVersioning(
        keep_original=first_set(
            project.keep_original, global_.keep_original, default=defaults.DEFAULT_KEEP_ORIGINAL
        ),
        generate_optimized=first_set(
            project.generate_optimized, global_.generate_optimized, default=defaults.DEFAULT_GENERATE_OPTIMIZED
        ),
        optimized_versions=first_set(
            project.optimized_versions, global_.optimized_versions, default=defaults.DEFAULT_OPTIMIZED_VERSIONS
        ),
        generate_thumbnails=first_set(
            project.generate_thumbnails, global_.generate_thumbnails, default=defaults.DEFAULT_GENERATE_THUMBNAILS
        ),
        thumbnail_sizes=first_set(
            project.thumbnail_sizes, global_.thumbnail_sizes, default=defaults.DEFAULT_THUMBNAIL_SIZES
        ),
        eager=first_set(project.eager, global_.eager, default=defaults.DEFAULT_EAGER),
    )


def resolve(global_config: GlobalConfig, project: ProjectConfig | None = None) -> EffectiveConfig:
    """Compute the effective configuration for one operation.

    Folder settings only have a global layer; projects cannot override them.

    Args:
        global_config: Process-wide configuration
        project: Active project, if any

    Returns:
        Fully resolved EffectiveConfig
    """
    return EffectiveConfig(
        versioning=resolve_versioning(project.versioning if project else None, global_config.versioning),
        folder=EffectiveFolder(
            auto_create_folders=first_set(
                global_config.folder.auto_create_folders, default=defaults.DEFAULT_AUTO_CREATE_FOLDERS
            )
        ),
    )
