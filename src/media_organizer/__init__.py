"""media-organizer: layered configuration and folder organization for media uploads.

This library decides *where* an asset goes and *which* derived variants to
request for it, for a remote media-asset service:
- Global configuration merged with an optional active project, field by field
- Folder path templates such as "artworks/{year}/{category}"
- Ordered eager variant plans (optimized formats, thumbnails, video posters)

The network client is not part of this library; it consumes the folder,
parameters and variant plan produced here.

Public API:
    ConfigManager: Global configuration plus the active project
    ProjectContext: Single-slot holder for the active project
    GlobalConfig, ProjectConfig, VersioningConfig: Configuration layers
    resolve: Merge layers into an EffectiveConfig
    expand, build_path: Path templating
    normalize, validate, parse_path: Folder path normalization
    plan, match_variants: Variant planning and result matching
    prepare_image_upload, prepare_video_upload: Upload request assembly
    UrlBuilder: Delivery URL assembly
    SearchQuery, build_search_params: Search expression assembly
    OrganizerError, ValidationError, StateError, ConfigFileError: Exception types

Example:
    ```python
    from media_organizer import ConfigManager, FolderOptions, GlobalConfig, ProjectConfig

    manager = ConfigManager(GlobalConfig(cloud_name="demo", api_key="key", api_secret="secret"))
    manager.set_project(
        ProjectConfig(
            name="portfolio",
            root_folder="portfolio",
            structure={"artworks": "artworks/{year}/{category}"},
        )
    )

    manager.build_folder(FolderOptions(type="artworks", year=2024, category="oil"))
    # -> "portfolio/artworks/2024/oil"
    ```
"""

from .exceptions import ConfigFileError
from .exceptions import OrganizerError
from .exceptions import StateError
from .exceptions import ValidationError
from .folders import FolderPath
from .folders import normalize
from .folders import parse_path
from .folders import validate
from .manager import ConfigManager
from .models import AssetKind
from .models import ConfigPaths
from .models import EffectiveConfig
from .models import FolderOptions
from .models import GlobalConfig
from .models import MatchedVariants
from .models import OptimizedVersion
from .models import ProjectConfig
from .models import ThumbnailSize
from .models import Variant
from .models import VariantKind
from .models import VariantOverrides
from .models import VariantPlan
from .models import VersioningConfig
from .planner import match_variants
from .planner import plan
from .project import ProjectContext
from .resolver import resolve
from .search import SearchQuery
from .search import SortField
from .search import build_search_expression
from .search import build_search_params
from .templates import build_path
from .templates import expand
from .uploads import UploadOptions
from .uploads import UploadRequest
from .uploads import VideoUploadOptions
from .uploads import prepare_image_upload
from .uploads import prepare_video_upload
from .urls import UrlBuilder
from .utils import deep_merge

__version__ = "0.1.0"

__all__ = [
    "ConfigManager",
    "ConfigPaths",
    "ProjectContext",
    "GlobalConfig",
    "ProjectConfig",
    "VersioningConfig",
    "OptimizedVersion",
    "ThumbnailSize",
    "EffectiveConfig",
    "FolderOptions",
    "FolderPath",
    "AssetKind",
    "Variant",
    "VariantKind",
    "VariantOverrides",
    "VariantPlan",
    "MatchedVariants",
    "resolve",
    "expand",
    "build_path",
    "normalize",
    "validate",
    "parse_path",
    "plan",
    "match_variants",
    "UploadOptions",
    "VideoUploadOptions",
    "UploadRequest",
    "prepare_image_upload",
    "prepare_video_upload",
    "UrlBuilder",
    "SearchQuery",
    "SortField",
    "build_search_expression",
    "build_search_params",
    "deep_merge",
    "OrganizerError",
    "ValidationError",
    "StateError",
    "ConfigFileError",
]
