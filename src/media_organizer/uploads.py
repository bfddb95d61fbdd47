"""Assemble upload request parameters for the remote asset service."""

import logging
from dataclasses import dataclass
from dataclasses import field
from typing import Any

from .folders import normalize_validated
from .manager import ConfigManager
from .models import AssetKind
from .models import FolderOptions
from .models import MatchedVariants
from .models import ThumbnailSize
from .models import VariantKind
from .models import VariantOverrides
from .models import VariantPlan
from .planner import match_variants
from .utils import deep_merge
from .utils import first_set
from .utils import unique
from .validation import IMAGE_MAX_BYTES
from .validation import VIDEO_MAX_BYTES
from .validation import generate_public_id
from .validation import validate_file_size
from .validation import validate_file_type
from .validation import validate_public_id

logger = logging.getLogger(__name__)


@dataclass
class UploadOptions:
    """Per-call upload options.

    ``folder`` is either a literal path or FolderOptions resolved through
    the active project. Versioning fields left as None fall back to the
    effective configuration.
    """

    folder: str | FolderOptions | None = None
    public_id: str | None = None
    use_timestamp: bool = False
    generate_optimized: bool | None = None
    generate_thumbnails: bool | None = None
    thumbnail_sizes: list[ThumbnailSize] | None = None
    tags: list[str] = field(default_factory=list)
    context: dict[str, str] = field(default_factory=dict)
    eager: list[dict[str, Any]] = field(default_factory=list)
    overwrite: bool | None = None
    invalidate: bool | None = None
    resource_type: str | None = None


@dataclass
class VideoUploadOptions(UploadOptions):
    """Upload options with video-only settings."""

    generate_thumbnail: bool = False
    thumbnail_time: float | None = None
    streaming_profile: str | None = None
    video_codec: str | None = None
    audio_codec: str | None = None


@dataclass(frozen=True)
class UploadRequest:
    """Parameters for the remote uploader plus the plan they were built from."""

    params: dict[str, Any]
    plan: VariantPlan

    def match(self, produced: list[dict[str, Any]] | None) -> MatchedVariants:
        """Interpret the eager records returned for this request."""
        return match_variants(self.plan, produced)


def resolve_folder(manager: ConfigManager, folder: str | FolderOptions | None) -> str | None:
    """Destination folder for an upload, or None for the account root."""
    if folder is None:
        return None
    if isinstance(folder, FolderOptions):
        built = manager.build_folder(folder)
        return normalize_validated(built) if built else None
    return normalize_validated(folder)


def _resource_type(requested: str | None, default: str | None, kind: AssetKind) -> str:
    """Call value, else the global default when it fits the asset kind, else the kind."""
    if requested:
        return requested
    if default in ("auto", kind.value):
        return default
    return kind.value


def _base_params(manager: ConfigManager, options: UploadOptions, kind: AssetKind, folder: str | None) -> dict:
    global_config = manager.get_global_config()
    upload_defaults = global_config.upload_defaults
    project = manager.get_project()

    params: dict[str, Any] = {
        "resource_type": _resource_type(options.resource_type, upload_defaults.resource_type, kind),
        "public_id": options.public_id,
        "overwrite": first_set(options.overwrite, upload_defaults.overwrite, default=False),
        "invalidate": first_set(options.invalidate, upload_defaults.invalidate, default=True),
    }

    if global_config.upload_preset:
        params["upload_preset"] = global_config.upload_preset

    if folder:
        params["folder"] = folder

    tags = unique(project.default_tags if project else None, upload_defaults.tags, options.tags)
    if tags:
        params["tags"] = tags

    context = deep_merge(dict(project.default_context) if project else {}, options.context)
    if context:
        params["context"] = context

    return params


def _public_id(file_name: str, options: UploadOptions, folder: str | None) -> str:
    if options.public_id:
        validate_public_id(options.public_id)
        return options.public_id
    return generate_public_id(file_name, folder, options.use_timestamp)


def prepare_image_upload(
    manager: ConfigManager,
    file_name: str,
    options: UploadOptions | None = None,
    *,
    content_type: str | None = None,
    size: int | None = None,
) -> UploadRequest:
    """Build the upload request for an image.

    Args:
        manager: Configuration source
        file_name: Original file name (used to derive the public ID)
        options: Per-call options
        content_type: MIME type, validated against image/* when given
        size: Size in bytes, validated against the image limit when given

    Returns:
        UploadRequest

    Raises:
        ValidationError: If the file, folder or public ID is invalid
    """
    options = options or UploadOptions()
    if content_type is not None:
        validate_file_type(content_type, ["image/*"])
    if size is not None:
        validate_file_size(size, IMAGE_MAX_BYTES)

    folder = resolve_folder(manager, options.folder)
    variant_plan = manager.plan_variants(
        AssetKind.IMAGE,
        VariantOverrides(
            generate_optimized=options.generate_optimized,
            generate_thumbnails=options.generate_thumbnails,
            thumbnail_sizes=None if options.thumbnail_sizes is None else tuple(options.thumbnail_sizes),
            eager=tuple(options.eager),
        ),
    )

    params = _base_params(manager, options, AssetKind.IMAGE, folder)
    params["public_id"] = _public_id(file_name, options, folder)

    if len(variant_plan) and variant_plan.eager:
        params["eager"] = variant_plan.to_eager()
    elif len(variant_plan):
        logger.debug(f"Eager generation disabled; {len(variant_plan)} variant(s) left to on-demand delivery")

    return UploadRequest(params=params, plan=variant_plan)


def prepare_video_upload(
    manager: ConfigManager,
    file_name: str,
    options: VideoUploadOptions | None = None,
    *,
    content_type: str | None = None,
    size: int | None = None,
) -> UploadRequest:
    """Build the upload request for a video.

    A requested poster frame is always submitted eagerly; other variants
    are submitted only when eager generation is enabled.

    Raises:
        ValidationError: If the file, folder or public ID is invalid
    """
    options = options or VideoUploadOptions()
    if content_type is not None:
        validate_file_type(content_type, ["video/*"])
    if size is not None:
        validate_file_size(size, VIDEO_MAX_BYTES)

    folder = resolve_folder(manager, options.folder)
    variant_plan = manager.plan_variants(
        AssetKind.VIDEO,
        VariantOverrides(
            generate_optimized=options.generate_optimized,
            generate_thumbnails=options.generate_thumbnails,
            thumbnail_sizes=None if options.thumbnail_sizes is None else tuple(options.thumbnail_sizes),
            eager=tuple(options.eager),
            video_thumbnail=options.generate_thumbnail,
            thumbnail_time=options.thumbnail_time,
        ),
    )

    params = _base_params(manager, options, AssetKind.VIDEO, folder)
    params["public_id"] = _public_id(file_name, options, folder)

    for key in ("streaming_profile", "video_codec", "audio_codec"):
        value = getattr(options, key)
        if value:
            params[key] = value

    # The poster frame is always requested; the rest follows the eager setting.
    eager = [
        dict(variant.params)
        for variant in variant_plan
        if variant_plan.eager or variant.kind is VariantKind.VIDEO_THUMBNAIL
    ]
    if eager:
        params["eager"] = eager

    return UploadRequest(params=params, plan=variant_plan)
