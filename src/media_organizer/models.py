"""Data models for media-organizer."""

from collections.abc import Iterator
from collections.abc import Mapping
from dataclasses import dataclass
from dataclasses import field
from dataclasses import fields
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any

from .exceptions import ValidationError
from .folders import validate


def _build(cls, data: Mapping[str, Any] | None, **converted: Any):
    """Construct a dataclass from a plain mapping, rejecting unknown keys."""
    data = dict(data or {})
    known = {f.name for f in fields(cls)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValidationError(f"Unknown {cls.__name__} field(s): {', '.join(unknown)}")
    data.update({key: value for key, value in converted.items() if value is not None})
    try:
        return cls(**data)
    except TypeError as e:
        raise ValidationError(f"Invalid {cls.__name__}: {e}") from e


def _prune(data: dict[str, Any]) -> dict[str, Any]:
    """Drop unset entries so YAML output only carries explicit values."""
    return {key: value for key, value in data.items() if value is not None and value != {} and value != []}


class AssetKind(Enum):
    """Kind of asset being produced, selects video-only planning rules."""

    IMAGE = "image"
    VIDEO = "video"


class VariantKind(Enum):
    """Origin of a planned eager variant."""

    OPTIMIZED = "optimized"
    THUMBNAIL = "thumbnail"
    CUSTOM = "custom"
    VIDEO_THUMBNAIL = "video_thumbnail"


@dataclass(frozen=True)
class OptimizedVersion:
    """A re-encoded format of the original (e.g. webp) with no resizing."""

    name: str
    format: str
    quality: str | int | None = None
    preserve_transparency: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        return _prune(
            {
                "name": self.name,
                "format": self.format,
                "quality": self.quality,
                "preserve_transparency": self.preserve_transparency,
            }
        )


@dataclass(frozen=True)
class ThumbnailSize:
    """A named thumbnail preset with fixed dimensions."""

    name: str
    width: int
    height: int
    crop: str | None = None
    quality: str | int | None = None
    format: str | None = None
    gravity: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _prune(
            {
                "name": self.name,
                "width": self.width,
                "height": self.height,
                "crop": self.crop,
                "quality": self.quality,
                "format": self.format,
                "gravity": self.gravity,
            }
        )


@dataclass(frozen=True)
class VersioningConfig:
    """Versioning block shared by the global and project layers.

    Every field is optional; None means "not set at this layer" and lets a
    lower-precedence layer (or the hard default) supply the value.
    """

    keep_original: bool | None = None
    generate_optimized: bool | None = None
    optimized_versions: tuple[OptimizedVersion, ...] | None = None
    generate_thumbnails: bool | None = None
    thumbnail_sizes: tuple[ThumbnailSize, ...] | None = None
    eager: bool | None = None

    def __post_init__(self):
        if self.optimized_versions is not None:
            object.__setattr__(self, "optimized_versions", tuple(self.optimized_versions))
        if self.thumbnail_sizes is not None:
            object.__setattr__(self, "thumbnail_sizes", tuple(self.thumbnail_sizes))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "VersioningConfig":
        data = data or {}
        optimized = data.get("optimized_versions")
        sizes = data.get("thumbnail_sizes")
        return _build(
            cls,
            data,
            optimized_versions=None if optimized is None else tuple(_build(OptimizedVersion, v) for v in optimized),
            thumbnail_sizes=None if sizes is None else tuple(_build(ThumbnailSize, s) for s in sizes),
        )

    def to_dict(self) -> dict[str, Any]:
        return _prune(
            {
                "keep_original": self.keep_original,
                "generate_optimized": self.generate_optimized,
                "optimized_versions": None
                if self.optimized_versions is None
                else [v.to_dict() for v in self.optimized_versions],
                "generate_thumbnails": self.generate_thumbnails,
                "thumbnail_sizes": None
                if self.thumbnail_sizes is None
                else [s.to_dict() for s in self.thumbnail_sizes],
                "eager": self.eager,
            }
        )


@dataclass(frozen=True)
class FolderConfig:
    """Global folder settings."""

    auto_create_folders: bool | None = None


@dataclass(frozen=True)
class UploadDefaults:
    """Global defaults applied to every upload request."""

    resource_type: str | None = None
    overwrite: bool | None = None
    invalidate: bool | None = None
    tags: tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "tags", tuple(self.tags))


@dataclass(frozen=True)
class GlobalConfig:
    """Process-wide configuration, set once at startup.

    The identity credentials are opaque to the organizer but required:
    construction fails with ValidationError when any of them is missing.

    Attributes:
        cloud_name: Remote account name (also used for delivery URLs)
        api_key: API key
        api_secret: API secret
        upload_preset: Optional preset for unsigned uploads
        folder: Folder settings
        versioning: Global versioning layer
        upload_defaults: Defaults for upload requests
    """

    cloud_name: str
    api_key: str
    api_secret: str
    upload_preset: str | None = None
    folder: FolderConfig = field(default_factory=FolderConfig)
    versioning: VersioningConfig = field(default_factory=VersioningConfig)
    upload_defaults: UploadDefaults = field(default_factory=UploadDefaults)

    def __post_init__(self):
        for name in ("cloud_name", "api_key", "api_secret"):
            if not getattr(self, name):
                raise ValidationError(f"{name} is required")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GlobalConfig":
        data = data or {}
        defaults = data.get("upload_defaults")
        return _build(
            cls,
            data,
            cloud_name=data.get("cloud_name") or "",
            api_key=data.get("api_key") or "",
            api_secret=data.get("api_secret") or "",
            folder=_build(FolderConfig, data.get("folder")),
            versioning=VersioningConfig.from_dict(data.get("versioning")),
            upload_defaults=_build(UploadDefaults, defaults) if defaults is not None else None,
        )


@dataclass(frozen=True)
class ProjectConfig:
    """A project layer: root folder, folder structure and versioning overrides.

    ``structure`` maps an asset type (e.g. "artworks") to a path template;
    the special key "template" is the fallback used for unlisted types.
    """

    name: str
    root_folder: str
    structure: Mapping[str, str] = field(default_factory=dict)
    versioning: VersioningConfig = field(default_factory=VersioningConfig)
    default_tags: tuple[str, ...] = ()
    default_context: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        if self.root_folder:
            validate(self.root_folder)
        object.__setattr__(self, "structure", MappingProxyType(dict(self.structure)))
        object.__setattr__(self, "default_tags", tuple(self.default_tags))
        object.__setattr__(self, "default_context", MappingProxyType(dict(self.default_context)))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ProjectConfig":
        data = data or {}
        return _build(cls, data, versioning=VersioningConfig.from_dict(data.get("versioning")))

    def to_dict(self) -> dict[str, Any]:
        return _prune(
            {
                "name": self.name,
                "root_folder": self.root_folder,
                "structure": dict(self.structure),
                "versioning": self.versioning.to_dict(),
                "default_tags": list(self.default_tags),
                "default_context": dict(self.default_context),
            }
        )


@dataclass(frozen=True)
class EffectiveVersioning:
    """Fully resolved versioning settings; no field is ever None."""

    keep_original: bool
    generate_optimized: bool
    optimized_versions: tuple[OptimizedVersion, ...]
    generate_thumbnails: bool
    thumbnail_sizes: tuple[ThumbnailSize, ...]
    eager: bool


@dataclass(frozen=True)
class EffectiveFolder:
    """Fully resolved folder settings."""

    auto_create_folders: bool


@dataclass(frozen=True)
class EffectiveConfig:
    """Result of merging the global and project layers for one operation."""

    versioning: EffectiveVersioning
    folder: EffectiveFolder


@dataclass(frozen=True)
class FolderOptions:
    """Per-call folder path parameters.

    ``custom`` values are appended (or substituted into a template) in
    insertion order.
    """

    type: str | None = None
    year: int | None = None
    month: int | None = None
    category: str | None = None
    custom: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class VariantOverrides:
    """Per-call overrides for variant planning.

    Attributes:
        generate_optimized: Override the effective generate_optimized flag
        generate_thumbnails: Override the effective generate_thumbnails flag
        thumbnail_sizes: Replaces the effective thumbnail list as a whole
        eager: Ad hoc transformation records, appended verbatim
        video_thumbnail: Request a poster frame (video assets only)
        thumbnail_time: Poster frame offset in seconds (default 1)
    """

    generate_optimized: bool | None = None
    generate_thumbnails: bool | None = None
    thumbnail_sizes: tuple[ThumbnailSize, ...] | None = None
    eager: tuple[dict[str, Any], ...] = ()
    video_thumbnail: bool = False
    thumbnail_time: float | None = None


@dataclass(frozen=True)
class Variant:
    """One eager transformation request."""

    kind: VariantKind
    params: Mapping[str, Any]
    name: str | None = None

    def __post_init__(self):
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))


@dataclass(frozen=True)
class VariantPlan:
    """Ordered eager transformation requests for a single upload."""

    variants: tuple[Variant, ...] = ()
    eager: bool = True

    def __iter__(self) -> Iterator[Variant]:
        return iter(self.variants)

    def __len__(self) -> int:
        return len(self.variants)

    def to_eager(self) -> list[dict[str, Any]]:
        """Parameter records in plan order, as sent to the remote service."""
        return [dict(variant.params) for variant in self.variants]

    def thumbnails(self) -> list[Variant]:
        return [variant for variant in self.variants if variant.kind is VariantKind.THUMBNAIL]


@dataclass(frozen=True)
class MatchedVariants:
    """Produced variants mapped back to the names they were requested under."""

    thumbnails: dict[str, dict[str, Any]] = field(default_factory=dict)
    optimized: dict[str, dict[str, Any]] = field(default_factory=dict)
    video_thumbnail: dict[str, Any] | None = None


@dataclass(frozen=True)
class ConfigPaths:
    """Locations of YAML settings files.

    Attributes:
        settings: Global settings file (required)
        project: Project file to activate on load (optional)
    """

    settings: Path
    project: Path | None = None
