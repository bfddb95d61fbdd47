"""Plan the eager variants requested alongside an upload, and match results back."""

import logging
from collections.abc import Iterable
from collections.abc import Mapping
from typing import Any

from . import defaults
from .models import AssetKind
from .models import EffectiveConfig
from .models import MatchedVariants
from .models import ThumbnailSize
from .models import Variant
from .models import VariantKind
from .models import VariantOverrides
from .models import VariantPlan
from .utils import first_set

logger = logging.getLogger(__name__)


def preset_to_transformation(size: ThumbnailSize) -> dict[str, Any]:
    """Convert a thumbnail size to a transformation record, dropping unset keys."""
    transformation: dict[str, Any] = {}
    for key in ("width", "height", "crop", "quality", "format", "gravity"):
        value = getattr(size, key)
        if value:
            transformation[key] = value
    return transformation


def plan(
    effective: EffectiveConfig,
    kind: AssetKind = AssetKind.IMAGE,
    overrides: VariantOverrides | None = None,
) -> VariantPlan:
    """Build the ordered variant plan for one upload.

    The order is fixed because the remote service returns produced variants
    positionally and they are matched back by dimension:
    1. Optimized versions (format and quality, no dimensions)
    2. Thumbnails (per-call list if given, else the effective list)
    3. Caller-supplied ad hoc transformations, verbatim
    4. The video poster frame, when requested for a video

    Args:
        effective: Resolved configuration
        kind: Asset kind
        overrides: Per-call overrides (take precedence over effective values)

    Returns:
        VariantPlan
    """
    overrides = overrides or VariantOverrides()
    versioning = effective.versioning
    variants: list[Variant] = []

    if first_set(overrides.generate_optimized, default=versioning.generate_optimized):
        for version in versioning.optimized_versions:
            params: dict[str, Any] = {"format": version.format}
            if version.quality:
                params["quality"] = version.quality
            variants.append(Variant(VariantKind.OPTIMIZED, params, name=version.name))

    if first_set(overrides.generate_thumbnails, default=versioning.generate_thumbnails):
        # A per-call list replaces the effective list wholesale.
        sizes = first_set(overrides.thumbnail_sizes, default=versioning.thumbnail_sizes)
        for size in sizes:
            variants.append(Variant(VariantKind.THUMBNAIL, preset_to_transformation(size), name=size.name))

    for entry in overrides.eager:
        variants.append(Variant(VariantKind.CUSTOM, dict(entry)))

    if kind is AssetKind.VIDEO and overrides.video_thumbnail:
        variants.append(
            Variant(
                VariantKind.VIDEO_THUMBNAIL,
                {
                    "width": defaults.VIDEO_THUMBNAIL_WIDTH,
                    "height": defaults.VIDEO_THUMBNAIL_HEIGHT,
                    "crop": "fill",
                    "format": "jpg",
                    "start_offset": first_set(overrides.thumbnail_time, default=defaults.VIDEO_THUMBNAIL_TIME),
                },
                name="thumbnail",
            )
        )

    return VariantPlan(variants=tuple(variants), eager=versioning.eager)


def _find_thumbnail_name(produced: Mapping[str, Any], variant_plan: VariantPlan) -> str | None:
    for variant in variant_plan.thumbnails():
        if variant.params.get("width") == produced["width"] and variant.params.get("height") == produced["height"]:
            return variant.name
    return None


def match_variants(variant_plan: VariantPlan, produced: Iterable[Mapping[str, Any]] | None) -> MatchedVariants:
    """Map produced variants back to the names they were requested under.

    A produced record with both width and height is a thumbnail, named by an
    exact (width, height) match against the plan's thumbnail entries; records
    that match nothing are dropped. Anything else is an optimized version
    named "optimized-<format>" (format defaults to webp). For plans that
    requested a video poster frame, a jpg record carrying start_offset is
    returned as the video thumbnail.

    Args:
        variant_plan: The plan that was submitted
        produced: Eager result records from the remote service

    Returns:
        MatchedVariants
    """
    thumbnails: dict[str, dict[str, Any]] = {}
    optimized: dict[str, dict[str, Any]] = {}
    video_thumbnail: dict[str, Any] | None = None
    wants_poster = any(variant.kind is VariantKind.VIDEO_THUMBNAIL for variant in variant_plan)

    for record in produced or ():
        if wants_poster and video_thumbnail is None and record.get("format") == "jpg" and "start_offset" in record:
            video_thumbnail = {
                "secure_url": record.get("secure_url"),
                "time": record.get("start_offset") or defaults.VIDEO_THUMBNAIL_TIME,
            }
            continue

        if record.get("width") and record.get("height"):
            name = _find_thumbnail_name(record, variant_plan)
            if name is None:
                logger.debug(f"Dropping produced variant {record.get('width')}x{record.get('height')}: no requested size")
                continue
            thumbnails[name] = {
                "secure_url": record.get("secure_url"),
                "width": record["width"],
                "height": record["height"],
                "bytes": record.get("bytes"),
            }
        else:
            fmt = record.get("format") or "webp"
            optimized[f"optimized-{fmt}"] = {
                "secure_url": record.get("secure_url"),
                "format": fmt,
                "bytes": record.get("bytes"),
            }

    return MatchedVariants(thumbnails=thumbnails, optimized=optimized, video_thumbnail=video_thumbnail)
