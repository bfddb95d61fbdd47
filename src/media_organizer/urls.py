"""Delivery URL assembly with transformation parameters."""

from collections.abc import Mapping
from typing import Any

BASE_URL = "https://res.cloudinary.com"

# Keys consumed by the fixed-position groups; anything else is appended.
_IMAGE_KEYS = ("width", "height", "crop", "quality", "format", "gravity", "radius", "effect", "overlay")

_VIDEO_PARAMS = (
    ("bit_rate", "br"),
    ("duration", "du"),
    ("start_offset", "so"),
    ("end_offset", "eo"),
    ("audio_codec", "ac"),
    ("video_codec", "vc"),
    ("streaming_profile", "sp"),
)


class UrlBuilder:
    """Builds delivery URLs for one account.

    Parameters are always emitted in the same order so equal transformations
    produce equal URLs:
    1. Size group "w_,h_,c_[,g_]"
    2. Quality, then format (format "auto" is omitted)
    3. Radius, effect, overlay (images) or bit rate, duration, offsets,
       codecs, streaming profile (videos)
    4. Remaining keys as "<key>_<value>" in insertion order (images)

    Args:
        cloud_name: Account name used in the URL path
    """

    def __init__(self, cloud_name: str):
        self.cloud_name = cloud_name

    def _base(self, resource_type: str) -> str:
        return f"{BASE_URL}/{self.cloud_name}/{resource_type}/upload"

    @staticmethod
    def _size_and_format(transformations: Mapping[str, Any], with_gravity: bool) -> list[str]:
        parts: list[str] = []

        if transformations.get("width") or transformations.get("height"):
            size: list[str] = []
            if transformations.get("width"):
                size.append(f"w_{transformations['width']}")
            if transformations.get("height"):
                size.append(f"h_{transformations['height']}")
            if transformations.get("crop"):
                size.append(f"c_{transformations['crop']}")
            gravity = transformations.get("gravity")
            if with_gravity and gravity and gravity != "auto":
                size.append(f"g_{gravity}")
            parts.append(",".join(size))

        if transformations.get("quality"):
            parts.append(f"q_{transformations['quality']}")
        fmt = transformations.get("format")
        if fmt and fmt != "auto":
            parts.append(f"f_{fmt}")
        return parts

    def image_url(self, public_id: str, transformations: Mapping[str, Any] | None = None) -> str:
        """URL for an image, optionally transformed."""
        if not transformations:
            return f"{self._base('image')}/{public_id}"

        parts = self._size_and_format(transformations, with_gravity=True)
        if transformations.get("radius"):
            parts.append(f"r_{transformations['radius']}")
        if transformations.get("effect"):
            parts.append(f"e_{transformations['effect']}")
        if transformations.get("overlay"):
            parts.append(str(transformations["overlay"]))

        for key, value in transformations.items():
            if key not in _IMAGE_KEYS and value is not None:
                parts.append(f"{key}_{value}")

        if not parts:
            return f"{self._base('image')}/{public_id}"

        return f"{self._base('image')}/{'/'.join(parts)}/{public_id}"

    def video_url(self, public_id: str, transformations: Mapping[str, Any] | None = None) -> str:
        """URL for a video, optionally transformed."""
        if not transformations:
            return f"{self._base('video')}/{public_id}"

        parts = self._size_and_format(transformations, with_gravity=False)
        for key, prefix in _VIDEO_PARAMS:
            if transformations.get(key):
                parts.append(f"{prefix}_{transformations[key]}")

        if not parts:
            return f"{self._base('video')}/{public_id}"

        return f"{self._base('video')}/{'/'.join(parts)}/{public_id}"

    def video_thumbnail_url(
        self,
        public_id: str,
        time: float = 1,
        width: int | None = None,
        height: int | None = None,
    ) -> str:
        """URL of a jpg frame taken ``time`` seconds into a video."""
        size = f"w_{width},h_{height},so_{time}" if width and height else f"so_{time}"
        return f"{self._base('video')}/{size}/{public_id}.jpg"
