"""Hard defaults used when neither the project nor the global layer sets a value."""

from .models import OptimizedVersion
from .models import ThumbnailSize

DEFAULT_KEEP_ORIGINAL = True
DEFAULT_GENERATE_OPTIMIZED = False
DEFAULT_GENERATE_THUMBNAILS = False
DEFAULT_EAGER = True
DEFAULT_AUTO_CREATE_FOLDERS = False

# Declaration order is significant: plans list thumbnails in this order.
DEFAULT_THUMBNAIL_PRESETS: dict[str, ThumbnailSize] = {
    "thumbnail": ThumbnailSize("thumbnail", 400, 300, crop="fill", quality="auto", format="auto", gravity="auto"),
    "medium": ThumbnailSize("medium", 1200, 900, crop="limit", quality="auto", format="auto"),
    "large": ThumbnailSize("large", 1920, 1080, crop="limit", quality="auto", format="auto"),
    "small": ThumbnailSize("small", 200, 150, crop="fill", quality="auto", format="auto"),
    "square": ThumbnailSize("square", 400, 400, crop="fill", quality="auto", format="auto", gravity="auto"),
}

DEFAULT_THUMBNAIL_SIZES: tuple[ThumbnailSize, ...] = tuple(DEFAULT_THUMBNAIL_PRESETS.values())

DEFAULT_OPTIMIZED_VERSIONS: tuple[OptimizedVersion, ...] = (
    OptimizedVersion("optimized-webp", "webp", quality="auto", preserve_transparency=True),
    OptimizedVersion("optimized-avif", "avif", quality="auto", preserve_transparency=True),
)

VIDEO_THUMBNAIL_WIDTH = 640
VIDEO_THUMBNAIL_HEIGHT = 360
VIDEO_THUMBNAIL_TIME = 1


def get_thumbnail_preset(name: str) -> ThumbnailSize | None:
    """Look up a default thumbnail preset by name."""
    return DEFAULT_THUMBNAIL_PRESETS.get(name)
