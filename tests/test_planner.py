"""Tests for variant planning and result matching."""

import pytest
from media_organizer import AssetKind
from media_organizer import ThumbnailSize
from media_organizer import VariantKind
from media_organizer import VariantOverrides
from media_organizer import VersioningConfig
from media_organizer.defaults import get_thumbnail_preset
from media_organizer.models import GlobalConfig
from media_organizer.planner import match_variants
from media_organizer.planner import plan
from media_organizer.planner import preset_to_transformation
from media_organizer.resolver import resolve


def _effective(**versioning):
    config = GlobalConfig(cloud_name="demo", api_key="key", api_secret="secret", versioning=VersioningConfig(**versioning))
    return resolve(config)


class TestPlan:
    """Test plan function."""

    def test_empty_by_default(self):
        assert len(plan(_effective())) == 0

    def test_defaults_produce_seven_entries(self):
        result = plan(_effective(generate_optimized=True, generate_thumbnails=True))
        assert len(result) == 7
        assert [v.kind for v in result] == [VariantKind.OPTIMIZED] * 2 + [VariantKind.THUMBNAIL] * 5
        assert [v.params.get("format") for v in list(result)[:2]] == ["webp", "avif"]
        assert [v.name for v in result.thumbnails()] == ["thumbnail", "medium", "large", "small", "square"]

    def test_optimized_entries_have_no_dimensions(self):
        result = plan(_effective(generate_optimized=True))
        assert result.to_eager() == [
            {"format": "webp", "quality": "auto"},
            {"format": "avif", "quality": "auto"},
        ]

    def test_thumbnail_entry_params(self):
        result = plan(_effective(generate_thumbnails=True))
        assert result.to_eager()[0] == {
            "width": 400,
            "height": 300,
            "crop": "fill",
            "quality": "auto",
            "format": "auto",
            "gravity": "auto",
        }
        assert "gravity" not in result.to_eager()[1]

    def test_overrides_take_precedence(self):
        result = plan(
            _effective(generate_optimized=True, generate_thumbnails=False),
            overrides=VariantOverrides(generate_optimized=False, generate_thumbnails=True),
        )
        assert [v.kind for v in result] == [VariantKind.THUMBNAIL] * 5

    def test_thumbnail_override_replaces_list(self):
        sizes = (ThumbnailSize("banner", 1600, 400, crop="fill"),)
        result = plan(_effective(generate_thumbnails=True), overrides=VariantOverrides(thumbnail_sizes=sizes))
        assert result.to_eager() == [{"width": 1600, "height": 400, "crop": "fill"}]

    def test_custom_entries_last_and_verbatim(self):
        custom = ({"effect": "sepia"}, {"width": 10, "angle": 90})
        result = plan(_effective(generate_optimized=True), overrides=VariantOverrides(eager=custom))
        assert result.to_eager()[-2:] == [{"effect": "sepia"}, {"width": 10, "angle": 90}]
        assert [v.kind for v in result][-2:] == [VariantKind.CUSTOM, VariantKind.CUSTOM]

    def test_video_thumbnail_appended_last(self):
        result = plan(
            _effective(generate_optimized=True),
            AssetKind.VIDEO,
            VariantOverrides(eager=({"effect": "blur"},), video_thumbnail=True),
        )
        assert result.to_eager()[-1] == {
            "width": 640,
            "height": 360,
            "crop": "fill",
            "format": "jpg",
            "start_offset": 1,
        }
        assert list(result)[-1].kind is VariantKind.VIDEO_THUMBNAIL

    def test_video_thumbnail_time(self):
        result = plan(_effective(), AssetKind.VIDEO, VariantOverrides(video_thumbnail=True, thumbnail_time=4.5))
        assert result.to_eager() == [
            {"width": 640, "height": 360, "crop": "fill", "format": "jpg", "start_offset": 4.5}
        ]

    def test_video_thumbnail_ignored_for_images(self):
        assert len(plan(_effective(), AssetKind.IMAGE, VariantOverrides(video_thumbnail=True))) == 0

    def test_eager_flag_follows_config(self):
        assert plan(_effective(eager=False)).eager is False
        assert plan(_effective()).eager is True

    def test_to_eager_returns_copies(self):
        result = plan(_effective(generate_optimized=True))
        result.to_eager()[0]["format"] = "png"
        assert result.to_eager()[0]["format"] == "webp"


class TestPresetToTransformation:
    """Test preset_to_transformation function."""

    def test_drops_unset(self):
        assert preset_to_transformation(ThumbnailSize("s", 10, 20)) == {"width": 10, "height": 20}


class TestMatchVariants:
    """Test match_variants function."""

    @pytest.fixture
    def full_plan(self):
        return plan(_effective(generate_optimized=True, generate_thumbnails=True))

    def test_thumbnails_matched_by_dimensions(self, full_plan):
        produced = [
            {"width": 1200, "height": 900, "secure_url": "https://x/medium.jpg", "bytes": 10},
            {"width": 400, "height": 400, "secure_url": "https://x/square.jpg", "bytes": 5},
        ]
        matched = match_variants(full_plan, produced)
        assert matched.thumbnails == {
            "medium": {"secure_url": "https://x/medium.jpg", "width": 1200, "height": 900, "bytes": 10},
            "square": {"secure_url": "https://x/square.jpg", "width": 400, "height": 400, "bytes": 5},
        }

    def test_unmatched_thumbnail_dropped(self, full_plan):
        matched = match_variants(full_plan, [{"width": 333, "height": 333, "secure_url": "u"}])
        assert matched.thumbnails == {}
        assert matched.optimized == {}

    def test_optimized_named_by_format(self, full_plan):
        matched = match_variants(full_plan, [{"format": "avif", "secure_url": "u", "bytes": 3}])
        assert matched.optimized == {"optimized-avif": {"secure_url": "u", "format": "avif", "bytes": 3}}

    def test_optimized_format_defaults_to_webp(self, full_plan):
        matched = match_variants(full_plan, [{"secure_url": "u"}])
        assert list(matched.optimized) == ["optimized-webp"]

    def test_width_only_is_optimized(self, full_plan):
        matched = match_variants(full_plan, [{"width": 400, "format": "png"}])
        assert list(matched.optimized) == ["optimized-png"]

    def test_no_produced(self, full_plan):
        matched = match_variants(full_plan, None)
        assert matched.thumbnails == {} and matched.optimized == {} and matched.video_thumbnail is None

    def test_video_poster(self):
        video_plan = plan(_effective(), AssetKind.VIDEO, VariantOverrides(video_thumbnail=True, thumbnail_time=3))
        matched = match_variants(
            video_plan,
            [{"width": 640, "height": 360, "format": "jpg", "start_offset": 3, "secure_url": "https://x/poster.jpg"}],
        )
        assert matched.video_thumbnail == {"secure_url": "https://x/poster.jpg", "time": 3}
        assert matched.thumbnails == {}


class TestPresets:
    """Test default thumbnail presets."""

    def test_get_thumbnail_preset(self):
        preset = get_thumbnail_preset("square")
        assert (preset.width, preset.height, preset.gravity) == (400, 400, "auto")
        assert get_thumbnail_preset("poster") is None

    def test_presets_usable_as_override(self):
        sizes = (get_thumbnail_preset("small"),)
        result = plan(_effective(), overrides=VariantOverrides(generate_thumbnails=True, thumbnail_sizes=sizes))
        assert [v.name for v in result] == ["small"]


class TestPlanImmutability:
    """Test a built plan cannot be changed afterwards."""

    def test_params_read_only(self):
        result = plan(_effective(generate_optimized=True))
        with pytest.raises(TypeError):
            list(result)[0].params["format"] = "gif"
        assert result.to_eager()[0] == {"format": "webp", "quality": "auto"}

    def test_custom_entry_copied(self):
        entry = {"effect": "sepia"}
        result = plan(_effective(), overrides=VariantOverrides(eager=(entry,)))
        entry["effect"] = "blur"
        assert result.to_eager() == [{"effect": "sepia"}]
