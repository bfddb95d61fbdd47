"""Tests for layered configuration resolution."""

import pytest
from media_organizer import GlobalConfig
from media_organizer import OptimizedVersion
from media_organizer import ProjectConfig
from media_organizer import ThumbnailSize
from media_organizer import VersioningConfig
from media_organizer.defaults import DEFAULT_OPTIMIZED_VERSIONS
from media_organizer.defaults import DEFAULT_THUMBNAIL_SIZES
from media_organizer.models import FolderConfig
from media_organizer.resolver import resolve
from media_organizer.resolver import resolve_versioning

AVIF_ONLY = (OptimizedVersion("optimized-avif", "avif"),)
TINY = (ThumbnailSize("tiny", 50, 50),)

# field -> (project value, global value, hard default)
FIELDS = {
    "keep_original": (False, False, True),
    "generate_optimized": (True, True, False),
    "optimized_versions": (AVIF_ONLY, (OptimizedVersion("optimized-png", "png"),), DEFAULT_OPTIMIZED_VERSIONS),
    "generate_thumbnails": (True, True, False),
    "thumbnail_sizes": (TINY, (ThumbnailSize("huge", 4000, 3000),), DEFAULT_THUMBNAIL_SIZES),
    "eager": (False, False, True),
}


def _global(**versioning) -> GlobalConfig:
    return GlobalConfig(cloud_name="demo", api_key="key", api_secret="secret", versioning=VersioningConfig(**versioning))


def _project(**versioning) -> ProjectConfig:
    return ProjectConfig(name="p", root_folder="p", versioning=VersioningConfig(**versioning))


class TestResolve:
    """Test resolve function."""

    def test_defaults_without_any_layer(self, global_config):
        effective = resolve(global_config)
        versioning = effective.versioning
        assert versioning.keep_original is True
        assert versioning.generate_optimized is False
        assert versioning.optimized_versions == DEFAULT_OPTIMIZED_VERSIONS
        assert versioning.generate_thumbnails is False
        assert versioning.thumbnail_sizes == DEFAULT_THUMBNAIL_SIZES
        assert versioning.eager is True
        assert effective.folder.auto_create_folders is False

    @pytest.mark.parametrize("field", list(FIELDS))
    def test_project_wins(self, field):
        project_value, global_value, _ = FIELDS[field]
        effective = resolve(_global(**{field: global_value}), _project(**{field: project_value}))
        assert getattr(effective.versioning, field) == project_value

    @pytest.mark.parametrize("field", list(FIELDS))
    def test_global_when_project_unset(self, field):
        _, global_value, _ = FIELDS[field]
        effective = resolve(_global(**{field: global_value}), _project())
        assert getattr(effective.versioning, field) == global_value

    @pytest.mark.parametrize("field", list(FIELDS))
    def test_default_when_both_unset(self, field):
        _, _, default = FIELDS[field]
        effective = resolve(_global(), _project())
        assert getattr(effective.versioning, field) == default

    def test_merge_is_field_level(self):
        """Test a project setting one field keeps the global's other fields."""
        effective = resolve(_global(optimized_versions=AVIF_ONLY, generate_optimized=True), _project(generate_thumbnails=True))
        assert effective.versioning.generate_thumbnails is True
        assert effective.versioning.generate_optimized is True
        assert effective.versioning.optimized_versions == AVIF_ONLY

    def test_project_false_overrides_global_true(self):
        effective = resolve(_global(eager=True), _project(eager=False))
        assert effective.versioning.eager is False

    def test_auto_create_folders_global_only(self):
        config = GlobalConfig(
            cloud_name="demo", api_key="key", api_secret="secret", folder=FolderConfig(auto_create_folders=True)
        )
        assert resolve(config, _project()).folder.auto_create_folders is True

    def test_resolve_is_pure(self, global_config, portfolio):
        assert resolve(global_config, portfolio) == resolve(global_config, portfolio)


class TestResolveVersioning:
    """Test resolve_versioning with raw layers."""

    def test_no_layers(self):
        assert resolve_versioning(None, None).thumbnail_sizes == DEFAULT_THUMBNAIL_SIZES

    def test_thumbnail_list_replaced_whole(self):
        result = resolve_versioning(VersioningConfig(thumbnail_sizes=TINY), None)
        assert result.thumbnail_sizes == TINY
