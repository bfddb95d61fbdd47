"""Shared fixtures."""

import pytest
from media_organizer import GlobalConfig
from media_organizer import ProjectConfig


@pytest.fixture
def global_config():
    """Global configuration with credentials only."""
    return GlobalConfig(cloud_name="demo", api_key="key", api_secret="secret")


@pytest.fixture
def portfolio():
    """Project with per-type structure and a fallback template."""
    return ProjectConfig(
        name="portfolio",
        root_folder="portfolio",
        structure={
            "artworks": "artworks/{year}/{category}",
            "journals": "journals/{year}",
            "template": "{type}/{year}",
        },
        default_tags=("portfolio",),
        default_context={"owner": "studio"},
    )
