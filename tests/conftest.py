"""Shared fixtures."""

import pytest

from sgrfmt.config import reset_settings, use_settings
from sgrfmt.config.types import FeatureConfig, Settings


@pytest.fixture(autouse=True)
def default_settings():
    """Run every test with default settings, whatever the environment holds."""
    use_settings(Settings())
    yield
    reset_settings()


@pytest.fixture
def const_format_enabled():
    """Enable the constant-format feature for one test."""
    return use_settings(Settings(features=FeatureConfig(const_format=True)))
