"""Pytest configuration and fixtures."""

import pytest

from src.core.config import Settings


@pytest.fixture
def test_settings(tmp_path):
    """Settings pointing at a fake site with short waits."""
    return Settings(
        _env_file=None,
        base_url="https://example.test",
        wait_timeout=0.1,
        screenshots_path=str(tmp_path / "screenshots"),
        logs_path=str(tmp_path / "logs"),
    )
