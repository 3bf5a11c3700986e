"""Pytest configuration and shared fixtures."""

from pathlib import Path
from unittest.mock import AsyncMock, Mock

import pytest
from PIL import Image
from playwright.async_api import Browser, BrowserContext, Page

from visreg.models.config import SnapshotPaths, SuiteConfig, ViewportConfig


# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def snapshot_paths(tmp_path: Path) -> SnapshotPaths:
    """Snapshot directories rooted in a temp dir (directories not created)."""
    return SnapshotPaths(root=tmp_path / "snapshots")


@pytest.fixture
def suite_config(tmp_path: Path) -> SuiteConfig:
    """A config that captures quickly and writes under tmp_path."""
    return SuiteConfig(
        target_url="https://example.com",
        viewports=[
            ViewportConfig(name="web", width=1920, height=1080),
            ViewportConfig(name="mobile", width=375, height=667),
        ],
        settle_ms=0,
        viewport_delay_ms=0,
        record_video=False,
        snapshots_root=str(tmp_path / "snapshots"),
    )


# ============================================================================
# Playwright Fixtures
# ============================================================================


@pytest.fixture
def mock_page() -> AsyncMock:
    """Create a mock Playwright page."""
    page = AsyncMock(spec=Page)
    page.url = "https://example.com"
    page.screenshot = AsyncMock()
    page.goto = AsyncMock()
    page.wait_for_selector = AsyncMock()
    page.wait_for_timeout = AsyncMock()
    page.set_default_navigation_timeout = Mock()
    return page


@pytest.fixture
def mock_context(mock_page: AsyncMock) -> AsyncMock:
    """Create a mock Playwright browser context."""
    context = AsyncMock(spec=BrowserContext)
    context.new_page = AsyncMock(return_value=mock_page)
    context.add_init_script = AsyncMock()
    context.close = AsyncMock()
    return context


@pytest.fixture
def mock_browser(mock_context: AsyncMock) -> AsyncMock:
    """Create a mock Playwright browser."""
    browser = AsyncMock(spec=Browser)
    browser.new_context = AsyncMock(return_value=mock_context)
    return browser


# ============================================================================
# Helper Functions
# ============================================================================


def write_png(path: Path, color=(255, 255, 255), size=(10, 10)) -> Path:
    """Write a solid-color PNG, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.new("RGB", size, color).save(path)
    return path


@pytest.fixture
def png_writer():
    """Fixture that provides the write_png helper."""
    return write_png


def make_screenshot_writer(color=(255, 255, 255), size=(10, 10)):
    """Side effect for page.screenshot that writes a real PNG to ``path``."""
    async def _screenshot(path, **kwargs):
        write_png(Path(path), color=color, size=size)
    return _screenshot


@pytest.fixture
def screenshot_writer():
    """Fixture that provides the make_screenshot_writer factory."""
    return make_screenshot_writer
