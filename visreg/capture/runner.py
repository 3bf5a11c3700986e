"""Visits every configured page at every viewport."""

from __future__ import annotations

import asyncio
import logging
import shutil
import time

from playwright.async_api import Browser, async_playwright

from visreg.models.config import PageTarget, SuiteConfig, ViewportConfig
from visreg.models.snapshot import CaptureMode, SnapshotResult

from .browser import create_context, launch_browser
from .snapshot import SnapshotCapturer

logger = logging.getLogger(__name__)


class CaptureRunner:
    """Drives the browser through pages x viewports and collects snapshot results."""

    def __init__(self, config: SuiteConfig, mode: CaptureMode = "regression"):
        self.config = config
        self.mode = mode
        self.capturer = SnapshotCapturer(config, mode)

    def run(self) -> list[SnapshotResult]:
        return asyncio.run(self._run())

    def clear_previous_run(self) -> None:
        """Remove actual, diff and video output left behind by an earlier run."""
        paths = self.config.snapshot_paths
        for directory in (paths.actual_dir, paths.diff_dir, paths.videos_dir):
            if directory.exists():
                logger.debug("Removing %s", directory)
            shutil.rmtree(directory, ignore_errors=True)

    async def _run(self) -> list[SnapshotResult]:
        start = time.time()
        logger.info("=== Capturing %s (%s mode) ===", self.config.target_url, self.mode)
        self.clear_previous_run()
        async with async_playwright() as p:
            browser = await launch_browser(p, headless=self.config.headless)
            try:
                results = await self.capture_all(browser)
            finally:
                await browser.close()
        logger.info("=== Capture complete: %d snapshots in %.1fs ===", len(results), time.time() - start)
        return results

    async def capture_all(self, browser: Browser) -> list[SnapshotResult]:
        results: list[SnapshotResult] = []
        for target in self.config.pages:
            for index, viewport in enumerate(self.config.viewports):
                if index > 0 and self.config.viewport_delay_ms > 0:
                    logger.debug("Waiting %dms before next viewport", self.config.viewport_delay_ms)
                    await asyncio.sleep(self.config.viewport_delay_ms / 1000)
                results.append(await self._capture_viewport(browser, target, viewport))
        return results

    async def _capture_viewport(
        self, browser: Browser, target: PageTarget, viewport: ViewportConfig
    ) -> SnapshotResult:
        name = f"{target.name}-{viewport.name}"
        url = self.config.page_url(target)
        logger.info("Viewport %s (%dx%d): %s", viewport.name, viewport.width, viewport.height, url)

        record_video_dir = None
        if self.config.record_video:
            videos_dir = self.config.snapshot_paths.videos_dir
            videos_dir.mkdir(parents=True, exist_ok=True)
            record_video_dir = str(videos_dir)

        context = await create_context(
            browser,
            viewport=viewport.as_playwright(),
            user_agent=self.config.user_agent,
            extra_headers=self.config.extra_headers,
            record_video_dir=record_video_dir,
        )
        try:
            page = await context.new_page()
            page.set_default_navigation_timeout(self.config.navigation_timeout_ms)
            await page.goto(url, wait_until="load")
            await page.wait_for_selector("body", state="visible")
            # Let animations and transitions finish
            await page.wait_for_timeout(self.config.settle_ms)
            return await self.capturer.compare_snapshot(page, name, viewport.name)
        except Exception as e:
            logger.warning("Snapshot %s failed: %s", name, e)
            return SnapshotResult(name=name, viewport=viewport.name, status="error", message=str(e))
        finally:
            await context.close()
