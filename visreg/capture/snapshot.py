"""Screenshots a page and compares it against its baseline."""

from __future__ import annotations

import logging
import shutil

from playwright.async_api import Page

from visreg.models.config import SnapshotPaths, SuiteConfig
from visreg.models.snapshot import CaptureMode, SnapshotResult

from .image_diff import compare_images

logger = logging.getLogger(__name__)


class SnapshotCapturer:
    """Writes actual, baseline and diff images for named snapshots."""

    def __init__(self, config: SuiteConfig, mode: CaptureMode = "regression"):
        self.config = config
        self.mode = mode
        self.paths: SnapshotPaths = config.snapshot_paths

    def _rel(self, path) -> str:
        return path.relative_to(self.paths.root).as_posix()

    async def compare_snapshot(self, page: Page, name: str, viewport: str = "") -> SnapshotResult:
        filename = f"{name}{self.paths.extension}"
        actual_path = self.paths.actual_dir / filename
        baseline_path = self.paths.base_dir / filename
        diff_path = self.paths.diff_dir / filename

        actual_path.parent.mkdir(parents=True, exist_ok=True)
        await page.screenshot(path=str(actual_path), full_page=self.config.full_page)
        logger.debug("Captured %s", actual_path)

        result = SnapshotResult(name=name, viewport=viewport, actual_path=self._rel(actual_path))

        if self.mode == "base" or not baseline_path.exists():
            baseline_path.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(actual_path, baseline_path)
            if diff_path.exists():
                diff_path.unlink()
            result.baseline_path = self._rel(baseline_path)
            if self.mode == "base":
                result.status = "baseline"
                result.message = "Baseline updated"
            else:
                result.status = "new"
                result.message = "No baseline found, stored current capture as baseline"
            logger.info("%s: %s", name, result.message)
            return result

        diff = compare_images(
            baseline_path,
            actual_path,
            diff_path,
            error_threshold=self.config.error_threshold,
            pixel_tolerance=self.config.pixel_tolerance,
        )
        result.baseline_path = self._rel(baseline_path)
        result.diff_ratio = diff.diff_ratio
        result.status = "pass" if diff.passed else "fail"
        result.message = f"Pixel diff: {diff.diff_ratio:.2%} (threshold: {diff.threshold:.2%})"
        if diff.diff_path:
            result.diff_path = self._rel(diff.diff_path)
            logger.warning("%s: %s", name, result.message)
        else:
            logger.info("%s: %s", name, result.message)
        return result
