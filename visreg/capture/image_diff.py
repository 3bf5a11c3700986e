"""Pixel comparison between a baseline and an actual screenshot."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from PIL import Image, ImageChops

logger = logging.getLogger(__name__)

HIGHLIGHT = (255, 0, 0)


@dataclass
class ImageDiff:
    diff_ratio: float
    threshold: float
    diff_path: Path | None = None

    @property
    def passed(self) -> bool:
        return self.diff_ratio <= self.threshold


def compare_images(
    baseline_path: Path,
    actual_path: Path,
    diff_path: Path,
    error_threshold: float = 0.01,
    pixel_tolerance: int = 10,
) -> ImageDiff:
    """Compare two screenshots and write a diff image if they differ too much.

    A pixel counts as different when any channel differs by more than
    ``pixel_tolerance``. The diff image is written only when the share of
    differing pixels exceeds ``error_threshold``; otherwise a leftover diff
    from an earlier run is removed.
    """
    with Image.open(baseline_path) as baseline_img, Image.open(actual_path) as actual_img:
        baseline = baseline_img.convert("RGB")
        actual = actual_img.convert("RGB")

    if baseline.size != actual.size:
        logger.debug("Resizing %s from %s to %s", actual_path.name, actual.size, baseline.size)
        actual = actual.resize(baseline.size)

    total = baseline.size[0] * baseline.size[1]
    if total == 0:
        return ImageDiff(diff_ratio=0.0, threshold=error_threshold)

    # Max channel difference per pixel, then binarize against the tolerance.
    channels = ImageChops.difference(baseline, actual).split()
    delta = channels[0]
    for band in channels[1:]:
        delta = ImageChops.lighter(delta, band)
    mask = delta.point(lambda v: 255 if v > pixel_tolerance else 0)

    diff_count = mask.histogram()[255]
    result = ImageDiff(diff_ratio=diff_count / total, threshold=error_threshold)

    if result.passed:
        if diff_path.exists():
            diff_path.unlink()
        return result

    diff_path.parent.mkdir(parents=True, exist_ok=True)
    faded = Image.blend(baseline, Image.new("RGB", baseline.size, (255, 255, 255)), 0.6)
    highlighted = Image.composite(Image.new("RGB", baseline.size, HIGHLIGHT), faded, mask)
    highlighted.save(diff_path)
    result.diff_path = diff_path
    return result
