"""Pairs baseline, actual and diff images by filename."""

from __future__ import annotations

import logging
import posixpath

from visreg.models.config import SnapshotPaths
from visreg.models.snapshot import SnapshotComparison

from .discovery import discover

logger = logging.getLogger(__name__)


def _index_by_basename(rel_paths, label: str) -> dict[str, str]:
    """Map basename -> relative path, keeping the first path seen for each basename."""
    index: dict[str, str] = {}
    for rel in rel_paths:
        basename = posixpath.basename(rel)
        if basename in index:
            logger.warning(
                "Duplicate %s image %s ignored (using %s)", label, rel, index[basename]
            )
            continue
        index[basename] = rel
    return index


def _strip_extension(basename: str, extension: str) -> str:
    return basename[: -len(extension)] if extension and basename.endswith(extension) else basename


def collate(paths: SnapshotPaths) -> list[SnapshotComparison]:
    """Build the sorted list of comparisons from the three snapshot directories.

    Actual images drive the report. When there are none, every baseline is
    listed on its own so a baseline-only run still produces a report.
    """
    ext = paths.extension
    baselines = _index_by_basename(discover(paths.base_dir, ext), "baseline")
    diffs = _index_by_basename(discover(paths.diff_dir, ext), "diff")

    comparisons: list[SnapshotComparison] = []
    seen: set[str] = set()

    for actual_rel in discover(paths.actual_dir, ext):
        basename = posixpath.basename(actual_rel)
        name = _strip_extension(basename, ext)
        if name in seen:
            continue
        seen.add(name)

        base_rel = baselines.get(basename)
        diff_rel = diffs.get(basename)
        comparisons.append(SnapshotComparison(
            name=name,
            baseline_path=f"base/{base_rel}" if base_rel else None,
            actual_path=f"actual/{actual_rel}",
            diff_path=f"diff/{diff_rel}" if diff_rel else None,
            has_diff=diff_rel is not None,
        ))

    if not comparisons:
        logger.debug("No actual images in %s, listing baselines only", paths.actual_dir)
        for basename, base_rel in baselines.items():
            name = _strip_extension(basename, ext)
            if name in seen:
                continue
            seen.add(name)
            comparisons.append(SnapshotComparison(
                name=name,
                baseline_path=f"base/{base_rel}",
            ))

    logger.debug(
        "Collated %d comparisons (%d baselines, %d diffs)",
        len(comparisons), len(baselines), len(diffs),
    )
    return sorted(comparisons, key=lambda c: c.name)
