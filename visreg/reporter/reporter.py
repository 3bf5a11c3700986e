"""Report generation orchestration."""

from __future__ import annotations

import logging
import time
from pathlib import Path

from visreg.models.config import SnapshotPaths

from .collator import collate
from .html_report import count_results, render_html_report

logger = logging.getLogger(__name__)


class NoSnapshotsFoundError(Exception):
    """Neither actual nor baseline images exist under the snapshots root."""

    def __init__(self, paths: SnapshotPaths):
        super().__init__(f"No snapshots found under {paths.root}")
        self.paths = paths


def build_report(paths: SnapshotPaths, generated_at: str | None = None) -> Path:
    """Collate the snapshot directories and write the HTML report.

    Raises NoSnapshotsFoundError without writing anything when there is
    nothing to report. Write errors propagate to the caller.
    """
    comparisons = collate(paths)
    if not comparisons:
        raise NoSnapshotsFoundError(paths)

    passed, failed = count_results(comparisons)
    logger.debug("Rendering report: %d passed, %d failed", passed, failed)

    report_html = render_html_report(
        comparisons, generated_at or time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime())
    )
    output_path = paths.report_file
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(report_html)
    logger.debug("HTML report: %s", output_path)
    return output_path
