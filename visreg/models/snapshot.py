"""Snapshot data structures shared by the capture driver and the report builder."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel

CaptureMode = Literal["regression", "base"]
SnapshotStatus = Literal["baseline", "new", "pass", "fail", "error"]


class SnapshotComparison(BaseModel):
    """One row of the visual report, keyed by image name."""
    name: str
    baseline_path: Optional[str] = None  # relative to the snapshots root, e.g. "base/home.png"
    actual_path: Optional[str] = None
    diff_path: Optional[str] = None
    has_diff: bool = False


class SnapshotResult(BaseModel):
    """Outcome of capturing a single named snapshot."""
    name: str
    viewport: str = ""
    status: SnapshotStatus = "pass"
    diff_ratio: Optional[float] = None
    actual_path: Optional[str] = None
    baseline_path: Optional[str] = None
    diff_path: Optional[str] = None
    message: str = ""

    @property
    def failed(self) -> bool:
        return self.status in ("fail", "error")
