"""Configuration models for the visual regression suite."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_CONFIG_PATH = "visreg-config.json"

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)


class ViewportConfig(BaseModel):
    name: str = "web"
    width: int = 1920
    height: int = 1080

    def as_playwright(self) -> dict:
        return {"width": self.width, "height": self.height}


class PageTarget(BaseModel):
    name: str = "homepage"
    path: str = "/"


class SnapshotPaths(BaseModel):
    """Fixed locations of the snapshot directories and the report file."""

    model_config = ConfigDict(frozen=True)

    root: Path = Path("snapshots")
    extension: str = ".png"
    report_name: str = "visual-report.html"

    @property
    def base_dir(self) -> Path:
        return self.root / "base"

    @property
    def actual_dir(self) -> Path:
        return self.root / "actual"

    @property
    def diff_dir(self) -> Path:
        return self.root / "diff"

    @property
    def videos_dir(self) -> Path:
        return self.root / "videos"

    @property
    def report_file(self) -> Path:
        return self.root / self.report_name


class SuiteConfig(BaseModel):
    # Target
    target_url: str = "https://pradappandiyan.medium.com"
    pages: list[PageTarget] = Field(default_factory=lambda: [PageTarget()])

    # Browser
    viewports: list[ViewportConfig] = Field(
        default_factory=lambda: [
            ViewportConfig(name="web", width=1920, height=1080),
            ViewportConfig(name="tablet", width=768, height=1024),
            ViewportConfig(name="mobile", width=375, height=667),
        ]
    )
    user_agent: Optional[str] = DEFAULT_USER_AGENT
    extra_headers: dict[str, str] = Field(default_factory=dict)
    headless: bool = True
    navigation_timeout_ms: int = 30000

    # Timing
    settle_ms: int = 500
    viewport_delay_ms: int = 5000  # pause between viewports to avoid rate limiting (HTTP 403)

    # Comparison
    error_threshold: float = 0.01
    pixel_tolerance: int = 10  # per-channel difference still counted as a match
    full_page: bool = True

    # Output
    snapshots_root: str = "snapshots"
    record_video: bool = True

    @field_validator("error_threshold")
    @classmethod
    def check_threshold(cls, v: float) -> float:
        if not 0.0 <= v <= 1.0:
            raise ValueError("error_threshold must be between 0 and 1")
        return v

    @property
    def snapshot_paths(self) -> SnapshotPaths:
        return SnapshotPaths(root=Path(self.snapshots_root))

    def page_url(self, page: PageTarget) -> str:
        return self.target_url.rstrip("/") + "/" + page.path.lstrip("/")

    @classmethod
    def load(cls, path: str | Path) -> "SuiteConfig":
        """Load config from a JSON file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        with open(path) as f:
            data = json.load(f)
        return cls(**data)

    @classmethod
    def load_or_default(cls, path: str | Path = DEFAULT_CONFIG_PATH) -> "SuiteConfig":
        """Load config if the file exists, otherwise fall back to defaults."""
        if Path(path).exists():
            return cls.load(path)
        return cls()

    def save(self, path: str | Path) -> None:
        """Save config to a JSON file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(self.model_dump(), f, indent=2)
