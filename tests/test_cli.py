"""Tests for the command line interface."""

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from visreg.cli import cli, report_main
from visreg.models.config import SuiteConfig
from visreg.models.snapshot import SnapshotResult


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def workdir(tmp_path, monkeypatch) -> Path:
    """Run the CLI from an empty temp directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestReportMain:
    """Tests for the flagless visual-report entry point."""

    def test_no_snapshots_exits_1(self, runner, workdir):
        result = runner.invoke(report_main, [])
        assert result.exit_code == 1
        assert "No snapshots found" in result.output
        assert not (workdir / "snapshots" / "visual-report.html").exists()

    def test_generates_report(self, runner, workdir, png_writer):
        root = workdir / "snapshots"
        for rel in ("a.png", "b.png"):
            png_writer(root / "base" / rel)
            png_writer(root / "actual" / rel)
        png_writer(root / "diff" / "b.png")

        result = runner.invoke(report_main, [])

        assert result.exit_code == 0
        assert "Report generated" in result.output
        content = (root / "visual-report.html").read_text(encoding="utf-8")
        assert "&#10003; 1 passed" in content
        assert "&#10007; 1 failed" in content

    def test_uses_config_in_working_directory(self, runner, workdir, png_writer):
        SuiteConfig(snapshots_root="shots").save(workdir / "visreg-config.json")
        png_writer(workdir / "shots" / "base" / "home.png")

        result = runner.invoke(report_main, [])

        assert result.exit_code == 0
        assert (workdir / "shots" / "visual-report.html").exists()

    def test_rejects_arguments(self, runner, workdir):
        result = runner.invoke(report_main, ["--config", "x.json"])
        assert result.exit_code == 2


class TestReportCommand:
    """Tests for `visreg report`."""

    def test_missing_config_file(self, runner, workdir):
        result = runner.invoke(cli, ["report", "--config", "missing.json"])
        assert result.exit_code == 1
        assert "Config file not found" in result.output

    def test_report_with_config(self, runner, workdir, png_writer):
        config_path = workdir / "custom.json"
        SuiteConfig(snapshots_root="custom").save(config_path)
        png_writer(workdir / "custom" / "actual" / "home.png")

        result = runner.invoke(cli, ["report", "-c", str(config_path)])

        assert result.exit_code == 0
        assert (workdir / "custom" / "visual-report.html").exists()


class TestCaptureCommand:
    """Tests for `visreg capture` with the runner mocked out."""

    def test_all_passed(self, runner, workdir):
        results = [SnapshotResult(name="homepage-web", viewport="web", status="pass")]
        with patch("visreg.cli.CaptureRunner") as runner_cls:
            runner_cls.return_value.run.return_value = results
            result = runner.invoke(cli, ["capture"])

        assert result.exit_code == 0
        assert runner_cls.call_args.kwargs["mode"] == "regression"
        assert "1 snapshots captured" in result.output

    def test_base_mode(self, runner, workdir):
        with patch("visreg.cli.CaptureRunner") as runner_cls:
            runner_cls.return_value.run.return_value = []
            runner.invoke(cli, ["capture", "--base"])

        assert runner_cls.call_args.kwargs["mode"] == "base"

    def test_failures_exit_1(self, runner, workdir):
        results = [
            SnapshotResult(name="homepage-web", viewport="web", status="pass"),
            SnapshotResult(name="homepage-mobile", viewport="mobile", status="fail"),
        ]
        with patch("visreg.cli.CaptureRunner") as runner_cls:
            runner_cls.return_value.run.return_value = results
            result = runner.invoke(cli, ["capture"])

        assert result.exit_code == 1
        assert "1 of 2 snapshots failed" in result.output


class TestInitCommand:
    """Tests for `visreg init`."""

    def test_creates_config(self, runner, workdir):
        result = runner.invoke(cli, ["init", "--target", "https://example.com"])

        assert result.exit_code == 0
        data = json.loads((workdir / "visreg-config.json").read_text())
        assert data["target_url"] == "https://example.com"

    def test_keeps_existing_config_when_declined(self, runner, workdir):
        SuiteConfig(target_url="https://old.example.com").save(workdir / "visreg-config.json")

        result = runner.invoke(cli, ["init", "--target", "https://new.example.com"], input="n\n")

        assert result.exit_code == 0
        data = json.loads((workdir / "visreg-config.json").read_text())
        assert data["target_url"] == "https://old.example.com"
