"""CLI entry points for the visual regression suite."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from visreg.capture.runner import CaptureRunner
from visreg.models.config import DEFAULT_CONFIG_PATH, SuiteConfig
from visreg.reporter.reporter import NoSnapshotsFoundError, build_report

console = Console()

STATUS_STYLES = {
    "pass": "green",
    "baseline": "blue",
    "new": "yellow",
    "fail": "red",
    "error": "red",
}


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )


def _load_config(config: str | None) -> SuiteConfig:
    """Load an explicit config path, or the default one if it exists."""
    if config is None:
        return SuiteConfig.load_or_default(DEFAULT_CONFIG_PATH)
    try:
        return SuiteConfig.load(config)
    except FileNotFoundError:
        console.print(f"[red]Config file not found: {config}[/red]")
        console.print("Run 'visreg init' to create a default config.")
        sys.exit(1)


def _generate_report(cfg: SuiteConfig) -> None:
    try:
        path = build_report(cfg.snapshot_paths)
    except NoSnapshotsFoundError:
        console.print(
            'No snapshots found. Run "visreg capture" or "visreg capture --base" first.'
        )
        sys.exit(1)
    console.print(f"Report generated: [blue]{path}[/blue]")


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Visual regression suite: capture snapshots and build the comparison report."""
    setup_logging(verbose)


@cli.command()
@click.option("--base", is_flag=True, help="Overwrite baselines instead of comparing")
@click.option("--config", "-c", default=None, help="Config file path")
def capture(base: bool, config: str | None) -> None:
    """Screenshot every page at every viewport and diff against baselines."""
    cfg = _load_config(config)
    runner = CaptureRunner(cfg, mode="base" if base else "regression")
    results = runner.run()

    table = Table(title="Snapshots")
    table.add_column("Snapshot", style="bold")
    table.add_column("Viewport")
    table.add_column("Status")
    table.add_column("Details")
    for r in results:
        style = STATUS_STYLES.get(r.status, "white")
        table.add_row(r.name, r.viewport, f"[{style}]{r.status.upper()}[/{style}]", r.message)
    console.print(table)

    failed = [r for r in results if r.failed]
    if failed:
        console.print(f"[red]{len(failed)} of {len(results)} snapshots failed[/red]")
        console.print("Run 'visreg report' to review the differences.")
        sys.exit(1)
    console.print(f"[green]{len(results)} snapshots captured[/green]")


@cli.command()
@click.option("--config", "-c", default=None, help="Config file path")
def report(config: str | None) -> None:
    """Build the HTML comparison report from the snapshot directories."""
    _generate_report(_load_config(config))


@cli.command()
@click.option("--target", "-t", prompt="Target URL", help="Website URL to test")
def init(target: str) -> None:
    """Create a default configuration file."""
    config_path = Path(DEFAULT_CONFIG_PATH)
    if config_path.exists():
        if not click.confirm(f"{config_path} already exists. Overwrite?"):
            return

    cfg = SuiteConfig(target_url=target)
    cfg.save(config_path)
    console.print(f"[green]Created {config_path}[/green]")
    console.print("\nCapture the first baselines with:")
    console.print("  [blue]visreg capture --base[/blue]")


@click.command()
def report_main() -> None:
    """Build the visual regression report (no options)."""
    setup_logging()
    _generate_report(_load_config(None))


if __name__ == "__main__":
    cli()
