"""Image discovery: walks a snapshot directory and yields image paths."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator


def discover(directory: Path, extension: str = ".png") -> Iterator[str]:
    """Yield every image under ``directory`` as a posix path relative to it.

    A missing directory yields nothing. Entries are visited depth-first in
    sorted name order so duplicate basenames always resolve the same way.
    """
    directory = Path(directory)
    if not directory.is_dir():
        return
    yield from _walk(directory, directory, extension)


def _walk(current: Path, root: Path, extension: str) -> Iterator[str]:
    for entry in sorted(current.iterdir(), key=lambda p: p.name):
        if entry.is_dir() and not entry.is_symlink():
            yield from _walk(entry, root, extension)
        elif entry.name.endswith(extension):
            yield entry.relative_to(root).as_posix()
