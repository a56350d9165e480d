"""Utility helpers for locating fortune files."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterator

# Data, index and source files that live next to fortune files.
EXCLUDED_SUFFIXES = (
    ".dat",
    ".pos",
    ".c",
    ".h",
    ".p",
    ".i",
    ".f",
    ".pas",
    ".ftn",
    ".ins.c",
    ".ins.pas",
    ".ins.ftn",
    ".sml",
)

FilePredicate = Callable[[Path], bool]


def is_fortune_file(path: Path) -> bool:
    """Return True unless the file name ends in an excluded suffix."""
    return not Path(path).name.endswith(EXCLUDED_SUFFIXES)


def iter_fortune_paths(folder: Path, predicate: FilePredicate = is_fortune_file) -> Iterator[Path]:
    """Yield accepted files under ``folder``, recursively and in sorted order."""
    for item in sorted(folder.rglob("*")):
        if item.is_file() and predicate(item):
            yield item
