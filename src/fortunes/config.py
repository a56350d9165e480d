"""Application configuration defaults."""

from __future__ import annotations

import math
import os
import re
from dataclasses import dataclass
from pathlib import Path

from fortunes.errors import ConfigurationError
from fortunes.models import Mode

FORTUNES_FOLDER_ENV = "FORTUNES_FOLDER"

_DURATION_PART = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|ms|s|m|h)")
_UNIT_SECONDS = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}


def _get_default_folder() -> Path | None:
    value = os.environ.get(FORTUNES_FOLDER_ENV)
    return Path(value) if value else None


def parse_duration(value: str) -> float:
    """Parse a duration such as ``1.5s``, ``300ms`` or ``1m30s`` into seconds.

    Bare numbers are taken as seconds.
    """
    text = value.strip()
    if not text:
        raise ValueError("Empty duration")
    try:
        seconds = float(text)
    except ValueError:
        position = 0
        seconds = 0.0
        for match in _DURATION_PART.finditer(text):
            if match.start() != position:
                break
            seconds += float(match.group(1)) * _UNIT_SECONDS[match.group(2)]
            position = match.end()
        if position != len(text):
            raise ValueError(f"Invalid duration: {value!r}") from None
    if not math.isfinite(seconds):
        raise ValueError(f"Invalid duration: {value!r}")
    if seconds < 0:
        raise ValueError(f"Negative duration: {value!r}")
    return seconds


@dataclass(slots=True)
class AppConfig:
    folder: Path | None = None
    mode: Mode = Mode.ALL
    wait: float = 0.0
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.folder is None:
            self.folder = _get_default_folder()

    def resolve_folder(self, base_dir: Path | None = None) -> Path:
        if self.folder is None:
            raise ConfigurationError(
                f"No fortune folder given; pass --folder or set {FORTUNES_FOLDER_ENV}"
            )
        if Path(self.folder).is_absolute() or base_dir is None:
            return Path(self.folder)
        return base_dir / self.folder
