"""Core fortune data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable, Iterator, List

from fortunes.errors import ConfigurationError

SHORT_LENGTH = 160


class Mode(str, Enum):
    """Length filter applied to both file weights and in-file fortunes."""

    ALL = "all"
    SHORT = "short"
    LONG = "long"

    def accepts(self, fortune: str) -> bool:
        if self is Mode.SHORT:
            return len(fortune) < SHORT_LENGTH
        if self is Mode.LONG:
            return len(fortune) >= SHORT_LENGTH
        return True

    def weight(self, fortune_file: FortuneFile) -> int:
        if self is Mode.SHORT:
            return fortune_file.short_count
        if self is Mode.LONG:
            return fortune_file.long_count
        return fortune_file.total_count


def resolve_mode(short: bool = False, long: bool = False) -> Mode:
    """Turn the short/long flags into a single mode."""
    if short and long:
        raise ConfigurationError("Short and long fortunes are mutually exclusive")
    if short:
        return Mode.SHORT
    if long:
        return Mode.LONG
    return Mode.ALL


@dataclass(slots=True, frozen=True)
class FortuneFile:
    """Fortune counts for one file on disk."""

    path: Path
    total_count: int
    short_count: int
    long_count: int

    def __post_init__(self) -> None:
        if min(self.total_count, self.short_count, self.long_count) < 0:
            raise ValueError(f"Negative fortune count for {self.path}")
        if self.short_count + self.long_count != self.total_count:
            raise ValueError(
                f"Short ({self.short_count}) and long ({self.long_count}) counts "
                f"do not add up to {self.total_count} for {self.path}"
            )

    @classmethod
    def from_fortunes(cls, path: Path, fortunes: Iterable[str]) -> FortuneFile:
        total = short = 0
        for fortune in fortunes:
            total += 1
            if Mode.SHORT.accepts(fortune):
                short += 1
        return cls(path=path, total_count=total, short_count=short, long_count=total - short)


@dataclass(slots=True)
class Corpus:
    """Ordered fortune files found in one folder."""

    files: List[FortuneFile] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.files)

    def __iter__(self) -> Iterator[FortuneFile]:
        return iter(self.files)

    @property
    def paths(self) -> List[Path]:
        return [item.path for item in self.files]

    def weights(self, mode: Mode) -> List[int]:
        return [mode.weight(item) for item in self.files]

    def total_weight(self, mode: Mode) -> int:
        return sum(self.weights(mode))
