"""Exceptions raised while indexing and selecting fortunes."""

from __future__ import annotations


class FortuneError(Exception):
    """Base class for every fortune lookup failure."""


class ConfigurationError(FortuneError):
    """The fortune folder or the selection flags are unusable."""


class EmptyCorpusError(FortuneError):
    """No fortune can be drawn for the requested mode."""


class FortuneReadError(FortuneError):
    """A fortune file could not be read."""

    def __init__(self, path, reason: str) -> None:
        super().__init__(f"Cannot read {path}: {reason}")
        self.path = path


class CorpusChangedError(FortuneError):
    """A fortune file no longer matches what was indexed."""
