"""Printing the chosen fortune."""

from __future__ import annotations

import time
from typing import IO, Callable, Optional

import typer


def display_fortune(
    fortune: str,
    wait: float = 0.0,
    file: Optional[IO[str]] = None,
    sleep: Optional[Callable[[float], None]] = None,
) -> None:
    """Wait ``wait`` seconds, then write ``fortune`` verbatim.

    Tabs and control characters such as backspace overstrike are passed
    through untouched.
    """
    if wait < 0:
        raise ValueError("wait must not be negative")
    if wait:
        (sleep or time.sleep)(wait)
    typer.echo(fortune, file=file)
