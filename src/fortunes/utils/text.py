"""Helpers for splitting fortune files into individual fortunes."""

from __future__ import annotations

import re
from pathlib import Path
from typing import List

from fortunes.errors import FortuneReadError

# A line holding only "%" between runs of line breaks.
DELIMITER = re.compile(r"[\r\n]+%[\r\n]+")


def split_fortunes(text: str) -> List[str]:
    """Split fortune file text on ``%`` delimiter lines.

    Pieces are returned untouched and in order. Text without a delimiter
    comes back as a single fortune. When the text ends on a delimiter the
    empty piece after it is dropped, since it is not a fortune and would
    otherwise count towards the file weight.
    """
    fortunes = DELIMITER.split(text)
    if len(fortunes) > 1 and fortunes[-1] == "":
        fortunes.pop()
    return fortunes


def read_fortunes(path: Path) -> List[str]:
    """Read a fortune file and split it."""
    try:
        text = Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise FortuneReadError(path, exc.strerror or str(exc)) from exc
    return split_fortunes(text)
