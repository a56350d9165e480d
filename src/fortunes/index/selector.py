"""Weighted random fortune selection."""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from fortunes.errors import CorpusChangedError, EmptyCorpusError
from fortunes.models import Corpus, FortuneFile, Mode
from fortunes.utils.text import read_fortunes

LOGGER = logging.getLogger(__name__)


class Selector:
    """Draws a file by fortune count, then a fortune inside it."""

    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        *,
        seed: Optional[int] = None,
    ) -> None:
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def choose_file(self, corpus: Corpus, mode: Mode = Mode.ALL) -> FortuneFile:
        """Pick a file with probability proportional to its weight under ``mode``."""
        if not corpus.files:
            raise EmptyCorpusError("No fortune files to choose from")

        cumulative = np.cumsum(corpus.weights(mode))
        total = int(cumulative[-1])
        if total <= 0:
            raise EmptyCorpusError(f"No {mode.value} fortunes in any file")

        draw = int(self.rng.integers(0, total))
        # First entry whose cumulative weight exceeds the draw; zero weights never win.
        position = int(np.searchsorted(cumulative, draw, side="right"))
        return corpus.files[position]

    def select(self, corpus: Corpus, mode: Mode = Mode.ALL) -> str:
        """Return one random fortune from ``corpus`` matching ``mode``."""
        chosen = self.choose_file(corpus, mode)
        LOGGER.debug("Selected %s (weight %d)", chosen.path, mode.weight(chosen))

        candidates = [fortune for fortune in read_fortunes(chosen.path) if mode.accepts(fortune)]
        if not candidates:
            raise CorpusChangedError(
                f"{chosen.path} has no {mode.value} fortunes left; it changed after indexing"
            )
        if len(candidates) != mode.weight(chosen):
            LOGGER.warning("%s changed after indexing", chosen.path)

        return candidates[int(self.rng.integers(0, len(candidates)))]
