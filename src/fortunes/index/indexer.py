"""Fortune file indexing."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from fortunes.errors import ConfigurationError
from fortunes.models import Corpus, FortuneFile
from fortunes.utils.files import FilePredicate, is_fortune_file, iter_fortune_paths
from fortunes.utils.text import read_fortunes

LOGGER = logging.getLogger(__name__)


def _check_folder(folder: Path) -> Path:
    folder = Path(folder)
    if not folder.exists():
        raise ConfigurationError(f"Fortune folder not found: {folder}")
    if not folder.is_dir():
        raise ConfigurationError(f"Fortune folder is not a directory: {folder}")
    return folder


def list_fortune_files(folder: Path, predicate: FilePredicate = is_fortune_file) -> List[Path]:
    """List accepted fortune files without reading them."""
    return list(iter_fortune_paths(_check_folder(folder), predicate))


class Indexer:
    """Counts the fortunes held by every file in a folder."""

    def __init__(self, predicate: FilePredicate = is_fortune_file) -> None:
        self.predicate = predicate

    def index(self, folder: Path) -> Corpus:
        """Index all fortune files found under ``folder``.

        A file that cannot be read aborts the whole run.
        """
        folder = _check_folder(folder)
        corpus = Corpus()
        for path in iter_fortune_paths(folder, self.predicate):
            entry = self._index_single(path)
            corpus.files.append(entry)

        if not corpus.files:
            LOGGER.warning("No fortune files found in %s", folder)
        else:
            LOGGER.info(
                "Indexed %d fortunes in %d files",
                sum(item.total_count for item in corpus),
                len(corpus),
            )
        return corpus

    def _index_single(self, path: Path) -> FortuneFile:
        entry = FortuneFile.from_fortunes(path, read_fortunes(path))
        LOGGER.debug(
            "%s: %d fortunes (%d short, %d long)",
            path,
            entry.total_count,
            entry.short_count,
            entry.long_count,
        )
        return entry


def index_folder(folder: Path, predicate: FilePredicate = is_fortune_file) -> Corpus:
    return Indexer(predicate).index(folder)
