"""Tests for the CLI."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from fortunes.cli import _setup_logging, app
from fortunes.config import FORTUNES_FOLDER_ENV


runner = CliRunner()
LONG = "L" * 200


def _write(path: Path, fortunes: list[str]) -> Path:
    path.write_text("\n%\n".join(fortunes), encoding="utf-8")
    return path


@pytest.fixture
def folder(tmp_path: Path) -> Path:
    _write(tmp_path / "art", ["the only short one"])
    _write(tmp_path / "epics", [LONG])
    (tmp_path / "art.dat").write_bytes(b"\x00\x00")
    return tmp_path


@pytest.fixture(autouse=True)
def _no_env_folder(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(FORTUNES_FOLDER_ENV, raising=False)


class TestSetupLogging:
    """Tests for _setup_logging helper."""

    def test_setup_logging_verbose(self) -> None:
        """Verbose mode sets DEBUG level."""
        with patch("fortunes.cli.logging.basicConfig") as mock_config:
            _setup_logging(verbose=True)
            mock_config.assert_called_once()
            assert mock_config.call_args[1]["level"] == logging.DEBUG

    def test_setup_logging_normal(self) -> None:
        """Normal mode only reports warnings."""
        with patch("fortunes.cli.logging.basicConfig") as mock_config:
            _setup_logging(verbose=False)
            mock_config.assert_called_once()
            assert mock_config.call_args[1]["level"] == logging.WARNING


class TestFortuneCommand:
    """Tests for printing a fortune."""

    def test_short_fortune(self, folder: Path) -> None:
        """Prints the only short fortune in short mode."""
        result = runner.invoke(app, ["--folder", str(folder), "--short"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "the only short one"

    def test_fortune_printed_verbatim(self, tmp_path: Path) -> None:
        """Keeps tabs and backspaces in the printed fortune."""
        fortune = "Quote line\n\t\t-- Mark Twain\nA_\bB"
        _write(tmp_path / "quotes", [fortune])
        result = runner.invoke(app, ["-f", str(tmp_path)])
        assert result.exit_code == 0
        assert result.stdout == fortune + "\n"

    def test_long_fortune(self, folder: Path) -> None:
        result = runner.invoke(app, ["-f", str(folder), "-l"])
        assert result.exit_code == 0
        assert result.stdout.strip() == LONG

    def test_any_fortune_with_seed(self, folder: Path) -> None:
        """Same seed gives the same fortune."""
        first = runner.invoke(app, ["-f", str(folder), "--seed", "9"])
        second = runner.invoke(app, ["-f", str(folder), "--seed", "9"])
        assert first.exit_code == 0
        assert first.stdout.strip() in {"the only short one", LONG}
        assert first.stdout == second.stdout

    def test_folder_from_environment(self, folder: Path) -> None:
        result = runner.invoke(app, ["-s"], env={FORTUNES_FOLDER_ENV: str(folder)})
        assert result.exit_code == 0
        assert "the only short one" in result.stdout

    def test_wait_is_applied(self, folder: Path) -> None:
        """Parses the wait duration and sleeps before printing."""
        with patch("fortunes.display.time.sleep") as mock_sleep:
            result = runner.invoke(app, ["-f", str(folder), "-s", "-w", "1.5s"])
        assert result.exit_code == 0
        mock_sleep.assert_called_once_with(1.5)

    def test_invalid_wait(self, folder: Path) -> None:
        result = runner.invoke(app, ["-f", str(folder), "-w", "soon"])
        assert result.exit_code == 2

    def test_short_and_long_conflict(self, folder: Path) -> None:
        """Rejects short and long together as a usage error."""
        result = runner.invoke(app, ["-f", str(folder), "-s", "-l"])
        assert result.exit_code == 2

    def test_no_folder_configured(self) -> None:
        result = runner.invoke(app, [])
        assert result.exit_code == 1
        assert FORTUNES_FOLDER_ENV in result.output

    def test_missing_folder(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["-f", str(tmp_path / "nope")])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_empty_folder(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["-f", str(tmp_path)])
        assert result.exit_code == 1
        assert "No fortune files" in result.output

    def test_all_filtered_out(self, tmp_path: Path) -> None:
        """Fails instead of printing a long fortune in short mode."""
        _write(tmp_path / "epics", [LONG])
        result = runner.invoke(app, ["-f", str(tmp_path), "-s"])
        assert result.exit_code == 1
        assert LONG not in result.stdout


class TestListMode:
    """Tests for --list."""

    def test_list_files(self, folder: Path) -> None:
        """Prints accepted files one per line."""
        result = runner.invoke(app, ["-f", str(folder), "--list"])
        assert result.exit_code == 0
        assert result.stdout.splitlines() == [str(folder / "art"), str(folder / "epics")]

    def test_list_with_counts(self, tmp_path: Path) -> None:
        """Shows total, short and long counts for each file."""
        _write(tmp_path / "mixed", ["a", "b", LONG])
        _write(tmp_path / "epics", [LONG])
        (tmp_path / "mixed.dat").write_bytes(b"\x00")

        result = runner.invoke(app, ["-f", str(tmp_path), "-t", "--counts"])
        assert result.exit_code == 0
        assert "Total" in result.stdout
        assert "mixed.dat" not in result.stdout
        rows = [
            [cell.strip() for cell in re.split(r"[│┃|]", line)]
            for line in result.stdout.splitlines()
        ]
        counts = [row[-4:-1] for row in rows if len(row) >= 5]
        assert ["1", "0", "1"] in counts
        assert ["3", "2", "1"] in counts

    def test_counts_requires_list(self, folder: Path) -> None:
        """Rejects --counts on its own as a usage error."""
        result = runner.invoke(app, ["-f", str(folder), "--counts"])
        assert result.exit_code == 2

    def test_list_missing_folder(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["-f", str(tmp_path / "nope"), "--list"])
        assert result.exit_code == 1
