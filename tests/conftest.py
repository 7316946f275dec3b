"""Shared fixtures for the Letter Boxed solver tests."""

import pytest

from letterboxed.letter_box import LetterBox
from letterboxed.solver.config import config as solver_config
from letterboxed.wordlist import filter_and_group

# Walls: ABC, DEF, GHI, JKL
LETTERS = "ABCDEFGHIJKL"

RAW_WORDS = [
    "ADGJBEH",
    "HKCFIL",
    "ADGJBEHKCFIL",
    "LAD",
    "DGJ",
    "JCK",
    "ABD",  # A and B share a wall
    "AD",  # too short
    "AXD",  # X is not in the puzzle
    "LAD",  # duplicate
]


@pytest.fixture
def letter_box() -> LetterBox:
    return LetterBox(LETTERS)


@pytest.fixture
def catalog(letter_box):
    return filter_and_group(RAW_WORDS, letter_box)


@pytest.fixture
def serial_solver(monkeypatch, tmp_path):
    """Run the solver in-process and keep log files under a temporary directory."""
    monkeypatch.setattr(solver_config, "use_parallelism", False)
    monkeypatch.setattr(solver_config, "log_dir", str(tmp_path / "logs"))


@pytest.fixture
def dictionary_file(tmp_path):
    path = tmp_path / "dictionary.txt"
    path.write_text("\n".join(w.lower() for w in RAW_WORDS) + "\n\n", encoding="utf-8")
    return path
