"""Module for word list management in Letter Boxed."""

from collections import defaultdict
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import TypeAlias

from sortedcontainers import SortedSet

from letterboxed.letter_box import LetterBox
from letterboxed.solver.config import config as solver_config


@dataclass(frozen=True, order=True)
class Word:
    """A dictionary word, together with the number of distinct letters it contains.

    Equality, hashing and ordering only consider the text of the word.
    """

    text: str
    n_unique_letters: int = field(init=False, compare=False)

    def __post_init__(self) -> None:
        # Frozen dataclass, so bypass __setattr__ for the derived field
        object.__setattr__(self, "n_unique_letters", len(set(self.text)))

    def __len__(self) -> int:
        return len(self.text)

    def __str__(self) -> str:
        return self.text

    def __getitem__(self, index: int) -> str:
        """Return the character at `index`.

        Raises:
            IndexError: If `index` is outside `[0, len(word))`.  Negative indices are not
                supported.
        """
        if not 0 <= index < len(self.text):
            raise IndexError(f"Index {index} out of range for word '{self.text}'.")
        return self.text[index]

    @property
    def first_letter(self) -> str:
        return self[0]

    @property
    def last_letter(self) -> str:
        return self[len(self.text) - 1]


WordCatalog: TypeAlias = Mapping[str, Iterable[Word]]
"""Mapping from a starting letter to the valid words beginning with it."""


def load_word_list(path: str | PathLike | None = None) -> set[str]:
    """Load the word list from a dictionary file.

    Args:
        path: Path to the dictionary file, one word per line.  Defaults to the configured
            dictionary.

    Returns:
        A set of uppercase words.
    """
    word_list_path = Path(solver_config.word_list_path if path is None else path)
    if not word_list_path.is_file():
        raise FileNotFoundError(f"Word list file not found: {word_list_path}")

    with word_list_path.open("r", encoding="utf-8") as f:
        words: set[str] = set()
        for line in f:
            word = line.strip().upper()
            if not word:
                continue
            words.add(word)
        return words


def filter_and_group(
    raw_words: Iterable[str],
    letter_box: LetterBox,
    *,
    deterministic: bool | None = None,
) -> dict[str, SortedSet | set[Word]]:
    """Create the word catalog for a puzzle.

    Words are upper-cased to match the puzzle letters.  Each word that can be traced within
    the puzzle is added under its first letter.  Duplicate words are stored once.

    Args:
        raw_words (Iterable[str]): Candidate words, e.g. from `load_word_list`.
        letter_box (LetterBox): The puzzle.
        deterministic (bool | None): If True, each letter maps to a `SortedSet` so that words
            are always visited in the same order.  Defaults to the configured value.

    Returns:
        A mapping from starting letter to the set of valid words beginning with it.  Letters
        with no valid words are absent.
    """
    if deterministic is None:
        deterministic = solver_config.deterministic

    catalog: defaultdict[str, set[Word]] = defaultdict(set)
    for text in raw_words:
        text = text.strip().upper()
        if letter_box.is_valid_word(text):
            catalog[text[0]].add(Word(text))

    if deterministic:
        return {ch: SortedSet(words) for ch, words in catalog.items()}
    return dict(catalog)  # Convert defaultdict to regular dict for return


def catalog_size(catalog: WordCatalog) -> int:
    """Return the total number of words in a catalog."""
    return sum(len(words) for words in catalog.values())
