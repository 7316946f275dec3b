"""Solver state representation for Letter Boxed puzzles."""

from collections.abc import Iterable
from datetime import datetime
from time import time

from letterboxed.letter_box import LetterBox
from letterboxed.solver.config import config as solver_config
from letterboxed.solver.utils import TIMESTAMP_FMT
from letterboxed.wordlist import WordCatalog, catalog_size, filter_and_group


class TaskArgs:
    """Wrapper for task arguments for the solver.

    Pickleable, so that it can be used with multiprocessing (passed to worker processes).
    """

    def __init__(
        self,
        *,
        letter_box: LetterBox,
        n_words: int,
        words: Iterable[str] | None = None,
        catalog: WordCatalog | None = None,
    ) -> None:
        """Initialize the solver with the given puzzle and word list.

        Exactly one of `words` and `catalog` must be given.

        Args:
            letter_box (LetterBox): The puzzle to solve.
            n_words (int): Number of words per solution.
            words (Iterable[str] | None): Raw candidate words, filtered for the puzzle here.
            catalog (WordCatalog | None): A catalog already built with `filter_and_group`.
        """
        if (words is None) == (catalog is None):
            raise ValueError("Exactly one of 'words' and 'catalog' must be given.")

        self.letter_box = letter_box.to_dict()
        """dict representing the puzzle."""

        self.n_words = n_words
        """Number of words per solution."""

        self.catalog = catalog if catalog is not None else filter_and_group(words, letter_box)
        """Mapping from starting letter to the valid words beginning with it."""

        self.start_time = time()
        """Timestamp when the solver started, in seconds since the epoch."""

    def branch_letters(self) -> list[str]:
        """Return the starting letter of each top-level search branch, one per puzzle letter."""
        letters = LetterBox.from_dict(self.letter_box).letters
        return sorted(letters) if solver_config.deterministic else list(letters)

    def summary(self) -> dict[str, object]:
        """Return a dictionary-based summary of the task arguments."""
        return {
            "letter_box": dict(self.letter_box),
            "n_words": self.n_words,
            "catalog_letters": "".join(sorted(self.catalog)),
            "words_count": catalog_size(self.catalog),
            "start_time": datetime.fromtimestamp(self.start_time)
            .astimezone()
            .strftime(TIMESTAMP_FMT),
        }
