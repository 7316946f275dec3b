"""Functions for checking, ordering and writing puzzle solutions."""

from collections.abc import Iterable, Sequence
from os import PathLike
from pathlib import Path
from typing import TypeAlias

from letterboxed.letter_box import LetterBox

Solution: TypeAlias = tuple[str, ...]
"""An ordered chain of words."""


def sort_solutions(solutions: Iterable[Solution]) -> list[Solution]:
    """Return the solutions sorted by number of words, then alphabetically."""
    return sorted(solutions, key=lambda s: (len(s), s))


def is_valid_solution(solution: Sequence[str], letter_box: LetterBox, n_words: int) -> bool:
    """Validate a solution: word count, valid words, chained words and full letter coverage."""
    if len(solution) != n_words:
        return False
    if not all(letter_box.is_valid_word(word) for word in solution):
        return False
    for prev_word, next_word in zip(solution, solution[1:]):
        if prev_word[-1] != next_word[0]:
            return False

    used_letters = set().union(*solution)
    return used_letters == letter_box.letters


def format_solution(solution: Sequence[str]) -> str:
    """Format a solution as a single line of space-separated words."""
    return " ".join(solution)


def write_solutions(path: str | PathLike, solutions: Iterable[Solution]) -> int:
    """Write solutions to a file, one per line.

    Args:
        path: The output file.  Parent directories are created if needed.
        solutions: The solutions to write.

    Returns:
        The number of solutions written.
    """
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    n_written = 0
    with out_path.open("w", encoding="utf-8") as f:
        for solution in solutions:
            print(format_solution(solution), file=f)
            n_written += 1
    return n_written
