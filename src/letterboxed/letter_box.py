"""Classes and functions for representing the walls and rules of the puzzle."""

from collections.abc import Iterable

from letterboxed.solver.config import config as solver_config


class InvalidPuzzleError(ValueError):
    """Raised when the puzzle letters or rules do not describe a valid puzzle."""

    pass


class LetterBox:
    """The walls of a Letter Boxed puzzle.

    The letters are split into `wall_count` equal groups of consecutive letters, in input order.
    Two letters on the same wall may never appear next to each other within a word.

    Each letter is assumed to appear only once in the puzzle.  If a letter repeats, it belongs
    to the wall of its first occurrence.

    Instances are not modified after construction, so they can be shared freely between
    search branches.
    """

    def __init__(
        self,
        letters: str,
        *,
        wall_count: int | None = None,
        min_word_length: int | None = None,
    ) -> None:
        """Create a puzzle from a string of letters.

        Args:
            letters (str): The puzzle letters, with each wall typed in consecutively.
                Case is normalized to uppercase.
            wall_count (int | None): Number of walls.  Defaults to the configured value.
            min_word_length (int | None): Shortest admissible word.  Defaults to the
                configured value.

        Raises:
            InvalidPuzzleError: If the number of walls or the minimum word length is not
                positive, or the number of letters is not a positive multiple of the number
                of walls.
        """
        self.wall_count = solver_config.wall_count if wall_count is None else wall_count
        self.min_word_length = (
            solver_config.min_word_length if min_word_length is None else min_word_length
        )
        if self.wall_count < 1:
            raise InvalidPuzzleError(f"Wall count must be positive, got {self.wall_count}.")
        if self.min_word_length < 1:
            raise InvalidPuzzleError(
                f"Minimum word length must be positive, got {self.min_word_length}."
            )

        letters = clean(letters)
        if not letters or len(letters) % self.wall_count != 0:
            raise InvalidPuzzleError(
                f"Expected a positive multiple of {self.wall_count} letters, "
                f"got {len(letters)}: '{letters}'."
            )

        letters_per_wall = len(letters) // self.wall_count
        self.walls: tuple[str, ...] = tuple(
            letters[start : start + letters_per_wall]
            for start in range(0, len(letters), letters_per_wall)
        )
        """The walls, in input order.  Walls are identified by their index in this tuple."""

        self.wall_index: dict[str, int] = {}
        """Mapping from each letter to the index of its wall."""
        for wall_idx, wall in enumerate(self.walls):
            for ch in wall:
                self.wall_index.setdefault(ch, wall_idx)

        self.letters: frozenset[str] = frozenset(self.wall_index)
        """The set of all letters in the puzzle."""

    def __str__(self) -> str:
        """Return a string representation of the puzzle, e.g. `ABC-DEF-GHI-JKL`."""
        return "-".join(self.walls)

    def __repr__(self) -> str:
        return f"LetterBox({''.join(self.walls)!r}, wall_count={self.wall_count})"

    def wall_of(self, letter: str) -> int | None:
        """Return the index of the wall holding `letter`, or None if it is not in the puzzle."""
        return self.wall_index.get(letter)

    def same_wall(self, letter1: str, letter2: str) -> bool:
        """Returns whether two letters are on the same wall.

        Letters not in the puzzle are never on the same wall as anything.
        """
        wall1 = self.wall_index.get(letter1)
        if wall1 is None:
            return False
        return wall1 == self.wall_index.get(letter2)

    def __contains__(self, letter: str) -> bool:
        return letter in self.wall_index

    def contains(self, letter: str) -> bool:
        """Returns whether the letter is part of the puzzle."""
        return letter in self.wall_index

    def is_valid_word(self, word: str) -> bool:
        """Returns whether a word can be traced within the puzzle.

        A word is valid if it is long enough, uses only puzzle letters, and never has two
        consecutive letters on the same wall.
        """
        if len(word) < self.min_word_length:
            return False

        prev_wall = None
        for ch in word:
            wall = self.wall_index.get(ch)
            if wall is None or wall == prev_wall:
                return False
            prev_wall = wall
        return True

    def letter_count(self) -> int:
        """Returns the number of distinct letters in the puzzle."""
        return len(self.letters)

    def max_words(self) -> int:
        """Returns the largest word count a solution may be asked for."""
        return self.letter_count() // self.min_word_length

    def to_dict(self) -> dict:
        """Return a dictionary representation of the puzzle for serialization.

        Used to supply the puzzle to worker processes and to log task summaries.
        """
        return {
            "letters": "".join(self.walls),
            "wall_count": self.wall_count,
            "min_word_length": self.min_word_length,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "LetterBox":
        """Create a LetterBox instance from a dictionary representation."""
        return cls(
            data["letters"],
            wall_count=data["wall_count"],
            min_word_length=data["min_word_length"],
        )


def clean(letters: str | Iterable[str]) -> str:
    """Clean the puzzle letters by removing whitespace and converting to uppercase."""
    return "".join("".join(letters).split()).upper()
