"""Utility functions for the Letter Boxed solver."""

from functools import lru_cache

from letterboxed.letter_box import LetterBox

TIMESTAMP_FMT = "%Y-%m-%d %H:%M:%S.%f %Z%z"


class InvalidWordCountError(ValueError):
    """Raised when the requested number of words per solution is out of range."""

    pass


@lru_cache(maxsize=300_000)
def get_word_letters(word: str) -> frozenset[str]:
    """Return a cached set of the letters in a word.

    This is the hotspot of the search: it is called for every candidate word at every depth.
    """
    return frozenset(word)


def validate_word_count(letter_box: LetterBox, n_words: int) -> None:
    """Check that `n_words` lies in `[1, letter_box.max_words()]`.

    Raises:
        InvalidWordCountError: If the word count is out of range.
    """
    max_words = letter_box.max_words()
    if not 1 <= n_words <= max_words:
        raise InvalidWordCountError(
            f"Number of words must be between 1 and {max_words} for puzzle {letter_box}, "
            f"got {n_words}."
        )


def time_str(seconds: float) -> str:
    """Convert a time duration in seconds to a human-readable string.

    Args:
        seconds: Time duration in seconds.

    Returns:
        A string formatted as "HH:MM:SS.sss".
    """
    hours, rem = divmod(seconds, 3600)
    minutes, secs = divmod(rem, 60)
    return f"{int(hours):02}:{int(minutes):02}:{secs:05.2f}"


def int_comma(n: int) -> str:
    """Format an integer with commas as thousands separators."""
    return f"{n:,}"
