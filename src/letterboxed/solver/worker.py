"""Main module for worker tasks in the parallel solver.

Each worker task searches one branch: every chain of words whose first word begins with a
given letter.  The search is a plain depth-first traversal that runs to completion.
"""

from collections.abc import Set
from dataclasses import dataclass
from multiprocessing.sharedctypes import Synchronized
from time import time

from letterboxed.letter_box import LetterBox
from letterboxed.solutions import Solution
from letterboxed.solver.utils import get_word_letters, time_str
from letterboxed.wordlist import WordCatalog


@dataclass(kw_only=True)
class WorkerState:
    """Global state maintained by each worker process."""

    worker_idx: int
    """Index of the worker process."""

    start_time: float
    """Timestamp when the solver started, in seconds since the epoch."""

    letter_box: LetterBox
    """The puzzle being solved."""

    catalog: WordCatalog
    """Mapping from starting letter to the valid words beginning with it."""

    n_branches_searched: int = 0
    """Number of branches searched by this worker."""


worker_state: WorkerState | None = None
"""Global state for each worker process."""


def init_worker_globals(
    worker_ctr: "Synchronized[int]",
    start_time: float,
    letter_box: dict,
    catalog: WordCatalog,
) -> None:
    """Initialize global variables for worker processes.

    Args:
        worker_ctr (Synchronized[int]): Shared counter for workers.
        start_time (float): UNIX timestamp when the solver started.
        letter_box (dict): Dict representation of a LetterBox.
        catalog (WordCatalog): The word catalog for the puzzle, shared read-only by all
            branches.
    """
    global worker_state  # noqa: PLW0603
    with worker_ctr.get_lock():
        # Get and set the shared worker counter atomically, using the obtained value
        # as the worker index
        worker_idx = worker_ctr.value
        worker_ctr.value += 1

    worker_state = WorkerState(
        worker_idx=worker_idx,
        start_time=start_time,
        letter_box=LetterBox.from_dict(letter_box),
        catalog=catalog,
    )
    print(f"Worker {worker_state.worker_idx} initialized.", flush=True)


def worker_task(start_letter: str, n_words: int) -> list[Solution]:
    """Worker task to find all solutions whose first word begins with `start_letter`.

    Args:
        start_letter (str): The first letter of the first word.
        n_words (int): Number of words per solution.

    Returns:
        The solutions found in this branch, in discovery order.
    """
    # Ensure worker_state is initialized
    if not worker_state:
        raise RuntimeError("Worker state not initialized. Call init_worker_globals first.")

    solutions = search_branch(
        worker_state.letter_box,
        worker_state.catalog,
        start_letter=start_letter,
        n_words=n_words,
    )
    worker_state.n_branches_searched += 1
    print(
        f"Worker {worker_state.worker_idx}, {start_letter}: "
        f"{len(solutions)} solution(s) found "
        f"(#B:{worker_state.n_branches_searched} "
        f"T:{time_str(time() - worker_state.start_time)}).",
        flush=True,
    )
    return solutions


def search_branch(
    letter_box: LetterBox,
    catalog: WordCatalog,
    *,
    start_letter: str,
    n_words: int,
) -> list[Solution]:
    """Find all solutions of `n_words` words whose first word begins with `start_letter`.

    The returned list is private to this branch; no state is shared with other branches.
    """
    solutions: list[Solution] = []
    extend_chain(
        catalog,
        words_remaining=n_words,
        must_start_with=start_letter,
        uncovered=letter_box.letters,
        chosen=(),
        solutions=solutions,
    )
    return solutions


def extend_chain(
    catalog: WordCatalog,
    *,
    words_remaining: int,
    must_start_with: str,
    uncovered: Set[str],
    chosen: Solution,
    solutions: list[Solution],
) -> None:
    """Recursively extend a partial chain of words, collecting every complete solution.

    Args:
        catalog (WordCatalog): Mapping from starting letter to valid words.  Words in the
            catalog are not re-validated here.
        words_remaining (int): Number of words still to choose.
        must_start_with (str): The letter the next word must begin with.
        uncovered (Set[str]): Puzzle letters not used by any word in `chosen`.
            Never mutated; each branch gets its own set.
        chosen (Solution): The words chosen so far.
        solutions (list[Solution]): Output list.  A chain is appended only when all words
            have been chosen and every letter is covered.
    """
    if words_remaining == 0:
        if not uncovered:
            solutions.append(chosen)
        return

    candidates = catalog.get(must_start_with)
    if not candidates:
        return  # Dead end: no words start with this letter

    last_word = words_remaining == 1
    for word in candidates:
        # The last word must cover every remaining letter on its own
        if last_word and len(uncovered) > word.n_unique_letters:
            continue

        extend_chain(
            catalog,
            words_remaining=words_remaining - 1,
            must_start_with=word.last_letter,
            uncovered=uncovered - get_word_letters(word.text),
            chosen=(*chosen, word.text),
            solutions=solutions,
        )
