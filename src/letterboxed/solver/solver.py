"""Main solver module for Letter Boxed puzzles."""

import os
import sys
from collections.abc import Iterable
from concurrent.futures import ProcessPoolExecutor
from contextlib import nullcontext
from datetime import datetime
from multiprocessing import Value
from multiprocessing.sharedctypes import Synchronized
from os import PathLike
from pathlib import Path
from time import time
from typing import TextIO

from letterboxed.letter_box import LetterBox
from letterboxed.solutions import Solution, sort_solutions
from letterboxed.solver.config import config as solver_config
from letterboxed.solver.parallel import solve_serially, solve_with_parallel_branches
from letterboxed.solver.task_args import TaskArgs
from letterboxed.solver.utils import TIMESTAMP_FMT, int_comma, time_str, validate_word_count
from letterboxed.solver.worker import init_worker_globals
from letterboxed.wordlist import WordCatalog, load_word_list


def get_executor(
    *,
    n_workers: int | None = None,
    task_args: TaskArgs,
) -> ProcessPoolExecutor:
    """Get a ProcessPoolExecutor.

    Args:
        n_workers (int | None): Number of worker processes to create.  If None, defaults to
            one per search branch, capped at the number of CPU cores.
        task_args (TaskArgs): The puzzle and word catalog, passed once to each worker.

    Returns:
        A ProcessPoolExecutor instance for worker processes.
    """
    worker_ctr: Synchronized[int] = Value("i", 0)

    cpus = os.cpu_count() or 1  # Fallback to 1 if os.cpu_count() is None
    if n_workers is None:
        n_workers = max(1, min(cpus, len(task_args.branch_letters())))
    if n_workers > cpus:
        raise ValueError(
            f"Requested number of workers ({n_workers}) exceeds CPU count ({cpus})",
        )
    return ProcessPoolExecutor(
        max_workers=n_workers,
        initializer=init_worker_globals,
        initargs=(
            worker_ctr,
            task_args.start_time,
            task_args.letter_box,
            task_args.catalog,
        ),
    )


def solve(
    letter_box: LetterBox,
    n_words: int,
    *,
    words: Iterable[str] | None = None,
    catalog: WordCatalog | None = None,
    logf: TextIO | None = None,
) -> list[Solution]:
    """Find every solution of `n_words` words for a puzzle.

    Args:
        letter_box (LetterBox): The puzzle to solve.
        n_words (int): Number of words per solution.
        words (Iterable[str] | None): Raw candidate words.  Either this or `catalog` is required.
        catalog (WordCatalog | None): A catalog already built with `filter_and_group`.
        logf: File object to log the solving process.  If None, the log is discarded.

    Returns:
        All solutions.  Sorted if the solver is configured to be deterministic, otherwise in
        no particular order.

    Raises:
        InvalidWordCountError: If `n_words` is out of range for the puzzle.
    """
    validate_word_count(letter_box, n_words)
    task_args = TaskArgs(letter_box=letter_box, n_words=n_words, words=words, catalog=catalog)

    log_ctx = nullcontext(logf) if logf is not None else open(os.devnull, "w", encoding="utf-8")
    with log_ctx as out:
        return solve_one(task_args, logf=out)


def solve_one(task_args: TaskArgs, *, logf: TextIO) -> list[Solution]:
    """Search every branch of a puzzle and return the merged solutions.

    Args:
        task_args (TaskArgs): The puzzle, word catalog and number of words per solution.
        logf: File object to log the solving process.
    """
    letter_box = LetterBox.from_dict(task_args.letter_box)
    print(f"Selected puzzle: {letter_box}", file=logf, flush=True)
    print(f"Words per solution: {task_args.n_words}", file=logf, flush=True)

    # Start time as formatted string (in local timezone)
    start_time_str = (
        datetime.fromtimestamp(task_args.start_time).astimezone().strftime(TIMESTAMP_FMT)
    )
    print(f"Start time: {start_time_str}", file=logf, flush=True)

    if solver_config.use_parallelism:
        with get_executor(n_workers=solver_config.max_workers, task_args=task_args) as executor:
            try:
                solutions = solve_with_parallel_branches(executor, task_args, logf)
            except BaseException:
                # Includes KeyboardInterrupt
                executor.shutdown(wait=False, cancel_futures=True)
                raise
    else:
        solutions = solve_serially(task_args, logf)

    if solver_config.deterministic:
        solutions = sort_solutions(solutions)

    print(
        f"{int_comma(len(solutions))} solution(s) found "
        f"in {time_str(time() - task_args.start_time)}.",
        file=logf,
        flush=True,
    )
    return solutions


def run(
    letters: str,
    n_words: int,
    *,
    word_list_path: str | PathLike | None = None,
) -> list[Solution]:
    """Run the solver on the given puzzle, logging to a file under the configured log dir.

    Args:
        letters (str): The puzzle letters, with each wall typed in consecutively.
        n_words (int): Number of words per solution.
        word_list_path: Path to the dictionary file.  Defaults to the configured dictionary.

    Returns:
        All solutions found.
    """
    letter_box = LetterBox(letters)
    print(f"Puzzle: {letter_box}")
    validate_word_count(letter_box, n_words)

    words = load_word_list(word_list_path)
    task_args = TaskArgs(letter_box=letter_box, n_words=n_words, words=words)
    print(
        f"Loaded {int_comma(len(words))} words, "
        f"{int_comma(task_args.summary()['words_count'])} usable in this puzzle."
    )

    logfile = Path(solver_config.log_dir) / "".join(letter_box.walls) / f"{n_words}-words.log"
    print(f"Log file: {logfile}")

    logfile.parent.mkdir(parents=True, exist_ok=True)

    with open(logfile, "w", encoding="utf-8") as logf:
        try:
            solutions = solve_one(task_args, logf=logf)
        except KeyboardInterrupt:
            print("Solver interrupted by user.", file=logf, flush=True)
            print("Solver interrupted by user.")
            sys.exit(1)
    print()
    return solutions
