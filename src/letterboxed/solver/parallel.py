"""Implementation of the parallel solver: task distribution, worker management and merging."""

import traceback
from concurrent.futures import Executor, as_completed
from dataclasses import dataclass, field
from pprint import pprint
from typing import Literal, TextIO, TypedDict

from letterboxed.letter_box import LetterBox
from letterboxed.solutions import Solution
from letterboxed.solver.config import config as solver_config
from letterboxed.solver.task_args import TaskArgs
from letterboxed.solver.worker import search_branch, worker_task


class WorkerTaskPayload(TypedDict):
    """Payload submitted to worker processes."""

    start_letter: str
    """First letter of the first word in the branch."""
    n_words: int
    """Number of words per solution."""


@dataclass
class Result:
    """Wrapper for worker task results."""

    start_letter: str
    status: Literal["success", "no_solution", "error"]
    result: list[Solution] = field(default_factory=list)
    err_msg: str | None = None


class SearchError(RuntimeError):
    """Raised when one or more search branches failed."""

    def __init__(self, failed: list[Result]) -> None:
        self.failed = failed
        letters = ", ".join(r.start_letter for r in failed)
        super().__init__(f"Search failed for branch(es) starting with: {letters}")


def log_task_args(task_args: TaskArgs, logf: TextIO) -> None:
    """Write the solver configuration and task summary to the log."""
    print("Solver config:", file=logf, flush=True)
    pprint(solver_config.model_dump(), stream=logf, width=120)
    print("Solver initialized with:", file=logf, flush=True)
    pprint(task_args.summary(), stream=logf, width=120)
    print("", file=logf, flush=True)
    print("#" * 80, file=logf, flush=True)
    print("", file=logf, flush=True)


def solve_with_parallel_branches(
    executor: Executor,
    task_args: TaskArgs,
    logf: TextIO,
) -> list[Solution]:
    """Solve the puzzle with one worker task per starting letter.

    Each task returns its own list of solutions.  The lists are concatenated once every task
    has finished, so no lock is needed on the results.

    Args:
        executor (Executor): Executor for managing worker processes.  Its workers must have
            been initialized with `init_worker_globals`.
        task_args (TaskArgs): The puzzle, word catalog and number of words per solution.
        logf: File object to log the solving process.

    Returns:
        All solutions found, in no particular order.

    Raises:
        SearchError: If any branch failed.  No solutions are returned in that case.
    """
    log_task_args(task_args, logf)

    branch_letters = task_args.branch_letters()
    print(
        f"Starting parallel solver with {len(branch_letters)} branches: "
        f"{''.join(branch_letters)}",
        file=logf,
        flush=True,
    )
    tasks: list[WorkerTaskPayload] = [
        {"start_letter": letter, "n_words": task_args.n_words} for letter in branch_letters
    ]

    futures = {executor.submit(_worker_task, task): task["start_letter"] for task in tasks}
    results: list[Result] = []
    for future in as_completed(futures):
        try:
            results.append(future.result())
        except Exception as e:
            # The wrapper catches search errors, so this means the worker process itself died
            start_letter = futures[future]
            print(f"Error retrieving worker result for '{start_letter}': {str(e)}", flush=True)
            results.append(
                Result(
                    start_letter=start_letter,
                    status="error",
                    err_msg=f"Error retrieving worker result: {str(e)}\n{traceback.format_exc()}",
                )
            )

    return merge_results(results, logf)


def solve_serially(task_args: TaskArgs, logf: TextIO) -> list[Solution]:
    """Solve the puzzle by searching each branch in turn in the calling process."""
    log_task_args(task_args, logf)

    letter_box = LetterBox.from_dict(task_args.letter_box)
    print("Starting serial solver...", file=logf, flush=True)
    results = []
    for letter in task_args.branch_letters():
        try:
            solutions = search_branch(
                letter_box,
                task_args.catalog,
                start_letter=letter,
                n_words=task_args.n_words,
            )
            results.append(
                Result(
                    start_letter=letter,
                    status="success" if solutions else "no_solution",
                    result=solutions,
                )
            )
        except Exception as e:
            results.append(
                Result(
                    start_letter=letter,
                    status="error",
                    err_msg=f"Search encountered an error: {str(e)}\n{traceback.format_exc()}",
                )
            )
    return merge_results(results, logf)


def merge_results(results: list[Result], logf: TextIO) -> list[Solution]:
    """Concatenate the solutions of all branches.

    Raises:
        SearchError: If any branch reported an error.
    """
    solutions: list[Solution] = []
    failed: list[Result] = []
    for result in results:
        if result.status == "error":
            print(
                f"Branch '{result.start_letter}' encountered an error:",
                file=logf,
                flush=True,
            )
            print(result.err_msg, file=logf, flush=True)
            failed.append(result)
        elif result.status == "success":
            print(
                f"Branch '{result.start_letter}': {len(result.result)} solution(s).",
                file=logf,
                flush=True,
            )
            solutions.extend(result.result)
        else:
            print(f"Branch '{result.start_letter}': no solution.", file=logf, flush=True)

    if failed:
        raise SearchError(failed)
    return solutions


def _worker_task(args: WorkerTaskPayload) -> Result:
    """Worker task to search the branch for a given starting letter.

    Args:
        args (dict): Dictionary received from `executor.submit` containing:
            - "start_letter": The first letter of the first word.
            - "n_words": Number of words per solution.

    Returns:
        A Result wrapper.
    """
    try:
        start_letter = args["start_letter"]
        ret = worker_task(**args)
        return Result(
            start_letter=start_letter,
            status="success" if ret else "no_solution",
            result=ret,
        )
    except Exception as e:
        return Result(
            start_letter=args.get("start_letter", "<missing>"),
            status="error",
            err_msg=f"Worker encountered an error: {str(e)}\n{traceback.format_exc()}",
        )
