"""Letter Boxed Puzzle Solver.

Finds every chain of dictionary words that uses all the letters of a Letter Boxed puzzle.
Each word must start with the last letter of the previous word, and no two consecutive letters
of a word may lie on the same side (wall) of the box.  Uses a parallel backtracking search,
with one branch per starting letter.
"""

import argparse
import sys
from collections.abc import Sequence

from .letter_box import InvalidPuzzleError, LetterBox
from .solutions import format_solution, write_solutions
from .solver import solver
from .solver.utils import InvalidWordCountError


def prompt_word_count(letter_box: LetterBox) -> int:
    """Ask the user for the number of words per solution, until a valid number is given."""
    max_words = letter_box.max_words()
    prompt = "Please enter the number of words you want in your solution: "
    while True:
        try:
            line = input(prompt)
        except EOFError:
            print()
            sys.exit(1)
        try:
            n_words = int(line.strip())
        except ValueError:
            n_words = 0
        if 1 <= n_words <= max_words:
            return n_words
        prompt = f"Please enter a number between 1 and {max_words}: "


def main(argv: Sequence[str] | None = None) -> None:
    """Main entry point for the Letter Boxed solver."""
    parser = argparse.ArgumentParser(
        prog="letterboxed",
        description="Parallel Letter Boxed solver",
    )
    parser.add_argument(
        "letters",
        type=str,
        help="Puzzle letters, with each wall typed in consecutively (e.g. ABCDEFGHIJKL)",
    )
    parser.add_argument(
        "n_words",
        type=int,
        nargs="?",
        help="Number of words per solution (prompted for if omitted)",
    )
    parser.add_argument("--dictionary", type=str, help="Dictionary file, one word per line")
    parser.add_argument("--output", type=str, help="Write solutions to this file")
    parser.add_argument(
        "--max-words",
        action="store_true",
        help="Print the largest allowed number of words per solution and exit",
    )
    args = parser.parse_args(argv)

    try:
        letter_box = LetterBox(args.letters)
    except InvalidPuzzleError as e:
        print(e)
        sys.exit(1)

    if args.max_words:
        print(letter_box.max_words())
        return

    n_words = args.n_words if args.n_words is not None else prompt_word_count(letter_box)
    print(
        "Please be patient, finding all solutions can take a few minutes for more than two words."
    )

    try:
        solutions = solver.run(args.letters, n_words, word_list_path=args.dictionary)
    except (InvalidWordCountError, FileNotFoundError) as e:
        print(e)
        sys.exit(1)

    print(f"{len(solutions)} solution(s) found!")
    if args.output:
        n_written = write_solutions(args.output, solutions)
        print(f"Wrote {n_written} solution(s) to {args.output}")
    else:
        for solution in solutions:
            print(format_solution(solution))
