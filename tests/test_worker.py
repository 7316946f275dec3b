from multiprocessing import Value
from time import time

from letterboxed.solutions import is_valid_solution
from letterboxed.solver import worker
from letterboxed.wordlist import Word, filter_and_group
from letterboxed.solver.worker import extend_chain, search_branch


def _search_all(letter_box, catalog, n_words):
    solutions = []
    for letter in sorted(letter_box.letters):
        solutions.extend(
            search_branch(letter_box, catalog, start_letter=letter, n_words=n_words)
        )
    return solutions


def test_single_word_solution(letter_box, catalog):
    assert _search_all(letter_box, catalog, 1) == [("ADGJBEHKCFIL",)]


def test_two_word_solutions(letter_box, catalog):
    assert set(_search_all(letter_box, catalog, 2)) == {
        ("ADGJBEH", "HKCFIL"),
        ("ADGJBEHKCFIL", "LAD"),
    }


def test_three_and_four_word_solutions(letter_box, catalog):
    assert set(_search_all(letter_box, catalog, 3)) == {
        ("ADGJBEH", "HKCFIL", "LAD"),
        ("ADGJBEHKCFIL", "LAD", "DGJ"),
    }
    assert set(_search_all(letter_box, catalog, 4)) == {
        ("ADGJBEH", "HKCFIL", "LAD", "DGJ"),
        ("ADGJBEHKCFIL", "LAD", "DGJ", "JCK"),
    }


def test_solutions_are_valid(letter_box, catalog):
    for n_words in range(1, letter_box.max_words() + 1):
        solutions = _search_all(letter_box, catalog, n_words)
        assert len(solutions) == len(set(solutions))
        for solution in solutions:
            assert is_valid_solution(solution, letter_box, n_words)


def test_branch_only_contains_its_starting_letter(letter_box, catalog):
    assert search_branch(letter_box, catalog, start_letter="H", n_words=2) == []
    for solution in search_branch(letter_box, catalog, start_letter="A", n_words=3):
        assert solution[0][0] == "A"


def test_chain_without_full_coverage_yields_nothing(letter_box):
    # Catalog entries are trusted as-is, even ones the puzzle rules would reject
    catalog = {"A": [Word("ABD")], "D": [Word("DGJ")], "J": [Word("JCK")]}
    assert _search_all(letter_box, catalog, 2) == []
    assert _search_all(letter_box, catalog, 3) == []


def test_missing_start_letter_is_a_dead_end(letter_box, catalog):
    assert search_branch(letter_box, catalog, start_letter="B", n_words=2) == []


def test_last_word_must_cover_remaining_letters():
    solutions = []
    # HKC has enough distinct letters to pass the size check but misses B and E
    extend_chain(
        {"H": [Word("HKC"), Word("HEB")]},
        words_remaining=1,
        must_start_with="H",
        uncovered=frozenset("BE"),
        chosen=("XH",),
        solutions=solutions,
    )
    assert solutions == [("XH", "HEB")]


def test_uncovered_set_is_not_shared_between_candidates():
    uncovered = frozenset("ABCDEFGHIJKL")
    solutions = []
    extend_chain(
        {"A": [Word("ADGJBEH"), Word("ADGJBEHKCFIL")], "H": [Word("HKCFIL")]},
        words_remaining=2,
        must_start_with="A",
        uncovered=uncovered,
        chosen=(),
        solutions=solutions,
    )
    assert solutions == [("ADGJBEH", "HKCFIL")]
    assert uncovered == frozenset("ABCDEFGHIJKL")


def test_catalog_built_from_raw_words(letter_box):
    catalog = filter_and_group(["ADGJBEHKCFIL", "LAD", "ABD"], letter_box)
    assert _search_all(letter_box, catalog, 2) == [("ADGJBEHKCFIL", "LAD")]


def test_worker_task_counts_branches(letter_box, catalog, monkeypatch, capsys):
    monkeypatch.setattr(worker, "worker_state", None)
    worker.init_worker_globals(Value("i", 0), time(), letter_box.to_dict(), catalog)

    assert worker.worker_task("A", 2) == [("ADGJBEH", "HKCFIL"), ("ADGJBEHKCFIL", "LAD")]
    assert worker.worker_task("H", 2) == []

    assert worker.worker_state.n_branches_searched == 2
    out = capsys.readouterr().out
    assert "Worker 0 initialized." in out
    assert "Worker 0, A: 2 solution(s) found (#B:1 " in out
    assert "Worker 0, H: 0 solution(s) found (#B:2 " in out
