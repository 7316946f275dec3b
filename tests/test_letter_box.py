import pytest

from letterboxed.letter_box import InvalidPuzzleError, LetterBox, clean


def test_walls_partition_letters(letter_box):
    assert letter_box.walls == ("ABC", "DEF", "GHI", "JKL")
    assert letter_box.letter_count() == 12
    assert letter_box.letters == frozenset("ABCDEFGHIJKL")
    for wall_idx, wall in enumerate(letter_box.walls):
        for ch in wall:
            assert letter_box.wall_of(ch) == wall_idx
    assert sum(len(wall) for wall in letter_box.walls) == letter_box.letter_count()


@pytest.mark.parametrize("letters", ["ABCD", "ABCDEFGH", "ABCDEFGHIJKLMNOP"])
def test_every_letter_on_exactly_one_wall(letters):
    box = LetterBox(letters)
    walls = [set(wall) for wall in box.walls]
    assert len(walls) == 4
    assert set().union(*walls) == set(letters)
    for i in range(4):
        for j in range(i + 1, 4):
            assert not walls[i] & walls[j]


@pytest.mark.parametrize("letters", ["", "ABC", "ABCDE", "ABCDEFGHIJK"])
def test_invalid_letter_count(letters):
    with pytest.raises(InvalidPuzzleError):
        LetterBox(letters)


def test_letters_are_normalized():
    box = LetterBox("abc def ghi jkl")
    assert box.walls == ("ABC", "DEF", "GHI", "JKL")
    assert clean(" a b\nc ") == "ABC"


def test_custom_wall_count():
    box = LetterBox("ABCDEF", wall_count=3, min_word_length=2)
    assert box.walls == ("AB", "CD", "EF")
    assert box.max_words() == 3
    assert box.is_valid_word("AC")
    with pytest.raises(InvalidPuzzleError):
        LetterBox("ABCD", wall_count=3)


def test_same_wall(letter_box):
    assert letter_box.same_wall("A", "C")
    assert not letter_box.same_wall("A", "D")
    assert not letter_box.same_wall("A", "Z")
    assert not letter_box.same_wall("Z", "Z")


def test_contains(letter_box):
    assert letter_box.contains("G")
    assert "G" in letter_box
    assert not letter_box.contains("Z")
    assert letter_box.wall_of("Z") is None


def test_repeated_letter_keeps_first_wall():
    box = LetterBox("ABCADEFGHIJK")
    assert box.wall_of("A") == 0
    assert box.letter_count() == 11


@pytest.mark.parametrize(
    "word, expected",
    [
        ("ADG", True),
        ("ADGJBEHKCFIL", True),
        ("LAD", True),
        ("AD", False),  # too short
        ("ABD", False),  # A, B on the same wall
        ("ADZ", False),  # Z not in puzzle
        ("ADA", True),  # letters may repeat if not adjacent on a wall
        ("ADDG", False),  # a letter is on the same wall as itself
    ],
)
def test_is_valid_word(letter_box, word, expected):
    assert letter_box.is_valid_word(word) is expected


def test_max_words(letter_box):
    assert letter_box.max_words() == 4


def test_dict_round_trip(letter_box):
    copy = LetterBox.from_dict(letter_box.to_dict())
    assert copy.walls == letter_box.walls
    assert copy.wall_index == letter_box.wall_index
    assert str(copy) == "ABC-DEF-GHI-JKL"


@pytest.mark.parametrize("min_word_length", [0, -1])
def test_invalid_min_word_length(min_word_length):
    with pytest.raises(InvalidPuzzleError):
        LetterBox("ABCDEFGHIJKL", min_word_length=min_word_length)


def test_invalid_wall_count():
    with pytest.raises(InvalidPuzzleError):
        LetterBox("ABCDEFGHIJKL", wall_count=0)
