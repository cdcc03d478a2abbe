import itertools
import time

from boggle.dictionary import Dictionary
from boggle.grid import Grid
from boggle.solver import (
    find_all_words,
    find_word_path,
    is_valid_word,
    path_exists,
    score_round,
    score_word,
)

BOARD = Grid.from_rows([
    ["C", "A", "T", "S"],
    ["R", "E", "P", "O"],
    ["B", "O", "N", "E"],
    ["D", "I", "G", "S"],
])


def _cat_grid() -> Grid:
    letters = ["X"] * 16
    letters[0], letters[1], letters[5] = "C", "A", "T"
    return Grid(letters)


def _is_adjacent(grid: Grid, a: int, b: int) -> bool:
    return b in grid.neighbors(a)


def test_score_table():
    assert score_word("") == 0
    assert score_word("AB") == 0
    assert score_word("CAT") == 1
    assert score_word("CATS") == 1
    assert score_word("WORDS") == 2
    assert score_word("LETTER") == 3
    assert score_word("LETTERS") == 5
    assert score_word("ADVENTURE") == 11
    assert score_word("ANTIDISESTABLISHMENTARIANISM") == 11


def test_qu_tile_scores_both_letters():
    assert score_word("QUIT") == 1
    assert score_word("QUIET") == 2


def test_cat_on_diagonal():
    dictionary = Dictionary.from_words(["CAT"])
    assert is_valid_word("CAT", dictionary, _cat_grid())
    assert is_valid_word("cat", dictionary, _cat_grid())


def test_word_not_in_dictionary():
    dictionary = Dictionary.from_words(["DOG"])
    assert not is_valid_word("CAT", dictionary, _cat_grid())


def test_anagram_is_not_a_match():
    """Sharing a signature with a dictionary word isn't enough."""
    dictionary = Dictionary.from_words(["ACT"])
    assert not is_valid_word("CAT", dictionary, _cat_grid())


def test_dictionary_word_not_on_board():
    dictionary = Dictionary.from_words(["CAT", "DOG"])
    assert not is_valid_word("DOG", dictionary, _cat_grid())


def test_no_revisit():
    """A word requiring revisiting a cell should not be found."""
    grid = Grid.from_rows([["A", "B"], ["C", "D"]])
    dictionary = Dictionary.from_words(["ABA", "ABC", "ABCD"])
    assert not is_valid_word("ABA", dictionary, grid)
    assert is_valid_word("ABC", dictionary, grid)
    assert is_valid_word("ABCD", dictionary, grid)


def test_qu_word():
    grid = Grid.from_rows([
        ["QU", "I", "E"],
        ["X", "X", "T"],
        ["X", "X", "X"],
    ])
    dictionary = Dictionary.from_words(["quiet", "quit", "quest"])
    assert is_valid_word("QUIET", dictionary, grid)
    assert is_valid_word("quiet", dictionary, grid)
    assert is_valid_word("QUIT", dictionary, grid)
    assert not is_valid_word("QUEST", dictionary, grid)


def test_path_is_distinct_and_adjacent():
    path = find_word_path("BONES", BOARD)
    assert path is not None
    assert len(path) == len("BONES")
    assert len(set(path)) == len(path)
    assert "".join(BOARD.at(i) for i in path) == "BONES"
    for a, b in zip(path, path[1:]):
        assert _is_adjacent(BOARD, a, b)


def test_path_missing():
    assert find_word_path("ZEBRA", BOARD) is None
    # S at 3 and 15 are far apart
    assert find_word_path("SS", BOARD) is None


def test_single_letter_and_empty_word():
    grid = Grid(["A"])
    assert find_word_path("A", grid) == [0]
    assert find_word_path("B", grid) is None
    assert find_word_path("", grid) == []


def test_visited_restored_after_search():
    visited = [False] * BOARD.size()
    assert find_word_path("BONES", BOARD, visited) is not None
    assert visited == [False] * BOARD.size()
    assert find_word_path("ZEBRA", BOARD, visited) is None
    assert visited == [False] * BOARD.size()


def test_path_exists_from_given_start():
    visited = [False] * BOARD.size()
    path: list[int] = []
    assert path_exists(BOARD, visited, 0, "CAT", 0, path)
    assert path == [0, 1, 2]
    assert not path_exists(BOARD, visited, 1, "CAT")
    assert path_exists(BOARD, visited, 5, "CAT", 3)
    assert not any(visited)


def test_is_valid_is_idempotent():
    dictionary = Dictionary.from_words(["BONES", "CATS"])
    first = [is_valid_word(w, dictionary, BOARD) for w in ("BONES", "CATS", "SNOB")]
    second = [is_valid_word(w, dictionary, BOARD) for w in ("BONES", "CATS", "SNOB")]
    assert first == second == [True, True, False]
    assert len(dictionary) == 2


def test_find_all_order_and_dedupe():
    grid = Grid.from_rows([
        ["H", "O", "U", "S"],
        ["C", "A", "T", "E"],
        ["D", "O", "G", "X"],
        ["X", "X", "X", "X"],
    ])
    dictionary = Dictionary.from_words(["CAT", "DOG", "HOUSE", "CAT", "ZEBRA", "AT"])
    assert find_all_words(dictionary, grid) == [("HOUSE", 2), ("CAT", 1), ("DOG", 1)]


def test_find_all_matches_validator():
    words = ["CAT", "CATS", "CAR", "CARE", "BONE", "BONES", "REP", "PEN", "PONE",
             "DIG", "DIGS", "ONE", "ONES", "APE", "NOD", "NOG", "SON", "REPO", "ZEBRA"]
    dictionary = Dictionary.from_words(words)
    found = dict(find_all_words(dictionary, BOARD))
    for w in words:
        assert (w in found) == is_valid_word(w, dictionary, BOARD)
    assert "CAT" in found
    assert "BONES" in found
    assert "ZEBRA" not in found


def test_score_round_keeps_submission_order():
    dictionary = Dictionary.from_words(["CAT", "CATS", "BONES", "AT"])
    scored, total = score_round(["BONES", "AT", "ZZZ", "CAT", "SON"], dictionary, BOARD)
    assert scored == [("BONES", 2), ("CAT", 1)]
    assert total == 3


def test_performance_with_generated_dictionary():
    """Coach search over a few thousand words stays fast."""
    words = []
    letters = "ABCDEFGHIJKLMNOPRSTUE"
    for length in range(3, 6):
        for combo in itertools.combinations(letters, length):
            words.append("".join(combo))
            if len(words) > 5000:
                break
        if len(words) > 5000:
            break
    dictionary = Dictionary.from_words(words)

    grid = Grid.from_rows([
        ["T", "A", "P", "E"],
        ["I", "N", "S", "O"],
        ["E", "D", "R", "L"],
        ["K", "G", "H", "M"],
    ])

    start = time.perf_counter()
    found = find_all_words(dictionary, grid)
    elapsed = time.perf_counter() - start

    assert elapsed < 5.0, f"Search took {elapsed:.3f}s"
    assert len(found) > 0
