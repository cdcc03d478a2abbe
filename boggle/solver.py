from __future__ import annotations

import logging
from typing import Iterable, Sequence

from boggle.dictionary import Dictionary, normalize_word, signature
from boggle.grid import Grid

logger = logging.getLogger("boggle")

#         0  1  2  3  4  5  6  7  8+
SCORES = (0, 0, 0, 1, 1, 2, 3, 5, 11)


def score_word(word: str) -> int:
    """Points for a word by its length. A "Qu" tile counts as two letters."""
    length = len(word.strip())
    return SCORES[min(length, len(SCORES) - 1)]


def path_exists(
    grid: Grid,
    visited: list[bool],
    cell: int,
    chars: Sequence[str],
    index: int = 0,
    path: list[int] | None = None,
) -> bool:
    """Can chars[index:] be spelled starting at cell without reusing a cell?

    visited is only set for cells on the current path and is restored before
    returning, whatever the result. If path is given, the cells of the
    successful path are appended to it.
    """
    if index >= len(chars):
        return True
    if grid.at(cell) != chars[index]:
        return False
    if path is not None:
        path.append(cell)
    if index == len(chars) - 1:
        return True

    visited[cell] = True
    try:
        for n in grid.neighbors(cell):
            if not visited[n] and path_exists(grid, visited, n, chars, index + 1, path):
                return True
    finally:
        visited[cell] = False

    if path is not None:
        path.pop()
    return False


def find_word_path(word: str, grid: Grid, visited: list[bool] | None = None) -> list[int] | None:
    """Return the cells spelling word on grid, or None if it can't be traced."""
    chars = tuple(normalize_word(word))
    if not chars:
        return []
    if visited is None:
        visited = [False] * grid.size()
    for start in range(grid.size()):
        path: list[int] = []
        if path_exists(grid, visited, start, chars, 0, path):
            return path
    return None


def is_valid_word(word: str, dictionary: Dictionary, grid: Grid) -> bool:
    """A word counts if it is in the dictionary and can be traced on the grid."""
    normalized = normalize_word(word)
    bucket = dictionary.words_with_signature(signature(normalized))
    if not bucket:
        return False
    if not any(normalize_word(entry) == normalized for entry in bucket):
        return False
    return find_word_path(word, grid) is not None


def find_all_words(dictionary: Dictionary, grid: Grid) -> list[tuple[str, int]]:
    """Every dictionary word the grid admits, best scores first."""
    found: dict[str, int] = {}
    for word in dictionary:
        if word in found:
            continue
        score = score_word(word)
        if score == 0:
            continue
        if is_valid_word(word, dictionary, grid):
            found[word] = score

    result = sorted(found.items(), key=lambda ws: (-ws[1], ws[0]))
    logger.info("Found %d words on %s", len(result), grid)
    return result


def score_round(words: Iterable[str], dictionary: Dictionary, grid: Grid) -> tuple[list[tuple[str, int]], int]:
    """Score the submitted words in order; words that don't count are dropped."""
    scored = []
    total = 0
    for word in words:
        s = score_word(word)
        if s > 0 and is_valid_word(word, dictionary, grid):
            scored.append((word, s))
            total += s
        else:
            logger.debug("Rejected %r (score=%d)", word, s)
    return scored, total
