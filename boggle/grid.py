from __future__ import annotations

import functools
import math
from typing import Iterator, Sequence

import numpy as np

# "Classic" Boggle dice, 1976 to 1986
CLASSIC_DICE = [
    "AACIOT",
    "ABILTY",
    "ABJMOQ",
    "ACDEMP",
    "ACELRS",
    "ADENVZ",
    "AHMORS",
    "BIFORX",
    "DENOSW",
    "DKNOTU",
    "EEFHIY",
    "EGKLUY",
    "EGINTV",
    "EHINPS",
    "ELPSTU",
    "GILRUW",
]

# Big Boggle (5x5) dice
BIG_DICE = [
    "AAAFRS",
    "AAEEEE",
    "AAFIRS",
    "ADENNN",
    "AEEEEM",
    "AEEGMU",
    "AEGMNN",
    "AFIRSY",
    "BJKQXZ",
    "CCENST",
    "CEIILT",
    "CEILPT",
    "CEIPST",
    "DDHNOT",
    "DHHLOR",
    "DHLNOR",
    "DHLNOR",
    "EIIITT",
    "EMOTTT",
    "ENSSSU",
    "FIPRSY",
    "GORRVW",
    "IPRRRY",
    "NOOTUW",
    "OOOTTU",
]

DICE = {
    4: CLASSIC_DICE,
    5: BIG_DICE,
}


def dice_for_size(side: int) -> list[str]:
    try:
        return DICE[side]
    except KeyError:
        raise ValueError(f"No dice set for a {side}x{side} board") from None


@functools.cache
def init_neighbors(side: int) -> tuple[frozenset[int], ...]:
    """Adjacency for a side x side board, cells numbered row-major."""
    ns = []
    for i in range(side * side):
        x, y = i % side, i // side
        n = set()
        for dy in (-1, 0, 1):
            ny = y + dy
            if ny < 0 or ny >= side:
                continue
            for dx in (-1, 0, 1):
                nx = x + dx
                if nx < 0 or nx >= side:
                    continue
                if dx == 0 and dy == 0:
                    continue
                n.add(ny * side + nx)
        ns.append(frozenset(n))
    return tuple(ns)


class Grid:
    """Square board of letter tiles. The "Qu" tile is stored as "Q"."""

    __slots__ = ("_cells", "_side", "_neighbors")

    def __init__(self, letters: Sequence[str]):
        cells = tuple(_normalize_cell(let) for let in letters)
        side = math.isqrt(len(cells))
        if not cells or side * side != len(cells):
            raise ValueError(f"A grid needs a positive square number of cells, got {len(cells)}")
        self._cells = cells
        self._side = side
        self._neighbors = init_neighbors(side)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[str]]) -> Grid:
        if any(len(row) != len(rows) for row in rows):
            raise ValueError("Grid rows must form a square")
        return cls([cell for row in rows for cell in row])

    @classmethod
    def from_string(cls, letters: str) -> Grid:
        """Build from one character per cell, e.g. "catsrepobonedigs"."""
        return cls(list(letters))

    def at(self, i: int) -> str:
        return self._cells[i]

    def neighbors(self, i: int) -> frozenset[int]:
        return self._neighbors[i]

    def size(self) -> int:
        return len(self._cells)

    def side(self) -> int:
        return self._side

    def rows(self) -> list[tuple[str, ...]]:
        s = self._side
        return [self._cells[r * s:(r + 1) * s] for r in range(s)]

    def __len__(self):
        return len(self._cells)

    def __getitem__(self, i: int) -> str:
        return self._cells[i]

    def __iter__(self) -> Iterator[str]:
        return iter(self._cells)

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self):
        return hash(self._cells)

    def __str__(self):
        return " / ".join(" ".join("Qu" if c == "Q" else c for c in row) for row in self.rows())

    def __repr__(self):
        return f"Grid({''.join(self._cells)!r})"


def _normalize_cell(letter: str) -> str:
    letter = letter.strip().upper()
    if letter == "QU":
        return "Q"
    if len(letter) != 1:
        raise ValueError(f"Grid cells hold a single letter (or Qu), got {letter!r}")
    return letter


def generate_board(dice: Sequence[str], rng: np.random.Generator) -> Grid:
    """Roll one face of each die, then shuffle the dice into random positions."""
    faces = [die[rng.integers(len(die))] for die in dice]
    order = rng.permutation(len(faces))
    return Grid([faces[i] for i in order])
