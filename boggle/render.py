"""Box-drawing output for the board and the end-of-round tables."""

from boggle.grid import Grid

CELL_WIDTH = 4
SCORE_WIDTH = 37


def _tile(letter: str) -> str:
    return " Qu " if letter == "Q" else f" {letter}  "


def _rule(side: int, left: str, mid: str, right: str) -> str:
    return left + mid.join("━" * CELL_WIDTH for _ in range(side)) + right


def render_board(grid: Grid) -> str:
    side = grid.side()
    lines = [_rule(side, "┏", "┳", "┓")]
    for r, row in enumerate(grid.rows()):
        lines.append("┃" + "┃".join(_tile(let) for let in row) + "┃")
        if r < side - 1:
            lines.append(_rule(side, "┣", "╋", "┫"))
    lines.append(_rule(side, "┗", "┻", "┛"))
    return "\n".join(lines)


def _boxed(line: str) -> str:
    return "│" + line.ljust(SCORE_WIDTH) + "│"


def _titled_top(title: str) -> str:
    title = f"[ {title} ]"
    pad = SCORE_WIDTH - len(title)
    return "┌" + "─" * (pad // 2) + title + "─" * (pad - pad // 2) + "┐"


def render_score(scored: list[tuple[str, int]], total: int) -> str:
    blank = _boxed("")
    lines = [_titled_top("Final Score"), blank]
    for word, s in scored:
        lines.append(_boxed(f" {word:>16} : {s:<16}"))
    lines += [
        blank,
        "├" + "─" * SCORE_WIDTH + "┤",
        blank,
        _boxed(f"      Total score : {total:<16}"),
        blank,
        "└" + "─" * SCORE_WIDTH + "┘",
    ]
    return "\n".join(lines)


def render_coach(found: list[tuple[str, int]], min_score: int = 2) -> str:
    """Ranked list of the words the player could have found."""
    shown = [(w, s) for w, s in found if s >= min_score]
    lines = [_titled_top("Coach"), _boxed("")]
    if not shown:
        lines.append(_boxed("  Nothing worth mentioning."))
    for rank, (word, s) in enumerate(shown, 1):
        lines.append(_boxed(f" {rank:>4}. {word:<22} {s:>5}"))
    lines += [
        _boxed(""),
        _boxed(f"  {len(found)} words on this board"),
        "└" + "─" * SCORE_WIDTH + "┘",
    ]
    return "\n".join(lines)
