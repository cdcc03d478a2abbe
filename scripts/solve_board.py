"""
List every word on a given board.

Usage:
    python -m scripts.solve_board <letters> [--dictionary PATH] [--min-score N]

Examples:
    python -m scripts.solve_board catsrepobonedigs
    python -m scripts.solve_board "c a t s / r e p o / b o n e / d i g s"
    python -m scripts.solve_board qitesandr --min-score 1

Letters are read row by row; "q" stands for the Qu tile. Spaces and slashes
are ignored.
"""
import argparse
import logging
import sys
from pathlib import Path

# Ensure project root is on path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from boggle.settings import ConfigError, Settings
from boggle.dictionary import load_dictionary
from boggle.grid import Grid
from boggle.metrics import RoundStats
from boggle.render import render_board
from boggle.solver import find_all_words, find_word_path

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")


def main():
    parser = argparse.ArgumentParser(description="Boggle board solver")
    parser.add_argument("letters", help="Board letters, row-major")
    parser.add_argument("--dictionary", type=str, default=None,
                        help="Word list (default: DICTIONARY_PATH setting)")
    parser.add_argument("--min-score", type=int, default=1,
                        help="Only print words worth at least this many points (default: 1)")
    parser.add_argument("--paths", action="store_true",
                        help="Print the cells used to spell each word")
    args = parser.parse_args()

    letters = args.letters.replace(" ", "").replace("/", "")
    try:
        grid = Grid.from_string(letters)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    dict_path = args.dictionary
    if dict_path is None:
        try:
            dict_path = str(Settings().DICTIONARY_PATH)
        except ConfigError as e:
            print(f"Error: {e}")
            sys.exit(1)

    stats = RoundStats(board="".join(grid))
    with stats.timed("load_dictionary"):
        try:
            dictionary = load_dictionary(dict_path)
        except OSError as e:
            print(f"Error: could not read {dict_path}: {e}")
            sys.exit(1)

    with stats.timed("solve"):
        found = find_all_words(dictionary, grid)
    stats.record_coach(found)

    print(render_board(grid))
    print()
    total = 0
    for word, score in found:
        if score < args.min_score:
            continue
        total += score
        if args.paths:
            print(f"{score:>3}  {word:<16} {find_word_path(word, grid)}")
        else:
            print(f"{score:>3}  {word}")
    print(f"\n{len(found)} words, {total} points shown ({stats.summary()})")


if __name__ == "__main__":
    main()
