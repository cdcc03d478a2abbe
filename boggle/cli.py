"""Play a timed round of Boggle in the terminal."""

import argparse
import logging
import sys

import numpy as np

from boggle.dictionary import load_dictionary
from boggle.game import play_round
from boggle.grid import dice_for_size, generate_board
from boggle.metrics import RoundStats
from boggle.render import render_board, render_coach, render_score
from boggle.settings import (
    SUPPORTED_GRID_SIZES,
    ConfigError,
    Settings,
    update_settings,
    validate_settings,
)
from boggle.solver import find_all_words, score_round

logger = logging.getLogger("boggle")


def positive_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a whole number of seconds, got {value!r}") from None
    if n <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {n}")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Find words on a grid of letter dice before time runs out.")
    parser.add_argument("--size", type=int, choices=SUPPORTED_GRID_SIZES, default=None,
                        help="Board side length (default: GRID_SIZE setting, 4)")
    parser.add_argument("--dictionary", type=str, default=None,
                        help="Path to a word list with one word per line")
    parser.add_argument("--time-limit", type=positive_int, default=None,
                        help="Seconds allowed for the round (default: 180)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for the dice, for a repeatable board")
    parser.add_argument("--coach", action="store_true", default=None,
                        help="After scoring, list every word that was on the board")
    parser.add_argument("--debug", action="store_true", default=None,
                        help="Verbose logging")
    return parser


def apply_args(cfg: Settings, args: argparse.Namespace) -> dict[str, str]:
    overrides = {
        "GRID_SIZE": args.size,
        "DICTIONARY_PATH": args.dictionary,
        "TIME_LIMIT": args.time_limit,
        "SEED": args.seed,
        "COACH": args.coach,
        "DEBUG": args.debug,
    }
    return update_settings(cfg, **{k: v for k, v in overrides.items() if v is not None})


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO,
                        format="%(asctime)s %(name)s %(levelname)s %(message)s")
    try:
        cfg = Settings()
    except ConfigError as e:
        logger.error("%s", e)
        return 1

    errors = apply_args(cfg, args)
    if errors:
        logger.error("Invalid settings: %s", errors)
        return 1
    try:
        validate_settings(cfg)
    except ConfigError as e:
        logger.error("%s", e)
        return 1
    if cfg.DEBUG:
        logger.setLevel(logging.DEBUG)

    stats = RoundStats()

    with stats.timed("load_dictionary"):
        try:
            dictionary = load_dictionary(str(cfg.DICTIONARY_PATH))
        except OSError as e:
            logger.error("Failed to open dictionary %s: %s", cfg.DICTIONARY_PATH, e)
            return 1

    with stats.timed("generate_board"):
        rng = np.random.default_rng(cfg.SEED if cfg.SEED >= 0 else None)
        grid = generate_board(dice_for_size(cfg.GRID_SIZE), rng)
    stats.board = "".join(grid)
    logger.info("Board %dx%d: %s", grid.side(), grid.side(), grid)

    print(render_board(grid))
    words = play_round(cfg.TIME_LIMIT, cfg.QUIT_WORD)

    with stats.timed("score"):
        scored, total = score_round(words, dictionary, grid)
    stats.record_round(words, scored, total)
    print()
    print(render_score(scored, total))

    if cfg.COACH:
        with stats.timed("coach"):
            found = find_all_words(dictionary, grid)
        stats.record_coach(found)
        print()
        print(render_coach(found, cfg.COACH_MIN_SCORE))

    logger.info("Round: %s", stats.summary())
    return 0


if __name__ == "__main__":
    sys.exit(main())
