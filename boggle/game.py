from __future__ import annotations

import logging
import sys
import time
from typing import Callable, TextIO

logger = logging.getLogger("boggle")


def play_round(
    time_limit: int,
    quit_word: str = "QQ",
    stream: TextIO | None = None,
    out: TextIO | None = None,
    clock: Callable[[], float] = time.monotonic,
) -> list[str]:
    """Collect words typed one per line until time runs out.

    Input is read with a blocking readline, so a line entered after the
    deadline ends the round but is not counted. The round also ends on the
    quit word or at end of input. Words are returned upper-cased, in the
    order entered, without duplicates; nothing is validated here.
    """
    stream = stream or sys.stdin
    out = out or sys.stdout
    quit_word = quit_word.upper()

    start = clock()
    words: list[str] = []
    print(f"You have {time_limit} seconds to find as many words as you can! "
          f"Type {quit_word} to give up.", file=out)

    while True:
        try:
            line = stream.readline()
        except (OSError, UnicodeDecodeError) as e:
            print(f"Not a word ({e}).", file=out)
            logger.warning("Failed to read input: %s", e)
            line = None

        if line == "":
            logger.info("End of input")
            break

        remaining = int(time_limit - (clock() - start))
        if line is not None and remaining > 0:
            w = line.strip().upper()
            if w == quit_word:
                print(f"You gave up with {remaining} seconds left.", file=out)
                break
            if w and w not in words:
                words.append(w)
            elif w:
                print(f"Already found {w}", file=out)
            if remaining % 10 == 0:
                print(f"{remaining} seconds remaining.", file=out)

        if clock() - start >= time_limit:
            print("Time's up!", file=out)
            break

    logger.info("Round over: %d words submitted", len(words))
    return words
