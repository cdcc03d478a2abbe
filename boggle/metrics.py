import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass, field

logger = logging.getLogger("boggle")


@dataclass
class RoundStats:
    """What happened in one round: words, points, and how long each step took."""

    board: str = ""
    submitted: int = 0
    accepted: int = 0
    score: int = 0
    available: int | None = None  # only known once the coach has searched the board
    best_possible: int | None = None
    timings: dict[str, float] = field(default_factory=dict)

    @contextmanager
    def timed(self, step: str):
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self.timings[step] = round((time.perf_counter() - t0) * 1000, 1)  # ms
            logger.info("step=%s elapsed=%.1fms", step, self.timings[step])

    def record_round(self, submitted: list[str], scored: list[tuple[str, int]], total: int):
        self.submitted = len(submitted)
        self.accepted = len(scored)
        self.score = total

    def record_coach(self, found: list[tuple[str, int]]):
        self.available = len(found)
        self.best_possible = sum(s for _, s in found)

    @property
    def found_ratio(self) -> float | None:
        """Share of the board's words the player got, once the coach has run."""
        if not self.available:
            return None
        return self.accepted / self.available

    def summary(self) -> str:
        parts = [f"board={self.board}", f"words={self.accepted}/{self.submitted}", f"score={self.score}"]
        if self.available is not None:
            parts.append(f"available={self.available}")
            parts.append(f"best={self.best_possible}")
        parts += [f"{step}={ms:.1f}ms" for step, ms in self.timings.items()]
        return " ".join(parts)
