from __future__ import annotations

import logging
from collections import defaultdict
from typing import Iterable, Iterator

logger = logging.getLogger("boggle")


def normalize_word(word: str) -> str:
    """Upper-case a word and collapse "QU" to the single "Q" tile."""
    return word.strip().upper().replace("QU", "Q")


def signature(word: str) -> str:
    """Letters of word sorted by code point, so anagrams share a key."""
    return "".join(sorted(word))


class Dictionary:
    """Word list bucketed by signature.

    Buckets are keyed by the signature of the Q-collapsed word and hold the
    upper-cased spelling as it appeared in the source, in insertion order.
    """

    def __init__(self):
        self._buckets: dict[str, list[str]] = defaultdict(list)
        self._count = 0

    def add(self, word: str):
        word = word.strip().upper()
        if not word:
            return
        self._buckets[signature(normalize_word(word))].append(word)
        self._count += 1

    def words_with_signature(self, sig: str) -> tuple[str, ...]:
        return tuple(self._buckets.get(sig, ()))

    def contains(self, word: str) -> bool:
        normalized = normalize_word(word)
        bucket = self.words_with_signature(signature(normalized))
        return any(normalize_word(entry) == normalized for entry in bucket)

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def __iter__(self) -> Iterator[str]:
        for bucket in self._buckets.values():
            yield from bucket

    def __len__(self) -> int:
        return self._count

    @property
    def bucket_count(self) -> int:
        return len(self._buckets)

    @classmethod
    def from_words(cls, words: Iterable[str]) -> Dictionary:
        dictionary = cls()
        for word in words:
            dictionary.add(word)
        return dictionary


def load_dictionary(path: str) -> Dictionary:
    """Load a newline-delimited word list. OSError propagates to the caller."""
    with open(path, "r", encoding="utf-8", errors="ignore") as f:
        dictionary = Dictionary.from_words(f)
    logger.info("Loaded %d words in %d buckets from %s", len(dictionary), dictionary.bucket_count, path)
    return dictionary
