"""Word sentiment scores learned from rated movie reviews."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

NEUTRAL = 2.0
TABLE_SIZE = 20071
HASH_PREFIX = 5


@dataclass
class WordEntry:
    """A word with the total score and number of its appearances."""

    word: str
    total_score: int
    appearances: int = 1

    def add_appearance(self, score: int) -> None:
        """Record one more appearance of the word with ``score``."""
        self.total_score += score
        self.appearances += 1

    def average(self) -> float:
        """Return the mean score over all appearances."""
        return self.total_score / self.appearances


class HashTable:
    """A chained hash table of word entries."""

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError("table size must be positive")
        self.size = size
        self._buckets: list[list[WordEntry]] = [[] for _ in range(size)]

    def compute_hash(self, word: str) -> int:
        """Return the bucket index for ``word``."""
        total = 1
        for char in word[:HASH_PREFIX]:
            total *= abs(ord(char) - 96)
        total *= len(word)
        return total % self.size

    def _find(self, word: str) -> WordEntry | None:
        bucket = self._buckets[self.compute_hash(word)]
        return next((entry for entry in bucket if entry.word == word), None)

    def put(self, word: str, score: int) -> None:
        """Add an appearance of ``word`` with ``score``."""
        entry = self._find(word)
        if entry is None:
            self._buckets[self.compute_hash(word)].append(WordEntry(word, score))
        else:
            entry.add_appearance(score)

    def average(self, word: str) -> float:
        """Return the average score of ``word``, or the neutral 2.0 if unseen."""
        entry = self._find(word)
        return NEUTRAL if entry is None else entry.average()

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self._find(word) is not None


def load_reviews(table: HashTable, lines: Iterable[str]) -> None:
    """Add every word of each "score words..." line to ``table``."""
    for line in lines:
        fields = line.split()
        if not fields:
            continue
        try:
            score = int(fields[0])
        except ValueError:
            raise ValueError(f"review line must start with a score: {line!r}") from None
        for word in fields[1:]:
            table.put(word, score)


def review_sentiment(table: HashTable, review: str) -> float:
    """Return the average score of the words of ``review``."""
    words = review.split()
    if not words:
        raise ValueError("review has no words")
    return sum(table.average(word) for word in words) / len(words)


def classify(value: float) -> str:
    """Describe a sentiment value in words."""
    if value >= 3.0:
        return "Positive Sentiment"
    if value >= 2.0:
        return "Somewhat Positive Sentiment"
    if value >= 1.0:
        return "Somewhat Negative Sentiment"
    return "Negative Sentiment"


def main(argv: list[str] | None = None) -> int:
    """Learn from a review file, then rate reviews typed on standard input."""
    args = sys.argv[1:] if argv is None else argv
    path = Path(args[0]) if args else Path("movieReviews.txt")
    table = HashTable(TABLE_SIZE)
    try:
        with path.open(encoding="utf-8") as reviews:
            load_reviews(table, reviews)
    except OSError:
        print("could not open file")
        return 1
    except ValueError as error:
        print(error)
        return 1

    while True:
        print("enter a review -- Press return to exit: ")
        line = sys.stdin.readline()
        review = line.rstrip("\r\n")
        if not review:
            return 0
        if not review.split():
            continue
        value = review_sentiment(table, review)
        print(f"The review has an average value of {value:g}")
        print(classify(value))
        print()