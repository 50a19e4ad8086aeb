"""Shortest word ladders between five-letter words of a dictionary."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterator
from pathlib import Path

WORD_LENGTH = 5
NO_LADDER = "No Word Ladder Found!!"


def one_off(first: str, second: str) -> bool:
    """Return True if the words have equal length and differ in exactly one letter."""
    if len(first) != len(second):
        return False
    return sum(a != b for a, b in zip(first, second)) == 1


class WordLadder:
    """A dictionary of five-letter words that ladders are built from."""

    def __init__(self, filename: str | Path) -> None:
        try:
            text = Path(filename).read_text(encoding="utf-8")
        except OSError as error:
            raise OSError("Could not open input file") from error
        words = text.split()
        if not words or any(len(word) != WORD_LENGTH for word in words):
            raise ValueError("Not a five letter word")
        self.words: list[str] = words

    def __contains__(self, word: object) -> bool:
        return word in self.words

    def find_ladder(self, start: str, end: str) -> list[str] | None:
        """Return a shortest ladder from ``start`` to ``end``, or None if there is none.

        Raises ValueError if either word is not in the dictionary.
        """
        if start not in self or end not in self:
            raise ValueError("Not a valid word")
        if start == end:
            return [start]

        remaining = list(self.words)
        remaining.remove(start)
        paths: deque[list[str]] = deque([[start]])
        while paths:
            path = paths[0]
            unused: list[str] = []
            for word in remaining:
                if one_off(path[-1], word):
                    longer = [*path, word]
                    if word == end:
                        return longer
                    paths.append(longer)
                else:
                    unused.append(word)
            remaining = unused
            paths.popleft()
        return None

    def output_ladder(self, start: str, end: str, output_file: str | Path) -> None:
        """Write the ladder from ``start`` to ``end`` to ``output_file``."""
        ladder = self.find_ladder(start, end)
        try:
            out = open(output_file, "w", encoding="utf-8")
        except OSError as error:
            raise OSError("Could not open output file") from error
        with out:
            if ladder is None:
                out.write(NO_LADDER)
            elif len(ladder) == 1:
                out.write(ladder[0])
            else:
                out.write("".join(f"{word} " for word in ladder))


def _tokens(stream) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise EOFError("unexpected end of input") from None


def main(argv: list[str] | None = None) -> int:
    """Ask for a dictionary, two words and an output file, then write the ladder."""
    tokens = _tokens(sys.stdin)
    try:
        print("Name of the dictionary file?")
        ladder = WordLadder(_read(tokens))
        print("Enter a five letter word")
        start = _read(tokens)
        print("Enter another five letter word")
        end = _read(tokens)
        print(
            "And finally, enter the file to which you want the word ladder "
            "to be outputted to"
        )
        output_file = _read(tokens)
        ladder.output_ladder(start, end, output_file)
    except (OSError, ValueError, EOFError) as error:
        print(error)
    return 0