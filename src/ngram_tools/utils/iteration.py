from __future__ import annotations

from collections.abc import Generator, Iterable, Iterator
from enum import Enum
from typing import TextIO

# Token sources for the CLI. These split text naively and lazily, so that the
# n-gram producer never needs the whole input in memory.

# Characters are read in blocks of this size.
CHAR_BLOCK_SIZE = 4096


def iter_chars(
    stream: TextIO, block_size: int = CHAR_BLOCK_SIZE
) -> Generator[str, None, None]:
    """Yield every character of a text stream, newlines included."""
    while block := stream.read(block_size):
        yield from block


def iter_words(lines: Iterable[str]) -> Generator[str, None, None]:
    """Yield whitespace-separated words, continuing across line boundaries.

    >>> list(iter_words(["one two\\n", "three\\n"]))
    ```['one', 'two', 'three']```
    """
    for line in lines:
        yield from line.split()


def iter_lines(lines: Iterable[str]) -> Generator[str, None, None]:
    """Yield non-empty lines, without their line endings."""
    for line in lines:
        if stripped := line.rstrip("\r\n"):
            yield stripped


class TokenMode(Enum):
    CHARS = "chars"
    WORDS = "words"
    LINES = "lines"


def tokenize(stream: TextIO, mode: TokenMode) -> Iterator[str]:
    """Lazily split a text stream into tokens according to `mode`."""
    if mode == TokenMode.CHARS:
        return iter_chars(stream)
    if mode == TokenMode.WORDS:
        return iter_words(stream)
    return iter_lines(stream)
