from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

from ngram_tools.ngrams.errors import InvalidPadLengthError
from ngram_tools.ngrams.pad import Pad

T = TypeVar("T")

log = logging.getLogger(__name__)


class Padded(Iterator[T], Generic[T]):
    """Wrap a source, adding sentinels before its first and after its last token.

    :param source: The tokens to pad.
    :param n: The window size the padding is for.
    :param pad: Supplies the sentinel and the pad length for `n`.
    """

    def __init__(self, source: Iterable[T], n: int, pad: Pad[T]) -> None:
        length = pad.length(n)
        if not 0 <= length <= n - 1:
            raise InvalidPadLengthError(length, n)
        self.source: Iterator[T] = iter(source)
        self.length = length
        self.pad = pad
        self.remaining = length
        self.source_exhausted = False

    def _sentinel(self) -> T:
        self.remaining -= 1
        return self.pad.symbol()

    def __next__(self) -> T:
        if self.remaining > 0:
            return self._sentinel()

        if not self.source_exhausted:
            try:
                return next(self.source)
            except StopIteration:
                # First time we've seen the end, so set up the trailing pad.
                log.debug("Source exhausted; appending %d sentinel(s).", self.length)
                self.source_exhausted = True
                self.remaining = self.length

        if self.remaining > 0:
            return self._sentinel()
        raise StopIteration

    def __repr__(self) -> str:
        return f"Padded(pad={self.pad!r}, length={self.length})"
