from __future__ import annotations

import collections
import logging
import sys
from collections.abc import Iterable, Iterator
from enum import Enum
from typing import Any, Generic, TypeVar

from ngram_tools.ngrams.errors import (
    InsufficientInputError,
    InvalidWindowSizeError,
    ProducerStateError,
)
from ngram_tools.ngrams.pad import Pad, resolve_pad
from ngram_tools.ngrams.padded import Padded

if sys.version_info < (3, 11):
    from typing_extensions import Self
else:
    from typing import Self

T = TypeVar("T")

log = logging.getLogger(__name__)


class ProducerState(Enum):
    FRESH = "fresh"
    CONSUMING = "consuming"
    EXHAUSTED = "exhausted"


class Ngrams(Iterator[list[T]], Generic[T]):
    r"""Produce the n-grams of a sequence of tokens.

    >>> list(Ngrams("one two three four".split(), 2))
    [['one', 'two'], ['two', 'three'], ['three', 'four']]

    >>> list(Ngrams("foo", 2).pad())
    [['\u2060', 'f'], ['f', 'o'], ['o', 'o'], ['o', '\u2060']]

    The source is expected to be pre-tokenized; no decisions are made here
    about how the input should be tokenized. It is consumed lazily, one token
    per window once the first window has been formed.

    A producer is single-use. Once it is exhausted it stays exhausted; build a
    new one over a fresh source to start again.

    :param source: The tokens.
    :param n: The window size. Must be a positive integer.
    :param strict: If True (the default), raise `InsufficientInputError` when the
        source is too short to form even the first window's lookback. Otherwise,
        just produce no windows.
    """

    def __init__(self, source: Iterable[T], n: int, *, strict: bool = True) -> None:
        if isinstance(n, bool) or not isinstance(n, int) or n < 1:
            raise InvalidWindowSizeError(n)
        self.source: Iterator[T] = iter(source)
        self.strict = strict
        self._n = n
        self._memsize = n - 1
        self._memory: collections.deque[T] = collections.deque(maxlen=self._memsize)
        self._padding: Padded[T] | None = None
        self._padded = False
        self._state = ProducerState.FRESH

    @property
    def n(self) -> int:
        return self._n

    @property
    def padded(self) -> bool:
        return self._padded

    @property
    def padding(self) -> Padded[T] | None:
        """The padding stage, once padding is enabled."""
        return self._padding

    def window_has_padding(self, index: int) -> bool:
        """Does the window just produced at `index` contain any sentinels?

        Worked out from position rather than by comparing tokens, so real
        tokens equal to the sentinel are not mistaken for padding.
        """
        if self._padding is None:
            return False
        return index < self._padding.length or self._padding.source_exhausted

    @property
    def state(self) -> ProducerState:
        return self._state

    @property
    def exhausted(self) -> bool:
        """Has this producer produced its last window?"""
        return self._state is ProducerState.EXHAUSTED

    def pad(self, pad: Pad[T] | type[T] | None = None) -> Self:
        """Include padding at the beginning and end of the input.

        Must be called before the first window is pulled, and only once.

        :param pad: A `Pad`, a token type with a registered pad, or None to use
            the string pad (which also covers single characters).
        :return: This producer, so that calls can be chained.
        """
        if self._state is not ProducerState.FRESH:
            raise ProducerStateError(
                "Padding must be enabled before iteration starts "
                f"(state: {self._state.value})."
            )
        if self._padded:
            raise ProducerStateError("Padding is already enabled.")
        resolved = resolve_pad(pad)
        self._padding = Padded(self.source, self._n, resolved)
        self.source = self._padding
        self._padded = True
        log.debug("Padding enabled with %r for n=%d.", resolved, self._n)
        return self

    def _fill_memory(self) -> bool:
        while len(self._memory) < self._memsize:
            try:
                self._memory.append(next(self.source))
            except StopIteration:
                return False
        return True

    def _finish(self) -> None:
        self._state = ProducerState.EXHAUSTED
        self._memory.clear()

    def __next__(self) -> list[T]:
        if self._state is ProducerState.EXHAUSTED:
            raise StopIteration

        self._state = ProducerState.CONSUMING
        # Also resumes a fill-up interrupted by a source error.
        if len(self._memory) < self._memsize:
            if not self._fill_memory():
                received = len(self._memory)
                self._finish()
                if self.strict:
                    raise InsufficientInputError(self._memsize, received)
                log.debug(
                    "Source ended after %d of %d lookback token(s); no windows.",
                    received,
                    self._memsize,
                )
                raise StopIteration
            log.debug("Lookback filled with %d token(s).", self._memsize)

        try:
            token = next(self.source)
        except StopIteration:
            self._finish()
            raise

        window = [*self._memory, token]
        # With maxlen set, appending evicts the oldest token.
        self._memory.append(token)
        return window

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(n={self._n}, padded={self._padded}, "
            f"state={self._state.value})"
        )


def ngrams(
    iterable: Iterable[T],
    n: int,
    *,
    pad: bool | Pad[T] | type[T] | None = False,
    strict: bool = True,
) -> Ngrams[T]:
    """Iterator adaptor: the n-grams of `iterable`.

    >>> list(ngrams("hello", 2))
    [['h', 'e'], ['e', 'l'], ['l', 'l'], ['l', 'o']]

    :param iterable: The tokens.
    :param n: The window size.
    :param pad: False or None for no padding, True for the string pad, or a
        `Pad` / a registered token type.
    :param strict: See `Ngrams`.
    """
    producer: Ngrams[Any] = Ngrams(iterable, n, strict=strict)
    if pad is True:
        producer.pad()
    elif isinstance(pad, (Pad, type)):
        producer.pad(pad)
    elif pad is not None and pad is not False:
        raise TypeError(f"pad must be a bool, a Pad or a token type, not {pad!r}.")
    return producer
