from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from ngram_tools.constants import WORD_SEP, WORD_SEP_BYTES
from ngram_tools.ngrams.errors import UnknownTokenTypeError

T = TypeVar("T")


class Pad(ABC, Generic[T]):
    """Tells a padded n-gram producer how to pad the ends of its input.

    Subclasses supply the sentinel token for their token type and, optionally,
    how many sentinels go on each end for a given window size.
    """

    @abstractmethod
    def symbol(self) -> T:
        """The token used to pad the beginning and end of the input."""
        ...

    def length(self, n: int) -> int:
        """Number of sentinels to add to each end. Defaults to `n - 1`."""
        return n - 1


class SymbolPad(Pad[T]):
    """Pad with a fixed symbol, for caller-defined token types.

    :param symbol: The sentinel token.
    :param length: (Optional) Maps the window size to the pad length.
        When omitted, the pad length is `n - 1`.
    """

    def __init__(self, symbol: T, length: Callable[[int], int] | None = None) -> None:
        self._symbol = symbol
        self._length = length

    def symbol(self) -> T:
        return self._symbol

    def length(self, n: int) -> int:
        if self._length is None:
            return super().length(n)
        return self._length(n)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._symbol!r})"


class StrPad(Pad[str]):
    def symbol(self) -> str:
        return WORD_SEP


class BytesPad(Pad[bytes]):
    def symbol(self) -> bytes:
        return WORD_SEP_BYTES


class BytearrayPad(Pad[bytearray]):
    def symbol(self) -> bytearray:
        # A new object every time; windows must not share a mutable sentinel.
        return bytearray(WORD_SEP_BYTES)


# A character is just a one-character string.
STR_PAD = StrPad()
CHAR_PAD = STR_PAD
BYTES_PAD = BytesPad()
BYTEARRAY_PAD = BytearrayPad()

_registry: dict[type, Pad[Any]] = {
    str: STR_PAD,
    bytes: BYTES_PAD,
    bytearray: BYTEARRAY_PAD,
}


def register_pad(token_type: type[T], pad: Pad[T]) -> None:
    """Bind a pad to a token type, replacing any existing binding."""
    _registry[token_type] = pad


def pad_for(token_type: type[T]) -> Pad[T]:
    """Return the pad bound to exactly `token_type`.

    Subclasses of a registered type are not matched; register them explicitly.
    """
    try:
        return _registry[token_type]
    except KeyError:
        raise UnknownTokenTypeError(token_type) from None


def resolve_pad(pad: Pad[T] | type[T] | None) -> Pad[T]:
    """Turn the argument to `Ngrams.pad` into a `Pad`."""
    if pad is None:
        return STR_PAD  # type: ignore[return-value]
    if isinstance(pad, Pad):
        return pad
    return pad_for(pad)
