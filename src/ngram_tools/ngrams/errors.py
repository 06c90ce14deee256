from __future__ import annotations


class NgramError(ValueError):
    """Base class for errors raised while building or consuming n-grams."""


class InvalidWindowSizeError(NgramError):
    def __init__(self, n: object) -> None:
        super().__init__(f"Window size must be a positive integer, not {n!r}.")
        self.n = n


class InvalidPadLengthError(NgramError):
    def __init__(self, length: int, n: int) -> None:
        super().__init__(
            f"Pad length must be between 0 and {n - 1} for window size {n}, "
            f"not {length}."
        )
        self.length = length
        self.n = n


class InsufficientInputError(NgramError):
    """The source ran out before the first window could be formed."""

    def __init__(self, required: int, received: int) -> None:
        super().__init__(
            f"Need at least {required} token(s) before the first window, "
            f"but the input only had {received}."
        )
        self.required = required
        self.received = received


class ProducerStateError(NgramError):
    pass


class UnknownTokenTypeError(NgramError, LookupError):
    def __init__(self, token_type: type) -> None:
        super().__init__(f"No padding registered for token type {token_type!r}.")
        self.token_type = token_type
