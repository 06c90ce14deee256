from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pydantic import Field

from ngram_tools.models.util import RecordBaseModel


class WindowRecord(RecordBaseModel):
    """One n-gram, as written by `ngrams --format json`."""

    index: int = Field(ge=0)
    tokens: list[Any]
    has_padding: bool = False

    @classmethod
    def from_window(
        cls, index: int, window: Sequence[Any], has_padding: bool = False
    ) -> WindowRecord:
        return cls(index=index, tokens=list(window), has_padding=has_padding)
