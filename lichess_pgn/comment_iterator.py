"""Extraction of ``[%command value]`` pairs from PGN comments."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TypeVar

_Text = TypeVar("_Text", str, bytes, bytearray)


def iter_comment(comment: _Text) -> Iterator[tuple[_Text, _Text]]:
    """Yield (command, value) for each bracketed command in a comment.

    The value is what follows the last space before the closing bracket.
    Raises ValueError when a bracket closes without a usable space.
    """
    if isinstance(comment, (bytes, bytearray)):
        space, opening, closing = ord(" "), ord("["), ord("]")
    else:
        space, opening, closing = " ", "[", "]"
    start = sep = 0
    for index, char in enumerate(comment):
        if char == space:
            sep = index
        elif char == opening:
            start = index + 1
        elif char == closing:
            if start > sep or sep + 1 > index:
                raise ValueError(f"malformed comment command ending at {index}: {comment!r}")
            yield comment[start:sep], comment[sep + 1 : index]
            start = sep = 0