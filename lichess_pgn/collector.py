"""Collection of the distinct header names and comment commands in a PGN file."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from itertools import pairwise

_DELIMITERS = re.compile(r"[ _-]+")


def _is_letter(char: str) -> bool:
    return char.isupper() or char.islower()


def _is_boundary(before: str, current: str, after: str | None) -> bool:
    if before.islower() and current.isupper():
        return True
    if before.isdigit() and _is_letter(current):
        return True
    if _is_letter(before) and current.isdigit():
        return True
    return before.isupper() and current.isupper() and after is not None and after.islower()


def _words(text: str) -> Iterator[str]:
    """Split text into words at delimiters, case changes, acronyms and digits."""
    for chunk in _DELIMITERS.split(text):
        if not chunk:
            continue
        start = 0
        for index, (before, current) in enumerate(pairwise(chunk), start=1):
            after = chunk[index + 1] if index + 1 < len(chunk) else None
            if _is_boundary(before, current, after):
                yield chunk[start:index]
                start = index
        yield chunk[start:]


def to_constant_case(text: str) -> str:
    """UPPER_CASE_WITH_UNDERSCORES form of a name."""
    return "_".join(word.upper() for word in _words(text))


def to_snake_case(text: str) -> str:
    """lower_case_with_underscores form of a name."""
    return "_".join(word.lower() for word in _words(text))


def _decoded(names: Iterable[bytes]) -> list[tuple[bytes, str]]:
    """Sort names and decode them, reporting the ones that are not UTF-8."""
    result = []
    for raw in sorted(names):
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError:
            text = raw.decode("utf-8", errors="replace")
            print(f"Invalid UTF-8: {text} <- {list(raw)}")
        result.append((raw, text))
    return result


@dataclass
class Collector:
    """Distinct header names and comment commands seen so far."""

    headers: set[bytes] = field(default_factory=set)
    comments: set[bytes] = field(default_factory=set)

    def collect_header(self, header: bytes | str) -> None:
        self.headers.add(header.encode("utf-8") if isinstance(header, str) else bytes(header))

    def collect_comment(self, comment: bytes | str) -> None:
        self.comments.add(comment.encode("utf-8") if isinstance(comment, str) else bytes(comment))

    @staticmethod
    def _print_full(kind: str, names: list[tuple[bytes, str]], as_literal: bool) -> None:
        print(f"Constants for matching ({kind})\n")
        for raw, text in names:
            literal = f"bytes({list(raw)})" if as_literal else f'b"{text}"'
            print(f"{to_constant_case(text)} = {literal}")

        print(f"\nConstants for matching ({kind})\n")
        for _, text in names:
            print(f'    {to_constant_case(text)}: "{to_snake_case(text)}",')

        print(f"\nStruct fields ({kind})\n")
        for _, text in names:
            print(f'    {to_snake_case(text)}: str = ""')

        print(f"\nStruct fields reset ({kind})\n")
        for _, text in names:
            print(f'        self.{to_snake_case(text)} = ""')

    def print_headers(self, full: bool = False) -> None:
        """Print the collected header names in order, or code for handling them."""
        names = _decoded(self.headers)
        print("Headers collection\n")
        if full:
            self._print_full("Headers", names, as_literal=False)
        else:
            for _, text in names:
                print(text)

    def print_comments(self, full: bool = False) -> None:
        """Print the collected comment commands in order, or code for handling them."""
        names = _decoded(self.comments)
        print("Comments collection\n")
        if full:
            self._print_full("Comments", names, as_literal=True)
        else:
            for _, text in names:
                print(text)