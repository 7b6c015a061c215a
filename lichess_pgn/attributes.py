"""Typed values of the headers and comments found in Lichess PGN exports."""

from __future__ import annotations

import enum
import math
import re
import struct
from dataclasses import dataclass


class InvalidAttribute(ValueError):
    """Raised when a header or comment value cannot be parsed."""


_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


def _parse_f32(text: str) -> float:
    """Parse a single-precision float the strict way, without whitespace or underscores."""
    if not text:
        raise ValueError("cannot parse float from empty string")
    if not _FLOAT_RE.fullmatch(text):
        raise ValueError("invalid float literal")
    number = float(text)
    try:
        return struct.unpack("<f", struct.pack("<f", number))[0]
    except OverflowError:
        return math.copysign(math.inf, number)


def _parse_int(text: str, low: int, high: int) -> int:
    """Parse a decimal integer that must fit in [low, high]."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if text in ("+", "-"):
        raise ValueError("invalid digit found in string")
    negative = False
    digits = text
    if text[0] == "+":
        digits = text[1:]
    elif text[0] == "-" and low < 0:
        negative = True
        digits = text[1:]
    result = 0
    for char in digits:
        if not "0" <= char <= "9":
            raise ValueError("invalid digit found in string")
        result = result * 10 + (ord(char) - ord("0"))
        if negative and -result < low:
            raise ValueError("number too small to fit in target type")
        if not negative and result > high:
            raise ValueError("number too large to fit in target type")
    return -result if negative else result


def _split_terminator(text: str, separator: str) -> list[str]:
    """Split on a separator, dropping one trailing empty piece."""
    parts = text.split(separator)
    if parts[-1] == "":
        parts.pop()
    return parts


@dataclass(frozen=True)
class Eval:
    """An engine evaluation: a pawn score, or moves until checkmate."""

    value: float | int
    checkmate: bool = False

    @classmethod
    def parse(cls, value: str) -> Eval:
        try:
            return cls(_parse_f32(value))
        except ValueError as float_error:
            if len(value.encode("utf-8")) > 1 and value.startswith("#"):
                try:
                    return cls(_parse_int(value[1:], -128, 127), checkmate=True)
                except ValueError as exc:
                    raise InvalidAttribute(f"{exc}: {value}") from exc
            raise InvalidAttribute(f"{float_error}: {value}") from float_error

    def __str__(self) -> str:
        if self.checkmate:
            return f"#{self.value}"
        if math.isnan(self.value):
            return "NaN"
        if math.isinf(self.value):
            return "inf" if self.value > 0 else "-inf"
        return f"{self.value:.2f}"


def find_sep(time_control: str | bytes) -> int | None:
    """Index of the first '+', or None when absent or when nothing follows it."""
    plus = b"+" if isinstance(time_control, (bytes, bytearray)) else "+"
    index = time_control.find(plus)
    if index == -1 or index + 1 >= len(time_control):
        return None
    return index


@dataclass(frozen=True)
class TimeControl:
    """Initial time in seconds plus increment; both None for '-'."""

    total: int | None = None
    increment: int | None = None

    @classmethod
    def parse(cls, value: str) -> TimeControl:
        if value == "-":
            return cls()
        sep = find_sep(value)
        if sep is None:
            raise InvalidAttribute(f"Found invalid TimeControl: {value}")
        try:
            total = _parse_int(value[:sep], 0, 0xFFFF)
            increment = _parse_int(value[sep + 1 :], 0, 0xFF)
        except ValueError as exc:
            raise InvalidAttribute(f"{exc}: {value}") from exc
        return cls(total, increment)

    def __str__(self) -> str:
        if self.total is None:
            return ""
        return f"{self.total}+{self.increment}"


class ResultInner(enum.IntEnum):
    WHITE = 1
    BLACK = -1
    TIE = 0


_RESULTS = {
    "1-0": ResultInner.WHITE,
    "0-1": ResultInner.BLACK,
    "1/2-1/2": ResultInner.TIE,
}


@dataclass(frozen=True)
class ResultAttr:
    """Result of a game; None when the game has no result ('*')."""

    outcome: ResultInner | None = None

    @classmethod
    def parse(cls, value: str) -> ResultAttr:
        if value == "*":
            return cls()
        try:
            return cls(_RESULTS[value])
        except KeyError:
            raise InvalidAttribute(f"Found invalid result: {value}") from None

    def __str__(self) -> str:
        if self.outcome is None:
            return ""
        return str(int(self.outcome))


class Termination(enum.IntEnum):
    NORMAL = 0
    TIME_FORFEIT = 1
    RULES_INFRACTION = 2
    ABANDONED = 3
    UNTERMINATED = 4

    @classmethod
    def parse(cls, value: str) -> Termination:
        try:
            return _TERMINATIONS[value]
        except KeyError:
            raise InvalidAttribute(f"Found invalid termination: {value}") from None

    def __str__(self) -> str:
        return str(self.value)


_TERMINATIONS = {
    "Normal": Termination.NORMAL,
    "Time forfeit": Termination.TIME_FORFEIT,
    "Rules infraction": Termination.RULES_INFRACTION,
    "Abandoned": Termination.ABANDONED,
    "Unterminated": Termination.UNTERMINATED,
}


@dataclass(frozen=True)
class Eco:
    """ECO opening code split into its letter and number; both None for '?'."""

    letter: str | None = None
    number: int | None = None

    @classmethod
    def parse(cls, value: str) -> Eco:
        if value == "?":
            return cls()
        if len(value.encode("utf-8")) == 3 and "A" <= value[0] <= "Z":
            try:
                number = _parse_int(value[1:], 0, 0xFF)
            except ValueError:
                pass
            else:
                return cls(value[0], number)
        raise InvalidAttribute(f"Found invalid ECO: {value}")

    def __str__(self) -> str:
        if self.letter is None:
            return ""
        return f"{self.letter}{self.number}"


@dataclass(frozen=True)
class Elo:
    """A player's rating; None for '?'."""

    rating: int | None = None

    @classmethod
    def parse(cls, value: str) -> Elo:
        if value == "?":
            return cls()
        try:
            return cls(_parse_int(value, 0, 0xFFFF))
        except ValueError as exc:
            raise InvalidAttribute(f"{exc}: {value}") from exc

    def __str__(self) -> str:
        return "" if self.rating is None else str(self.rating)


class Title(enum.IntEnum):
    BOT = 0
    LM = 1
    GM = 2
    IM = 3
    FM = 4
    CM = 5
    NM = 6
    WGM = 7
    WIM = 8
    WFM = 9
    WCM = 10
    WNM = 11
    GR = 12
    MC = 13
    MN = 14
    M = 15

    @classmethod
    def parse(cls, value: str) -> Title:
        try:
            title = _TITLES[value]
        except KeyError:
            raise InvalidAttribute(f"Found invalid result: {value}") from None
        if value in _REPORTED_TITLES:
            print(f"Found {value}")
        return title

    def __str__(self) -> str:
        return str(self.value)


_TITLES = {
    "BOT": Title.BOT,
    "LM": Title.LM,
    "GM": Title.GM,
    "IM": Title.IM,
    "FM": Title.CM,
    "CM": Title.CM,
    "NM": Title.NM,
    "WGM": Title.WGM,
    "WIM": Title.WIM,
    "WFM": Title.WFM,
    "WCM": Title.WCM,
    "WNM": Title.WNM,
    "ГР": Title.GR,
    "MC": Title.MC,
    "MN": Title.MN,
    "M": Title.M,
}

_REPORTED_TITLES = frozenset({"ГР", "MC", "MN", "M"})


@dataclass(frozen=True)
class Opening:
    """Opening name; None for '?'."""

    name: str | None = None

    @classmethod
    def parse(cls, value: str) -> Opening:
        return cls(None if value == "?" else value)

    def __str__(self) -> str:
        return "" if self.name is None else self.name


class Tournament(enum.IntEnum):
    NON_SPECIFIED = 0
    ARENA = 1
    SWISS = 2


_TOURNAMENT_KINDS = {"tournament": Tournament.ARENA, "swiss": Tournament.SWISS}


@dataclass(frozen=True)
class RuleSet:
    """Event of a game: a plain game mode (kind is None) or a tournament."""

    name: str
    kind: Tournament | None = None
    url_id: str = ""

    @property
    def is_game_mode(self) -> bool:
        return self.kind is None

    @classmethod
    def parse(cls, value: str) -> RuleSet:
        parts = _split_terminator(value, " ")
        if parts:
            last = parts.pop()
            if last == "game":
                return cls(" ".join(parts))
            if last.startswith("https"):
                kind = Tournament.NON_SPECIFIED
                if parts and parts[-1] in _TOURNAMENT_KINDS:
                    kind = _TOURNAMENT_KINDS[parts.pop()]
                url_parts = _split_terminator(last, "/")
                return cls(" ".join(parts), kind, url_parts[-1] if url_parts else "")
        return cls(value, Tournament.NON_SPECIFIED, "")

    def __str__(self) -> str:
        if self.kind is None:
            return self.name
        return f"{self.name}|{int(self.kind)}|{self.url_id}"