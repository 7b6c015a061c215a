"""Validation of the headers and comments of Lichess PGN games."""

from __future__ import annotations

import datetime
import re
import sys
from collections.abc import Callable
from dataclasses import dataclass, fields

from lichess_pgn.attributes import (
    Eco,
    Elo,
    Eval,
    InvalidAttribute,
    Opening,
    ResultAttr,
    RuleSet,
    Termination,
    TimeControl,
    Title,
    _parse_int,
)
from lichess_pgn.constants import (
    BLACK,
    BLACK_ELO,
    BLACK_RATING_DIFF,
    BLACK_TITLE,
    CLK,
    DATE,
    ECO,
    EVAL,
    EVENT,
    OPENING,
    RESULT,
    ROUND,
    SITE,
    TERMINATION,
    TIME_CONTROL,
    UTC_DATE,
    UTC_TIME,
    WHITE,
    WHITE_ELO,
    WHITE_RATING_DIFF,
    WHITE_TITLE,
)
from lichess_pgn.data import Game

_Raw = bytes | bytearray | str
_Report = Callable[[str], None]

_TIME_RE = re.compile(r"(\d{1,2}):(\d{1,2}):(\d{1,2})")
_TIME_PREFIX_RE = re.compile(r"\d{0,2}(?::\d{0,2}(?::\d{0,2})?)?")
_DATE_RE = re.compile(r"([+-]?\d{4,})\.(\d{1,2})\.(\d{1,2})")
_DATE_PREFIX_RE = re.compile(r"[+-]?\d*(?:\.\d{0,2}(?:\.\d{0,2})?)?")


def _time_error(value: str) -> str | None:
    """Why a value is not a valid H:M:S time, or None when it is."""
    match = _TIME_RE.match(value)
    if match is None:
        if _TIME_PREFIX_RE.fullmatch(value):
            return "premature end of input"
        return "input contains invalid characters"
    if match.end() != len(value):
        return "trailing input"
    hour, minute, second = (int(part) for part in match.groups())
    if hour > 23 or minute > 59 or second > 60:
        return "input is out of range"
    return None


def _date_error(value: str) -> str | None:
    """Why a value is not a valid Y.m.d date, or None when it is."""
    match = _DATE_RE.match(value)
    if match is None:
        if _DATE_PREFIX_RE.fullmatch(value):
            return "premature end of input"
        return "input contains invalid characters"
    if match.end() != len(value):
        return "trailing input"
    year, month, day = (int(part) for part in match.groups())
    try:
        datetime.date(year, month, day)
    except ValueError:
        return "input is out of range"
    return None


def _as_bytes(key: _Raw) -> bytes:
    return key.encode("utf-8") if isinstance(key, str) else bytes(key)


def _describe(key: bytes) -> str:
    return f"{key.decode('utf-8', errors='replace')} <- {list(key)}"


def _reporter(problems: list[str], game_id: int | None) -> _Report:
    def report(message: str) -> None:
        problems.append(message if game_id is None else f"{game_id + 1} - {message}")

    return report


def _decode(value: _Raw, game_id: int | None, report: _Report) -> str:
    """Decode a value as UTF-8; invalid bytes are fatal when a game id is known."""
    if isinstance(value, str):
        return value
    raw = bytes(value)
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        lossy = raw.decode("utf-8", errors="replace")
        message = f"Invalid UTF-8: {lossy} <- {list(raw)}"
        if game_id is not None:
            raise ValueError(f"{game_id + 1} - {message}") from None
        report(message)
        return lossy


def _emit(problems: list[str]) -> list[str]:
    for problem in problems:
        print(problem, file=sys.stderr)
    return problems


def check_comment(key: _Raw, value: _Raw, game_id: int | None = None) -> list[str]:
    """Check one comment command; return (and print to stderr) the problems found."""
    problems: list[str] = []
    report = _reporter(problems, game_id)
    text = _decode(value, game_id, report)
    key = _as_bytes(key)
    if key == CLK:
        error = _time_error(text)
        if error is not None:
            report(f"{error} ({text})")
    elif key == EVAL:
        try:
            Eval.parse(text)
        except InvalidAttribute as exc:
            report(f"{exc} ({text})")
    else:
        report(f"New comment found: {_describe(key)}")
    return _emit(problems)


@dataclass
class Checker:
    """Tracks which headers a game carried and reports what is wrong or missing."""

    current_date: str | None = None
    site: bool = False
    time_control: bool = False
    result: bool = False
    termination: bool = False
    date: bool = False
    time: bool = False
    opening: bool = False
    eco: bool = False
    event: bool = False
    white: bool = False
    white_elo: bool = False
    black: bool = False
    black_elo: bool = False

    def _reset(self) -> None:
        for item in fields(self):
            setattr(self, item.name, item.default)

    def check_game(self, game_id: int | None = None, game: Game | None = None) -> list[str]:
        """Report the headers the finished game lacked, then start afresh."""
        problems: list[str] = []

        def report(message: str) -> None:
            problems.append(message if game_id is None else f"{game_id} - {message}")

        stats = game_id is not None
        if not self.site:
            report("Site is null.")
        if not self.time_control:
            report("TimeControl is null.")
        if not self.result:
            report("Result is null.")
        if not self.termination:
            report("Termination is null.")
        if game is not None and game.termination == "Unterminated" and game.result != "*":
            report(
                "Unterminated with result."
                if stats
                else "Abandoned or Unterminated with result."
            )
        if not self.date:
            report("Date is null.")
        if not self.time:
            report("Time is null.")
        if not self.opening:
            report("Opening is null.")
        if not self.eco:
            report("ECO is null.")
        if self.eco != self.opening:
            report(
                "Opening without ECO / ECO without Opening."
                if stats
                else "Opening without ECO / ECO without Opening.."
            )
        if not self.event:
            report("Event is null.")
        if not self.white:
            report("White is null.")
        if not self.white_elo:
            report("WhiteElo is null.")
        if not self.black:
            report("Black is null.")
        if not self.black_elo:
            report("BlackElo is null.")
        self._reset()
        return _emit(problems)

    def _compare_date(self, text: str, report: _Report) -> None:
        if self.current_date is None:
            self.current_date = text
        elif self.current_date != text:
            report("UTCDate is different than Date")

    @staticmethod
    def _parse(parser: Callable[[str], object], text: str, report: _Report) -> None:
        try:
            parser(text)
        except InvalidAttribute as exc:
            report(str(exc))

    @staticmethod
    def _rating_diff(text: str, report: _Report) -> None:
        try:
            _parse_int(text, -0x8000, 0x7FFF)
        except ValueError as exc:
            report(str(exc))

    def check_header(self, key: _Raw, value: _Raw, game_id: int | None = None) -> list[str]:
        """Check one header; return (and print to stderr) the problems found."""
        problems: list[str] = []
        report = _reporter(problems, game_id)
        text = _decode(value, game_id, report)
        key = _as_bytes(key)

        if key == SITE:
            self.site = True
        elif key == TIME_CONTROL:
            self.time_control = True
            self._parse(TimeControl.parse, text, report)
        elif key == RESULT:
            self.result = True
            self._parse(ResultAttr.parse, text, report)
        elif key == TERMINATION:
            self.termination = True
            self._parse(Termination.parse, text, report)
        elif key == DATE:
            self._compare_date(text, report)
        elif key == UTC_DATE:
            self.date = True
            error = _date_error(text)
            if error is not None:
                report(f"{error} ({text})")
            self._compare_date(text, report)
        elif key == UTC_TIME:
            self.time = True
            error = _time_error(text)
            if error is not None:
                report(f"{error} ({text})")
        elif key == OPENING:
            self.opening = True
            Opening.parse(text)
        elif key == ECO:
            self.eco = True
            self._parse(Eco.parse, text, report)
        elif key == EVENT:
            self.event = True
            RuleSet.parse(text)
        elif key == ROUND:
            if text != "-":
                print(text)
        elif key == WHITE:
            self.white = True
        elif key == WHITE_ELO:
            self.white_elo = True
            self._parse(Elo.parse, text, report)
        elif key == WHITE_RATING_DIFF:
            self._rating_diff(text, report)
        elif key == WHITE_TITLE:
            self._parse(Title.parse, text, report)
        elif key == BLACK:
            self.black = True
        elif key == BLACK_ELO:
            self.black_elo = True
            self._parse(Elo.parse, text, report)
        elif key == BLACK_RATING_DIFF:
            self._rating_diff(text, report)
        elif key == BLACK_TITLE:
            self._parse(Title.parse, text, report)
        else:
            report(f"New header found: {_describe(key)}")
        return _emit(problems)