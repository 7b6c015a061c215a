"""Raw game and move records collected while reading a PGN export."""

from __future__ import annotations

from dataclasses import dataclass, field, fields

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

_HEADER_FIELDS = {
    SITE: "site",
    TIME_CONTROL: "time_control",
    RESULT: "result",
    TERMINATION: "termination",
    DATE: "date",
    UTC_DATE: "utc_date",
    UTC_TIME: "utc_time",
    OPENING: "opening",
    ECO: "eco",
    EVENT: "event",
    ROUND: "round",
    WHITE: "white",
    WHITE_ELO: "white_elo",
    WHITE_RATING_DIFF: "white_rating_diff",
    WHITE_TITLE: "white_title",
    BLACK: "black",
    BLACK_ELO: "black_elo",
    BLACK_RATING_DIFF: "black_rating_diff",
    BLACK_TITLE: "black_title",
}

_COMMENT_FIELDS = {
    CLK: "clk",
    EVAL: "eval",
}


def _as_bytes(data: bytes | bytearray | str) -> bytes:
    return data.encode("utf-8") if isinstance(data, str) else bytes(data)


def _decode(value: bytes | bytearray | str) -> str:
    """Decode a value as UTF-8, raising ValueError when it is not valid."""
    if isinstance(value, str):
        return value
    try:
        return bytes(value).decode("utf-8")
    except UnicodeDecodeError:
        lossy = bytes(value).decode("utf-8", errors="replace")
        raise ValueError(f"Invalid UTF-8: {lossy} <- {list(value)}") from None


def _describe(key: bytes) -> str:
    return f"{key.decode('utf-8', errors='replace')} <- {list(key)}"


@dataclass
class Game:
    """Header values of one game, kept as the text found in the file."""

    game_id: int = 0

    site: str = ""
    time_control: str = ""
    result: str = ""
    termination: str = ""

    date: str = ""
    utc_date: str = ""
    utc_time: str = ""

    opening: str = ""
    eco: str = ""

    event: str = ""
    round: str = ""

    white: str = ""
    white_elo: str = ""
    white_rating_diff: str = ""
    white_title: str = ""

    black: str = ""
    black_elo: str = ""
    black_rating_diff: str = ""
    black_title: str = ""

    def reset(self) -> None:
        """Clear every header value, keeping the game id."""
        for item in fields(self):
            if item.name != "game_id":
                setattr(self, item.name, "")

    def set(self, key: bytes | str, value: bytes | str) -> None:
        """Append a header value to the field its key names."""
        text = _decode(value)
        key = _as_bytes(key)
        name = _HEADER_FIELDS.get(key)
        if name is None:
            print(f"New header found: {_describe(key)}")
            return
        setattr(self, name, getattr(self, name) + text)


@dataclass
class Move:
    """One move of a game with the commands found in its comment."""

    game_id: int = 0
    num: int = 0
    san: str = ""
    nag: int | None = None
    eval: str = ""
    clk: str = ""

    def reset(self) -> None:
        """Clear the move text, its NAG and its comment values."""
        self.san = ""
        self.nag = None
        self.clk = ""
        self.eval = ""

    def set(self, key: bytes | str, value: bytes | str) -> None:
        """Append a comment command value to the field its key names."""
        text = _decode(value)
        key = _as_bytes(key)
        name = _COMMENT_FIELDS.get(key)
        if name is None:
            print(f"New comment found: {_describe(key)}")
            return
        setattr(self, name, getattr(self, name) + text)


@dataclass
class Data:
    """The game and move being read at the moment."""

    game: Game = field(default_factory=Game)
    move: Move = field(default_factory=Move)

    def new_game(self) -> None:
        """Start the next game: advance ids and clear both records."""
        self.game.game_id += 1
        self.game.reset()
        self.move.game_id += 1
        self.move.num = 0
        self.move.reset()

    def new_move(self, san: object) -> None:
        """Start the next move of the current game."""
        self.move.reset()
        self.move.num += 1
        self.move.san = str(san)

    def add_nag(self, nag: int) -> None:
        """Attach a numeric annotation glyph to the current move."""
        self.move.nag = int(nag)

    def is_move_valid(self) -> bool:
        """Whether a move has been started in the current game."""
        return self.move.num != 0