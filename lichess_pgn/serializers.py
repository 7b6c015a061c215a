"""Writers that store collected games and moves as CSV files."""

from __future__ import annotations

import csv
import os
from dataclasses import fields
from typing import IO

from lichess_pgn.data import Game, Move

GAMES_CSV = "games.csv"
MOVES_CSV = "moves.csv"

GAME_COLUMNS = (
    "GameId",
    "Site",
    "TimeControl",
    "Result",
    "Termination",
    "Date",
    "UTCDate",
    "UTCTime",
    "Opening",
    "ECO",
    "Event",
    "Round",
    "White",
    "WhiteElo",
    "WhiteRatingDiff",
    "WhiteTitle",
    "Black",
    "BlackElo",
    "BlackRatingDiff",
    "BlackTitle",
)

MOVE_COLUMNS = ("GameId", "Num", "San", "Nag", "Eval", "Clk")

_RENAMED = {"utc_date": "UTCDate", "utc_time": "UTCTime", "eco": "ECO"}

_PathLike = str | os.PathLike


def game_record(game: Game) -> list[str]:
    """The CSV fields of a game, in the order of GAME_COLUMNS."""
    return [
        str(game.game_id),
        game.site,
        game.time_control,
        game.result,
        game.termination,
        game.date,
        game.utc_date,
        game.utc_time,
        game.opening,
        game.eco,
        game.event,
        game.round,
        game.white,
        game.white_elo,
        game.white_rating_diff,
        game.white_title,
        game.black,
        game.black_elo,
        game.black_rating_diff,
        game.black_title,
    ]


def move_record(move: Move) -> list[str]:
    """The CSV fields of a move, in the order of MOVE_COLUMNS."""
    return [
        str(move.game_id),
        str(move.num),
        move.san,
        "" if move.nag is None else str(move.nag),
        move.eval,
        move.clk,
    ]


def _pascal_case(name: str) -> str:
    if name in _RENAMED:
        return _RENAMED[name]
    return "".join(part.capitalize() for part in name.split("_"))


def _open(path: _PathLike) -> IO[str]:
    return open(path, "w", encoding="utf-8", newline="")


class _FileSerializer:
    """Holds the two output files."""

    def __init__(self, games_path: _PathLike, moves_path: _PathLike) -> None:
        self._games = _open(games_path)
        try:
            self._moves = _open(moves_path)
        except BaseException:
            self._games.close()
            raise

    def _close_files(self) -> None:
        self._games.close()
        self._moves.close()


class CsvSerializer(_FileSerializer):
    """Writes games and moves through a CSV writer, quoting where needed."""

    def __init__(self, games_path: _PathLike = GAMES_CSV, moves_path: _PathLike = MOVES_CSV) -> None:
        super().__init__(games_path, moves_path)
        self._game_writer = csv.writer(self._games, lineterminator="\n")
        self._move_writer = csv.writer(self._moves, lineterminator="\n")
        self._game_writer.writerow(GAME_COLUMNS)
        self._move_writer.writerow(MOVE_COLUMNS)

    def write_game(self, game: Game) -> None:
        self._game_writer.writerow(game_record(game))

    def write_move(self, move: Move) -> None:
        self._move_writer.writerow(move_record(move))

    def close(self) -> None:
        """Flush and close both files."""
        self._close_files()

    def __enter__(self) -> CsvSerializer:
        return self

    def __exit__(self, *args) -> None:
        self.close()


class ManualSerializer(_FileSerializer):
    """Writes games and moves as comma-joined lines without any quoting."""

    def __init__(self, games_path: _PathLike = GAMES_CSV, moves_path: _PathLike = MOVES_CSV) -> None:
        super().__init__(games_path, moves_path)
        self._games.write(",".join(GAME_COLUMNS))
        self._moves.write(",".join(MOVE_COLUMNS))

    def write_game(self, game: Game) -> None:
        self._games.write("\n" + ",".join(game_record(game)))

    def write_move(self, move: Move) -> None:
        self._moves.write("\n" + ",".join(move_record(move)))

    def close(self) -> None:
        """Flush and close both files."""
        self._close_files()

    def __enter__(self) -> ManualSerializer:
        return self

    def __exit__(self, *args) -> None:
        self.close()


class RecordSerializer(_FileSerializer):
    """Writes the fields of each record by name; headers come with the first record."""

    def __init__(self, games_path: _PathLike = GAMES_CSV, moves_path: _PathLike = MOVES_CSV) -> None:
        super().__init__(games_path, moves_path)
        self._game_writer = csv.writer(self._games, lineterminator="\n")
        self._move_writer = csv.writer(self._moves, lineterminator="\n")
        self._games_started = False
        self._moves_started = False

    @staticmethod
    def _row(record: Game | Move) -> tuple[list[str], list[str]]:
        names, values = [], []
        for item in fields(record):
            names.append(_pascal_case(item.name))
            value = getattr(record, item.name)
            values.append("" if value is None else str(value))
        return names, values

    def write_game(self, game: Game) -> None:
        names, values = self._row(game)
        if not self._games_started:
            self._game_writer.writerow(names)
            self._games_started = True
        self._game_writer.writerow(values)

    def write_move(self, move: Move) -> None:
        names, values = self._row(move)
        if not self._moves_started:
            self._move_writer.writerow(names)
            self._moves_started = True
        self._move_writer.writerow(values)

    def close(self) -> None:
        """Flush and close both files."""
        self._close_files()

    def __enter__(self) -> RecordSerializer:
        return self

    def __exit__(self, *args) -> None:
        self.close()