import csv

import pytest

from lichess_pgn.data import Game, Move
from lichess_pgn.serializers import (
    GAME_COLUMNS,
    MOVE_COLUMNS,
    CsvSerializer,
    ManualSerializer,
    RecordSerializer,
    game_record,
    move_record,
)

SERIALIZERS = [CsvSerializer, ManualSerializer, RecordSerializer]


def _game(**changes):
    values = dict(
        game_id=9000,
        site="https://lichess.org/ABCDEFGH",
        time_control="300+0",
        result="0-1",
        termination="Time forfeit",
        date="2017.04.01",
        utc_date="2017.04.01",
        utc_time="11:32:01",
        opening="Sicilian Defense: Old Sicilian",
        eco="B30",
        event="Rated Bullet tournament",
        round="-",
        white="Abbot",
        white_elo="2100",
        white_title="FM",
        white_rating_diff="-4",
        black="Costello",
        black_elo="2000",
        black_title="",
        black_rating_diff="+1",
    )
    values.update(changes)
    return Game(**values)


def _move(**changes):
    values = dict(game_id=9000, num=30, san="Nbd2", nag=4, eval="0.17", clk="0:00:30")
    values.update(changes)
    return Move(**values)


def _read(path):
    with open(path, encoding="utf-8", newline="") as handle:
        return list(csv.reader(handle))


def _write(cls, tmp_path, games, moves):
    games_path = tmp_path / f"{cls.__name__}_games.csv"
    moves_path = tmp_path / f"{cls.__name__}_moves.csv"
    with cls(games_path, moves_path) as serializer:
        for game in games:
            serializer.write_game(game)
        for move in moves:
            serializer.write_move(move)
    return _read(games_path), _read(moves_path)


def test_game_record_order():
    record = game_record(_game())
    assert len(record) == len(GAME_COLUMNS)
    assert record[0] == "9000"
    assert record[9] == "B30"
    assert record[14] == "-4"
    assert record[15] == "FM"
    assert record[19] == ""


def test_move_record_values():
    assert move_record(_move()) == ["9000", "30", "Nbd2", "4", "0.17", "0:00:30"]
    assert move_record(_move(nag=None)) == ["9000", "30", "Nbd2", "", "0.17", "0:00:30"]


@pytest.mark.parametrize("cls", SERIALIZERS)
def test_game_csv_roundtrip(cls, tmp_path):
    games, _ = _write(cls, tmp_path, [_game(), _game()], [])
    assert games[0] == list(GAME_COLUMNS)
    assert games[1:] == [game_record(_game())] * 2


@pytest.mark.parametrize("cls", SERIALIZERS)
def test_move_csv_roundtrip(cls, tmp_path):
    _, moves = _write(cls, tmp_path, [], [_move(), _move(num=31, nag=None)])
    assert moves[0] == list(MOVE_COLUMNS)
    assert moves[1] == ["9000", "30", "Nbd2", "4", "0.17", "0:00:30"]
    assert moves[2] == ["9000", "31", "Nbd2", "", "0.17", "0:00:30"]


def test_all_serializers_agree(tmp_path):
    outputs = [_write(cls, tmp_path, [_game()] * 3, [_move()] * 3) for cls in SERIALIZERS]
    assert outputs[0] == outputs[1] == outputs[2]


def test_manual_layout(tmp_path):
    games_path, moves_path = tmp_path / "g.csv", tmp_path / "m.csv"
    with ManualSerializer(games_path, moves_path) as serializer:
        serializer.write_move(_move())
    assert moves_path.read_text(encoding="utf-8") == (
        "GameId,Num,San,Nag,Eval,Clk\n9000,30,Nbd2,4,0.17,0:00:30"
    )
    assert games_path.read_text(encoding="utf-8") == ",".join(GAME_COLUMNS)


def test_csv_quotes_commas(tmp_path):
    games_path, moves_path = tmp_path / "g.csv", tmp_path / "m.csv"
    with CsvSerializer(games_path, moves_path) as serializer:
        serializer.write_game(_game(opening="Queen's Gambit, Declined"))
    text = games_path.read_text(encoding="utf-8")
    assert '"Queen\'s Gambit, Declined"' in text
    assert _read(games_path)[1][8] == "Queen's Gambit, Declined"


def test_record_serializer_header_only_with_records(tmp_path):
    games_path, moves_path = tmp_path / "g.csv", tmp_path / "m.csv"
    with RecordSerializer(games_path, moves_path) as serializer:
        serializer.write_move(_move())
    assert games_path.read_text(encoding="utf-8") == ""
    assert _read(moves_path)[0] == list(MOVE_COLUMNS)


def test_csv_serializer_header_without_records(tmp_path):
    games_path, moves_path = tmp_path / "g.csv", tmp_path / "m.csv"
    with CsvSerializer(games_path, moves_path):
        pass
    assert _read(games_path) == [list(GAME_COLUMNS)]
    assert _read(moves_path) == [list(MOVE_COLUMNS)]


def test_close_flushes(tmp_path):
    games_path, moves_path = tmp_path / "g.csv", tmp_path / "m.csv"
    serializer = ManualSerializer(games_path, moves_path)
    serializer.write_game(_game(game_id=1))
    serializer.close()
    assert _read(games_path)[1][0] == "1"


def test_missing_directory_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        CsvSerializer(tmp_path / "absent" / "g.csv", tmp_path / "m.csv")