# lichess-pgn

Building blocks for working with the game dumps Lichess publishes in PGN
form: typed parsing of header values, extraction of `[%key value]`
annotations from move comments, raw per-game and per-move records, checks
of the headers a game carries, collection of the distinct header names and
comment keys seen, and export of games and moves to CSV.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What the package does not do

It does not read PGN files itself and has no command-line program. There is
no tokenizer for move text and no decompression of `.zst` dumps: the
headers, SAN moves, NAGs and comments of each game have to come from a PGN
reader of your choice, and are then handed to the classes below. Output
goes to CSV files only; there is no database storage.

## Modules

### `lichess_pgn.constants`

Header names (`SITE`, `TIME_CONTROL`, `RESULT`, `TERMINATION`, `DATE`,
`UTC_DATE`, `UTC_TIME`, `EVENT`, `ROUND`, `OPENING`, `ECO`, `WHITE`,
`WHITE_ELO`, `WHITE_RATING_DIFF`, `WHITE_TITLE`, `BLACK`, `BLACK_ELO`,
`BLACK_RATING_DIFF`, `BLACK_TITLE`) and comment keys (`EVAL`, `CLK`) as
byte strings, e.g. `UTC_DATE == b"UTCDate"`, `EVAL == b"%eval"`.

### `lichess_pgn.attributes`

Typed header and comment values. Each has a `parse` class method that
raises `InvalidAttribute` (a `ValueError`) on bad input, and a `__str__`
giving a compact export form.

- `Eval` – `"0.17"` gives a pawn score, `"#-3"` a mate count
  (`checkmate=True`); scores print with two decimals, mates as `#N`.
- `TimeControl` – `"300+0"` gives `total=300, increment=0`; `"-"` gives an
  empty time control that prints as `""`. `find_sep` returns the index of
  the `+`, or `None` when it is missing or nothing follows it.
- `ResultAttr` – `"1-0"`, `"0-1"`, `"1/2-1/2"` map to `ResultInner.WHITE`,
  `BLACK`, `TIE` and print as `1`, `-1`, `0`; `"*"` has no outcome.
- `Termination` – `Normal`, `Time forfeit`, `Rules infraction`,
  `Abandoned`, `Unterminated`; prints as its number.
- `Eco` – a letter `A`–`Z` and a two-digit number; `"?"` is empty.
- `Elo` – a rating, or `None` for `"?"`.
- `Title` – player titles (`BOT`, `GM`, `IM`, `WGM`, …); prints as its
  number. Parsing `ГР`, `MC`, `MN` or `M` also prints a notice.
- `Opening` – the opening name, or `None` for `"?"`.
- `RuleSet` – the `Event` header: `"Rated Blitz game"` is a game mode named
  `Rated Blitz`; `"Rated Blitz tournament https://lichess.org/tournament/abc"`
  is a tournament with `kind=Tournament.ARENA` and `url_id="abc"`
  (`swiss` gives `Tournament.SWISS`). Tournaments print as
  `name|kind|url_id`.

### `lichess_pgn.comment_iterator`

`iter_comment(comment)` yields `(key, value)` pairs from a comment, as
bytes for bytes input and as `str` for `str` input:

```python
>>> list(iter_comment(b" [%eval 0.17] [%clk 0:00:30] "))
[(b'%eval', b'0.17'), (b'%clk', b'0:00:30')]
```

A closing bracket without a usable space before it raises `ValueError`.

### `lichess_pgn.data`

- `Game` – every header as the text found in the file, plus `game_id`.
  `set(key, value)` appends the value to the field named by the header key;
  an unknown key prints `New header found: …`. `reset()` clears all fields
  but the id.
- `Move` – `game_id`, `num`, `san`, `nag`, `eval`, `clk`. `set(key, value)`
  fills `eval` and `clk` from comment keys; other keys print
  `New comment found: …`.
- `Data` – the current `game` and `move`. `new_game()` advances both ids
  and clears the records, `new_move(san)` starts the next move,
  `add_nag(nag)` attaches a NAG, `is_move_valid()` tells whether a move has
  been started in the current game.

Values given as bytes that are not valid UTF-8 raise `ValueError`.

### `lichess_pgn.stats`

`Stats` counts games, headers, SANs, NAGs, comments, variations and
outcomes through its methods `header`, `san`, `nag`, `comment`,
`end_variation`, `outcome` and `end_game`; `str(stats)` gives a summary.

### `lichess_pgn.checker`

- `check_comment(key, value, game_id=None)` checks a `%clk` (an `H:M:S`
  time) or a `%eval` value and reports unknown keys.
- `Checker.check_header(key, value, game_id=None)` records which headers a
  game carried and checks each value: time control, result, termination,
  `UTCDate` (`Y.m.d`, and equal to `Date`), `UTCTime`, ECO, ratings,
  rating differences and titles. A `Round` other than `-` is printed.
- `Checker.check_game(game_id=None, game=None)` reports the headers the
  game lacked, an opening without ECO or the reverse, and, given the
  `Game`, an unterminated game with a result; then the checker starts
  afresh.

Each returns the list of problems found and prints them to standard error.
With a `game_id`, messages are prefixed with the game number, and a value
that is not valid UTF-8 raises `ValueError` instead of being reported.

### `lichess_pgn.collector`

`Collector` gathers distinct header names (`collect_header`) and comment
keys (`collect_comment`). `print_headers(full=False)` and
`print_comments(full=False)` print them sorted; with `full=True` they print
Python snippets for handling each name: constant definitions, a mapping to
field names, dataclass fields and reset lines. `to_constant_case` and
`to_snake_case` give those name forms (`"WhiteRatingDiff"` →
`WHITE_RATING_DIFF`, `white_rating_diff`).

### `lichess_pgn.serializers`

Three writers, each taking `games_path` and `moves_path` (by default
`games.csv` and `moves.csv` in the current directory), usable as context
managers or closed with `close()`:

- `CsvSerializer` – writes the header rows at once and quotes fields as CSV
  requires.
- `ManualSerializer` – comma-joined lines with no quoting and no trailing
  newline.
- `RecordSerializer` – writes a header row from the record's field names
  with the first record of each file.

`game_record(game)` and `move_record(move)` give the field lists in the
order of `GAME_COLUMNS` and `MOVE_COLUMNS`.

## Example

```python
from lichess_pgn.attributes import RuleSet, TimeControl
from lichess_pgn.comment_iterator import iter_comment
from lichess_pgn.data import Data
from lichess_pgn.serializers import CsvSerializer

print(TimeControl.parse("300+0"))            # 300+0
print(RuleSet.parse("Rated Blitz game"))     # Rated Blitz

data = Data()
data.new_game()
data.game.set(b"White", b"Abbot")
data.game.set(b"Black", b"Costello")
data.new_move("e4")
for key, value in iter_comment(b" [%eval 0.17] [%clk 0:00:30] "):
    data.move.set(key, value)

with CsvSerializer("games.csv", "moves.csv") as out:
    out.write_game(data.game)
    out.write_move(data.move)
```