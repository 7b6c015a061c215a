import pytest

from lichess_pgn.attributes import (
    Eco,
    Elo,
    Eval,
    InvalidAttribute,
    Opening,
    ResultAttr,
    ResultInner,
    RuleSet,
    Termination,
    TimeControl,
    Title,
    Tournament,
    find_sep,
)


# Eval

def test_eval_numeric():
    ev = Eval.parse("0.17")
    assert not ev.checkmate
    assert ev.value == pytest.approx(0.17)
    assert str(ev) == "0.17"


@pytest.mark.parametrize(
    "text, shown",
    [("-1.5", "-1.50"), ("1e3", "1000.00"), ("inf", "inf"), ("3", "3.00"), (".5", "0.50")],
)
def test_eval_display(text, shown):
    assert str(Eval.parse(text)) == shown


def test_eval_checkmate():
    ev = Eval.parse("#-3")
    assert ev.checkmate
    assert ev.value == -3
    assert str(ev) == "#-3"
    assert str(Eval.parse("#4")) == "#4"


@pytest.mark.parametrize(
    "text, message",
    [
        ("abc", "invalid float literal: abc"),
        ("#", "invalid float literal: #"),
        ("", "cannot parse float from empty string: "),
        ("#200", "number too large to fit in target type: #200"),
        ("#-200", "number too small to fit in target type: #-200"),
        ("#x", "invalid digit found in string: #x"),
    ],
)
def test_eval_errors(text, message):
    with pytest.raises(InvalidAttribute) as info:
        Eval.parse(text)
    assert str(info.value) == message


@pytest.mark.parametrize("text", [" 1", "1_0", "1e", "."])
def test_eval_rejects_loose_floats(text):
    with pytest.raises(InvalidAttribute):
        Eval.parse(text)


# TimeControl

def test_find_sep_values():
    assert find_sep("900+900") == 3
    assert find_sep(b"900+900") == 3
    assert find_sep("900+") is None
    assert find_sep("900") is None


def test_find_sep_split():
    text = "900+900"
    i = find_sep(text)
    assert (text[:i], text[i + 1 :]) == ("900", "900")


def test_time_control_parse():
    tc = TimeControl.parse("300+0")
    assert (tc.total, tc.increment) == (300, 0)
    assert str(tc) == "300+0"


def test_time_control_dash():
    tc = TimeControl.parse("-")
    assert tc.total is None
    assert str(tc) == ""


@pytest.mark.parametrize(
    "text, message",
    [
        ("900+900", "number too large to fit in target type: 900+900"),
        ("70000+0", "number too large to fit in target type: 70000+0"),
        ("a+1", "invalid digit found in string: a+1"),
        ("300", "Found invalid TimeControl: 300"),
        ("300+", "Found invalid TimeControl: 300+"),
    ],
)
def test_time_control_errors(text, message):
    with pytest.raises(InvalidAttribute) as info:
        TimeControl.parse(text)
    assert str(info.value) == message


# ResultAttr

@pytest.mark.parametrize(
    "text, outcome, shown",
    [
        ("1-0", ResultInner.WHITE, "1"),
        ("0-1", ResultInner.BLACK, "-1"),
        ("1/2-1/2", ResultInner.TIE, "0"),
        ("*", None, ""),
    ],
)
def test_result(text, outcome, shown):
    result = ResultAttr.parse(text)
    assert result.outcome == outcome
    assert str(result) == shown


def test_result_invalid():
    with pytest.raises(InvalidAttribute, match="Found invalid result: 2-0"):
        ResultAttr.parse("2-0")


# Termination

def test_termination():
    assert Termination.parse("Time forfeit") is Termination.TIME_FORFEIT
    assert str(Termination.parse("Time forfeit")) == "1"
    assert str(Termination.parse("Unterminated")) == "4"
    assert str(Termination.parse("Normal")) == "0"


def test_termination_invalid():
    with pytest.raises(InvalidAttribute, match="Found invalid termination: Abandonment"):
        Termination.parse("Abandonment")


# Eco

def test_eco():
    eco = Eco.parse("B30")
    assert (eco.letter, eco.number) == ("B", 30)
    assert str(eco) == "B30"
    assert str(Eco.parse("B03")) == "B3"
    assert str(Eco.parse("?")) == ""


@pytest.mark.parametrize("text", ["b30", "B3", "BXX", "B300", ""])
def test_eco_invalid(text):
    with pytest.raises(InvalidAttribute) as info:
        Eco.parse(text)
    assert str(info.value) == f"Found invalid ECO: {text}"


# Elo

def test_elo():
    assert Elo.parse("2100").rating == 2100
    assert str(Elo.parse("2100")) == "2100"
    assert str(Elo.parse("?")) == ""
    assert Elo.parse("+1500").rating == 1500


@pytest.mark.parametrize(
    "text, message",
    [
        ("-5", "invalid digit found in string: -5"),
        ("70000", "number too large to fit in target type: 70000"),
        ("", "cannot parse integer from empty string: "),
    ],
)
def test_elo_invalid(text, message):
    with pytest.raises(InvalidAttribute) as info:
        Elo.parse(text)
    assert str(info.value) == message


# Title

def test_title():
    assert Title.parse("GM") is Title.GM
    assert str(Title.parse("GM")) == "2"
    assert str(Title.parse("BOT")) == "0"
    assert Title.parse("FM") is Title.CM


def test_title_reported(capsys):
    assert Title.parse("ГР") is Title.GR
    assert capsys.readouterr().out == "Found ГР\n"


def test_title_invalid():
    with pytest.raises(InvalidAttribute, match="Found invalid result: XX"):
        Title.parse("XX")


# Opening

def test_opening():
    assert Opening.parse("?").name is None
    assert str(Opening.parse("?")) == ""
    name = "Sicilian Defense: Old Sicilian"
    assert str(Opening.parse(name)) == name


# RuleSet

def test_rule_set_game_mode():
    rules = RuleSet.parse("Rated Blitz game")
    assert rules.is_game_mode
    assert rules.name == "Rated Blitz"
    assert str(rules) == "Rated Blitz"


def test_rule_set_arena():
    rules = RuleSet.parse("Rated Bullet tournament https://lichess.org/tournament/abcd1234")
    assert rules == RuleSet("Rated Bullet", Tournament.ARENA, "abcd1234")
    assert str(rules) == "Rated Bullet|1|abcd1234"


def test_rule_set_swiss():
    rules = RuleSet.parse("Rated Blitz swiss https://lichess.org/swiss/XyZ")
    assert str(rules) == "Rated Blitz|2|XyZ"


def test_rule_set_url_without_kind():
    rules = RuleSet.parse("Titled Arena https://lichess.org/abc/")
    assert rules == RuleSet("Titled Arena", Tournament.NON_SPECIFIED, "abc")


def test_rule_set_other():
    rules = RuleSet.parse("Casual Correspondence")
    assert rules == RuleSet("Casual Correspondence", Tournament.NON_SPECIFIED, "")
    assert str(rules) == "Casual Correspondence|0|"
    assert str(RuleSet.parse("")) == "|0|"