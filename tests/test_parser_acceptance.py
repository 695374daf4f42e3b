import pytest

from dice_notation.models import ConstantTerm, DiceTerm
from dice_notation.parser import parse, render_expression


@pytest.mark.parametrize(
    ("text", "rendered", "terms"),
    [
        ("d20", "1d20", [DiceTerm(count=1, sides=20)]),
        ("1d20", "1d20", [DiceTerm(count=1, sides=20)]),
        ("-1d20", "-1d20", [DiceTerm(count=-1, sides=20)]),
        ("-d20", "-1d20", [DiceTerm(count=-1, sides=20)]),
        ("- d20", "-1d20", [DiceTerm(count=-1, sides=20)]),
        ("- 1d20", "-1d20", [DiceTerm(count=-1, sides=20)]),
        ("3d8", "3d8", [DiceTerm(count=3, sides=8)]),
        ("2D6", "2d6", [DiceTerm(count=2, sides=6)]),
        ("0d6", "0d6", [DiceTerm(count=0, sides=6)]),
        ("10", "10", [ConstantTerm(value=10)]),
        ("+10", "10", [ConstantTerm(value=10)]),
        (" + 10", "10", [ConstantTerm(value=10)]),
        ("-10", "-10", [ConstantTerm(value=-10)]),
        (" - 10", "-10", [ConstantTerm(value=-10)]),
        (
            "2d20 +5",
            "2d20 + 5",
            [DiceTerm(count=2, sides=20), ConstantTerm(value=5)],
        ),
        (
            "2d20 -5",
            "2d20 + -5",
            [DiceTerm(count=2, sides=20), ConstantTerm(value=-5)],
        ),
        (
            "2d20 + 5",
            "2d20 + 5",
            [DiceTerm(count=2, sides=20), ConstantTerm(value=5)],
        ),
        (
            "2d20 - 5",
            "2d20 + -5",
            [DiceTerm(count=2, sides=20), ConstantTerm(value=-5)],
        ),
        (
            "-d8 - 3",
            "-1d8 + -3",
            [DiceTerm(count=-1, sides=8), ConstantTerm(value=-3)],
        ),
        ("0" * 5000 + "5", "5", [ConstantTerm(value=5)]),
        ("-" + "0" * 5000 + "7", "-7", [ConstantTerm(value=-7)]),
        ("00002d" + "0" * 5000 + "6", "2d6", [DiceTerm(count=2, sides=6)]),
        (
            "d20+2d4-1",
            "1d20 + 2d4 + -1",
            [DiceTerm(count=1, sides=20), DiceTerm(count=2, sides=4), ConstantTerm(value=-1)],
        ),
    ],
)
def test_parse_acceptance(text, rendered, terms):
    parsed = parse(text)
    assert parsed == terms
    assert render_expression(parsed) == rendered


def test_parse_empty_input_yields_no_terms():
    assert parse("") == []
    assert parse("   ") == []


@pytest.mark.parametrize(
    "text",
    ["-2147483648", "2147483647", "-2147483648d6", "2147483647d6", "d4294967295"],
)
def test_parse_accepts_numeric_bounds(text):
    assert len(parse(text)) == 1


@pytest.mark.parametrize(("count", "sides"), [(1, 20), (-3, 6), (0, 4), (12, 100)])
def test_rendered_dice_term_parses_back(count, sides):
    rendered = render_expression([DiceTerm(count=count, sides=sides)])
    assert parse(rendered) == [DiceTerm(count=count, sides=sides)]
