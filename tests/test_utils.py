import pytest

from core.utils import cents_to_dollars, dollars_to_cents, format_currency, format_dollars


@pytest.mark.parametrize("cents,text", [
    (0, "$0"), (500, "$5"), (2000, "$20"), (1154, "$11.54"), (950, "$9.50"), (5, "$0.05"),
])
def test_format_dollars(cents, text):
    assert format_dollars(cents) == text


@pytest.mark.parametrize("cents,decimals,text", [
    (105125, 2, "$1,051.25"),
    (105125, 0, "$1,051"),
    (0, 2, "$0.00"),
])
def test_format_currency(cents, decimals, text):
    assert format_currency(cents, decimals) == text


@pytest.mark.parametrize("value,cents", [
    ("10", 1000),
    ("$10.50", 1050),
    (" 1,234.56 ", 123456),
    ("0.1", 10),
    ("19.99", 1999),
    (2.5, 250),
    ("", 0),
    (None, 0),
    ("abc", 0),
    ("-5", 0),
    ("inf", 0),
    ("nan", 0),
])
def test_dollars_to_cents(value, cents):
    assert dollars_to_cents(value) == cents


@pytest.mark.parametrize("cents,text", [(0, ""), (1050, "10.50"), (500, "5.00")])
def test_cents_to_dollars(cents, text):
    assert cents_to_dollars(cents) == text
