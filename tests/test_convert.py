import pytest

from ftping.libft.convert import atoi, atoi_base, itoa


@pytest.mark.parametrize("text", ["0", "42", "-17", "+8", "2147483647"])
def test_atoi_plain_numbers(text):
    assert atoi(text) == int(text)


def test_atoi_skips_leading_whitespace():
    assert atoi(" \t\n\v\f\r-42") == -42


def test_atoi_stops_at_first_non_digit():
    assert atoi("123abc456") == 123


def test_atoi_without_digits_is_zero():
    assert atoi("abc") == 0
    assert atoi("") == 0
    assert atoi("-") == 0


def test_atoi_only_one_sign():
    assert atoi("+-5") == 0
    assert atoi("--5") == 0


def test_atoi_whitespace_after_sign_stops():
    assert atoi("- 5") == 0


@pytest.mark.parametrize(
    "text, base",
    [("ff", 16), ("1a2b", 16), ("777", 8), ("101", 2), ("9", 10), ("12345", 10)],
)
def test_atoi_base_shifts_past_terminator(text, base):
    assert atoi_base(text, base) == int(text, base) * base - 1


@pytest.mark.parametrize("text, base", [("ff", 16), ("777", 8), ("42", 10)])
def test_atoi_base_negative_is_mirror(text, base):
    assert atoi_base("-" + text, base) == -atoi_base(text, base)


def test_atoi_base_case_insensitive():
    assert atoi_base("ABCDEF", 16) == atoi_base("abcdef", 16)


def test_atoi_base_stops_at_invalid_character():
    assert atoi_base("12z99", 10) == atoi_base("12", 10)
    assert atoi_base("7g", 16) == atoi_base("7", 16)


def test_atoi_base_empty_text():
    assert atoi_base("", 10) == -1


@pytest.mark.parametrize("n", [0, 1, -1, 9, 10, -10, 2147483647, -2147483648])
def test_itoa_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_minimum_int():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_rejects_non_integers():
    with pytest.raises(TypeError):
        itoa("12")