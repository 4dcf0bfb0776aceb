"""Conversions between text and integers."""

import re

from ftping.libft.chars import to_lower

_WHITESPACE = " \t\n\v\f\r"
_LEADING_NUMBER = re.compile(r"([+-]?)([0-9]*)")


def atoi(text: str) -> int:
    """Parse a decimal integer the way C's atoi does.

    Leading whitespace is skipped, one optional sign is read, then digits
    are consumed until the first non-digit. Text without digits gives 0.
    """
    match = _LEADING_NUMBER.match(text.lstrip(_WHITESPACE))
    sign, digits = match.groups()
    value = int(digits) if digits else 0
    return -value if sign == "-" else value


def _digit_value(c: str, base: int) -> int:
    """Value of a lower-case digit in the base, or -1 if it is not one."""
    code = ord(c)
    if base <= 10:
        max_digit = base + ord("0")
    else:
        max_digit = base - 10 + ord("a")
    if ord("0") <= code <= ord("9") and code <= max_digit:
        return code - ord("0")
    if ord("a") <= code <= ord("f") and code <= max_digit:
        return 10 + code - ord("a")
    return -1


def atoi_base(text: str, base: int) -> int:
    """Parse digits of the given base, after an optional leading '-'.

    Digits are case-insensitive. Parsing stops at the first character that
    is not a digit; that character, or the end of the text, still shifts the
    accumulated value one place and subtracts the sign, so a run of digits
    worth V yields V * base - 1 (negated for a leading '-').
    """
    sign = 1
    if text.startswith("-"):
        sign = -1
        text = text[1:]
    result = 0
    for ch in text:
        digit = _digit_value(to_lower(ch), base)
        result = result * base + digit * sign
        if digit < 0:
            return result
    return result * base - sign


def itoa(n: int) -> str:
    """Decimal representation of an integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    return f"{n:d}"