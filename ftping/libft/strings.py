"""String helpers with the semantics of the classic C string routines.

Positions are returned as indices instead of pointers; a search that finds
nothing returns None. Where a C routine would point at the terminating NUL,
the index returned is ``len(s)``.
"""

from typing import Callable, List, MutableSequence, Optional, Tuple, Union

CharLike = Union[int, str]


def _char(c: CharLike) -> str:
    """Normalise a character or integer code to a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int) and not isinstance(c, bool):
        return chr(c & 0xFF)
    raise TypeError(f"expected a character or an integer, got {type(c).__name__}")


def _require(value: Optional[str], name: str) -> str:
    if value is None:
        raise TypeError(f"{name} must be a string, not None")
    return value


def strlen(s: Optional[str]) -> int:
    """Length of the string; None counts as empty."""
    return 0 if s is None else len(s)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of c, or None.

    Searching for NUL finds the terminator, at index len(s).
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of c, or None.

    Searching for NUL finds the terminator, at index len(s).
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """A copy of the string."""
    return str(_require(s, "s"))


def strjoin(first: str, second: str) -> str:
    """The concatenation of two strings; None for either raises TypeError."""
    return _require(first, "first") + _require(second, "second")


def strlcpy(src: str, size: int) -> Tuple[Optional[str], int]:
    """Copy src into a buffer of the given size.

    Returns the text that fits (at most size - 1 characters) and the full
    length of src. With a size of 0 nothing is written and the text is None.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size == 0:
        return None, len(src)
    return src[: size - 1], len(src)


def strlcat(dest: str, src: Optional[str], size: int) -> Tuple[str, int]:
    """Append src to dest within a buffer of the given size.

    Returns the resulting text and the length the routine reports: the
    length of src alone when size is 0 or src is None, size plus the
    length of src when dest already fills the buffer, and otherwise the
    sum of both lengths.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size == 0 or src is None:
        return dest, strlen(src)
    if size <= len(dest):
        return dest, len(src) + size
    room = size - 1 - len(dest)
    return dest + src[:room], len(dest) + len(src)


def strncmp(first: str, second: Optional[str], n: int) -> int:
    """Compare at most n characters; return the difference at the stop point.

    A count of 0, or a missing second string, compares equal.
    """
    if n <= 0 or second is None:
        return 0
    index = 0
    while (
        index < len(first)
        and index < len(second)
        and index < n - 1
        and first[index] == second[index]
    ):
        index += 1
    a = ord(first[index]) if index < len(first) else 0
    b = ord(second[index]) if index < len(second) else 0
    return a - b


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of needle within the first length characters of haystack, or None.

    An empty needle is found at index 0.
    """
    if not needle:
        return 0
    if length <= 0:
        return None
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def substr(s: str, start: int, length: int) -> str:
    """At most length characters of s beginning at start.

    A start at or past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if length == 0 or start >= len(s):
        return ""
    return s[start : start + length]


def strtrim(s: str, charset: str) -> str:
    """s with every leading and trailing character found in charset removed."""
    return _require(s, "s").strip(_require(charset, "charset"))


def split(s: str, sep: CharLike) -> List[str]:
    """The non-empty words of s separated by the character sep."""
    separator = _char(sep)
    text = _require(s, "s")
    if separator == "\0":
        return [text] if text else []
    return [word for word in text.split(separator) if word]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """A new string whose characters are func(index, character).

    The result ends at the first NUL that func produces.
    """
    mapped = "".join(func(index, ch) for index, ch in enumerate(_require(s, "s")))
    return mapped.split("\0", 1)[0]


def striteri(s: MutableSequence, func: Callable[[int, MutableSequence], None]) -> None:
    """Call func(index, s) for each position of a mutable character sequence.

    func may change s[index] in place. Iteration stops at a NUL element.
    """
    index = 0
    while index < len(s) and s[index] not in ("\0", 0):
        func(index, s)
        index += 1