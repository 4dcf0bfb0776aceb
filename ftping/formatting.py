"""A small printf-style formatter supporting %c %s %p %d %i %u %x %X and %%."""

import operator
import sys
from typing import Any, Iterator, Optional, TextIO

_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF
_INT_SIGN = 0x80000000


def _to_c_int(value: Any) -> int:
    n = operator.index(value) & _UINT_MASK
    return n - (1 << 32) if n & _INT_SIGN else n


def format_unsigned(n: int, spec: str) -> str:
    """Render n as an unsigned 32-bit value: 'x' and 'X' in hex, 'u' in decimal."""
    value = operator.index(n) & _UINT_MASK
    if spec == "x":
        return f"{value:x}"
    if spec == "X":
        return f"{value:X}"
    if spec == "u":
        return f"{value:d}"
    raise ValueError(f"unsupported unsigned conversion {spec!r}")


def format_pointer(value: Optional[int]) -> str:
    """Render an address as 0x-prefixed hex; a null address gives '(nil)'."""
    if not value:
        return "(nil)"
    return f"0x{operator.index(value) & _POINTER_MASK:x}"


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(operator.index(value) & 0xFF)


def _format_string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _next_arg(args: Iterator[Any], spec: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for conversion %{spec}") from None


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "c":
        return _format_char(_next_arg(args, spec))
    if spec == "s":
        return _format_string(_next_arg(args, spec))
    if spec == "p":
        return format_pointer(_next_arg(args, spec))
    if spec in ("d", "i"):
        return f"{_to_c_int(_next_arg(args, spec)):d}"
    if spec in ("x", "X", "u"):
        return format_unsigned(_next_arg(args, spec), spec)
    if spec == "%":
        return "%"
    return "%" + spec


def format_message(fmt: str, *args: Any) -> str:
    """Expand the conversions in fmt with args.

    Unknown conversions are kept literally; a lone trailing '%' stays as is.
    Extra arguments are ignored; missing ones raise TypeError.
    """
    pieces = []
    pending = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            pieces.append("%")
            break
        pieces.append(_convert(spec, pending))
    return "".join(pieces)


def print_formatted(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted message and return the number of characters written."""
    text = format_message(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)