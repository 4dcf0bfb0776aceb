"""Operations on byte buffers."""

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]
WritableBuffer = Union[bytearray, memoryview]

CALLOC_LIMIT = 65535


def _check_count(n: int, *lengths: int) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for length in lengths:
        if n > length:
            raise IndexError(f"byte count {n} exceeds buffer length {length}")


def _check_span(offset: int, n: int, length: int) -> None:
    if offset < 0 or offset + n > length:
        raise IndexError(f"span {offset}..{offset + n} outside buffer of length {length}")


def bzero(buffer: WritableBuffer, n: int) -> None:
    """Zero the first n bytes of the buffer in place."""
    memset(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of count * size bytes.

    Requests larger than the allocator's limit raise MemoryError.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count == 0 or size == 0:
        return bytearray()
    if count > CALLOC_LIMIT // size:
        raise MemoryError(f"cannot allocate {count} blocks of {size} bytes")
    return bytearray(count * size)


def memchr(data: BytesLike, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to c within the first n bytes, or None."""
    _check_count(n, len(data))
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(first: BytesLike, second: BytesLike, n: int) -> int:
    """Compare n bytes; return the difference of the first mismatch, else 0."""
    _check_count(n, len(first), len(second))
    for a, b in zip(bytes(first[:n]), bytes(second[:n])):
        if a != b:
            return a - b
    return 0


def memcpy(dest: WritableBuffer, src: BytesLike, n: int) -> WritableBuffer:
    """Copy the first n bytes of src into the start of dest."""
    _check_count(n, len(dest), len(src))
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: WritableBuffer, dest_offset: int, src_offset: int, n: int) -> WritableBuffer:
    """Copy n bytes within one buffer; overlapping regions are handled."""
    _check_count(n)
    _check_span(dest_offset, n, len(buffer))
    _check_span(src_offset, n, len(buffer))
    buffer[dest_offset:dest_offset + n] = bytes(buffer[src_offset:src_offset + n])
    return buffer


def memset(buffer: WritableBuffer, c: int, n: int) -> WritableBuffer:
    """Set the first n bytes of the buffer to the low byte of c."""
    _check_count(n, len(buffer))
    buffer[:n] = bytes([c & 0xFF]) * n
    return buffer