"""ICMP echo request construction and the Internet checksum."""

import struct

ICMP_ECHO_REQUEST = 8
HEADER_SIZE = 8
PAYLOAD_SIZE = 56
PACKET_SIZE = HEADER_SIZE + PAYLOAD_SIZE
DEFAULT_PAYLOAD = b"Hello World!"

_HEADER = struct.Struct("!BBHHH")


def checksum(data: bytes) -> int:
    """The 16-bit one's complement Internet checksum of data.

    An odd trailing byte is treated as if followed by a zero byte.
    """
    data = bytes(data)
    if len(data) % 2:
        data += b"\0"
    total = sum(word for (word,) in struct.iter_unpack("!H", data))
    while total >> 16:
        total = (total >> 16) + (total & 0xFFFF)
    return ~total & 0xFFFF


def build_echo_request(identifier: int, sequence: int, payload: bytes = DEFAULT_PAYLOAD) -> bytes:
    """A complete ICMP echo request with its checksum filled in.

    The payload area is PAYLOAD_SIZE bytes; the payload is cut at its first
    NUL, truncated to leave room for a terminating NUL, and zero-padded.
    Identifier and sequence are truncated to 16 bits.
    """
    text = bytes(payload).split(b"\0", 1)[0][: PAYLOAD_SIZE - 1]
    body = text.ljust(PAYLOAD_SIZE, b"\0")
    ident = identifier & 0xFFFF
    seq = sequence & 0xFFFF
    unsigned = _HEADER.pack(ICMP_ECHO_REQUEST, 0, 0, ident, seq) + body
    return _HEADER.pack(ICMP_ECHO_REQUEST, 0, checksum(unsigned), ident, seq) + body