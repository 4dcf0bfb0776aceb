"""The ping target as given on the command line."""

from dataclasses import dataclass
from typing import Sequence

from ftping.formatting import format_message
from ftping.libft.convert import atoi

VERBOSE_FLAG = "-v"

_BANNER = (
    "ping: sock4.fd: 3 (socktype: SOCK_RAW), sock6.fd: 4 (socktype: SOCK_RAW), "
    "hints.ai_family: AF_INET\n\n"
    "ai->ai_family: AF_INET, ai->ai_canonname: '%s'\n"
)


@dataclass(frozen=True)
class Endpoint:
    """A host to ping, whether verbose output was asked for, and a port."""

    ip: str
    flag: bool = False
    port: int = 0


def parse_endpoint(args: Sequence[str]) -> Endpoint:
    """Build an Endpoint from words: an optional '-v', a host, an optional port.

    The port is read like C's atoi, so text that is not a number gives 0.
    Raises ValueError when no host is given.
    """
    words = list(args)
    flag = bool(words) and words[0] == VERBOSE_FLAG
    rest = words[1:] if flag else words
    if not rest:
        raise ValueError("no host given")
    port = atoi(rest[1]) if len(rest) > 1 else 0
    return Endpoint(ip=rest[0], flag=flag, port=port)


def verbose_banner(endpoint: Endpoint) -> str:
    """The diagnostic lines printed before pinging in verbose mode."""
    return format_message(_BANNER, endpoint.ip)