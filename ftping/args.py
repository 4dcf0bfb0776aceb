"""Command-line argument reading."""

from typing import List, Sequence

from ftping.libft.strings import split

USAGE = "ftping <ip:port>/<google.com>"


class UsageError(Exception):
    """The command line does not name anything to ping."""

    def __init__(self, message: str = USAGE) -> None:
        super().__init__(message)


def read_args(argv: Sequence[str]) -> List[str]:
    """Split the arguments (without the program name) into words.

    Arguments are joined with spaces and split again, so an argument that
    holds spaces yields several words and empty ones vanish. Raises
    UsageError when there are no arguments or no words.
    """
    if not argv:
        raise UsageError()
    words = split(" ".join(argv), " ")
    if not words:
        raise UsageError()
    return words