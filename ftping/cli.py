"""Command-line entry point."""

import sys
from typing import Optional, Sequence

from ftping.args import USAGE, UsageError, read_args
from ftping.endpoint import parse_endpoint, verbose_banner
from ftping.pinger import Pinger

BG_RED = "\033[41m"
RESET = "\033[0m"
USAGE_EXIT_STATUS = 255


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Ping the host named on the command line until interrupted."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        endpoint = parse_endpoint(read_args(argv))
    except (UsageError, ValueError):
        print(f"{BG_RED}{USAGE}{RESET}")
        return USAGE_EXIT_STATUS
    if endpoint.flag:
        sys.stdout.write(verbose_banner(endpoint))
    try:
        Pinger(endpoint.ip).run()
    except LookupError as exc:
        print(f"ping: {exc}")
    except OSError as exc:
        print(exc.strerror or exc, file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())