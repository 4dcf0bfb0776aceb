# ftping

`ftping` sends an ICMP echo request to a host once a second and reports each
packet that comes back, in the manner of the classic `ping` tool. Stop it
with Ctrl-C to see how many packets were transmitted, received and lost.

## Installation

```
pip install .
```

## Usage

```
ftping <host>
ftping <host> <port>
ftping -v <host>
```

The host may be an IPv4 address or a name; names are resolved to their first
IPv4 address. A second word is read as a port number, but it does not change
what is sent. With `-v`, a few lines about the socket and the address family
are printed before pinging begins.

A session looks like this:

```
PING example.com (192.0.2.10): 64 data bytes
84 bytes from host.example.com (192.0.2.10): icmp_seq=1 time=12.34 ms
^C
--- example.com ping statistics ---
3 packets transmitted, 3 received, 0% packet loss
```

Each loop sends one request, waits up to one second for a packet on the raw
socket, prints it if one arrives, and then pauses for a second. The byte count
is the size of the whole packet read from the socket, and `icmp_seq` counts
the packets received so far. Every ICMP packet the socket delivers in that
window is counted as a reply.

An unknown name prints

```
ping: <host>: Name or service not known
```

Raw ICMP sockets need elevated privileges, so run the command as root or give
the interpreter the needed capability. Without them the socket cannot be
opened and the error is written to standard error, prefixed with `socket:`.

Called with no arguments, the command prints a usage line on a red background
and exits with status 255.

## What it does not do

There are no options beyond `-v`: no packet count, no interval, no timeout, no
TTL and no payload size settings. Only IPv4 is supported. Replies are not
matched to the requests that were sent, and no round-trip minimum, average or
maximum is reported.

## Library

The package can also be used from Python:

- `ftping.packet`: `checksum` computes the Internet checksum and
  `build_echo_request` builds a 64-byte ICMP echo request.
- `ftping.pinger`: `Pinger` opens the socket (`open`, or use it as a context
  manager), `send`s and `receive`s, and `run`s the ping loop until `stop` is
  called or SIGINT arrives; `PingStatistics` keeps the tally and writes the
  summary; `resolve_hostname` and `format_reply` are available on their own.
- `ftping.endpoint`: `parse_endpoint` turns command-line words into an
  `Endpoint`; `verbose_banner` gives the `-v` text.
- `ftping.args`: `read_args` splits the arguments into words and raises
  `UsageError` when there are none.
- `ftping.formatting`: `format_message` and `print_formatted` handle a small
  printf-style language (`%c %s %p %d %i %u %x %X %%`);
  `format_unsigned` and `format_pointer` render single values.
- `ftping.lines`: `LineReader` reads lines from a text or binary stream a
  fixed number of units at a time.
- `ftping.libft`: `chars` (ASCII classification and case), `convert`
  (`atoi`, `atoi_base`, `itoa`), `memory` (operations on byte buffers),
  `strings` (C-style string routines returning indices) and `output`
  (writing characters, strings and numbers to a stream).

## Tests

```
pip install .[test]
pytest
```