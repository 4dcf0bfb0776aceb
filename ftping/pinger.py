"""Sending ICMP echo requests and reporting replies and statistics."""

import os
import signal
import socket
import sys
import threading
import time
from dataclasses import dataclass
from typing import Optional, TextIO

from ftping.packet import PACKET_SIZE, build_echo_request

NOT_KNOWN = "Name or service not known"
RECEIVE_BUFFER = 1024
RECEIVE_TIMEOUT = 1.0
INTERVAL = 1.0


@dataclass
class PingStatistics:
    """Counts of echo requests sent and replies received."""

    sent: int = 0
    received: int = 0

    def record_sent(self) -> int:
        """Count one sent request and return the new total."""
        self.sent += 1
        return self.sent

    def record_received(self) -> int:
        """Count one reply and return the new total."""
        self.received += 1
        return self.received

    def packet_loss(self) -> float:
        """Percentage of sent requests that got no reply."""
        return (self.sent - self.received) * 100.0 / (self.sent or 1)

    def summary(self, target: str) -> str:
        """The closing statistics block for target."""
        return (
            f"\n--- {target} ping statistics ---\n"
            f"{self.sent} packets transmitted, {self.received} received, "
            f"{self.packet_loss():.0f}% packet loss\n"
        )


def resolve_hostname(hostname: str) -> Optional[str]:
    """The first IPv4 address of hostname in dotted form, or None."""
    try:
        infos = socket.getaddrinfo(
            hostname, None, socket.AF_INET, socket.SOCK_RAW, socket.IPPROTO_ICMP
        )
    except (socket.gaierror, UnicodeError):
        return None
    if not infos:
        return None
    return infos[0][4][0]


def format_reply(
    nbytes: int, address: str, sequence: int, elapsed_ms: float, host: Optional[str] = None
) -> str:
    """One reply line, naming the host when its name is known."""
    source = f"{host} ({address})" if host else address
    return f"{nbytes} bytes from {source}: icmp_seq={sequence} time={elapsed_ms:.2f} ms"


class Pinger:
    """Pings one target over a raw ICMP socket until stopped."""

    def __init__(self, target: str) -> None:
        self.target = target
        self.ip: Optional[str] = None
        self.stats = PingStatistics()
        self.identifier = os.getpid() & 0xFFFF
        self._sock: Optional[socket.socket] = None
        self._stopped = threading.Event()

    def open(self) -> "Pinger":
        """Resolve the target and open the socket.

        Raises LookupError when the name does not resolve and OSError, with
        the failing call named in its strerror, when the socket cannot be set up.
        """
        if self._sock is not None:
            return self
        ip = resolve_hostname(self.target)
        if ip is None:
            raise LookupError(f"{self.target}: {NOT_KNOWN}")
        try:
            sock = socket.socket(socket.AF_INET, socket.SOCK_RAW, socket.IPPROTO_ICMP)
        except OSError as exc:
            raise OSError(exc.errno, f"socket: {exc.strerror or exc}") from exc
        try:
            sock.settimeout(RECEIVE_TIMEOUT)
        except OSError as exc:
            sock.close()
            raise OSError(exc.errno, f"setsockopt: {exc.strerror or exc}") from exc
        self.ip = ip
        self._sock = sock
        return self

    def __enter__(self) -> "Pinger":
        return self.open()

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _socket(self) -> socket.socket:
        if self._sock is None:
            raise RuntimeError("pinger is not open")
        return self._sock

    def send(self, sequence: int) -> bool:
        """Send one echo request; return whether it went out."""
        sock = self._socket()
        packet = build_echo_request(self.identifier, sequence)
        try:
            sock.sendto(packet, (self.ip, 0))
        except OSError:
            return False
        self.stats.record_sent()
        return True

    def receive(self) -> Optional[str]:
        """Wait for one packet; return its report line, or None on timeout."""
        sock = self._socket()
        start = time.monotonic()
        try:
            data, sender = sock.recvfrom(RECEIVE_BUFFER)
        except OSError:
            return None
        elapsed = (time.monotonic() - start) * 1000.0
        if not data:
            return None
        sequence = self.stats.record_received()
        address = sender[0]
        try:
            host, _ = socket.getnameinfo((address, 0), 0)
        except OSError:
            host = None
        return format_reply(len(data), address, sequence, elapsed, host)

    def stop(self) -> None:
        """Ask a running ping loop to finish."""
        self._stopped.set()

    def _install_interrupt(self):
        if threading.current_thread() is not threading.main_thread():
            return False, None
        previous = signal.signal(signal.SIGINT, lambda signum, frame: self.stop())
        return True, previous

    def run(self, out: Optional[TextIO] = None) -> PingStatistics:
        """Ping once a second until stopped or interrupted, then print statistics."""
        out = sys.stdout if out is None else out
        self.open()
        installed, previous = self._install_interrupt()
        try:
            out.write(f"PING {self.target} ({self.ip}): {PACKET_SIZE} data bytes\n")
            out.flush()
            sequence = 1
            while not self._stopped.is_set():
                self.send(sequence)
                sequence += 1
                line = self.receive()
                if line is not None:
                    out.write(line + "\n")
                    out.flush()
                self._stopped.wait(INTERVAL)
        finally:
            if installed:
                signal.signal(signal.SIGINT, previous)
            self.close()
        out.write(self.stats.summary(self.target))
        out.flush()
        return self.stats

    def close(self) -> None:
        """Close the socket if it is open."""
        if self._sock is not None:
            self._sock.close()
            self._sock = None