"""ICMP echo tool with packet, formatting, line-reading and text helpers."""

__version__ = "0.1.0"