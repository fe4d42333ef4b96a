"""Lenient parsing of SIP messages, URIs, start lines and common headers."""

__version__ = "0.1.0"