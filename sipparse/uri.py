"""Parsing of SIP, SIPS and TEL URIs."""

from __future__ import annotations

import re
from dataclasses import dataclass

from sipparse.utils import SipParseError

SIP_SCHEME = "sip"
SIPS_SCHEME = "sips"
TEL_SCHEME = "tel"

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def _atoi(s: str) -> int:
    """Convert a decimal string to int, giving 0 when it is not a valid integer."""
    if not _INT_RE.fullmatch(s):
        return 0
    value = int(s)
    if not _INT64_MIN <= value <= _INT64_MAX:
        return 0
    return value


@dataclass
class URI:
    """A URI as found in SIP headers.

    After :meth:`parse`, ``raw`` holds the URI without its scheme prefix.
    """

    raw: str
    scheme: str = ""
    user: str = ""
    host: str = ""
    port: str = ""
    port_int: int = 0

    @property
    def secure(self) -> bool:
        """True for a SIPS URI."""
        return self.scheme == SIPS_SCHEME

    def parse(self) -> None:
        """Parse ``raw`` into its parts; raise :class:`SipParseError` on failure."""
        self._strip_scheme()
        at_pos = max(self.raw.find("@"), 0)
        if at_pos or self.scheme == TEL_SCHEME:
            self._parse_user(at_pos)
        self._parse_host(at_pos)

    def _strip_scheme(self) -> None:
        raw = self.raw
        if len(raw) <= 4:
            return
        if raw.startswith("sip:"):
            self.raw, self.scheme = raw[4:], SIP_SCHEME
        elif raw.startswith("tel:"):
            self.raw, self.scheme = raw[4:], TEL_SCHEME
        elif len(raw) > 5 and raw.startswith("sips:"):
            self.raw, self.scheme = raw[5:], SIPS_SCHEME

    def _parse_user(self, at_pos: int) -> None:
        raw = self.raw
        first_semi = raw[:at_pos].find(";")
        if first_semi != -1:
            self.user = raw[:first_semi]
        elif self.scheme == TEL_SCHEME and at_pos == 0:
            self.user = raw.split(";", 1)[0]
        else:
            self.user = raw[:at_pos]

    def _parse_host(self, at_pos: int) -> None:
        raw = self.raw
        if len(raw) <= at_pos:
            raise SipParseError(f"malformed host part inside URI: {raw}")

        first_semi = raw[at_pos:].find(";")
        if first_semi != -1:
            segment = raw[at_pos + 1 : at_pos + first_semi]
            host_end = at_pos + first_semi
        else:
            segment = raw[at_pos + 1 :]
            host_end = len(raw)

        colon = 0
        for i, ch in enumerate(segment):
            if ch == ":":
                self.port = segment[i + 1 :]
                if len(self.port) >= 2:
                    self.port_int = _atoi(self.port)
                colon = i
            if colon:
                break

        host_start = at_pos + 1 if at_pos else 0
        if colon:
            self.host = raw[host_start : at_pos + colon + 1]
        else:
            self.host = raw[host_start:host_end]


def parse_uri(s: str) -> URI:
    """Parse ``s`` into a :class:`URI`."""
    uri = URI(raw=s)
    uri.parse()
    return uri