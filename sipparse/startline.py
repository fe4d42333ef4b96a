"""Parsing of the first line of a SIP request or response."""

from __future__ import annotations

from dataclasses import dataclass

from sipparse.constants import SIP_REQUEST, SIP_RESPONSE
from sipparse.uri import URI, parse_uri
from sipparse.utils import SipParseError


@dataclass
class StartLine:
    """A parsed request line or status line.

    ``type`` is ``SIP_REQUEST`` or ``SIP_RESPONSE``. Requests fill ``method``
    and ``uri``; responses fill ``resp`` and ``resp_text``. Both fill
    ``proto`` and ``version`` (``SIP`` and ``2.0`` in ``SIP/2.0``).
    """

    val: str
    type: str = ""
    method: str = ""
    uri: URI | None = None
    resp: str = ""
    resp_text: str = ""
    proto: str = ""
    version: str = ""


def _split_proto(token: str, what: str) -> tuple[str, str]:
    pos = token.find("/")
    if pos == -1:
        raise SipParseError(f"{what}: could not find '/' in {token!r}")
    if len(token) - 1 < pos + 1:
        raise SipParseError(f"{what}: '/' appears at the end of {token!r}")
    return token[:pos], token[pos + 1 :]


def _parse_response(line: StartLine) -> None:
    parts = line.val.split(" ", 2)
    if len(parts) != 3:
        raise SipParseError("status line did not split on LWS correctly")
    line.proto, line.version = _split_proto(parts[0], "status line")
    line.resp = parts[1]
    line.resp_text = parts[2]


def _parse_request(line: StartLine) -> None:
    parts = line.val.split(" ", 2)
    if len(parts) != 3:
        raise SipParseError("request line did not split on LWS correctly")
    if not parts[1]:
        raise SipParseError("request line has an empty request URI")
    line.method = parts[0]
    try:
        line.uri = parse_uri(parts[1])
    except SipParseError as exc:
        raise SipParseError(f"request line has a bad URI: {exc}") from exc
    line.proto, line.version = _split_proto(parts[2], "request line")


def parse_start_line(s: str) -> StartLine:
    """Parse a SIP start line; raise :class:`SipParseError` if it is malformed."""
    line = StartLine(val=s)
    if len(s) < 3:
        raise SipParseError("start line is shorter than 3 characters")
    if s.startswith("SIP"):
        line.type = SIP_RESPONSE
        _parse_response(line)
    else:
        line.type = SIP_REQUEST
        _parse_request(line)
    return line