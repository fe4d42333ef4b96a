"""Parsers for address-style SIP headers (From/To/Contact, P-Asserted-Identity,
Remote-Party-ID, Diversion) and for Via headers."""

from __future__ import annotations

from dataclasses import dataclass, field

from sipparse.uri import URI, parse_uri
from sipparse.utils import (
    Param,
    SipParseError,
    extract_sip_param,
    get_bracks,
    get_name,
    get_param,
)


def _bracket_positions(val: str) -> tuple[int, int]:
    """Locate ``<`` and ``>`` the way the address parsers expect.

    A position of 0 counts as "not yet found", so a later bracket of the
    same kind replaces it.
    """
    left = right = 0
    for i, ch in enumerate(val):
        if ch == "<" and left == 0:
            left = i
        if ch == ">" and right == 0:
            right = i
    return left, right


def _trailing_params(tail: str) -> list[str]:
    """Return the ``;``-separated parameters that follow the closing bracket.

    The last parameter is kept only when it is at least two characters long.
    """
    positions = [i for i, ch in enumerate(tail) if ch == ";"]
    result = []
    for pos, nxt in zip(positions, positions[1:] + [None]):
        if nxt is None:
            if len(tail) - 1 > pos + 1:
                result.append(tail[pos + 1 :])
        else:
            result.append(tail[pos + 1 : nxt])
    return result


def _parse_bracketed(val: str, what: str) -> tuple[str, URI, list[str]]:
    """Split ``"Name" <uri>;params`` into its name, parsed URI and raw params."""
    name, _ = get_name(val)
    left, right = _bracket_positions(val)
    if left >= right:
        raise SipParseError(f"{what}: could not locate brackets around the URI")
    try:
        uri = parse_uri(val[left + 1 : right])
    except SipParseError as exc:
        raise SipParseError(f"{what}: bad URI: {exc}") from exc
    return name, uri, _trailing_params(val[right + 1 :])


@dataclass
class From:
    """A From, To or Contact header: display name, tag and URI."""

    val: str
    name: str = ""
    tag: str = ""
    uri: URI | None = None


def parse_from(value: str) -> From:
    """Parse a From, To or Contact value; raise :class:`SipParseError` on a bad URI."""
    header = From(val=value, tag=extract_sip_param("tag=", value))
    header.name, _ = get_name(value)
    left, right, found = get_bracks(value)
    target = value[left + 1 : right] if found else value
    try:
        header.uri = parse_uri(target)
    except SipParseError as exc:
        raise SipParseError(f"address header: bad URI: {exc}") from exc
    return header


@dataclass
class PAssertedId:
    """A P-Asserted-Identity header: display name, URI and parameters."""

    val: str
    name: str = ""
    uri: URI | None = None
    params: list[Param] = field(default_factory=list)


def parse_p_asserted_id(value: str) -> PAssertedId:
    """Parse a P-Asserted-Identity value."""
    name, uri, raw_params = _parse_bracketed(value, "P-Asserted-Identity")
    return PAssertedId(
        val=value, name=name, uri=uri, params=[get_param(p) for p in raw_params]
    )


@dataclass
class RemotePartyId:
    """A Remote-Party-ID header with its party, screen and privacy parameters."""

    val: str
    name: str = ""
    uri: URI | None = None
    party: str = ""
    screen: str = ""
    privacy: str = ""
    params: list[Param] = field(default_factory=list)

    def _add_param(self, s: str) -> None:
        param = get_param(s)
        if param.param == "screen":
            self.screen = param.val
        elif param.param == "party":
            self.party = param.val
        elif param.param == "privacy":
            self.privacy = param.val
        else:
            self.params.append(param)


def parse_remote_party_id(value: str) -> RemotePartyId:
    """Parse a Remote-Party-ID value."""
    name, uri, raw_params = _parse_bracketed(value, "Remote-Party-ID")
    header = RemotePartyId(val=value, name=name, uri=uri)
    for raw in raw_params:
        header._add_param(raw)
    return header


@dataclass
class Diversion:
    """A Diversion header with its reason, privacy and counter parameters."""

    val: str
    name: str = ""
    uri: URI | None = None
    counter: str = ""
    reason: str = ""
    privacy: str = ""
    params: list[Param] = field(default_factory=list)

    def _add_param(self, s: str) -> None:
        param = get_param(s)
        if param.param == "reason":
            self.reason = param.val
        elif param.param == "privacy":
            self.privacy = param.val
        elif param.param == "counter":
            self.counter = param.val
        else:
            self.params.append(param)


def parse_diversion(value: str) -> Diversion:
    """Parse a Diversion value."""
    name, uri, raw_params = _parse_bracketed(value, "Diversion")
    header = Diversion(val=value, name=name, uri=uri)
    for raw in raw_params:
        header._add_param(raw)
    return header


@dataclass
class Via:
    """A single Via entry such as ``SIP/2.0/UDP host:5060;branch=z9hG4bK1``."""

    via: str
    proto: str = ""
    version: str = ""
    transport: str = ""
    sent_by: str = ""
    branch: str = ""
    received: str = ""
    rport: str = ""
    params: list[Param] = field(default_factory=list)

    def _add_param(self, s: str) -> None:
        param = get_param(s)
        if param.param == "branch":
            self.branch = param.val
        elif param.param == "rport":
            self.rport = param.val
        elif param.param == "received":
            self.received = param.val
        else:
            self.params.append(param)


def parse_via(value: str) -> Via:
    """Parse one Via entry; raise :class:`SipParseError` if it is malformed."""
    via = Via(via=value)
    proto_end = value.find(" ")
    if proto_end == -1:
        raise SipParseError("Via: could not find LWS")
    proto_parts = value[:proto_end].split("/", 2)
    if len(proto_parts) != 3:
        raise SipParseError("Via: protocol does not split into three parts on '/'")
    via.proto, via.version, via.transport = proto_parts

    param_start = value.find(";")
    if param_start == -1:
        return via
    if len(value) - 1 > param_start + 1:
        for part in value[param_start + 1 :].split(";"):
            via._add_param(part)
    if proto_end < param_start:
        via.sent_by = value[proto_end + 1 : param_start]
    return via


def parse_vias(value: str) -> list[Via]:
    """Parse a comma separated list of Via entries."""
    return [parse_via(part) for part in value.split(",")]