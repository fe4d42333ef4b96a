"""Parsing of whole SIP messages into their commonly used fields."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field

from sipparse.addresses import From, PAssertedId, RemotePartyId, parse_from
from sipparse.addresses import parse_p_asserted_id as _parse_p_asserted_id
from sipparse.addresses import parse_remote_party_id as _parse_remote_party_id
from sipparse.headers import Authorization, Cseq, parse_authorization, parse_cseq
from sipparse.startline import parse_start_line
from sipparse.utils import SipParseError, clean_ws

CALLING_PARTY_DEFAULT = "default"
CALLING_PARTY_RPID = "rpid"
CALLING_PARTY_PAID = "paid"


@dataclass
class Header:
    """A raw header name and value."""

    header: str
    val: str

    def __str__(self) -> str:
        return f"{self.header}: {self.val}"


@dataclass
class CallingPartyInfo:
    """The calling party of a message: display name and number."""

    name: str
    number: str
    anonymous: bool = False


@dataclass
class SipMsg:
    """A parsed SIP message.

    Only the headers that are commonly needed are parsed; their values are
    kept in flat fields. Headers named in ``xheaders`` can supply an
    alternative call id (``xcall_id``), and headers named in ``cheaders`` are
    collected into ``custom_header``.
    """

    msg: str = ""
    xheaders: list[str] = field(default_factory=list, repr=False)
    cheaders: list[str] = field(default_factory=list, repr=False)
    header_regex: dict[str, re.Pattern[str]] = field(default_factory=dict, repr=False)
    ignore_case_cheaders: bool = field(default=False, repr=False)

    body: str = ""
    calling_party: CallingPartyInfo | None = None
    authorization: Authorization | None = None
    auth_val: str = ""
    auth_user: str = ""
    content_length: str = ""
    content_type: str = ""
    from_: From | None = None
    from_user: str = ""
    from_host: str = ""
    from_tag: str = ""
    max_forwards: str = ""
    organization: str = ""
    to: From | None = None
    to_user: str = ""
    to_host: str = ""
    to_tag: str = ""
    expires: str = ""
    contact: From | None = None
    contact_val: str = ""
    contact_user: str = ""
    contact_host: str = ""
    contact_port: int = 0
    call_id: str = ""
    xcall_id: str = ""
    custom_header: dict[str, str] = field(default_factory=dict)
    cseq: Cseq | None = None
    cseq_method: str = ""
    cseq_val: str = ""
    reason_val: str = ""
    rtp_stat_val: str = ""
    via_one: str = ""
    via_one_branch: str = ""
    privacy: str = ""
    remote_party_id_val: str = ""
    diversion_val: str = ""
    remote_party_id: RemotePartyId | None = None
    p_asserted_id_val: str = ""
    pai_user: str = ""
    pai_host: str = ""
    p_asserted_id: PAssertedId | None = None
    user_agent: str = ""
    server: str = ""
    uri_host: str = ""
    uri_raw: str = ""
    uri_user: str = ""
    first_method: str = ""
    first_resp: str = ""
    first_resp_text: str = ""
    profile: str = ""

    # -- start line and headers -------------------------------------------

    def _parse_start_line(self, line: str) -> None:
        try:
            start = parse_start_line(line)
        except SipParseError as exc:
            raise SipParseError(f"error while parsing start line: {exc}") from exc
        self.first_method = start.method
        self.first_resp = start.resp
        self.first_resp_text = start.resp_text
        if start.uri is not None:
            self.uri_host = start.uri.host
            self.uri_raw = start.uri.raw
            self.uri_user = start.uri.user

    def _add_header(self, line: str) -> None:
        if not line or line == " ":
            return
        name, sep, rest = line.partition(":")
        if not sep:
            return
        hdr = clean_ws(name)
        value = clean_ws(rest)
        if len(hdr) == 1:
            self._add_compact_header(hdr, value, line)
        elif len(hdr) == 2:
            self._parse_to(value)
        else:
            self._add_full_header(hdr, value, line)

    def _add_compact_header(self, hdr: str, value: str, line: str) -> None:
        match hdr.lower():
            case "i":
                self.call_id = value
            case "f":
                self._parse_from(value)
            case "t":
                self._parse_to(value)
            case "m":
                self.contact_val = value
                self.parse_contact(line)
            case "v":
                self._parse_via(value)
            case "c":
                self.content_type = value
            case "l":
                self.content_length = value

    def _add_full_header(self, hdr: str, value: str, line: str) -> None:
        match hdr:
            case "Via" | "VIA" | "via":
                self._parse_via(value)
            case "From" | "FROM" | "from":
                self._parse_from(value)
            case "Call-ID" | "CALL-ID" | "Call-Id" | "Call-id" | "call-id":
                self.call_id = value
            case "CSeq" | "CSEQ" | "Cseq" | "cseq":
                self.cseq_val = value
                self._parse_cseq(value)
            case "Contact" | "CONTACT" | "contact":
                self.contact_val = value
                self.parse_contact(line)
            case "User-Agent" | "USER-AGENT" | "user-agent":
                self.user_agent = value
            case "Server" | "server":
                self.server = value
            case "Content-Type" | "CONTENT-TYPE" | "content-type":
                self.content_type = value
            case "Content-Length" | "CONTENT-LENGTH" | "content-length":
                self.content_length = value
            case (
                "Authorization"
                | "authorization"
                | "Proxy-Authorization"
                | "proxy-authorization"
            ):
                self._parse_authorization(value)
            case "Max-Forwards" | "MAX-FORWARDS" | "max-forwards":
                self.max_forwards = value
            case "Organization" | "organization":
                self.organization = value
            case "P-Asserted-Identity" | "p-asserted-identity":
                self.p_asserted_id_val = value
                self.parse_p_asserted_id(value)
            case "Reason" | "reason":
                self.reason_val = value
            case "Remote-Party-Id" | "remote-party-id":
                self.remote_party_id_val = value
            case "Diversion" | "diversion":
                self.diversion_val = value
            case "Privacy" | "privacy":
                self.privacy = value
            case "X-RTP-Stat":
                self.rtp_stat_val = value
            case "Expires":
                self.expires = value
            case (
                "Accept"
                | "Accept-Encoding"
                | "Accept-Language"
                | "Allow"
                | "Allow\u2011Events"
                | "Content-Disposition"
                | "Route"
                | "Record-Route"
                | "Proxy-Authenticate"
                | "proxy-authenticate"
                | "RAck"
                | "Supported"
                | "Unsupported"
                | "Warning"
                | "WWW-Authenticate"
            ):
                pass
            case _:
                self._add_other_header(hdr, value)

    def _add_other_header(self, hdr: str, value: str) -> None:
        for name in self.xheaders:
            if hdr != name:
                continue
            pattern = self.header_regex.get(name)
            if pattern is None:
                self.xcall_id = value
            else:
                match = pattern.search(value)
                if match:
                    self.xcall_id = match.group(1) or ""
        for name in self.cheaders:
            if self.ignore_case_cheaders:
                if hdr.casefold() == name.casefold():
                    self.custom_header[name] = value
            elif hdr == name:
                self.custom_header[hdr] = value

    # -- individual header parsers ----------------------------------------

    def _parse_via(self, value: str) -> None:
        self.via_one = value
        pos = value.find("branch=")
        if pos > -1:
            tail = value[pos + len("branch=") :]
            if tail:
                self.via_one_branch = tail.split(";", 1)[0]

    def _parse_cseq(self, value: str) -> None:
        self.cseq = parse_cseq(value)
        self.cseq_method = self.cseq.method

    def _parse_authorization(self, value: str) -> None:
        self.authorization = parse_authorization(value)
        self.auth_user = self.authorization.username
        self.auth_val = self.authorization.val

    def _parse_from(self, value: str) -> None:
        self.from_ = parse_from(value)
        self.from_user = self.from_.uri.user
        self.from_host = self.from_.uri.host
        self.from_tag = self.from_.tag

    def _parse_to(self, value: str) -> None:
        self.to = parse_from(value)
        self.to_user = self.to.uri.user
        self.to_host = self.to.uri.host
        self.to_tag = self.to.tag

    def parse_contact(self, value: str) -> None:
        """Parse a Contact value and fill the contact fields."""
        self.contact = parse_from(value)
        self.contact_user = self.contact.uri.user
        self.contact_host = self.contact.uri.host
        self.contact_port = self.contact.uri.port_int

    def parse_p_asserted_id(self, value: str) -> None:
        """Parse a P-Asserted-Identity value.

        A value that cannot be parsed is not an error: the raw header value
        is then used as ``pai_user``.
        """
        try:
            pai = _parse_p_asserted_id(value)
        except SipParseError:
            self.p_asserted_id = PAssertedId(val=value)
            self.pai_user = self.p_asserted_id_val
            return
        self.p_asserted_id = pai
        if not self.pai_user:
            self.pai_user = pai.uri.user
        if not self.pai_host:
            self.pai_host = pai.uri.host

    def parse_remote_party_id(self, value: str) -> None:
        """Parse a Remote-Party-ID value; raise :class:`SipParseError` on failure."""
        try:
            self.remote_party_id = _parse_remote_party_id(value)
        except SipParseError:
            self.remote_party_id = RemotePartyId(val=value)
            raise

    # -- calling party -----------------------------------------------------

    def get_calling_party(self, mode: str = CALLING_PARTY_DEFAULT) -> CallingPartyInfo:
        """Work out the calling party from the header that ``mode`` selects.

        ``mode`` is ``"rpid"`` (Remote-Party-ID), ``"paid"``
        (P-Asserted-Identity) or anything else for the From header. Both of
        the first two fall back to From when their header is absent.
        """
        if mode == CALLING_PARTY_RPID:
            party = self._calling_party_rpid()
        elif mode == CALLING_PARTY_PAID:
            party = self._calling_party_paid()
        else:
            party = self._calling_party_default()
        self.calling_party = party
        return party

    def _calling_party_default(self) -> CallingPartyInfo:
        if self.from_ is None:
            raise SipParseError("calling party: no From header found")
        if self.from_.uri is None:
            raise SipParseError("calling party: no URI found in From header")
        return CallingPartyInfo(name=self.from_.name, number=self.from_.uri.user)

    def _calling_party_paid(self) -> CallingPartyInfo:
        if self.p_asserted_id is None:
            if not self.p_asserted_id_val:
                return self._calling_party_default()
            self.parse_p_asserted_id(self.p_asserted_id_val)
        pai = self.p_asserted_id
        if pai is None or pai.uri is None:
            raise SipParseError("calling party: P-Asserted-Identity URI is missing")
        return CallingPartyInfo(name=pai.name, number=pai.uri.user)

    def _calling_party_rpid(self) -> CallingPartyInfo:
        if self.remote_party_id is None:
            if not self.remote_party_id_val:
                return self._calling_party_default()
            self.parse_remote_party_id(self.remote_party_id_val)
        rpid = self.remote_party_id
        if rpid is None or rpid.uri is None:
            raise SipParseError("calling party: Remote-Party-ID URI is missing")
        return CallingPartyInfo(name=rpid.name, number=rpid.uri.user)


def _header_lines(block: str) -> Iterator[str]:
    """Yield the lines of a header block that ends in a line break."""
    for line in block.split("\n")[:-1]:
        yield clean_ws(line.removesuffix("\r"))


def parse_msg(
    msg: str,
    xheaders: Iterable[str] = (),
    cheaders: Iterable[str] = (),
    header_regex: Mapping[str, str | re.Pattern[str]] | None = None,
    ignore_case_cheaders: bool = False,
) -> SipMsg:
    """Parse a whole SIP message; raise :class:`SipParseError` if it is malformed.

    ``xheaders`` names headers that carry an alternative call id; when
    ``header_regex`` holds a pattern for such a header, its first group is
    used. ``cheaders`` names extra headers to collect in ``custom_header``,
    compared without regard to case when ``ignore_case_cheaders`` is set.
    """
    eof = msg.find("\r\n\r\n")
    if eof == -1:
        eof = msg.rfind("\r\n")
    if eof == -1:
        raise SipParseError("no end of SIP headers found")

    sip = SipMsg(
        msg=msg,
        xheaders=list(xheaders),
        cheaders=list(cheaders),
        header_regex={
            name: re.compile(pattern) for name, pattern in (header_regex or {}).items()
        },
        ignore_case_cheaders=ignore_case_cheaders,
    )
    if len(msg) - 1 > eof + 4:
        sip.body = msg[eof + 4 :]

    first, *rest = _header_lines(msg[: eof + 2])
    sip._parse_start_line(first)
    for line in rest:
        sip._add_header(line)
    return sip


def get_sip_header_val(header: str, data: str) -> str:
    """Return the value after ``header`` up to the next CRLF, or ``""``.

    Leading spaces and tabs of the value are dropped.
    """
    start = data.find(header)
    if start == -1:
        return ""
    rest = data[start:]
    end = rest.find("\r\n")
    if end > len(header):
        return rest[len(header) : end].lstrip(" \t")
    return ""