"""Parsers for simple SIP header values."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from sipparse.utils import (
    Param,
    SipParseError,
    clean_ws,
    extract_sip_param,
    get_comma_separated,
    get_param,
)

_INT_RE = re.compile(r"[+-]?[0-9]+")


@dataclass
class Cseq:
    """A CSeq header: sequence number ``digit`` and ``method``."""

    val: str
    digit: str = ""
    method: str = ""


def parse_cseq(value: str) -> Cseq:
    """Parse a CSeq value such as ``100 INVITE``."""
    if len(value) < 3:
        raise SipParseError("CSeq is shorter than 3 characters")
    pos = value.find(" ")
    if pos == -1:
        raise SipParseError(f"CSeq has no LWS: {value}")
    if pos == 0:
        raise SipParseError(f"CSeq has LWS at position 0: {value}")
    if len(value) - 1 < pos + 1:
        raise SipParseError(f"CSeq ends in its first LWS: {value}")
    rest = value[pos + 1 :]
    method = rest if rest[0] != " " else clean_ws(rest)
    return Cseq(val=value, digit=value[:pos], method=method)


@dataclass
class SipWarning:
    """A Warning header: three-digit ``code``, ``agent`` and ``text``."""

    val: str
    code: str = ""
    code_int: int = 0
    agent: str = ""
    text: str = ""


def parse_warning(value: str) -> SipWarning:
    """Parse a Warning value such as ``301 host "text"``."""
    parts = value.split(" ", 2)
    if len(parts) != 3:
        raise SipParseError(
            f"Warning split on LWS returned {len(parts)} fields, want 3"
        )
    code = parts[0]
    if not _INT_RE.fullmatch(code) or not 0 <= int(code) <= 999:
        raise SipParseError(f"Warning has code {code!r}, want 3-digit code")
    return SipWarning(
        val=value,
        code=code,
        code_int=int(code),
        agent=parts[1],
        text=parts[2].replace('"', ""),
    )


@dataclass
class Rack:
    """An RAck header: RSeq value, CSeq value and CSeq method."""

    val: str
    rseq_val: str = ""
    cseq_val: str = ""
    cseq_method: str = ""


def parse_rack(value: str) -> Rack:
    """Parse an RAck value such as ``776656 1 INVITE``."""
    val = clean_ws(value)
    spaces = [i for i, ch in enumerate(val) if ch == " "]
    if len(spaces) != 2:
        raise SipParseError("RAck does not hold exactly two LWS")
    first, second = spaces
    if len(val) - 1 <= second:
        raise SipParseError("RAck ends in LWS")
    return Rack(
        val=val,
        rseq_val=val[:first],
        cseq_val=val[first + 1 : second],
        cseq_method=val[second + 1 :],
    )


@dataclass
class Reason:
    """A Reason header: protocol, ``cause`` and ``text`` parameters."""

    val: str
    proto: str = ""
    cause: str = ""
    text: str = ""

    def _add_param(self, s: str) -> None:
        param = get_param(s)
        if param.param == "cause":
            self.cause = param.val
        elif param.param == "text":
            self.text = param.val


def parse_reason(value: str) -> Reason:
    """Parse a Reason value such as ``Q.850;cause=16;text="NORMAL_CLEARING"``."""
    reason = Reason(val=value)
    parts = value.split(";")
    if len(parts) == 1:
        return reason
    reason.proto = clean_ws(parts[0])
    for part in parts[1:]:
        if part:
            reason._add_param(part.replace('"', ""))
    return reason


@dataclass
class Authorization:
    """An Authorization header: credentials scheme and user name."""

    val: str
    credentials: str = ""
    username: str = ""


def parse_authorization(value: str) -> Authorization:
    """Parse an Authorization or Proxy-Authorization value."""
    pos = value.find(" ")
    if pos == -1:
        raise SipParseError("Authorization has no LWS")
    if len(value) - 1 <= pos:
        raise SipParseError("Authorization has no digest response")
    return Authorization(
        val=value,
        credentials=value[:pos],
        username=extract_sip_param('username="', value),
    )


@dataclass
class AcceptParam:
    """One media range of an Accept header, such as ``application/sdp``."""

    type: str
    val: str


@dataclass
class Accept:
    """An Accept header and its media ranges."""

    val: str
    params: list[AcceptParam] = field(default_factory=list)

    def _add_param(self, s: str) -> None:
        pos = s.find("/")
        if pos != -1 and len(s) - 1 > pos:
            self.params.append(
                AcceptParam(type=clean_ws(s[:pos]), val=clean_ws(s[pos + 1 :]))
            )


def parse_accept(value: str) -> Accept:
    """Parse a comma separated Accept value."""
    accept = Accept(val=value)
    for part in get_comma_separated(value) or [value]:
        accept._add_param(part)
    return accept


@dataclass
class ContentDisposition:
    """A Content-Disposition header: disposition type and parameters."""

    val: str
    disp_type: str = ""
    params: list[Param] = field(default_factory=list)


def parse_content_disposition(value: str) -> ContentDisposition:
    """Parse a Content-Disposition value such as ``session; handling=required``."""
    disposition = ContentDisposition(val=value)
    pos = value.find(";")
    if pos == -1:
        disposition.disp_type = value
        return disposition
    disposition.disp_type = value[:pos]
    if len(value) - 1 > pos:
        disposition.params = [
            get_param(part) for part in value[pos + 1 :].split(";") if part
        ]
    return disposition