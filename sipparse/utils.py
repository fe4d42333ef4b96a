"""Small string helpers shared by the SIP header parsers."""

from __future__ import annotations

from dataclasses import dataclass

_WHITESPACE = " \t"
_SIP_PARAM_TERMINATORS = frozenset('\r\n\t ;"')


class SipParseError(ValueError):
    """Raised when a SIP message or one of its parts cannot be parsed."""


@dataclass
class Param:
    """A single ``name=value`` parameter; ``val`` is empty when absent."""

    param: str
    val: str = ""


def clean_ws(s: str) -> str:
    """Strip leading and trailing spaces and tabs."""
    return s.strip(_WHITESPACE)


def clean_brack(s: str) -> str:
    """Remove a leading ``<`` and the matching ``>`` that ends the address."""
    if not s:
        return ""
    n = s[1:] if s[0] == "<" else s
    last = len(n) - 1
    for i, ch in enumerate(n):
        if ch != ">":
            continue
        if last > i + 1 and n[i + 1] == ";":
            return n[:i] + n[i + 1 :]
        if i == last:
            return n[:i]
    return n


def get_quote_chars(s: str) -> tuple[int, int, bool]:
    """Return the positions of the first two double quotes and whether both exist."""
    first = s.find('"')
    if first == -1:
        return 0, 0, False
    second = s.find('"', first + 1)
    if second == -1:
        return 0, 0, False
    return first, second, True


def get_bracks(s: str) -> tuple[int, int, bool]:
    """Return the positions of ``<`` and ``>`` and whether they form a pair."""
    left = s.find("<")
    if left == -1:
        return 0, 0, False
    right = s.find(">")
    if right == -1 or right < left:
        return 0, 0, False
    return left, right, True


def get_name(s: str) -> tuple[str, int]:
    """Return the display name of an address header and where it ends."""
    if not s:
        return "", 0
    first, second, found = get_quote_chars(s)
    if found:
        if len(s) - 1 > second:
            return clean_ws(s[first + 1 : second]), second
        return "", 0
    left = s.find("<")
    if left <= 0:
        return "", 0
    return clean_ws(s[:left]), left


def get_comma_separated(s: str) -> list[str] | None:
    """Split on commas and trim each part; ``None`` if there is no comma."""
    parts = s.split(",")
    if len(parts) == 1:
        return None
    return [clean_ws(part) for part in parts]


def get_param(s: str) -> Param:
    """Parse ``name=value`` (or a bare ``name``) into a :class:`Param`."""
    name, sep, value = s.partition("=")
    if not sep:
        return Param(clean_ws(s))
    return Param(clean_ws(name), clean_ws(value))


def extract_sip_param(param: str, data: str) -> str:
    """Return the value that follows ``param`` in ``data``.

    The value runs up to the first CR, LF, tab, space, semicolon or double
    quote, or to the end of ``data``. An empty string is returned when
    ``param`` does not occur.
    """
    pos = data.find(param)
    if pos < 0:
        return ""
    rest = data[pos + len(param) :]
    for i, ch in enumerate(rest):
        if ch in _SIP_PARAM_TERMINATORS:
            return rest[:i]
    return rest