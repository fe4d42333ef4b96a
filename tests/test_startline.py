import pytest

from sipparse.constants import SIP_METHOD_INVITE, SIP_REQUEST, SIP_RESPONSE
from sipparse.startline import parse_start_line
from sipparse.utils import SipParseError


def test_response_line():
    line = parse_start_line("SIP/2.0 487 Request Cancelled")
    assert line.type == SIP_RESPONSE
    assert line.resp == "487"
    assert line.resp_text == "Request Cancelled"
    assert line.proto == "SIP"
    assert line.version == "2.0"
    assert line.uri is None


def test_request_line():
    line = parse_start_line("INVITE sip:1000@0.0.0.0;user=phone SIP/2.0")
    assert line.type == SIP_REQUEST
    assert line.method == SIP_METHOD_INVITE
    assert line.proto == "SIP"
    assert line.version == "2.0"
    assert line.uri is not None
    assert line.uri.user == "1000"
    assert line.uri.host == "0.0.0.0"


@pytest.mark.parametrize(
    "value",
    [
        "1412@34922@1000@1.2.3.4:5061;transport=tcp;user=phone@home1.2.3.4"
        "                                            111111111",
        "dlskmgkfmdg ldf,l,",
        "INVITE sip:alice@example.com SIP/",
        "INVITE sip:alice@example.com SIP2.0",
        "SIPX 200 OK",
        "SIP/ 200 OK",
        "SIP/2.0 200",
        "IN",
    ],
)
def test_bad_start_lines(value):
    with pytest.raises(SipParseError):
        parse_start_line(value)


def test_response_text_keeps_spaces():
    line = parse_start_line("SIP/2.0 503 Service  Unavailable")
    assert line.resp == "503"
    assert line.resp_text == "Service  Unavailable"