import pytest

from sipparse.headers import (
    AcceptParam,
    parse_accept,
    parse_authorization,
    parse_content_disposition,
    parse_cseq,
    parse_rack,
    parse_reason,
    parse_warning,
)
from sipparse.utils import Param, SipParseError


def test_cseq_simple():
    cseq = parse_cseq("100 INVITE")
    assert cseq.digit == "100"
    assert cseq.method == "INVITE"


def test_cseq_extra_whitespace():
    cseq = parse_cseq("1112423100   REGISTER   ")
    assert cseq.digit == "1112423100"
    assert cseq.method == "REGISTER"


@pytest.mark.parametrize("value", ["10", "100INVITE", " 100 INVITE", "100 "])
def test_cseq_errors(value):
    with pytest.raises(SipParseError):
        parse_cseq(value)


def test_warning():
    warning = parse_warning("301 isi.edu \"Incompatible network address type 'E.164'\"")
    assert warning.code == "301"
    assert warning.code_int == 301
    assert warning.agent == "isi.edu"
    assert warning.text == "Incompatible network address type 'E.164'"


@pytest.mark.parametrize("value", ["301 isi.edu", "abc isi.edu text", "1000 isi.edu text", "-1 a b"])
def test_warning_errors(value):
    with pytest.raises(SipParseError):
        parse_warning(value)


def test_rack():
    rack = parse_rack("776656 1 INVITE")
    assert rack.rseq_val == "776656"
    assert rack.cseq_val == "1"
    assert rack.cseq_method == "INVITE"


@pytest.mark.parametrize("value", ["776656 INVITE", "776656 1 INVITE extra"])
def test_rack_errors(value):
    with pytest.raises(SipParseError):
        parse_rack(value)


def test_reason_with_text():
    reason = parse_reason('Q.850;cause=16;text="NORMAL_CLEARING"')
    assert reason.proto == "Q.850"
    assert reason.cause == "16"
    assert reason.text == "NORMAL_CLEARING"


def test_reason_cause_only():
    reason = parse_reason("Q.850;cause=102")
    assert reason.proto == "Q.850"
    assert reason.cause == "102"
    assert reason.text == ""


def test_reason_without_params():
    reason = parse_reason("Q.850")
    assert (reason.proto, reason.cause, reason.text) == ("", "", "")


def test_authorization():
    auth = parse_authorization('Digest username="placeholder"')
    assert auth.credentials == "Digest"
    assert auth.username == "placeholder"


def test_authorization_without_username():
    auth = parse_authorization("Digest token")
    assert auth.credentials == "Digest"
    assert auth.username == ""


@pytest.mark.parametrize("value", ["Digest", "Digest "])
def test_authorization_errors(value):
    with pytest.raises(SipParseError):
        parse_authorization(value)


def test_accept_single():
    accept = parse_accept("application/sdp")
    assert accept.val == "application/sdp"
    assert accept.params == [AcceptParam(type="application", val="sdp")]


def test_accept_list():
    accept = parse_accept("application/sdp, text/plain ,bogus, text/")
    assert accept.params == [
        AcceptParam(type="application", val="sdp"),
        AcceptParam(type="text", val="plain"),
    ]


def test_content_disposition():
    disposition = parse_content_disposition("session; handling=required")
    assert disposition.val == "session; handling=required"
    assert disposition.disp_type == "session"
    assert disposition.params == [Param("handling", "required")]


def test_content_disposition_without_params():
    disposition = parse_content_disposition("render")
    assert disposition.disp_type == "render"
    assert disposition.params == []