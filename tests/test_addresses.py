import pytest

from sipparse.addresses import (
    parse_diversion,
    parse_from,
    parse_p_asserted_id,
    parse_remote_party_id,
    parse_via,
    parse_vias,
)
from sipparse.utils import Param, SipParseError


def test_from_with_quoted_name_and_tag():
    header = parse_from(
        '"Unknown" <sip:alice@0.0.0.0;user=phone;noa=national>;tag=dd737a8-co7387-INS002'
    )
    assert header.name == "Unknown"
    assert header.uri.user == "alice"
    assert header.tag == "dd737a8-co7387-INS002"


def test_from_without_name():
    header = parse_from(
        "<sip:alice@0.0.0.0;user=phone;noa=national>;tag=dd737a8-co7387-INS002"
    )
    assert header.name == ""
    assert header.uri.user == "alice"
    assert header.uri.host == "0.0.0.0"


def test_from_without_brackets():
    header = parse_from("sip:alice@example.com;tag=887s")
    assert header.tag == "887s"
    assert header.uri.user == "alice"
    assert header.uri.host == "example.com"


def test_from_tel_uri_without_brackets():
    header = parse_from("tel:+1000;tag=752520ac91292bae839ce09f3fa382aa")
    assert header.uri.user == "+1000"
    assert header.tag == "752520ac91292bae839ce09f3fa382aa"


def test_from_tel_uri_in_brackets():
    header = parse_from("<tel:1800;user=phone>;tag=sbc09033drebier-CC-3")
    assert header.uri.user == "1800"
    assert header.tag == "sbc09033drebier-CC-3"


def test_from_empty_raises():
    with pytest.raises(SipParseError):
        parse_from("")


def test_p_asserted_id():
    header = parse_p_asserted_id('"VoIP Call"<sip:1000@0.0.0.0>')
    assert header.name == "VoIP Call"
    assert header.uri.user == "1000"
    assert header.params == []


def test_p_asserted_id_bad_header():
    with pytest.raises(SipParseError):
        parse_p_asserted_id("bad header")


def test_p_asserted_id_host_only():
    header = parse_p_asserted_id("<sip:4.71.122.181:5060;user=phone>")
    assert header.uri.host == "4.71.122.181"
    assert header.uri.port_int == 5060


def test_p_asserted_id_params():
    header = parse_p_asserted_id("<sip:1000@example.com>;foo=bar;lr")
    assert header.params == [Param("foo", "bar"), Param("lr")]


def test_p_asserted_id_single_char_trailing_param_dropped():
    header = parse_p_asserted_id("<sip:1000@example.com>;a")
    assert header.params == []


def test_remote_party_id():
    header = parse_remote_party_id(
        '"Unknown" <sip:1000@0.0.0.0>;party=calling;screen=yes;privacy=off'
    )
    assert header.name == "Unknown"
    assert header.uri.user == "1000"
    assert header.privacy == "off"
    assert header.party == "calling"
    assert header.screen == "yes"
    assert header.params == []


def test_remote_party_id_on_diversion_value():
    header = parse_remote_party_id(
        '"Unknown" <sip:+1000@0.0.0.0>;reason=unconditional;privacy=off;counter=1'
    )
    assert header.name == "Unknown"
    assert header.privacy == "off"
    assert header.params == [Param("reason", "unconditional"), Param("counter", "1")]


def test_remote_party_id_without_brackets_raises():
    with pytest.raises(SipParseError):
        parse_remote_party_id("sip:1000@0.0.0.0")


def test_diversion():
    header = parse_diversion(
        '"Unknown" <sip:+1000@0.0.0.0>;reason=unconditional;privacy=off;counter=1'
    )
    assert header.name == "Unknown"
    assert header.uri.user == "+1000"
    assert header.reason == "unconditional"
    assert header.privacy == "off"
    assert header.counter == "1"
    assert header.params == []


def test_diversion_without_brackets_raises():
    with pytest.raises(SipParseError):
        parse_diversion("no brackets here")


def test_via():
    via = parse_via("SIP/2.0/UDP 0.0.0.0:5060;branch=z9hG4bK05B1a4c756d527cb513")
    assert via.proto == "SIP"
    assert via.version == "2.0"
    assert via.transport == "UDP"
    assert via.sent_by == "0.0.0.0:5060"
    assert via.branch == "z9hG4bK05B1a4c756d527cb513"


def test_via_rport_received_and_other_params():
    via = parse_via(
        "SIP/2.0/TCP 10.0.0.1:5060;branch=z9hG4bKea28eb32f60dc;rport=5080;received=10.0.0.2;alias"
    )
    assert via.branch == "z9hG4bKea28eb32f60dc"
    assert via.rport == "5080"
    assert via.received == "10.0.0.2"
    assert via.params == [Param("alias")]


def test_via_without_lws_raises():
    with pytest.raises(SipParseError):
        parse_via("SIP/2.0/UDP")


def test_via_bad_protocol_raises():
    with pytest.raises(SipParseError):
        parse_via("SIP/2.0 0.0.0.0:5060;branch=z9hG4bK1")


def test_multiple_vias():
    vias = parse_vias(
        "SIP/2.0/UDP 0.0.0.0:5060;branch=z9hG4bKea28eb32f60dc,"
        "SIP/2.0/UDP 1.1.1.1:5060;branch=z9hG4bK1750901461"
    )
    assert [v.branch for v in vias] == ["z9hG4bKea28eb32f60dc", "z9hG4bK1750901461"]
    assert [v.sent_by for v in vias] == ["0.0.0.0:5060", "1.1.1.1:5060"]


def test_multiple_vias_error_propagates():
    with pytest.raises(SipParseError):
        parse_vias("SIP/2.0/UDP 0.0.0.0:5060;branch=z9hG4bK1,broken")