import pytest

from sipparse.utils import (
    Param,
    SipParseError,
    clean_brack,
    clean_ws,
    extract_sip_param,
    get_bracks,
    get_comma_separated,
    get_name,
    get_param,
    get_quote_chars,
)


def test_clean_ws_strips_spaces_and_tabs():
    assert clean_ws("     white space\t") == "white space"


def test_clean_ws_tab_only():
    assert clean_ws("\t") == ""


def test_clean_ws_empty():
    assert clean_ws("") == ""


def test_clean_brack_plain():
    assert clean_brack("<sip:alice@example.com>") == "sip:alice@example.com"


def test_clean_brack_with_params():
    assert (
        clean_brack("<sip:alice@example.com>;param=foo?header=boo")
        == "sip:alice@example.com;param=foo?header=boo"
    )


def test_clean_brack_empty():
    assert clean_brack("") == ""


def test_get_name_quoted():
    name, end = get_name('"name" <sip:alice@example.com>')
    assert name == "name"
    assert end == 5


def test_get_name_absent():
    assert get_name("<sip:alice@example.com>") == ("", 0)


def test_get_name_unquoted():
    name, end = get_name("Anonymous <sip:alice@example.com>;tag=hyh8")
    assert name == "Anonymous"
    assert end == 10


def test_get_name_empty():
    assert get_name("") == ("", 0)


def test_get_comma_separated_single():
    assert get_comma_separated("foo ") is None


def test_get_comma_separated_two():
    assert get_comma_separated("foo , bar") == ["foo", "bar"]


def test_get_param_key_value():
    assert get_param("key=value") == Param("key", "value")


def test_get_param_key_only():
    p = get_param("key")
    assert p.param == "key"
    assert p.val == ""


def test_get_param_trims_whitespace():
    assert get_param(" user = phone ") == Param("user", "phone")


def test_get_quote_chars():
    assert get_quote_chars('a "b" c') == (2, 4, True)
    assert get_quote_chars('only "one') == (0, 0, False)


def test_get_bracks():
    assert get_bracks("x <y> z") == (2, 4, True)
    assert get_bracks("x >y< z") == (0, 0, False)
    assert get_bracks("no brackets") == (0, 0, False)


def test_extract_sip_param_quoted_username():
    val = (
        'Digest username="foobaruser124", realm="FOOBAR", algorithm=MD5, '
        'uri="sip:example.com", nonce="4f6d7a1d", response="abc", opaque=""'
    )
    assert extract_sip_param('username="', val) == "foobaruser124"


def test_extract_sip_param_tag_until_semicolon():
    assert extract_sip_param("tag=", "<sip:a@example.com>;tag=abc;x=1") == "abc"


def test_extract_sip_param_to_end():
    assert extract_sip_param("tag=", "sip:a@example.com;tag=887s") == "887s"


def test_extract_sip_param_missing():
    assert extract_sip_param("tag=", "sip:a@example.com") == ""


def test_sip_parse_error_carries_message():
    err = SipParseError("bad")
    assert isinstance(err, ValueError)
    assert str(err) == "bad"
    with pytest.raises(ValueError, match="^bad$"):
        raise err