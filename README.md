# sipparse

A forgiving parser for SIP (Session Initiation Protocol) messages. It pulls
out the fields a capture or monitoring tool usually needs: the start line,
Call-ID, From/To/Contact users and hosts, tags, CSeq, the top Via and its
branch, User-Agent, Authorization user, P-Asserted-Identity and more. It does
not validate a message against the SIP grammar.

## Installation

```
pip install sipparse
```

The package has no runtime dependencies.

## Parsing a message

```python
from sipparse.parser import parse_msg

raw = (
    "INVITE sip:alice@example.com SIP/2.0\r\n"
    "Via: SIP/2.0/UDP 192.0.2.1:5060;branch=z9hG4bK776asdhds\r\n"
    "From: \"Bob\" <sip:bob@example.com>;tag=abc123\r\n"
    "To: <sip:alice@example.com>\r\n"
    "Call-ID: a84b4c76e66710\r\n"
    "CSeq: 314 INVITE\r\n"
    "\r\n"
)

msg = parse_msg(raw)
print(msg.first_method, msg.call_id, msg.from_user, msg.from_tag)
print(msg.via_one_branch, msg.cseq_method)
```

`parse_msg` returns a `SipMsg` whose fields hold the values of the headers it
recognises (for example `from_user`, `to_host`, `contact_port`, `user_agent`,
`content_type`, `body`). Only the first Via value is kept, in `via_one`, with
its branch in `via_one_branch`. Headers such as Remote-Party-ID, Diversion,
Reason and X-RTP-Stat are stored as raw strings (`remote_party_id_val`,
`diversion_val`, `reason_val`, `rtp_stat_val`).

Extra options:

- `xheaders`: header names that carry an alternative call id, stored in
  `xcall_id`. When `header_regex` maps such a header name to a regular
  expression, the first group of its match is used instead of the whole value.
- `cheaders`: header names collected into the `custom_header` dict, compared
  without regard to case when `ignore_case_cheaders=True`.

```python
msg = parse_msg(raw, xheaders=["X-CID"], cheaders=["X-Custom"],
                header_regex={"X-CID": r"id=(\w+)"})
```

A malformed message raises `sipparse.utils.SipParseError`, a subclass of
`ValueError`.

## Calling party

```python
party = msg.get_calling_party("default")  # from the From header
party = msg.get_calling_party("paid")     # P-Asserted-Identity, falling back to From
party = msg.get_calling_party("rpid")     # Remote-Party-ID, falling back to From
print(party.name, party.number)           # also stored in msg.calling_party
```

## Individual headers

The header parsers can be used on their own:

```python
from sipparse.uri import parse_uri
from sipparse.startline import parse_start_line
from sipparse.headers import parse_cseq, parse_warning, parse_reason
from sipparse.addresses import parse_from, parse_via, parse_remote_party_id

uri = parse_uri("sip:alice@example.com:5060;transport=tcp")
print(uri.user, uri.host, uri.port_int)

line = parse_start_line("SIP/2.0 487 Request Cancelled")
print(line.resp, line.resp_text)

print(parse_cseq("100 INVITE").method)
print(parse_warning('301 example.com "Incompatible address"').code_int)
print(parse_reason('Q.850;cause=16;text="NORMAL_CLEARING"').cause)
print(parse_from("<sip:bob@example.com>;tag=887s").tag)
print(parse_via("SIP/2.0/UDP 192.0.2.1:5060;branch=z9hG4bK1").branch)
```

`sipparse.headers` also has `parse_rack`, `parse_authorization`,
`parse_accept` and `parse_content_disposition`; `sipparse.addresses` has
`parse_p_asserted_id`, `parse_diversion` and `parse_vias` (a comma separated
list of Via entries).

To pull a single header value out of raw message text without a full parse,
use `get_sip_header_val` from `sipparse.parser`:

```python
from sipparse.parser import get_sip_header_val

get_sip_header_val("Call-ID:", raw)  # "a84b4c76e66710"
```

Header name and method constants live in `sipparse.constants`.

## What it does not do

`sipparse` is a library only. It does not capture packets, listen on the
network, store messages or provide a command-line tool; it parses text that
you hand to it.