"""Transfer-encoding decoder tests.

What:
  Cover the three decoding policies: strict base64, lenient quoted-printable,
  and pass-through for everything else, plus header classification.

Why:
  The decoder decides whether a damaged message aborts rendering. Regressions
  here either hide corruption (too lenient) or make ordinary mail unreadable
  (too strict).
"""

import base64
import quopri

import pytest

from mailterm.core import (
    MalformedPayloadError,
    TransferEncoding,
    classify_transfer_encoding,
    decode,
)


def test_base64_round_trip_with_line_folding() -> None:
    data = bytes(range(256)) * 4
    encoded = base64.encodebytes(data)  # folded at 76 columns with newlines
    assert b"\n" in encoded
    assert decode(encoded, TransferEncoding.BASE64) == data


def test_base64_accepts_crlf_folding() -> None:
    encoded = base64.encodebytes(b"hello world, " * 20).replace(b"\n", b"\r\n")
    assert decode(encoded, TransferEncoding.BASE64) == b"hello world, " * 20


@pytest.mark.parametrize(
    "payload",
    [
        b"@@@not base64!!!",
        b"aGVsbG8",  # missing padding
        b"aGVs*bG8=",
    ],
)
def test_base64_rejects_malformed_input(payload: bytes) -> None:
    with pytest.raises(MalformedPayloadError):
        decode(payload, TransferEncoding.BASE64)


def test_quoted_printable_decodes_utf8_escapes() -> None:
    assert decode(b"Caf=C3=A9", TransferEncoding.QUOTED_PRINTABLE) == "Café".encode("utf-8")


def test_quoted_printable_round_trip() -> None:
    data = "Grüße aus Köln = viele Grüße\n".encode("utf-8") * 10
    assert decode(quopri.encodestring(data), TransferEncoding.QUOTED_PRINTABLE) == data


def test_quoted_printable_joins_soft_line_breaks() -> None:
    assert decode(b"Hello=\r\nWorld", TransferEncoding.QUOTED_PRINTABLE) == b"HelloWorld"


def test_quoted_printable_tolerates_stray_equals() -> None:
    assert decode(b"trailing=", TransferEncoding.QUOTED_PRINTABLE) == b"trailing"
    assert decode(b"a=ZZb", TransferEncoding.QUOTED_PRINTABLE) == b"a=ZZb"


def test_identity_returns_input_unchanged() -> None:
    payload = b"=C3 not decoded \xff"
    assert decode(payload, TransferEncoding.IDENTITY) is payload


@pytest.mark.parametrize(
    ("header", "expected"),
    [
        ("base64", TransferEncoding.BASE64),
        (" BASE64 ", TransferEncoding.BASE64),
        ("Quoted-Printable", TransferEncoding.QUOTED_PRINTABLE),
        ("7bit", TransferEncoding.IDENTITY),
        ("8bit", TransferEncoding.IDENTITY),
        ("x-uuencode", TransferEncoding.IDENTITY),
        (None, TransferEncoding.IDENTITY),
        ("", TransferEncoding.IDENTITY),
    ],
)
def test_classify_transfer_encoding(header, expected) -> None:
    assert classify_transfer_encoding(header) is expected
