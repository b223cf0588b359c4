"""Reverse the transfer encoding of a single leaf body.

What:
  Turn the raw body bytes of a MIME leaf into the bytes the sender meant,
  according to its :class:`~mailterm.core.encoding.TransferEncoding`.

Why:
  Base64 and quoted-printable need opposite policies. Corrupt base64 cannot be
  interpreted at all, so it fails the render; quoted-printable produced by real
  mailers is frequently sloppy (stray ``=``, over-long lines), so it is decoded
  leniently.

How:
  - ``BASE64``: drop the ASCII whitespace that line folding inserts, then use
    :func:`base64.b64decode` with ``validate=True`` so foreign characters and bad
    padding raise.
  - ``QUOTED_PRINTABLE``: :func:`quopri.decodestring`, which keeps invalid escape
    sequences literally and treats a trailing ``=`` as a soft line break.
  - ``IDENTITY``: pass through.

Interfaces:
  :func:`decode`.

Invariants & Safety:
  - Pure function; the input is never mutated.
  - Only :class:`~mailterm.core.errors.MalformedPayloadError` escapes.
"""
from __future__ import annotations

import base64
import binascii
import quopri

from .encoding import TransferEncoding
from .errors import MalformedPayloadError


def decode(payload: bytes, encoding: TransferEncoding) -> bytes:
    """Decode ``payload`` according to ``encoding``.

    Args:
      payload: Raw body bytes exactly as they appeared on the wire.
      encoding: Classified ``Content-Transfer-Encoding`` of the part.

    Returns:
      The decoded body bytes.

    Raises:
      MalformedPayloadError: When ``payload`` is not valid base64.
    """

    if encoding is TransferEncoding.BASE64:
        return _decode_base64(payload)
    if encoding is TransferEncoding.QUOTED_PRINTABLE:
        return quopri.decodestring(payload)
    return payload


def _decode_base64(payload: bytes) -> bytes:
    compact = b"".join(payload.split())
    try:
        return base64.b64decode(compact, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise MalformedPayloadError(f"Invalid base64 body: {exc}") from exc
