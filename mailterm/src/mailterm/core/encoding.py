"""Classify transfer encodings and content types into closed enumerations.

What:
  Map the free-form ``Content-Transfer-Encoding`` and ``Content-Type`` header
  values onto :class:`TransferEncoding` and :class:`ContentKind`.

Why:
  Header values arrive with arbitrary casing, parameters, and whitespace. One
  classification point keeps the decoder and renderer exhaustive instead of
  repeating string comparisons at every call site.

How:
  Lower-case and strip the header value, then compare against the known labels.
  Unknown or missing values fall back to the identity/plain variants.

Interfaces:
  :class:`TransferEncoding`, :class:`ContentKind`,
  :func:`classify_transfer_encoding`, :func:`classify_content_kind`.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional


class TransferEncoding(str, Enum):
    """Transfer encodings the decoder knows how to reverse."""

    BASE64 = "base64"
    QUOTED_PRINTABLE = "quoted-printable"
    IDENTITY = "identity"


class ContentKind(str, Enum):
    """Rendering strategy for a decoded leaf body."""

    HTML = "html"
    PLAIN_OR_OTHER = "plain"


def classify_transfer_encoding(value: Optional[str]) -> TransferEncoding:
    """Return the :class:`TransferEncoding` for a raw header value.

    ``7bit``, ``8bit``, ``binary`` and anything unrecognised map to
    :attr:`TransferEncoding.IDENTITY`.
    """

    if not value:
        return TransferEncoding.IDENTITY
    label = str(value).strip().lower()
    if label == TransferEncoding.BASE64.value:
        return TransferEncoding.BASE64
    if label == TransferEncoding.QUOTED_PRINTABLE.value:
        return TransferEncoding.QUOTED_PRINTABLE
    return TransferEncoding.IDENTITY


def classify_content_kind(value: Optional[str]) -> ContentKind:
    """Return :attr:`ContentKind.HTML` when ``value`` mentions ``text/html``."""

    if value and "text/html" in str(value).lower():
        return ContentKind.HTML
    return ContentKind.PLAIN_OR_OTHER
