"""Exception hierarchy for message body reconstruction.

What:
  Define the errors raised while turning a raw RFC822 payload into display
  text: undecodable transfer encodings, leaves without a body, and payloads
  whose structure cannot be walked.

Why:
  Rendering is all-or-nothing per message. Callers need a single base type to
  catch at the command boundary while tests and diagnostics can still tell the
  failure categories apart.

How:
  Derive every failure from :class:`DecodeError` and keep the subclasses free of
  behaviour; the message string carries the context.

Interfaces:
  :class:`DecodeError`, :class:`MalformedPayloadError`,
  :class:`MissingBodyError`, :class:`MessageStructureError`.

Invariants & Safety:
  - Text decoding never raises; only transfer decoding and structural problems
    surface as errors.
"""
from __future__ import annotations


class DecodeError(Exception):
    """Base error for any failure while rendering a message body."""


class MalformedPayloadError(DecodeError):
    """Raised when a part's bytes do not match its declared transfer encoding.

    What:
      Signal that, for example, a ``base64`` body contains characters outside
      the alphabet or has broken padding.

    Why:
      The whole render is aborted; returning half a message would hide the
      corruption from the reader.

    How:
      Raised by :func:`mailterm.core.decoder.decode` and propagated unchanged by
      the walker.
    """


class MissingBodyError(DecodeError):
    """Raised when a leaf part carries no retrievable body bytes."""


class MessageStructureError(DecodeError):
    """Raised when a payload cannot be parsed or nests deeper than allowed."""
