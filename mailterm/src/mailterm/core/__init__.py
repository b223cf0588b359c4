"""Message body reconstruction.

What:
  Expose the pure, synchronous pipeline that turns raw RFC822 bytes into the
  text shown by the reader: parse, walk, decode, render.

Why:
  Callers (the reader facade, the CLI, tests) should not depend on the module
  split between decoder, renderer, and walker.

How:
  Re-export the public callables, data types, and the error hierarchy.

Interfaces:
  ``render_raw``, ``render_message``, ``parse_message``, ``MessagePart``,
  ``decode``, ``render``, ``extract_subject``, ``extract_subjects``,
  ``TransferEncoding``, ``ContentKind`` and the ``DecodeError`` family.

Invariants & Safety:
  - Nothing in this package touches the network or shared mutable state.
"""

from .decoder import decode
from .encoding import (
    ContentKind,
    TransferEncoding,
    classify_content_kind,
    classify_transfer_encoding,
)
from .errors import DecodeError, MalformedPayloadError, MessageStructureError, MissingBodyError
from .headers import extract_subject, extract_subjects
from .parts import MAX_DEPTH, MessagePart, parse_message
from .renderer import WRAP_WIDTH, render
from .walker import render_message, render_raw

__all__ = [
    "ContentKind",
    "DecodeError",
    "MAX_DEPTH",
    "MalformedPayloadError",
    "MessagePart",
    "MessageStructureError",
    "MissingBodyError",
    "TransferEncoding",
    "WRAP_WIDTH",
    "classify_content_kind",
    "classify_transfer_encoding",
    "decode",
    "extract_subject",
    "extract_subjects",
    "parse_message",
    "render",
    "render_message",
    "render_raw",
]
