"""Walk a message tree and assemble its readable body.

What:
  Render every leaf of a :class:`~mailterm.core.parts.MessagePart` tree and join
  the results depth-first in wire order.

Why:
  The reader shows one string per message. Concatenating all leaves, including
  every branch of ``multipart/alternative``, matches what the terminal client
  has always displayed; choosing a single alternative would change the output
  of existing mailboxes.

How:
  For leaves, classify the transfer encoding and content type, decode the raw
  body, and render it. For composites, recurse into each child with an
  incremented depth and concatenate without separators. Any
  :class:`~mailterm.core.errors.DecodeError` aborts the whole render.

Interfaces:
  :func:`render_message`, :func:`render_raw`.

Invariants & Safety:
  - Output for children ``[A, B, C]`` is exactly ``A + B + C``.
  - Recursion is bounded by :data:`~mailterm.core.parts.MAX_DEPTH`.
"""
from __future__ import annotations

from .decoder import decode
from .encoding import classify_content_kind, classify_transfer_encoding
from .errors import MessageStructureError, MissingBodyError
from .parts import MAX_DEPTH, MessagePart, parse_message
from .renderer import render


def render_message(part: MessagePart) -> str:
    """Return the display text for ``part`` and all of its descendants.

    Raises:
      DecodeError: Any decoding or structural failure within the tree.
    """

    return _render(part, depth=0)


def render_raw(raw: bytes) -> str:
    """Parse ``raw`` RFC822 bytes and return their display text."""

    return render_message(parse_message(raw))


def _render(part: MessagePart, *, depth: int) -> str:
    if depth > MAX_DEPTH:
        raise MessageStructureError(f"Message nesting deeper than {MAX_DEPTH} levels")
    if not part.is_leaf:
        return "".join(_render(child, depth=depth + 1) for child in part.children)
    if part.body is None:
        raise MissingBodyError("Message part did not have a body")
    encoding = classify_transfer_encoding(part.header("Content-Transfer-Encoding"))
    kind = classify_content_kind(part.header("Content-Type"))
    return render(decode(part.body, encoding), kind)
