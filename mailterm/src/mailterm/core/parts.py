"""Parse raw RFC822 bytes into a tree of :class:`MessagePart` nodes.

What:
  Provide the immutable part tree consumed by the walker: ordered headers, raw
  (still transfer-encoded) body bytes on leaves, and ordered children on
  multipart containers.

Why:
  The walker must see each leaf's body exactly as it was transmitted so that the
  decoder, not the parser, decides how to treat broken encodings. Keeping our own
  small node type also lets tests build trees without crafting MIME text.

How:
  Use :class:`email.parser.BytesParser` with the default policy, then convert the
  resulting :class:`~email.message.EmailMessage` recursively. Headers are
  copied with ``raw_items()`` so only the parser itself interprets them, and
  bodies are taken as the stored octets, still transfer-encoded, for
  :mod:`mailterm.core.decoder`.

Interfaces:
  :class:`MessagePart`, :func:`parse_message`, :data:`MAX_DEPTH`.

Invariants & Safety:
  - A node is either a leaf (``children`` empty) or a composite; composites never
    carry a body.
  - Header lookups are case-insensitive and return the first match.
  - Trees deeper than :data:`MAX_DEPTH`, and headers the stdlib parser chokes
    on, are rejected with :class:`~mailterm.core.errors.MessageStructureError`.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from email import policy
from email.message import Message
from email.parser import BytesParser
from typing import List, Optional, Tuple

from .errors import MessageStructureError


MAX_DEPTH = 64
"""Deepest multipart nesting accepted from untrusted input."""

@dataclass(frozen=True)
class MessagePart:
    """One node of a parsed message.

    Attributes:
      headers: ``(name, value)`` pairs in wire order; duplicates are kept.
      body: Raw body bytes for leaves, ``None`` for composites or when absent.
      children: Sub-parts in wire order; empty for leaves.
    """

    headers: Tuple[Tuple[str, str], ...] = ()
    body: Optional[bytes] = None
    children: Tuple["MessagePart", ...] = field(default_factory=tuple)

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def header(self, name: str) -> Optional[str]:
        """Return the first value of header ``name`` (case-insensitive)."""

        wanted = name.lower()
        for key, value in self.headers:
            if key.lower() == wanted:
                return value
        return None

    @classmethod
    def leaf(cls, body: bytes, headers: Optional[List[Tuple[str, str]]] = None) -> "MessagePart":
        return cls(headers=tuple(headers or ()), body=body)

    @classmethod
    def composite(
        cls,
        children: List["MessagePart"],
        headers: Optional[List[Tuple[str, str]]] = None,
    ) -> "MessagePart":
        return cls(headers=tuple(headers or ()), children=tuple(children))


def parse_message(raw: bytes) -> MessagePart:
    """Parse ``raw`` RFC822 bytes into a :class:`MessagePart` tree.

    Args:
      raw: Message bytes as returned by an IMAP ``BODY[]``/``RFC822`` fetch.

    Returns:
      Root :class:`MessagePart`.

    Raises:
      MessageStructureError: When ``raw`` is not bytes, has headers the parser
        cannot handle, or nests deeper than :data:`MAX_DEPTH`.
    """

    if not isinstance(raw, (bytes, bytearray)):
        raise MessageStructureError(f"Expected raw message bytes, got {type(raw).__name__}")
    parser = BytesParser(policy=policy.default)
    try:
        message = parser.parsebytes(bytes(raw))
        return _convert(message, depth=0)
    except RecursionError as exc:
        raise MessageStructureError("Message nesting exceeds parser limits") from exc
    except (AttributeError, LookupError, TypeError, ValueError) as exc:
        # Header folding bugs in the stdlib surface as assorted builtin errors.
        raise MessageStructureError(f"Malformed message headers: {exc!r}") from exc


def _convert(message: Message, *, depth: int) -> MessagePart:
    if depth > MAX_DEPTH:
        raise MessageStructureError(f"Message nesting deeper than {MAX_DEPTH} levels")
    headers = tuple((str(name), str(value)) for name, value in message.raw_items())
    if message.is_multipart():
        children = tuple(_convert(child, depth=depth + 1) for child in message.get_payload())
        return MessagePart(headers=headers, children=children)
    return MessagePart(headers=headers, body=_raw_body(message))


def _raw_body(message: Message) -> Optional[bytes]:
    # get_payload() re-decodes 8-bit octets with the declared charset.
    payload = message._payload
    if payload is None:
        return None
    if isinstance(payload, bytes):
        return payload
    try:
        return payload.encode("ascii", errors="surrogateescape")
    except UnicodeEncodeError:
        return payload.encode("utf-8", errors="surrogateescape")
