"""Render decoded leaf bytes as terminal text.

What:
  Produce the display string for one decoded body: HTML is flattened to
  wrapped plain text, everything else is shown as UTF-8 text.

Why:
  Most mail clients send an HTML alternative, often the only readable one.
  Showing raw markup in a terminal is unusable, while guessing charsets is out
  of scope; decoding lossily keeps the reader working on any input.

How:
  Decode with ``errors="replace"`` so invalid sequences become U+FFFD, then
  hand HTML to :class:`html2text.HTML2Text` configured with an 80 column body
  width, wrapped list items and tables, and reference-style links.
  ``html2text`` is built on :mod:`html.parser`, which tolerates broken markup.
  Tokens html2text cannot break (long URLs, preformatted lines) are split
  at the column limit afterwards.

Interfaces:
  :data:`WRAP_WIDTH`, :func:`render`, :func:`html_to_text`.

Invariants & Safety:
  - No line of HTML output is longer than :data:`WRAP_WIDTH`.
"""
from __future__ import annotations

from typing import List

import html2text

from .encoding import ContentKind


WRAP_WIDTH = 80
"""Column limit for HTML paragraphs converted to text."""


def render(decoded: bytes, kind: ContentKind) -> str:
    """Return the display text for ``decoded`` bytes of the given ``kind``."""

    text = decoded.decode("utf-8", errors="replace")
    if kind is ContentKind.HTML:
        return html_to_text(text)
    return text


def html_to_text(markup: str, width: int = WRAP_WIDTH) -> str:
    """Convert ``markup`` to plain text wrapped at ``width`` columns.

    Link targets are listed as numbered references below the text and images
    are dropped, as a terminal cannot show them.
    """

    converter = html2text.HTML2Text()
    converter.body_width = width
    converter.wrap_list_items = True
    converter.wrap_tables = True
    converter.inline_links = False
    converter.ignore_images = True
    converter.unicode_snob = True
    return _fold_long_lines(converter.handle(markup), width)


def _fold_long_lines(text: str, width: int) -> str:
    if width <= 0:
        return text
    folded: List[str] = []
    for line in text.split("\n"):
        while len(line) > width:
            folded.append(line[:width])
            line = line[width:]
        folded.append(line)
    return "\n".join(folded)
