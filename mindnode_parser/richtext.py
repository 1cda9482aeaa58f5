"""Plain text and hyperlink extraction from MindNode rich-text fields.

Titles and notes are stored as small HTML fragments, e.g.
``<p>🌐 <a href="https://example.org">Example</a></p>``.
"""

from __future__ import annotations

import re
from html.parser import HTMLParser
from typing import Optional

NOTE_BOILERPLATE = re.compile(
    r"if you think this can be improved in any way[\s,]*please say",
    re.IGNORECASE,
)

_WHITESPACE = re.compile(r"\s+")

# Tags whose boundaries separate words even without surrounding spaces.
_BREAKING_TAGS = {"br", "p", "div", "li", "ul", "ol", "h1", "h2", "h3", "h4", "h5", "h6"}


class _RichTextParser(HTMLParser):
    """Collect the text chunks and the first link target of a fragment."""

    def __init__(self):
        super().__init__(convert_charrefs=True)
        self.chunks: list[str] = []
        self.url: Optional[str] = None

    def handle_starttag(self, tag, attrs):
        if tag in _BREAKING_TAGS:
            self.chunks.append(" ")
        elif tag == "a" and self.url is None:
            href = dict(attrs).get("href")
            if href:
                self.url = href.strip()

    def handle_endtag(self, tag):
        if tag in _BREAKING_TAGS:
            self.chunks.append(" ")

    def handle_data(self, data):
        self.chunks.append(data)


def _parse(rich_text: Optional[str]) -> _RichTextParser:
    parser = _RichTextParser()
    if rich_text:
        parser.feed(rich_text)
        parser.close()
    return parser


def get_text(rich_text: Optional[str]) -> str:
    """Strip all markup from a rich-text field and collapse whitespace.

    A literal ``<`` is expected to arrive escaped as ``&lt;``, as MindNode
    exports it; a bare ``<`` followed by a letter opens a tag and the
    rest of the field is dropped as markup.
    """
    text = "".join(_parse(rich_text).chunks)
    return _WHITESPACE.sub(" ", text).strip()


def get_url(rich_text: Optional[str]) -> str:
    """Return the first hyperlink target in a rich-text field, or ""."""
    return _parse(rich_text).url or ""


def trim_note(note: str) -> str:
    """Remove the stock "please say" request appended to many notes."""
    return _WHITESPACE.sub(" ", NOTE_BOILERPLATE.sub("", note)).strip()
