"""Regex-based HTML to plain-text conversion.

This is a tag scraper, not an HTML parser: only ``<script>``, ``<style>``,
``<br>`` and ``</p>`` get special treatment and every other tag is removed
blindly.  Only a handful of entities are decoded.
"""

from __future__ import annotations

import re

_SCRIPT_STYLE_RE = re.compile(r"<(script|style)[^>]*>.*?</\1>", re.IGNORECASE | re.DOTALL)
_BR_RE = re.compile(r"<br\s*/?>", re.IGNORECASE)
_P_CLOSE_RE = re.compile(r"</p>", re.IGNORECASE)
_TAG_RE = re.compile(r"<[^>]+>")

# &amp; is decoded last so "&amp;lt;" becomes "&lt;", not "<".
_ENTITIES: tuple[tuple[str, str], ...] = (
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&apos;", "'"),
    ("&nbsp;", " "),
    ("&amp;", "&"),
)


def decode_entities(text: str) -> str:
    """Decode the minimal entity set used by clipboard HTML."""
    for entity, char in _ENTITIES:
        text = text.replace(entity, char)
    return text


def strip_tags(html: str) -> str:
    """Replace every tag with a single space."""
    return _TAG_RE.sub(" ", html)


def html_to_plain_text(html: str) -> str:
    """Flatten *html* into a single line of visible text."""
    if not html:
        return ""
    s = _SCRIPT_STYLE_RE.sub(" ", html)
    s = _BR_RE.sub("\n", s)
    s = _P_CLOSE_RE.sub("\n\n", s)
    s = strip_tags(s)
    s = decode_entities(s)
    return " ".join(s.split())
