"""smartpaste.classifier — Clipboard content classifier.

Pure-function, no I/O.  Maps a :class:`~smartpaste.items.ClipboardSnapshot`
to exactly one :class:`~smartpaste.items.ContentType` by fast string/regex
matching.  The checks run in a fixed priority order and the first match wins;
that order is what resolves ambiguous payloads, so do not reorder it.

Usage::

    from smartpaste.classifier import classify

    snapshot = ClipboardSnapshot(plain_text="https://example.com/a?b=1")
    classify(snapshot)   # ContentType.URL
"""

from __future__ import annotations

from dataclasses import dataclass

from smartpaste.converters.patterns import is_likely_url, looks_like_code, looks_like_table
from smartpaste.items import ClipboardSnapshot, ContentType


@dataclass(frozen=True)
class Classification:
    """Result of a classification, with the rule that decided it."""

    content_type: ContentType
    rule: str  # "html_table"|"url"|"delimited_table"|"code"|"html"|"plain"|"empty"


def explain(snapshot: ClipboardSnapshot) -> Classification:
    """Classify *snapshot* and report which rule fired."""
    html = snapshot.html

    # ── Priority 1: an HTML table beats anything the plain text looks like ──
    if html is not None and "<table" in html.lower():
        return Classification(ContentType.TABLE, "html_table")

    plain = (snapshot.plain_text or "").strip()
    if plain:
        # ── Priority 2: URL ─────────────────────────────────────────────────
        if is_likely_url(plain):
            return Classification(ContentType.URL, "url")
        # ── Priority 3: delimited table ─────────────────────────────────────
        if looks_like_table(plain):
            return Classification(ContentType.TABLE, "delimited_table")
        # ── Priority 4: code ────────────────────────────────────────────────
        if looks_like_code(plain):
            return Classification(ContentType.CODE, "code")
        # ── Priority 5: rich text without a better match ────────────────────
        if html is not None:
            return Classification(ContentType.HTML, "html")
        return Classification(ContentType.PLAIN, "plain")

    if html is not None:
        return Classification(ContentType.HTML, "html")
    return Classification(ContentType.PLAIN, "empty")


def classify(snapshot: ClipboardSnapshot) -> ContentType:
    """Return the :class:`ContentType` of *snapshot*."""
    return explain(snapshot).content_type
