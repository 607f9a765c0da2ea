"""Regex and string heuristics shared by the classifier and the converters.

Everything here is a pure predicate over a string.  The checks are fast,
approximate and deliberately shallow: they answer "does this look like X?"
rather than fully parsing X.
"""

from __future__ import annotations

import json
import re

# ---------------------------------------------------------------------------
# URL shape
# ---------------------------------------------------------------------------

_SCHEME_URL_RE = re.compile(r"(?:https?|ftp)://[\w.-]+(?:\.[\w.-]+)+(?:[/?#]\S*)?")
_BARE_DOMAIN_RE = re.compile(r"[\w.-]+\.[a-zA-Z]{2,}(?:/\S*)?")


def is_likely_url(text: str) -> bool:
    """Return True if the whole of *text* is a URL or a bare domain with optional path."""
    return bool(_SCHEME_URL_RE.fullmatch(text) or _BARE_DOMAIN_RE.fullmatch(text))


# ---------------------------------------------------------------------------
# Delimited tables
# ---------------------------------------------------------------------------

TABLE_DELIMITERS: tuple[str, ...] = ("\t", ",", "|")


def non_empty_lines(text: str) -> list[str]:
    return [line for line in text.splitlines() if line.strip()]


def split_fields(line: str, delim: str) -> list[str]:
    """Split *line* on *delim*, dropping empty fields."""
    return [field for field in line.split(delim) if field]


def detect_delimiter(text: str) -> str | None:
    """Return the delimiter that splits every line into the same number (> 1) of fields.

    Delimiters are tried in :data:`TABLE_DELIMITERS` order; fewer than two
    non-empty lines is never a table.
    """
    lines = non_empty_lines(text)
    if len(lines) < 2:
        return None
    for delim in TABLE_DELIMITERS:
        counts = {len(split_fields(line, delim)) for line in lines}
        if len(counts) == 1 and counts.pop() > 1:
            return delim
    return None


def looks_like_table(text: str) -> bool:
    return detect_delimiter(text) is not None


# ---------------------------------------------------------------------------
# Source code
# ---------------------------------------------------------------------------

CODE_KEYWORDS: tuple[str, ...] = (
    "func ",
    "class ",
    "struct ",
    "import ",
    "public ",
    "private ",
    "def ",
    "for ",
    "if ",
    "var ",
    "let ",
    "const ",
    "#include",
)


def looks_like_code(text: str) -> bool:
    """Best-effort code signal.  Single-line snippets never count as code."""
    if "\n" not in text:
        return False
    has_braces = "{" in text or "}" in text
    has_semicolons = ";" in text
    has_keywords = any(kw in text for kw in CODE_KEYWORDS)
    has_indent = any(line.startswith(("  ", "\t")) for line in text.split("\n"))
    return has_braces or has_semicolons or has_keywords or has_indent


# ---------------------------------------------------------------------------
# JSON shape
# ---------------------------------------------------------------------------

def _reject_constant(name: str) -> float:
    raise ValueError(f"non-standard JSON constant {name}")


def loads_strict(text: str) -> object:
    """``json.loads`` that refuses ``NaN`` / ``Infinity`` like strict parsers do."""
    return json.loads(text, parse_constant=_reject_constant)


def is_json(text: str | None) -> bool:
    """Return True if *text* is a JSON object or array."""
    if not text:
        return False
    stripped = text.strip()
    if not (
        (stripped.startswith("{") and stripped.endswith("}"))
        or (stripped.startswith("[") and stripped.endswith("]"))
    ):
        return False
    try:
        loads_strict(stripped)
    except ValueError:
        return False
    return True
