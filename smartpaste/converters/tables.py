"""Table codec: delimited text and HTML tables in, CSV and Markdown out.

Rows are plain ``list[list[str]]``.  Rows of unequal length only appear as a
parsing artifact; the renderers pad or trim every row to the header's width.
"""

from __future__ import annotations

import logging
import re

from .html_text import decode_entities, strip_tags
from .patterns import detect_delimiter, non_empty_lines, split_fields

logger = logging.getLogger(__name__)

TableRows = list[list[str]]

_ROW_RE = re.compile(r"<tr[^>]*>(.*?)</tr>", re.IGNORECASE | re.DOTALL)
_CELL_RE = re.compile(r"<(td|th)[^>]*>(.*?)</(?:td|th)>", re.IGNORECASE | re.DOTALL)

_MD_MIN_WIDTH = 3


# ---------------------------------------------------------------------------
# Extraction
# ---------------------------------------------------------------------------

def rows_from_html(html: str) -> TableRows:
    """Scrape ``<tr>``/``<td>``/``<th>`` cells out of *html*.

    Returns an empty list when no row with at least one cell is found.
    """
    if not html:
        return []
    rows: TableRows = []
    for row_match in _ROW_RE.finditer(html):
        cells = [
            decode_entities(strip_tags(cell_match.group(2))).strip()
            for cell_match in _CELL_RE.finditer(row_match.group(1))
        ]
        if cells:
            rows.append(cells)
    return rows


def rows_from_delimited(text: str) -> TableRows:
    """Split delimiter-separated *text* into rows, or ``[]`` if it is not a table."""
    if not text:
        return []
    delim = detect_delimiter(text)
    if delim is None:
        return []
    logger.debug("Delimited table detected (delimiter=%r)", delim)
    return [
        [cell.strip(" \t") for cell in split_fields(line, delim)]
        for line in non_empty_lines(text)
    ]


# ---------------------------------------------------------------------------
# CSV
# ---------------------------------------------------------------------------

def csv_field(cell: str) -> str:
    """Quote *cell* only when it contains a comma, newline or quote."""
    if "," in cell or "\n" in cell or '"' in cell:
        return '"' + cell.replace('"', '""') + '"'
    return cell


def to_csv(rows: TableRows) -> str | None:
    """Render *rows* as CSV, padding or trimming each row to the header width."""
    if not rows:
        return None
    ncols = len(rows[0])
    return "\n".join(
        ",".join(csv_field(cell) for cell in (row + [""] * ncols)[:ncols])
        for row in rows
    )


def parse_csv(text: str) -> TableRows:
    """Parse CSV produced by :func:`to_csv` (or any comma/quote CSV) back into rows."""
    rows: TableRows = []
    row: list[str] = []
    field: list[str] = []
    in_quotes = False
    i = 0
    n = len(text)

    while i < n:
        ch = text[i]
        if in_quotes:
            if ch == '"':
                if i + 1 < n and text[i + 1] == '"':
                    field.append('"')
                    i += 1
                else:
                    in_quotes = False
            else:
                field.append(ch)
        elif ch == '"':
            in_quotes = True
        elif ch == ",":
            row.append("".join(field))
            field = []
        elif ch == "\n":
            row.append("".join(field))
            rows.append(row)
            row, field = [], []
        elif ch == "\r" and i + 1 < n and text[i + 1] == "\n":
            pass
        else:
            field.append(ch)
        i += 1

    row.append("".join(field))
    rows.append(row)
    if rows and rows[-1] == [""]:
        rows.pop()
    return rows


# ---------------------------------------------------------------------------
# Markdown
# ---------------------------------------------------------------------------

def _md_cell(cell: str) -> str:
    return cell.replace("|", "\\|").replace("\n", " ")


def to_markdown(rows: TableRows) -> str | None:
    """Render *rows* as a GitHub-style Markdown table; the first row is the header."""
    if not rows or not rows[0]:
        return None
    ncols = len(rows[0])
    grid = [
        [_md_cell(cell) for cell in (row + [""] * ncols)[:ncols]]
        for row in rows
    ]
    widths = [
        max(_MD_MIN_WIDTH, *(len(row[col]) for row in grid))
        for col in range(ncols)
    ]

    def render(cells: list[str]) -> str:
        return "| " + " | ".join(c.ljust(w) for c, w in zip(cells, widths)) + " |"

    lines = [render(grid[0]), render(["-" * w for w in widths])]
    lines.extend(render(row) for row in grid[1:])
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# High-level conversions used by the dispatcher
# ---------------------------------------------------------------------------

def html_table_to_csv(html: str) -> str | None:
    if "<table" not in html.lower():
        return None
    return to_csv(rows_from_html(html))


def plain_table_to_csv(text: str) -> str | None:
    return to_csv(rows_from_delimited(text))


def table_to_markdown(html: str | None, plain: str | None) -> str | None:
    """Best-effort Markdown table from whichever channel yields rows first.

    Order: HTML rows, delimited plain rows, CSV round-trip of the plain
    extraction, CSV round-trip of the HTML extraction.
    """
    attempts = (
        ("html rows", lambda: rows_from_html(html) if html else []),
        ("plain rows", lambda: rows_from_delimited(plain) if plain else []),
        ("plain csv", lambda: _csv_round_trip(plain_table_to_csv(plain) if plain else None)),
        ("html csv", lambda: _csv_round_trip(html_table_to_csv(html) if html else None)),
    )
    for name, attempt in attempts:
        rendered = to_markdown(attempt())
        if rendered:
            logger.debug("Markdown table built from %s", name)
            return rendered
        logger.debug("Markdown table: %s yielded nothing", name)
    return None


def _csv_round_trip(csv_text: str | None) -> TableRows:
    return parse_csv(csv_text) if csv_text else []
