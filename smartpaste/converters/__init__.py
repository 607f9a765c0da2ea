"""Converter sub-package: pure string-to-string transforms and the heuristics they share."""

from .code import detect_code_language, to_fenced_code_block
from .html_text import html_to_plain_text
from .patterns import detect_delimiter, is_json, is_likely_url, looks_like_code
from .tables import parse_csv, rows_from_delimited, rows_from_html, to_csv, to_markdown
from .text import json_pretty, to_bullets, to_one_line
from .urlnorm import strip_trackers

__all__ = [
    "detect_code_language",
    "detect_delimiter",
    "html_to_plain_text",
    "is_json",
    "is_likely_url",
    "json_pretty",
    "looks_like_code",
    "parse_csv",
    "rows_from_delimited",
    "rows_from_html",
    "strip_trackers",
    "to_bullets",
    "to_csv",
    "to_fenced_code_block",
    "to_markdown",
    "to_one_line",
]
