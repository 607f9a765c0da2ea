"""Transform dispatcher: run a recipe against a snapshot with channel fallback.

Each recipe tries its primary channel first and then the other one (plain
text or HTML).  When both miss, recipes that only tidy content fall back to
the untouched plain text; recipes that change the *form* of the content
(``code-fence``, ``bullets``, ``one-line``) return ``None`` instead.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from smartpaste.converters.code import to_fenced_code_block
from smartpaste.converters.html_text import html_to_plain_text
from smartpaste.converters.patterns import is_likely_url
from smartpaste.converters.tables import html_table_to_csv, plain_table_to_csv, table_to_markdown
from smartpaste.converters.text import json_pretty, to_bullets, to_one_line
from smartpaste.converters.urlnorm import strip_trackers
from smartpaste.items import ClipboardSnapshot, Recipe, parse_recipe

logger = logging.getLogger(__name__)

Transform = Callable[[ClipboardSnapshot], str | None]


def _has_text(value: str | None) -> bool:
    return bool(value and value.strip())


def _html_text(snapshot: ClipboardSnapshot) -> str | None:
    if not _has_text(snapshot.html):
        return None
    text = html_to_plain_text(snapshot.html or "")
    return text or None


# ---------------------------------------------------------------------------
# Per-recipe transforms (structured result or None)
# ---------------------------------------------------------------------------

def _smart_link(snapshot: ClipboardSnapshot) -> str | None:
    if _has_text(snapshot.plain_text):
        return strip_trackers((snapshot.plain_text or "").strip())
    text = _html_text(snapshot)
    if text and is_likely_url(text):
        return strip_trackers(text)
    return None


def _table_csv(snapshot: ClipboardSnapshot) -> str | None:
    if _has_text(snapshot.html):
        csv_text = html_table_to_csv(snapshot.html or "")
        if csv_text:
            return csv_text
    if _has_text(snapshot.plain_text):
        return plain_table_to_csv(snapshot.plain_text or "")
    return None


def _table_md(snapshot: ClipboardSnapshot) -> str | None:
    html = snapshot.html if _has_text(snapshot.html) else None
    plain = snapshot.plain_text if _has_text(snapshot.plain_text) else None
    return table_to_markdown(html, plain)


def _plain(snapshot: ClipboardSnapshot) -> str | None:
    return _html_text(snapshot)


def _on_text(convert: Callable[[str], str | None]) -> Transform:
    """Build a transform that runs *convert* on plain text, then on HTML-derived text."""

    def transform(snapshot: ClipboardSnapshot) -> str | None:
        if _has_text(snapshot.plain_text):
            result = convert(snapshot.plain_text or "")
            if result is not None:
                return result
        text = _html_text(snapshot)
        return convert(text) if text else None

    return transform


_TRANSFORMS: dict[Recipe, Transform] = {
    Recipe.SMART_LINK: _smart_link,
    Recipe.TABLE_CSV: _table_csv,
    Recipe.TABLE_MD: _table_md,
    Recipe.CODE_FENCE: _on_text(to_fenced_code_block),
    Recipe.PLAIN: _plain,
    Recipe.BULLETS: _on_text(to_bullets),
    Recipe.ONE_LINE: _on_text(to_one_line),
    Recipe.JSON_PRETTY: _on_text(json_pretty),
}

# Recipes whose total miss is reported as "nothing to do".
NO_RAW_FALLBACK: frozenset[Recipe] = frozenset(
    {Recipe.CODE_FENCE, Recipe.BULLETS, Recipe.ONE_LINE},
)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def apply(recipe: Recipe | str, snapshot: ClipboardSnapshot) -> str | None:
    """Run *recipe* on *snapshot*.

    Args:
        recipe:   A :class:`Recipe` or its public name (e.g. ``"table-md"``).
        snapshot: Clipboard contents.

    Returns:
        The replacement text, or ``None`` when there is nothing to do.

    Raises:
        :class:`~smartpaste.items.UnknownRecipeError`: If *recipe* is a name
            outside the catalogue.
    """
    resolved = parse_recipe(recipe)
    result = _TRANSFORMS[resolved](snapshot)
    if result is not None:
        return result

    if resolved in NO_RAW_FALLBACK:
        logger.debug("%s: no channel yielded content", resolved.value)
        return None
    logger.debug("%s: structured conversion unavailable, passing plain text through", resolved.value)
    return snapshot.plain_text
