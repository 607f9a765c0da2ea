"""Recipe selection: which transform fits this content in this destination."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from smartpaste.converters.patterns import is_json
from smartpaste.items import ContentType, DestinationContext, Recipe

if TYPE_CHECKING:
    from collections.abc import Sequence

    from smartpaste.profiles import DestinationRule

logger = logging.getLogger(__name__)

# Substrings of app identifiers, checked in order: spreadsheets first.
_CSV_APPS: tuple[str, ...] = ("excel", "numbers")
_MARKDOWN_APPS: tuple[str, ...] = (
    "notion",
    "obsidian",
    "bear",
    "typora",
    "markdown",
    "notes",
)

_FIXED_RECIPES: dict[ContentType, Recipe] = {
    ContentType.URL: Recipe.SMART_LINK,
    ContentType.CODE: Recipe.CODE_FENCE,
    ContentType.HTML: Recipe.PLAIN,
}


def table_recipe_for(context: DestinationContext) -> Recipe:
    app = context.app_identifier.lower()
    if any(name in app for name in _CSV_APPS):
        return Recipe.TABLE_CSV
    if any(name in app for name in _MARKDOWN_APPS):
        return Recipe.TABLE_MD
    return Recipe.TABLE_CSV


def select_recipe(
    content_type: ContentType,
    context: DestinationContext,
    plain_text: str | None = None,
    rules: Sequence[DestinationRule] | None = None,
) -> Recipe:
    """Map a content type and destination to a :class:`Recipe`.

    Args:
        content_type: Result of :func:`smartpaste.classifier.classify`.
        context:      Where the result will be pasted.
        plain_text:   The snapshot's plain text; only used to detect JSON
                      when *content_type* is ``PLAIN``.
        rules:        Optional profile rules, consulted before the built-in
                      mapping.  The first rule that applies wins.
    """
    for rule in rules or ():
        if rule.applies_to(content_type, context):
            logger.debug(
                "Profile rule %s -> %s for %s",
                rule.match, rule.recipe.value, context.app_identifier,
            )
            return rule.recipe

    if content_type in _FIXED_RECIPES:
        return _FIXED_RECIPES[content_type]
    if content_type is ContentType.TABLE:
        return table_recipe_for(context)
    if is_json(plain_text):
        return Recipe.JSON_PRETTY
    return Recipe.PLAIN
