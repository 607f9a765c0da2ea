"""smartpaste - turn whatever is on the clipboard into what the destination app wants.

Quick usage::

    from smartpaste import ClipboardSnapshot, DestinationContext, smart_paste

    result = smart_paste(
        ClipboardSnapshot(plain_text="https://x.com/p?utm_source=fb&id=5"),
        DestinationContext(app_identifier="com.apple.Safari"),
    )
    print(result.output)   # https://x.com/p?id=5

Explicit recipe (bypasses classification)::

    from smartpaste import RECIPE_CATALOGUE, apply

    for recipe in RECIPE_CATALOGUE:
        print(recipe.value, recipe.label)
    apply("bullets", ClipboardSnapshot(plain_text="one\\ntwo"))
"""

from smartpaste.classifier import classify, explain
from smartpaste.dispatch import apply
from smartpaste.items import (
    RECIPE_CATALOGUE,
    RECIPE_LABELS,
    ClipboardSnapshot,
    ContentType,
    DestinationContext,
    PasteResult,
    Recipe,
    UnknownRecipeError,
    parse_recipe,
)
from smartpaste.pipeline import SmartPaste, Suggestion, SuggestionState, smart_paste, suggest, toggle
from smartpaste.profiles import DestinationRule, ProfileError, load_profile
from smartpaste.recipes import select_recipe

__version__ = "0.1.0"
__all__ = [
    "RECIPE_CATALOGUE",
    "RECIPE_LABELS",
    "ClipboardSnapshot",
    "ContentType",
    "DestinationContext",
    "DestinationRule",
    "PasteResult",
    "ProfileError",
    "Recipe",
    "SmartPaste",
    "Suggestion",
    "SuggestionState",
    "UnknownRecipeError",
    "apply",
    "classify",
    "explain",
    "load_profile",
    "parse_recipe",
    "select_recipe",
    "smart_paste",
    "suggest",
    "toggle",
]
