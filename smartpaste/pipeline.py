"""smartpaste.pipeline — classify, select and transform in one call.

Usage::

    from smartpaste import ClipboardSnapshot, DestinationContext, smart_paste

    result = smart_paste(
        ClipboardSnapshot(plain_text="a,b\\n1,2"),
        DestinationContext(app_identifier="md.obsidian"),
    )
    print(result.recipe.value)   # table-md
    print(result.output)

Suggestions for clipboard-change events keep their throttle state in a value
the caller owns and threads through each call::

    state = SuggestionState()
    suggestion, state = suggest(snapshot, context, state, now=time.monotonic())
    if suggestion:
        notify(f"Paste as {suggestion.label}?")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from smartpaste.classifier import explain
from smartpaste.dispatch import apply
from smartpaste.items import (
    ClipboardSnapshot,
    ContentType,
    DestinationContext,
    PasteResult,
    Recipe,
    parse_recipe,
)
from smartpaste.recipes import select_recipe

if TYPE_CHECKING:
    from collections.abc import Sequence

    from smartpaste.profiles import DestinationRule

logger = logging.getLogger(__name__)

DEFAULT_SUGGESTION_INTERVAL = 5.0
_PREVIEW_LENGTH = 80


def smart_paste(
    snapshot: ClipboardSnapshot,
    context: DestinationContext | None = None,
    *,
    recipe: Recipe | str | None = None,
    rules: Sequence[DestinationRule] | None = None,
) -> PasteResult:
    """Run the whole pipeline for one paste event.

    Args:
        snapshot: Clipboard contents.
        context:  Paste destination; defaults to an unknown app.
        recipe:   Force a recipe by name, bypassing selection.  The content
                  type is still classified and reported.
        rules:    Destination rules from a profile (see
                  :func:`smartpaste.profiles.load_profile`).

    Returns:
        :class:`~smartpaste.items.PasteResult`.  ``output`` is ``None`` when
        there is nothing to paste (including an empty transform result).
    """
    context = context or DestinationContext()
    classification = explain(snapshot)
    if recipe is None:
        chosen = select_recipe(
            classification.content_type, context, snapshot.plain_text, rules,
        )
    else:
        chosen = parse_recipe(recipe)

    output = apply(chosen, snapshot) or None
    if output is None:
        logger.info(
            "SmartPaste: nothing to do (%s -> %s)",
            classification.content_type.value, chosen.value,
        )
    else:
        logger.info(
            "SmartPaste: %s -> %s, %d chars (rule=%s, app=%s)",
            classification.content_type.value, chosen.value, len(output),
            classification.rule, context.app_identifier,
        )
    return PasteResult(
        content_type=classification.content_type,
        recipe=chosen,
        output=output,
        changed=output is not None and output != snapshot.plain_text,
    )


class SmartPaste:
    """Pipeline bound to a fixed set of destination rules.

    Creating ``SmartPaste()`` with no arguments behaves exactly like calling
    :func:`smart_paste` directly.
    """

    def __init__(self, rules: Sequence[DestinationRule] | None = None) -> None:
        self._rules = tuple(rules or ())

    @classmethod
    def from_profile(cls, path: str) -> SmartPaste:
        from smartpaste.profiles import load_profile

        return cls(load_profile(path))

    @property
    def rules(self) -> tuple[DestinationRule, ...]:
        return self._rules

    def paste(
        self,
        snapshot: ClipboardSnapshot,
        context: DestinationContext | None = None,
        recipe: Recipe | str | None = None,
    ) -> PasteResult:
        return smart_paste(snapshot, context, recipe=recipe, rules=self._rules)

    def suggest(
        self,
        snapshot: ClipboardSnapshot,
        context: DestinationContext | None,
        state: SuggestionState,
        *,
        now: float,
        min_interval: float = DEFAULT_SUGGESTION_INTERVAL,
    ) -> tuple[Suggestion | None, SuggestionState]:
        return suggest(
            snapshot, context, state,
            now=now, min_interval=min_interval, rules=self._rules,
        )


# ---------------------------------------------------------------------------
# Suggestions
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SuggestionState:
    """Throttle state for suggestions, owned by the caller."""

    enabled: bool = True
    last_notified_at: float | None = None


@dataclass(frozen=True)
class Suggestion:
    content_type: ContentType
    recipe: Recipe
    label: str
    preview: str
    output: str


def toggle(state: SuggestionState) -> SuggestionState:
    return replace(state, enabled=not state.enabled)


def _preview(text: str) -> str:
    line = " ".join(text.split())
    if len(line) <= _PREVIEW_LENGTH:
        return line
    return line[: _PREVIEW_LENGTH - 1] + "…"


def suggest(
    snapshot: ClipboardSnapshot,
    context: DestinationContext | None,
    state: SuggestionState,
    *,
    now: float,
    min_interval: float = DEFAULT_SUGGESTION_INTERVAL,
    rules: Sequence[DestinationRule] | None = None,
) -> tuple[Suggestion | None, SuggestionState]:
    """Offer a transform for freshly copied content.

    Returns the suggestion (or ``None``) and the state to pass to the next
    call.  Nothing is suggested when suggestions are disabled, when the last
    one was less than *min_interval* seconds ago, or when the transform would
    leave the plain text as it is.
    """
    if not state.enabled:
        return None, state
    if state.last_notified_at is not None and now - state.last_notified_at < min_interval:
        logger.debug("Suggestion throttled (%.2fs since last)", now - state.last_notified_at)
        return None, state

    result = smart_paste(snapshot, context, rules=rules)
    if result.output is None or not result.changed:
        return None, state

    suggestion = Suggestion(
        content_type=result.content_type,
        recipe=result.recipe,
        label=result.label,
        preview=_preview(result.output),
        output=result.output,
    )
    return suggestion, replace(state, last_notified_at=now)
