"""Tests for smartpaste.pipeline — end-to-end runs and suggestions."""

from __future__ import annotations

import logging

from smartpaste.items import ClipboardSnapshot, ContentType, DestinationContext, PasteResult, Recipe
from smartpaste.pipeline import (
    SmartPaste,
    SuggestionState,
    smart_paste,
    suggest,
    toggle,
)
from smartpaste.profiles import DestinationRule

# ---------------------------------------------------------------------------
# smart_paste()
# ---------------------------------------------------------------------------

class TestSmartPaste:
    def test_returns_paste_result(self):
        result = smart_paste(ClipboardSnapshot(plain_text="hello"))
        assert isinstance(result, PasteResult)
        assert result.content_type is ContentType.PLAIN
        assert result.recipe is Recipe.PLAIN
        assert result.output == "hello"
        assert result.changed is False

    def test_url(self):
        result = smart_paste(
            ClipboardSnapshot(plain_text="https://x.com/p?utm_source=fb&id=5"),
            DestinationContext(app_identifier="com.apple.Safari"),
        )
        assert result.recipe is Recipe.SMART_LINK
        assert result.label == "clean link"
        assert result.output == "https://x.com/p?id=5"
        assert result.changed is True

    def test_table_for_obsidian(self, table_snapshot, obsidian):
        result = smart_paste(table_snapshot, obsidian)
        assert result.content_type is ContentType.TABLE
        assert result.recipe is Recipe.TABLE_MD
        assert result.output.startswith("| Name")

    def test_table_for_excel(self, table_snapshot, excel):
        result = smart_paste(table_snapshot, excel)
        assert result.recipe is Recipe.TABLE_CSV
        assert result.output.startswith("Name,Price\n")

    def test_json_plain_text(self):
        result = smart_paste(ClipboardSnapshot(plain_text='{"a":1}'))
        assert result.recipe is Recipe.JSON_PRETTY
        assert result.output == '{\n  "a": 1\n}'

    def test_forced_recipe_bypasses_selection(self):
        result = smart_paste(ClipboardSnapshot(plain_text="one\ntwo"), recipe="bullets")
        assert result.content_type is ContentType.PLAIN
        assert result.recipe is Recipe.BULLETS
        assert result.output == "- one\n- two"

    def test_nothing_to_do(self, caplog):
        with caplog.at_level(logging.INFO, logger="smartpaste.pipeline"):
            result = smart_paste(ClipboardSnapshot(), recipe=Recipe.CODE_FENCE)
        assert result.output is None
        assert result.changed is False
        assert "nothing to do" in caplog.text

    def test_empty_output_reported_as_none(self):
        result = smart_paste(ClipboardSnapshot(plain_text=""))
        assert result.output is None

    def test_rules_applied(self):
        rules = [DestinationRule(match=["slack"], content="code", recipe="plain")]
        snap = ClipboardSnapshot(plain_text="x = 1;\ny = 2;")
        result = smart_paste(snap, DestinationContext(app_identifier="com.slack"), rules=rules)
        assert result.content_type is ContentType.CODE
        assert result.recipe is Recipe.PLAIN

    def test_default_context(self):
        result = smart_paste(ClipboardSnapshot(plain_text="a,b\n1,2"), None)
        assert result.recipe is Recipe.TABLE_CSV


class TestSmartPasteClass:
    def test_defaults_match_function(self):
        snap = ClipboardSnapshot(plain_text="example.com/a?si=1")
        assert SmartPaste().paste(snap) == smart_paste(snap)

    def test_rules_bound(self):
        sp = SmartPaste([DestinationRule(match="notion", content="url", recipe="plain")])
        snap = ClipboardSnapshot(plain_text="https://x.com/?utm_source=a")
        result = sp.paste(snap, DestinationContext(app_identifier="notion.id"))
        assert result.recipe is Recipe.PLAIN
        assert result.output == "https://x.com/?utm_source=a"

    def test_from_profile(self, tmp_path):
        path = tmp_path / "p.yaml"
        path.write_text(
            "destinations:\n  - match: x\n    content: table\n    recipe: table-md\n",
            encoding="utf-8",
        )
        assert len(SmartPaste.from_profile(str(path)).rules) == 1


# ---------------------------------------------------------------------------
# suggest()
# ---------------------------------------------------------------------------

URL_SNAPSHOT = ClipboardSnapshot(plain_text="https://x.com/p?utm_source=fb&id=5")


class TestSuggest:
    def test_first_suggestion(self):
        state = SuggestionState()
        suggestion, new_state = suggest(URL_SNAPSHOT, None, state, now=100.0)
        assert suggestion is not None
        assert suggestion.recipe is Recipe.SMART_LINK
        assert suggestion.label == "clean link"
        assert suggestion.output == "https://x.com/p?id=5"
        assert new_state.last_notified_at == 100.0
        assert state.last_notified_at is None

    def test_throttled(self):
        state = SuggestionState(last_notified_at=100.0)
        suggestion, new_state = suggest(URL_SNAPSHOT, None, state, now=102.0)
        assert suggestion is None
        assert new_state is state

    def test_after_interval(self):
        state = SuggestionState(last_notified_at=100.0)
        suggestion, new_state = suggest(URL_SNAPSHOT, None, state, now=105.0, min_interval=5.0)
        assert suggestion is not None
        assert new_state.last_notified_at == 105.0

    def test_disabled(self):
        state = toggle(SuggestionState())
        assert state.enabled is False
        suggestion, new_state = suggest(URL_SNAPSHOT, None, state, now=1.0)
        assert suggestion is None
        assert new_state is state
        assert toggle(state).enabled is True

    def test_unchanged_content_not_suggested(self):
        snap = ClipboardSnapshot(plain_text="https://x.com/p?id=5")
        suggestion, _ = suggest(snap, None, SuggestionState(), now=1.0)
        assert suggestion is None

    def test_preview_truncated(self):
        url = "https://example.com/" + "a" * 120 + "?utm_source=x"
        suggestion, _ = suggest(ClipboardSnapshot(plain_text=url), None, SuggestionState(), now=1.0)
        assert suggestion is not None
        assert len(suggestion.preview) == 80
        assert suggestion.preview.endswith("…")
        assert len(suggestion.output) > 80

    def test_method_uses_bound_rules(self):
        sp = SmartPaste([DestinationRule(match="term", content="url", recipe="one-line")])
        suggestion, _ = sp.suggest(
            URL_SNAPSHOT, DestinationContext(app_identifier="terminal"),
            SuggestionState(), now=1.0,
        )
        # one-line leaves a URL unchanged, so there is nothing to offer
        assert suggestion is None
