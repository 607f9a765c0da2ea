"""Tests for smartpaste.dispatch — recipes and their fallback chains."""

from __future__ import annotations

import json

import pytest

from smartpaste.dispatch import NO_RAW_FALLBACK, apply
from smartpaste.items import RECIPE_CATALOGUE, ClipboardSnapshot, Recipe, UnknownRecipeError

# ---------------------------------------------------------------------------
# smart-link
# ---------------------------------------------------------------------------

class TestSmartLink:
    def test_plain_url_cleaned(self):
        snap = ClipboardSnapshot(plain_text=" https://x.com/p?utm_source=fb&id=5\n")
        assert apply("smart-link", snap) == "https://x.com/p?id=5"

    def test_html_only_url(self):
        snap = ClipboardSnapshot(html='<a href="#">https://x.com/p?fbclid=abc</a>')
        assert apply(Recipe.SMART_LINK, snap) == "https://x.com/p"

    def test_html_only_not_a_url(self):
        snap = ClipboardSnapshot(html="<p>not a link</p>")
        assert apply(Recipe.SMART_LINK, snap) is None

    def test_html_not_url_falls_back_to_plain(self):
        snap = ClipboardSnapshot(plain_text="   ", html="<p>hello there</p>")
        assert apply(Recipe.SMART_LINK, snap) == "   "


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------

class TestTableCsv:
    def test_from_html(self, table_snapshot):
        assert apply("table-csv", table_snapshot).splitlines()[0] == "Name,Price"

    def test_from_plain(self):
        snap = ClipboardSnapshot(plain_text="a\tb\n1\t2")
        assert apply("table-csv", snap) == "a,b\n1,2"

    def test_html_without_table_uses_plain(self):
        snap = ClipboardSnapshot(plain_text="a|b\n1|2", html="<p>a b 1 2</p>")
        assert apply("table-csv", snap) == "a,b\n1,2"

    def test_no_table_passes_plain_through(self):
        snap = ClipboardSnapshot(plain_text="hello")
        assert apply("table-csv", snap) == "hello"

    def test_ragged_html_rows_padded_and_trimmed(self):
        snap = ClipboardSnapshot(html=(
            "<table><tr><th>a</th><th>b</th><th>c</th></tr>"
            "<tr><td>1</td></tr>"
            "<tr><td>x</td><td>y</td><td>z</td><td>w</td></tr></table>"
        ))
        assert apply("table-csv", snap) == "a,b,c\n1,,\nx,y,z"


class TestTableMarkdown:
    def test_from_html(self, table_snapshot):
        lines = apply("table-md", table_snapshot).splitlines()
        assert lines[0] == "| Name          | Price |"
        assert lines[1] == "| ------------- | ----- |"
        assert lines[3] == "| Ben & Jerry's | 4,99  |"

    def test_from_plain_csv(self):
        out = apply("table-md", ClipboardSnapshot(plain_text="a,b\n1,2"))
        assert out.splitlines() == ["| a   | b   |", "| --- | --- |", "| 1   | 2   |"]

    def test_no_table_passes_plain_through(self):
        assert apply("table-md", ClipboardSnapshot(plain_text="words")) == "words"

    def test_nothing_at_all(self):
        assert apply("table-md", ClipboardSnapshot()) is None


# ---------------------------------------------------------------------------
# Form-changing recipes: no raw fallback
# ---------------------------------------------------------------------------

class TestNoRawFallback:
    def test_set(self):
        assert NO_RAW_FALLBACK == {Recipe.CODE_FENCE, Recipe.BULLETS, Recipe.ONE_LINE}

    @pytest.mark.parametrize("recipe", ["code-fence", "bullets", "one-line"])
    def test_empty_snapshot_returns_none(self, recipe):
        assert apply(recipe, ClipboardSnapshot()) is None
        assert apply(recipe, ClipboardSnapshot(plain_text=" \n ", html="<br>")) is None

    def test_code_fence_from_plain(self):
        out = apply("code-fence", ClipboardSnapshot(plain_text="x = 1;\ny = 2;"))
        assert out == "```\nx = 1;\ny = 2;\n```"

    def test_code_fence_from_html(self):
        out = apply("code-fence", ClipboardSnapshot(html="<pre>let x = 1;</pre>"))
        assert out == "```\nlet x = 1;\n```"

    def test_bullets_from_html(self):
        out = apply("bullets", ClipboardSnapshot(html="<p>one</p><p>two</p>"))
        assert out == "- one two"

    def test_one_line(self):
        assert apply("one-line", ClipboardSnapshot(plain_text="a\n  b\nc")) == "a b c"


# ---------------------------------------------------------------------------
# plain / json-pretty
# ---------------------------------------------------------------------------

class TestPlainAndJson:
    def test_plain_prefers_html(self):
        snap = ClipboardSnapshot(plain_text="raw", html="<p>Rich <b>text</b></p>")
        assert apply("plain", snap) == "Rich text"

    def test_plain_without_html(self):
        assert apply("plain", ClipboardSnapshot(plain_text="raw\ntext")) == "raw\ntext"

    def test_json_pretty(self):
        out = apply("json-pretty", ClipboardSnapshot(plain_text='{"a":[1,2]}'))
        assert json.loads(out) == {"a": [1, 2]}
        assert out.startswith("{\n  ")

    def test_json_pretty_from_html(self):
        out = apply("json-pretty", ClipboardSnapshot(plain_text="nope", html="<pre>[1, 2]</pre>"))
        assert out == "[\n  1,\n  2\n]"

    def test_invalid_json_passes_plain_through(self):
        assert apply("json-pretty", ClipboardSnapshot(plain_text="{oops")) == "{oops"


# ---------------------------------------------------------------------------
# Catalogue-wide behaviour
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("recipe", RECIPE_CATALOGUE)
def test_every_recipe_accepts_its_name(recipe):
    snap = ClipboardSnapshot(plain_text="alpha\nbeta")
    result = apply(recipe.value, snap)
    assert result is None or isinstance(result, str)


def test_unknown_recipe_raises():
    with pytest.raises(UnknownRecipeError):
        apply("markdown", ClipboardSnapshot(plain_text="x"))
