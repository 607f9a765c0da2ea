"""Shared pytest fixtures."""

from __future__ import annotations

import pytest

from smartpaste.items import ClipboardSnapshot, DestinationContext

HTML_TABLE = """<meta charset="utf-8">
<table>
  <thead>
    <tr><th>Name</th><th>Price</th></tr>
  </thead>
  <tbody>
    <tr><td><b>Apple</b></td><td>1.50</td></tr>
    <tr><td>Ben &amp; Jerry&apos;s</td><td>4,99</td></tr>
  </tbody>
</table>"""


@pytest.fixture
def html_table() -> str:
    return HTML_TABLE


@pytest.fixture
def table_snapshot() -> ClipboardSnapshot:
    return ClipboardSnapshot(plain_text="Name\tPrice\nApple\t1.50", html=HTML_TABLE)


@pytest.fixture
def obsidian() -> DestinationContext:
    return DestinationContext(app_identifier="md.obsidian")


@pytest.fixture
def excel() -> DestinationContext:
    return DestinationContext(app_identifier="com.microsoft.Excel")
