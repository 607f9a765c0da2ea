"""Line-shape converters and the JSON pretty-printer."""

from __future__ import annotations

import json
import logging

from .patterns import loads_strict

logger = logging.getLogger(__name__)

_JSON_INDENT = 2


def to_bullets(text: str) -> str | None:
    """Turn every non-empty line into a ``- `` bullet.  ``None`` if there are no lines."""
    lines = [line.strip() for line in text.splitlines()]
    items = [f"- {line}" for line in lines if line]
    return "\n".join(items) if items else None


def to_one_line(text: str) -> str | None:
    collapsed = " ".join(text.split())
    return collapsed or None


def json_pretty(text: str) -> str | None:
    """Re-serialize JSON *text* with two-space indentation, or ``None`` if it does not parse."""
    try:
        value = loads_strict(text.strip())
    except ValueError as exc:
        logger.debug("JSON pretty-print skipped: %s", exc)
        return None
    return json.dumps(value, indent=_JSON_INDENT, ensure_ascii=False)
