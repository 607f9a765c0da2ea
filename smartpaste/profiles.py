"""YAML-based destination profiles.

A profile adds per-application recipe overrides on top of the built-in
selector::

    destinations:
      - match: [slack, discord]
        content: table
        recipe: table-md
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from smartpaste.items import ContentType, DestinationContext, Recipe


class ProfileError(ValueError):
    """Raised when a profile file cannot be read or does not validate."""

    def __init__(self, message: str, path: str | Path = "") -> None:
        super().__init__(message)
        self.path = str(path)


class DestinationRule(BaseModel):
    """Pick *recipe* for *content* when the app identifier contains any of *match*."""

    model_config = ConfigDict(frozen=True)

    match: tuple[str, ...] = Field(min_length=1)
    content: ContentType
    recipe: Recipe

    @field_validator("match", mode="before")
    @classmethod
    def coerce_match(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = [v]
        if isinstance(v, (list, tuple)):
            return tuple(str(s).strip().lower() for s in v if str(s).strip())
        return v

    def applies_to(self, content_type: ContentType, context: DestinationContext) -> bool:
        if content_type != self.content:
            return False
        app = context.app_identifier.lower()
        return any(needle in app for needle in self.match)


def parse_profile(data: Any, path: str | Path = "") -> list[DestinationRule]:
    """Validate already-loaded profile *data* into an ordered rule list."""
    if data is None:
        return []
    if not isinstance(data, dict):
        raise ProfileError("profile must be a mapping with a 'destinations' list", path)
    entries = data.get("destinations") or []
    if not isinstance(entries, list):
        raise ProfileError("'destinations' must be a list", path)
    try:
        return [DestinationRule.model_validate(entry) for entry in entries]
    except ValidationError as exc:
        raise ProfileError(f"invalid destination rule: {exc}", path) from exc


def load_profile(path: str | Path) -> list[DestinationRule]:
    """Load a YAML profile file and return its destination rules in file order."""
    try:
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    except OSError as exc:
        raise ProfileError(f"cannot read profile: {exc}", path) from exc
    except yaml.YAMLError as exc:
        raise ProfileError(f"invalid YAML: {exc}", path) from exc
    return parse_profile(data, path)
