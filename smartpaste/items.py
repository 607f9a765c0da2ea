"""Pydantic models and enums shared by every stage of the paste pipeline."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class ContentType(str, Enum):
    """What the clipboard holds.  Declaration order follows classifier priority."""

    URL = "url"
    HTML = "html"
    TABLE = "table"
    CODE = "code"
    PLAIN = "plain"


class Recipe(str, Enum):
    """Named transform strategies.  The values are the public vocabulary."""

    SMART_LINK = "smart-link"
    TABLE_CSV = "table-csv"
    TABLE_MD = "table-md"
    CODE_FENCE = "code-fence"
    PLAIN = "plain"
    BULLETS = "bullets"
    ONE_LINE = "one-line"
    JSON_PRETTY = "json-pretty"

    @property
    def label(self) -> str:
        return RECIPE_LABELS[self]


RECIPE_CATALOGUE: tuple[Recipe, ...] = tuple(Recipe)

RECIPE_LABELS: dict[Recipe, str] = {
    Recipe.SMART_LINK: "clean link",
    Recipe.TABLE_CSV: "CSV table",
    Recipe.TABLE_MD: "Markdown table",
    Recipe.CODE_FENCE: "code block",
    Recipe.PLAIN: "plain text",
    Recipe.BULLETS: "bullet list",
    Recipe.ONE_LINE: "single line",
    Recipe.JSON_PRETTY: "pretty JSON",
}


class UnknownRecipeError(ValueError):
    """Raised when a recipe name is not part of :data:`RECIPE_CATALOGUE`."""

    def __init__(self, name: str) -> None:
        names = ", ".join(r.value for r in RECIPE_CATALOGUE)
        super().__init__(f"Unknown recipe {name!r}; expected one of: {names}")
        self.name = name


def parse_recipe(name: Recipe | str) -> Recipe:
    """Return the :class:`Recipe` for *name*, raising on anything outside the catalogue."""
    if isinstance(name, Recipe):
        return name
    try:
        return Recipe(name.strip().lower())
    except (ValueError, AttributeError):
        raise UnknownRecipeError(str(name)) from None


# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------

class ClipboardSnapshot(BaseModel):
    """Clipboard contents captured once per paste or suggestion event."""

    model_config = ConfigDict(frozen=True)

    plain_text: str | None = None
    html: str | None = None


class DestinationContext(BaseModel):
    """Identifies the application a result will be pasted into."""

    model_config = ConfigDict(frozen=True)

    app_identifier: str = "unknown.app"

    @field_validator("app_identifier", mode="before")
    @classmethod
    def default_when_blank(cls, v: Any) -> Any:
        if v is None or (isinstance(v, str) and not v.strip()):
            return "unknown.app"
        return v


# ---------------------------------------------------------------------------
# Outputs
# ---------------------------------------------------------------------------

class PasteResult(BaseModel):
    """Outcome of one pipeline run.

    ``output`` is ``None`` when there is nothing to paste; callers must then
    leave the clipboard untouched.
    """

    model_config = ConfigDict(frozen=True)

    content_type: ContentType
    recipe: Recipe
    output: str | None = None
    changed: bool = False

    @property
    def label(self) -> str:
        return self.recipe.label
