"""CLI entry point: python -m smartpaste --text FILE [--html FILE] [--app ID] [options]"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from smartpaste.classifier import explain
from smartpaste.items import RECIPE_CATALOGUE, ClipboardSnapshot, DestinationContext
from smartpaste.pipeline import smart_paste
from smartpaste.profiles import ProfileError, load_profile

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NOTHING_TO_DO = 1
EXIT_USAGE = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="smartpaste",
        description=(
            "Classify clipboard content and transform it for the app you are pasting into.\n"
            "Reads the payload from files or stdin and writes the result to stdout."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--text", default=None, metavar="FILE",
                        help="File holding the plain-text flavour ('-' for stdin)")
    parser.add_argument("--html", default=None, metavar="FILE",
                        help="File holding the HTML flavour ('-' for stdin)")
    parser.add_argument("--app", default="unknown.app", metavar="ID",
                        help="Destination app identifier, e.g. com.microsoft.Excel")
    parser.add_argument("--recipe", default=None,
                        choices=[r.value for r in RECIPE_CATALOGUE], metavar="NAME",
                        help="Force a recipe instead of the recommended one")
    parser.add_argument("--profile", default=None, metavar="FILE",
                        help="YAML profile with per-destination recipe overrides")
    parser.add_argument("--explain", action="store_true", default=False,
                        help="Show how the content was classified (on stderr)")
    parser.add_argument("--list-recipes", action="store_true", default=False,
                        help="List the available recipes and exit")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        metavar="{DEBUG,INFO,WARNING,ERROR}",
                        help="Logging level (default: WARNING)")
    return parser


def _read_source(source: str | None) -> str | None:
    if source is None:
        return None
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _print_recipes() -> None:
    from rich import box
    from rich.console import Console
    from rich.table import Table

    tbl = Table(title="[bold]Recipes[/bold]", box=box.SIMPLE_HEAVY)
    tbl.add_column("Name", style="cyan", no_wrap=True)
    tbl.add_column("Label", style="green")
    for recipe in RECIPE_CATALOGUE:
        tbl.add_row(recipe.value, recipe.label)
    Console().print(tbl)


def _print_explanation(snapshot: ClipboardSnapshot, app: str, recipe: str, label: str) -> None:
    from rich.console import Console
    from rich.panel import Panel

    classification = explain(snapshot)
    Console(stderr=True).print(
        Panel.fit(
            f"Content type:  [green]{classification.content_type.value}[/green]\n"
            f"Rule:          {classification.rule}\n"
            f"Destination:   [yellow]{app}[/yellow]\n"
            f"Recipe:        [bold cyan]{recipe}[/bold cyan] ({label})",
            border_style="cyan",
            title="[bold]SmartPaste[/bold]",
        ),
    )


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="[%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.list_recipes:
        _print_recipes()
        return EXIT_OK

    if args.text is None and args.html is None:
        args.text = "-"
    if args.text == "-" and args.html == "-":
        print("ERROR: only one of --text/--html can read stdin", file=sys.stderr)
        return EXIT_USAGE

    try:
        snapshot = ClipboardSnapshot(
            plain_text=_read_source(args.text),
            html=_read_source(args.html),
        )
    except (OSError, UnicodeDecodeError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_USAGE

    rules = []
    if args.profile:
        try:
            rules = load_profile(args.profile)
        except ProfileError as exc:
            print(f"ERROR: {args.profile}: {exc}", file=sys.stderr)
            return EXIT_USAGE
        logger.info("Loaded %d destination rule(s) from %s", len(rules), args.profile)

    context = DestinationContext(app_identifier=args.app)
    result = smart_paste(snapshot, context, recipe=args.recipe, rules=rules)

    if args.explain:
        _print_explanation(snapshot, context.app_identifier, result.recipe.value, result.label)

    if result.output is None:
        return EXIT_NOTHING_TO_DO
    sys.stdout.write(result.output)
    if not result.output.endswith("\n"):
        sys.stdout.write("\n")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
