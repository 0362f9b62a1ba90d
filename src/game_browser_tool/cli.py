"""Command line interface for game-browser-tool."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from pathlib import Path
from typing import Annotated, Any, Optional

import typer
from bs4 import BeautifulSoup
from rich.console import Console
from rich.table import Table

from .config import load_config
from .factory import build_browser, build_hero_parser
from .models import HeroItemType, ServerVariant
from .parsers.hero import HeroParser
from .parsers.query import parse_html
from .result import Failed

app = typer.Typer(help="Game Browser Tool entry point")
console = Console()


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Configure logging before executing any command."""

    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


@app.command()
def version() -> None:
    """Print the package version."""

    try:
        typer.echo(get_version("game-browser-tool"))
    except PackageNotFoundError:  # pragma: no cover - when running from source tree
        typer.echo("0.0.0")


@app.command()
def parse(
    page: Annotated[Path, typer.Argument(help="Saved HTML page of the hero screen.")],
    variant: Annotated[
        ServerVariant,
        typer.Option("--variant", help="Markup dialect of the server that produced the page."),
    ] = ServerVariant.TRAVIAN_OFFICIAL,
) -> None:
    """Print the hero facts found in a saved page."""

    doc = parse_html(page.read_text(encoding="utf-8"))
    render_hero(build_hero_parser(variant), doc)


@app.command()
def inspect(
    config_path: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Path to YAML configuration."),
    ] = None,
    env_file: Annotated[
        Optional[Path],
        typer.Option("--env-file", help="Path to an .env file with default configuration values."),
    ] = None,
    url: Annotated[
        Optional[str],
        typer.Option("--url", help="Page to open; defaults to the configured server URL."),
    ] = None,
    variant: Annotated[
        Optional[ServerVariant],
        typer.Option("--variant", help="Markup dialect of the server."),
    ] = None,
    headless: Annotated[
        Optional[bool],
        typer.Option("--headless/--headed", help="Run the browser in headless mode (or headed)."),
    ] = None,
    profile: Annotated[
        Optional[str],
        typer.Option("--profile", help="Profile directory name under the cache root."),
    ] = None,
) -> None:
    """Open a page in the browser and print the hero facts found on it."""

    overrides: dict[str, Any] = {}
    if url is not None or variant is not None:
        overrides.setdefault("server", {})
        if url is not None:
            overrides["server"]["url"] = url
        if variant is not None:
            overrides["server"]["variant"] = variant.value
    if headless is not None or profile is not None:
        overrides.setdefault("browser", {})
        if headless is not None:
            overrides["browser"]["headless"] = headless
        if profile is not None:
            overrides["browser"]["profile_name"] = profile

    config = load_config(config_path, env_file=env_file, **overrides)
    if not config.server.url:
        raise typer.BadParameter("No URL given and none configured", param_hint="--url")

    parser = build_hero_parser(config.server.variant)
    browser = build_browser(config.browser)
    outcome = browser.setup()
    if isinstance(outcome, Failed):
        _report(outcome)
        raise typer.Exit(code=1)
    try:
        outcome = browser.navigate(config.server.url)
        if isinstance(outcome, Failed):
            _report(outcome)
            raise typer.Exit(code=1)
        render_hero(parser, browser.snapshot())
    finally:
        browser.shutdown()


def render_hero(parser: HeroParser, doc: BeautifulSoup) -> None:
    summary = Table(title="Hero", show_header=False)
    summary.add_row("Adventure cooldown", str(parser.get_adventure_duration(doc)))
    summary.add_row("Can start adventure", "yes" if parser.can_start_adventure(doc) else "no")
    console.print(summary)

    items = Table(title="Inventory")
    items.add_column("Item")
    items.add_column("Amount", justify="right")
    for item in parser.get_items(doc):
        items.add_row(_item_name(item.type), str(item.amount))
    console.print(items)


def _item_name(item_type: HeroItemType | int) -> str:
    if isinstance(item_type, HeroItemType):
        return item_type.name.lower()
    return f"item{item_type}"


def _report(failure: Failed) -> None:
    console.print(f"[red]{failure.kind.value}[/red] {failure.message}")
    for marker in failure.trace:
        console.print(f"  at {marker}", style="dim")


if __name__ == "__main__":
    app()
