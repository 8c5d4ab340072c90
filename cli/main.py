"""shot-search CLI: run the extractor over saved search-result pages.

Usage:
    python cli/main.py --help

Commands:
    parse    → print every parsed shot as JSON
    summary  → one line per shot, plus a total
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from shot_search.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any working directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import json
import logging
from typing import List

import typer

from shot_search.config import settings
from shot_search.errors import DocumentParseError
from shot_search.scraper import Shot, extract_shots
from shot_search.scraper.patterns import HOST

app = typer.Typer(
    name="shot-search",
    help="Extract shots from saved search-result HTML.",
    no_args_is_help=True,
)


@app.callback()
def _configure() -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _read_source(source: str) -> bytes:
    """Read raw HTML from *source*, a file path or ``-`` for stdin.

    Bytes are handed to the parser undecoded so the page's own charset wins.
    """
    if source == "-":
        return sys.stdin.buffer.read()
    path = Path(source)
    if not path.is_file():
        typer.echo(f"❌ No such file: {source}", err=True)
        raise typer.Exit(code=1)
    return path.read_bytes()


def _extract(source: str, base_url: str) -> List[Shot]:
    html = _read_source(source)
    try:
        return extract_shots(html, base_url)
    except DocumentParseError as e:
        typer.echo(f"❌ Cannot parse {source}: {e}", err=True)
        raise typer.Exit(code=1)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------
@app.command("parse")
def parse(
    source: str = typer.Argument(..., help="HTML file to read, or '-' for stdin."),
    base_url: str = typer.Option(HOST, "--base-url", help="Prefix for relative links."),
    pretty: bool = typer.Option(False, "--pretty", help="Indent the JSON output."),
) -> None:
    """Print the shots found in SOURCE as a JSON array."""
    shots = _extract(source, base_url)
    typer.echo(json.dumps([s.to_dict() for s in shots], indent=2 if pretty else None))


@app.command("summary")
def summary(
    source: str = typer.Argument(..., help="HTML file to read, or '-' for stdin."),
    base_url: str = typer.Option(HOST, "--base-url", help="Prefix for relative links."),
) -> None:
    """Print one line per shot in SOURCE."""
    shots = _extract(source, base_url)
    if not shots:
        typer.echo("[summary] No shots found.")
        return
    for s in shots:
        typer.echo(
            f"  {s.id}  ♥{s.likes_count}  👁{s.views_count}  {s.title!r}  by @{s.author.username}"
        )
    typer.echo(f"[summary] {len(shots)} shot(s)")


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
