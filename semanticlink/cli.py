"""Command-line interface for semanticlink."""

import json
import logging
import re
from pathlib import Path

import requests
import typer
import yaml
from rich.console import Console
from rich.table import Table

from semanticlink import __version__
from semanticlink.config import validate_media_type
from semanticlink.filter import filter
from semanticlink.http import HttpClient, InterfaceNotAvailableError
from semanticlink.logging_config import setup_logging
from semanticlink.models import Link, LinkedRepresentation
from semanticlink.selectors import LinkSelector

app = typer.Typer(
    name="semanticlink",
    help="Resolve the links that form the semantic interface of a resource.",
)
console = Console()


@app.callback()
def main_options(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug diagnostics (e.g. available links on a miss)",
    ),
) -> None:
    setup_logging(logging.DEBUG if verbose else logging.WARNING)


def _load(path: Path) -> LinkedRepresentation:
    try:
        return LinkedRepresentation.from_file(path)
    except (OSError, ValueError, yaml.YAMLError) as e:
        console.print(f"[bold red]Error:[/bold red] cannot read {path}: {e}")
        raise typer.Exit(2) from e


def _selectors(
    rels: list[str], media_type: str | None, title: str | None, regex: bool
) -> list[LinkSelector]:
    def pattern(value: str):
        return re.compile(value) if regex else value

    try:
        validate_media_type(media_type)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--media-type") from e

    return [
        LinkSelector(
            rel=pattern(rel),
            media_type=media_type,
            title=pattern(title) if title is not None else None,
        )
        for rel in rels
    ]


def _print_links(links: list[Link], heading: str) -> None:
    table = Table(title=heading)
    table.add_column("rel", style="cyan")
    table.add_column("href")
    table.add_column("type", style="dim")
    table.add_column("title", style="green")
    for link in links:
        table.add_row(link.rel, link.href, link.type or "", link.title or "")
    console.print(table)


@app.command()
def links(
    file: Path = typer.Argument(..., help="JSON or YAML representation"),
) -> None:
    """List every link in a representation."""
    representation = _load(file)
    _print_links(representation.links, f"{len(representation.links)} links")


@app.command()
def resolve(
    file: Path = typer.Argument(..., help="JSON or YAML representation"),
    rels: list[str] = typer.Argument(..., help="Link relations in precedence order"),
    media_type: str | None = typer.Option(
        None, "--media-type", "-m", help="Media type to match (default: any)"
    ),
    title: str | None = typer.Option(None, "--title", "-t", help="Title to match"),
    regex: bool = typer.Option(
        False, "--regex", help="Treat relations and title as regular expressions"
    ),
) -> None:
    """Resolve the links matching the relations, best match first."""
    representation = _load(file)
    selectors = _selectors(rels, media_type, title, regex)

    found = filter(representation, selectors)
    if not found:
        console.print(
            f"[yellow]The semantic interface '{','.join(rels)}' is not available[/yellow]"
        )
        raise typer.Exit(1)
    _print_links(found, f"{len(found)} matching links")


@app.command()
def follow(
    url: str = typer.Argument(..., help="URL of a JSON representation"),
    rels: list[str] = typer.Argument(..., help="Link relations in precedence order"),
    media_type: str | None = typer.Option(
        None, "--media-type", "-m", help="Media type to match (default: any)"
    ),
) -> None:
    """Fetch a representation, follow a link and print the result."""
    selectors = _selectors(rels, media_type, None, False)
    client = HttpClient()

    try:
        root = client.get([Link(rel="self", href=url)], "self")
        representation = LinkedRepresentation.model_validate(root.json())
        response = client.get(representation, selectors)
    except InterfaceNotAvailableError as e:
        console.print(f"[yellow]{e}[/yellow]")
        raise typer.Exit(1) from e
    except (requests.RequestException, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1) from e

    try:
        console.print_json(json.dumps(response.json()))
    except ValueError:
        console.print(response.text)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"semanticlink {__version__}")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
