"""Command-line interface for showarr."""

from __future__ import annotations

import json
import os
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from enum import Enum
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from showarr.clients.sonarr import SonarrClient
from showarr.config import DEFAULT_LOG_LEVEL, Config, ConfigurationError
from showarr.logging_config import configure_logging, parse_log_level
from showarr.models.common import Folder, Profile
from showarr.models.sonarr import TVShow

app = typer.Typer(
    name="showarr",
    help="Search, list and add TV shows via Sonarr.",
    no_args_is_help=True,
)

console = Console()
error_console = Console(stderr=True)


class OutputFormat(str, Enum):
    """Output format options."""

    JSON = "json"
    TABLE = "table"
    SIMPLE = "simple"


FormatOption = Annotated[OutputFormat, typer.Option("--format", "-f", help="Output format")]


def _monitored_seasons(show: TVShow) -> list[int]:
    return [s.season_number for s in show.seasons if s.monitored]


def format_shows_json(shows: list[TVShow]) -> str:
    """Format series as JSON."""
    data = [
        {
            "id": show.id,
            "tvdb_id": show.tvdb_id,
            "title": show.title,
            "year": show.year,
            "seasons": len(show.seasons),
            "monitored_seasons": _monitored_seasons(show),
        }
        for show in shows
    ]
    return json.dumps(data, indent=2)


def format_shows_table(shows: list[TVShow], title: str) -> Table:
    """Format series as a rich table."""
    table = Table(title=escape(title))

    table.add_column("TVDB ID", style="cyan")
    table.add_column("Title", style="green")
    table.add_column("Year")
    table.add_column("Seasons")
    table.add_column("Monitored")

    for show in shows:
        monitored = ", ".join(map(str, _monitored_seasons(show))) or "-"
        table.add_row(
            str(show.tvdb_id),
            escape(show.title),
            str(show.year),
            str(len(show.seasons)),
            monitored,
        )

    return table


def format_show_simple(show: TVShow) -> str:
    """Format a series as '<title> (<year>) [tvdb:<id>]'."""
    return f"{show.title} ({show.year}) [tvdb:{show.tvdb_id}]"


def print_shows(shows: list[TVShow], output_format: OutputFormat, title: str) -> None:
    """Print series in the specified format."""
    if output_format == OutputFormat.JSON:
        console.print(format_shows_json(shows), markup=False, highlight=False)
    elif output_format == OutputFormat.TABLE:
        console.print(format_shows_table(shows, title))
    else:
        for show in shows:
            console.print(format_show_simple(show), markup=False, highlight=False)


def print_records(
    records: list[Any],
    output_format: OutputFormat,
    title: str,
    columns: dict[str, Callable[[Any], object]],
) -> None:
    """Print folders or profiles in the specified format."""
    if output_format == OutputFormat.JSON:
        data = [{name: getter(r) for name, getter in columns.items()} for r in records]
        console.print(json.dumps(data, indent=2), markup=False, highlight=False)
    elif output_format == OutputFormat.TABLE:
        table = Table(title=title)
        for name in columns:
            table.add_column(name.replace("_", " ").title())
        for r in records:
            values = [getter(r) for getter in columns.values()]
            table.add_row(*("" if v is None else escape(str(v)) for v in values))
        console.print(table)
    else:
        for r in records:
            line = " ".join(str(getter(r)) for getter in columns.values())
            console.print(line, markup=False, highlight=False)


def get_client(config: Config) -> SonarrClient:
    """Create a SonarrClient from config."""
    return SonarrClient(config.require_sonarr(), timeout=config.timeout)


@contextmanager
def sonarr_session() -> Iterator[SonarrClient]:
    """Open a client from the loaded config, mapping failures to exit codes."""
    try:
        config = Config.load()
        with get_client(config) as client:
            yield client
    except typer.Exit:
        raise
    except ConfigurationError as e:
        error_console.print(f"[red]Configuration error:[/red] {e}")
        raise typer.Exit(2) from e
    except Exception as e:
        error_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2) from e


@app.callback()
def main(
    log_level: Annotated[
        str | None,
        typer.Option(
            "--log-level",
            "-l",
            help="Logging level (debug, info, warning, error, critical).",
        ),
    ] = None,
) -> None:
    """Search, list and add TV shows via Sonarr."""
    if log_level is None:
        log_level = os.environ.get("SHOWARR_LOG_LEVEL")
    if log_level is None:
        try:
            log_level = Config.load().logging.level
        except ConfigurationError:
            log_level = DEFAULT_LOG_LEVEL

    try:
        parse_log_level(log_level)
    except ValueError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e

    configure_logging(log_level)


@app.command()
def search(
    term: Annotated[str, typer.Argument(help="Title or 'tvdb:<id>' to look up")],
    output_format: FormatOption = OutputFormat.TABLE,
) -> None:
    """Search for series that can be added.

    Examples:
        showarr search "The Expanse"
        showarr search tvdb:280619 --format json
    """
    with sonarr_session() as client:
        shows = client.search_tv_shows(term)
    if not shows:
        error_console.print(f"[yellow]No series found for:[/yellow] {term}")
        raise typer.Exit(1)
    print_shows(shows, output_format, f"Search: {term}")


@app.command()
def shows(output_format: FormatOption = OutputFormat.TABLE) -> None:
    """List series in the library."""
    with sonarr_session() as client:
        library = client.get_tv_shows()
    print_shows(library, output_format, "Library")


@app.command()
def folders(output_format: FormatOption = OutputFormat.TABLE) -> None:
    """List root folders."""
    with sonarr_session() as client:
        result: list[Folder] = client.get_folders()
    print_records(
        result,
        output_format,
        "Root Folders",
        {"id": lambda f: f.id, "path": lambda f: f.path, "free_space": lambda f: f.free_space},
    )


@app.command()
def profiles(
    path: Annotated[
        str,
        typer.Option("--path", help="Profile endpoint ('profile' or 'qualityprofile')"),
    ] = "profile",
    output_format: FormatOption = OutputFormat.TABLE,
) -> None:
    """List quality profiles."""
    with sonarr_session() as client:
        result: list[Profile] = client.get_profiles(path)
    print_records(
        result,
        output_format,
        "Quality Profiles",
        {"id": lambda p: p.id, "name": lambda p: p.name},
    )


@app.command()
def add(
    tvdb_id: Annotated[int, typer.Argument(help="TVDB ID of the series")],
    profile: Annotated[int, typer.Option("--profile", "-p", help="Quality profile ID")],
    folder: Annotated[str, typer.Option("--folder", help="Root folder path")],
    season: Annotated[
        list[int] | None,
        typer.Option("--season", "-s", help="Season number to monitor (repeatable)"),
    ] = None,
    output_format: FormatOption = OutputFormat.SIMPLE,
) -> None:
    """Add a series, or monitor more seasons of a series already in the library.

    Examples:
        showarr add 280619 --season 1 --season 2 --profile 1 --folder /tv
    """
    with sonarr_session() as client:
        matches = client.search_tv_shows(f"tvdb:{tvdb_id}")
        candidate = next((s for s in matches if s.tvdb_id == tvdb_id), None)
        if candidate is None:
            error_console.print(f"[red]Series not found:[/red] tvdb:{tvdb_id}")
            raise typer.Exit(2)
        result = client.add_tv_show(candidate, list(season or []), profile, folder)
    print_shows([result], output_format, "Added")


@app.command()
def version() -> None:
    """Show version information."""
    from showarr import __version__

    console.print(f"showarr version {__version__}")


if __name__ == "__main__":
    app()
