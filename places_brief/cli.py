import asyncio
import logging
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from places_brief.core.config import settings
from places_brief.core.errors import ConfigurationError, PlacesAPIError
from places_brief.core.logger import logs
from places_brief.display import print_result
from places_brief.models.places_model import LocationBias
from places_brief.services.search_service import build_search_service

app = typer.Typer(help="Search Google Places in a bounding box and summarize the area with an LLM")
console = Console(emoji=False)
err_console = Console(stderr=True, emoji=False)

# Exit codes
EXIT_PLACES_FAILED = 1
EXIT_CONFIG_ERROR = 2

# Mountain View, CA
DEFAULT_BIAS = (37.415, -122.091, 37.429, -122.065)

PRESETS = {
    "Schools": "Schools",
    "Restaurants": "Spicy vegetarian restaurants",
    "Parks": "Parks and playgrounds",
}


@app.command()
def search(
    query: str = typer.Argument(..., help="Text query, e.g. 'Schools'"),
    low_lat: float = typer.Option(DEFAULT_BIAS[0], help="Latitude of the south-west corner"),
    low_lng: float = typer.Option(DEFAULT_BIAS[1], help="Longitude of the south-west corner"),
    high_lat: float = typer.Option(DEFAULT_BIAS[2], help="Latitude of the north-east corner"),
    high_lng: float = typer.Option(DEFAULT_BIAS[3], help="Longitude of the north-east corner"),
    max_results: int = typer.Option(5, min=1, help="Maximum number of places"),
    summarize: bool = typer.Option(True, "--summarize/--no-summarize", help="Ask the LLM for an area summary"),
    raw: bool = typer.Option(False, "--raw", help="Print the raw API response first"),
):
    """
    Search places inside a rectangle and print them, followed by an AI summary.
    A missing summary still exits 0; a failed search (or any unexpected error
    while searching) exits 1; missing API keys exit 2.
    """
    try:
        bias = LocationBias.from_corners(low_lat, low_lng, high_lat, high_lng)
    except ValidationError as e:
        raise typer.BadParameter(str(e), param_hint="bounding box")

    try:
        service = build_search_service(settings, summarize=summarize)
    except ConfigurationError as e:
        logs.log(logging.ERROR, str(e))
        err_console.print(f"[bold red]Configuration error: {e}[/]")
        raise typer.Exit(code=EXIT_CONFIG_ERROR)

    try:
        result = asyncio.run(service.search(query, bias, max_results, summarize))
    except PlacesAPIError as e:
        logs.log(logging.ERROR, str(e))
        err_console.print(f"[bold red]Error: {e}[/]")
        raise typer.Exit(code=EXIT_PLACES_FAILED)
    except Exception as e:
        logs.log(logging.ERROR, f"Places search failed unexpectedly: {e!r}")
        err_console.print(f"[bold red]Unexpected error: {escape(repr(e))}[/]")
        raise typer.Exit(code=EXIT_PLACES_FAILED)

    print_result(console, result, raw=raw)

    if summarize and result.entries and result.summary is None:
        err_console.print("[yellow]AI summary unavailable, showing places only.[/]")


@app.command()
def presets():
    """List example queries."""
    table = Table(title="Example queries")
    table.add_column("Category", style="cyan")
    table.add_column("Query")
    for category, query in PRESETS.items():
        table.add_row(category, query)
    console.print(table)


def main():
    app()


if __name__ == "__main__":
    main()
