"""Console rendering of a search result."""

from typing import Optional
from rich.console import Console
from rich.markup import escape

from places_brief.models.base_model import SearchResult
from places_brief.models.places_model import ContextualContent, Place
from places_brief.models.summary_model import LocationSummary

SEPARATOR = "-------------------"


def print_place(console: Console, index: int, place: Place, context: Optional[ContextualContent]):
    console.print(f"\n{SEPARATOR}")
    console.print(f"[bold]Place {index}: {escape(place.display_text)}[/bold]")

    summary = place.generative_summary
    if summary and summary.overview:
        console.print("\n[cyan]Overview:[/cyan]")
        console.print(escape(summary.overview.text))

    if summary and summary.description:
        console.print("\n[cyan]Detailed Description:[/cyan]")
        console.print(escape(summary.description.text))

    if place.area_summary:
        console.print("\n[cyan]Area Information:[/cyan]")
        for block in place.area_summary.content_blocks:
            console.print(f"\n[bold]{escape(block.topic.upper())}:[/bold]")
            console.print(escape(block.content.text))

    review = context.top_review if context else None
    if review:
        console.print("\n[cyan]Top Review:[/cyan]")
        console.print(f'"{escape(review.text.text)}"')


def print_summary(console: Console, summary: LocationSummary):
    console.print(f"\n{SEPARATOR}")
    console.print("[bold green]AI Summary[/bold green]")
    console.print(escape(summary.overview))

    console.print("\n[cyan]Highlights:[/cyan]")
    for item in summary.highlights:
        console.print(f"  - {escape(item)}")

    console.print("\n[cyan]Best For:[/cyan]")
    for item in summary.best_for:
        console.print(f"  - {escape(item)}")

    if summary.price_range:
        console.print(f"\n[cyan]Price Range:[/cyan] {escape(summary.price_range)}")

    if summary.warnings:
        console.print("\n[yellow]Warnings:[/yellow]")
        for item in summary.warnings:
            console.print(f"  - {escape(item)}")

    console.print(f"\n[bold]Rating:[/bold] {summary.rating:g}/5")


def print_result(console: Console, result: SearchResult, raw: bool = False):
    if raw and result.response is not None:
        console.print("API Response:")
        console.print_json(data=result.response.to_wire())

    if not result.entries:
        console.print("No places found in the response")
        return

    for index, entry in enumerate(result.entries, start=1):
        print_place(console, index, entry.place, entry.context)

    if result.summary:
        print_summary(console, result.summary)
