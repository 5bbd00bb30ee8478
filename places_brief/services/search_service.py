import logging
from typing import Optional
from places_brief.core.config import Settings
from places_brief.core.llm_connection import LLMService
from places_brief.core.logger import logs
from places_brief.models.base_model import SearchResult
from places_brief.models.places_model import LocationBias, PlaceEntry
from places_brief.services.places_service import PlacesService
from places_brief.services.summary_service import SummaryService

class SearchService:
    def __init__(self, places: PlacesService, summarizer: Optional[SummaryService] = None):
        self.places = places
        self.summarizer = summarizer

    async def search(
        self,
        query: str,
        location_bias: Optional[LocationBias] = None,
        max_results: int = 5,
        summarize: bool = True
    ) -> SearchResult:
        # 1. Places search (errors propagate to the caller)
        response = await self.places.search_places(query, location_bias, max_results)

        # 2. Pair every place with its own contextual content
        contexts = response.contextual_contents
        if contexts is not None and len(contexts) != len(response.places):
            logs.log(
                logging.WARNING,
                f"contextualContents has {len(contexts)} item(s) for {len(response.places)} place(s)"
            )
        entries = [PlaceEntry(place=place, context=context) for place, context in response.paired()]

        # 3. Optional AI summary; None when skipped or failed
        summary = None
        if summarize and entries and self.summarizer is not None:
            summary = await self.summarizer.summarize_with_ai([entry.place for entry in entries])
            if summary is None:
                logs.log(logging.WARNING, "Continuing without AI summary")

        return SearchResult(query=query, entries=entries, summary=summary, response=response)


def build_search_service(settings: Settings, summarize: bool = True) -> SearchService:
    """Checks secrets first, then wires the services together."""
    settings.require_secrets(summarize=summarize)

    places = PlacesService(api_key=settings.GOOGLE_PLACES_API_KEY, timeout=settings.PLACES_TIMEOUT)
    summarizer = SummaryService(LLMService(settings)) if summarize else None
    return SearchService(places, summarizer)
