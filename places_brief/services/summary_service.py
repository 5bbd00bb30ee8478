import logging
from typing import List, Optional, Sequence
from pydantic import TypeAdapter
from places_brief.core.llm_connection import LLMService
from places_brief.core.logger import logs
from places_brief.models.places_model import Place
from places_brief.models.summary_model import LocationSummary, analyze_location_tool

SYSTEM_PROMPT = (
    "You are a local area analyst. "
    "You are given the places found in one neighborhood, with their overviews, descriptions and area information. "
    "Summarize what the area offers: a short overview, its key highlights, the typical price range if it applies, "
    "who the area is best for, any warnings a visitor should know about, and an overall rating from 1 to 5. "
    "Answer only by calling the analyze_location function with a JSON object matching its parameters."
)

_places_adapter = TypeAdapter(List[Place])


def build_places_prompt(places: Sequence[Place]) -> str:
    """Flattens places into plain text, one blank line between places."""
    sections = []
    for place in places:
        lines = [f"Name: {place.display_text}"]

        summary = place.generative_summary
        if summary and summary.overview:
            lines.append(f"Overview: {summary.overview.text}")
        if summary and summary.description:
            lines.append(f"Description: {summary.description.text}")

        if place.area_summary:
            for block in place.area_summary.content_blocks:
                lines.append(f"{block.topic.upper()}: {block.content.text}")

        sections.append("\n".join(lines))

    return "\n\n".join(sections)


class SummaryService:
    def __init__(self, llm: LLMService):
        self.llm = llm

    async def summarize_with_ai(self, places: Sequence[Place]) -> Optional[LocationSummary]:
        """
        Asks the LLM for a LocationSummary of the given places.
        Never raises: any failure is logged and the result is None.
        """
        try:
            places = _places_adapter.validate_python(list(places))
            if not places:
                logs.log(logging.INFO, "No places to summarize")
                return None

            prompt = build_places_prompt(places)
            arguments = await self.llm.call_tool(SYSTEM_PROMPT, prompt, analyze_location_tool())
            summary = LocationSummary.model_validate_json(arguments, strict=True)

            logs.log(logging.INFO, f"AI summary generated for {len(places)} place(s), rating {summary.rating}")
            return summary

        except Exception as e:
            logs.log(logging.ERROR, f"AI summary failed: {str(e)}")
            return None
