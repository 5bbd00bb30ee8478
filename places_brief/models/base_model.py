from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import List, Optional

from places_brief.models.places_model import LocationBias, PlaceEntry, PlacesResponse
from places_brief.models.summary_model import LocationSummary

class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

# --- API Request/Response Models ---
class SearchRequest(ApiModel):
    query: str = Field(..., min_length=1, pattern=r"\S", description="Text query, e.g. a category such as 'Schools'")
    location_bias: Optional[LocationBias] = Field(None, description="Rectangle to bias results towards")
    max_results: int = Field(5, gt=0, description="Maximum number of places to return")
    summarize: bool = Field(True, description="Ask the LLM for an area summary")

class SearchResult(ApiModel):
    query: str
    entries: List[PlaceEntry] = []
    summary: Optional[LocationSummary] = None
    # Raw envelope, kept for debugging output only
    response: Optional[PlacesResponse] = Field(None, exclude=True)
