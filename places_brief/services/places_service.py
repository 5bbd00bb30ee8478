import httpx
import logging
from typing import Optional
from places_brief.core.errors import PlacesAPIError
from places_brief.core.logger import logs
from places_brief.models.places_model import LocationBias, PlacesResponse

PLACES_SEARCH_URL = "https://places.googleapis.com/v1/places:searchText"
PLACES_FIELD_MASK = (
    "places.id,"
    "places.displayName,"
    "places.generativeSummary,"
    "places.areaSummary,"
    "contextualContents"
)

class PlacesService:
    def __init__(self, api_key: str, timeout: float = 30.0, transport: httpx.AsyncBaseTransport = None):
        self.api_key = api_key
        self.timeout = timeout
        self.base_url = PLACES_SEARCH_URL
        self.transport = transport

    async def search_places(
        self,
        query: str,
        location_bias: Optional[LocationBias] = None,
        max_results: int = 5
    ) -> PlacesResponse:
        """
        One Text Search request. The envelope is returned as the API sent it.
        Transport and HTTP failures are raised as PlacesAPIError; anything
        else propagates untouched.
        """
        if not query or not query.strip():
            raise ValueError("query must be a non-empty string")
        if isinstance(max_results, bool) or not isinstance(max_results, int) or max_results < 1:
            raise ValueError("max_results must be a positive integer")

        payload = {
            "textQuery": query,
            "maxResultCount": max_results
        }
        if location_bias is not None:
            payload["location_bias"] = location_bias.to_wire()

        headers = {
            "Content-Type": "application/json",
            "X-Goog-Api-Key": self.api_key,
            "X-Goog-FieldMask": PLACES_FIELD_MASK
        }

        logs.log(logging.INFO, f"Searching places for '{query}' (max {max_results})")

        async with httpx.AsyncClient(transport=self.transport) as client:
            try:
                response = await client.post(
                    self.base_url,
                    json=payload,
                    headers=headers,
                    timeout=self.timeout
                )
                response.raise_for_status()
            except httpx.HTTPError as e:
                logs.log(logging.ERROR, f"Places API failed: {str(e)}")
                raise PlacesAPIError(f"API request failed: {str(e)}") from e

        result = PlacesResponse.model_validate(response.json())
        logs.log(logging.INFO, f"Places API returned {len(result.places)} place(s) for '{query}'")
        return result
