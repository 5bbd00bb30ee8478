"""
Response model for the Places Text Search (New) API.

Wire names are camelCase; Python attributes are snake_case. Unknown fields
are kept so a parsed envelope dumps back to the payload it came from.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel
from typing import List, Optional, Tuple


class WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        frozen=True,
    )

    def to_wire(self) -> dict:
        """Dumps the model exactly as it arrived on the wire."""
        return self.model_dump(by_alias=True, exclude_unset=True)


# --- Location bias ---
class LatLng(WireModel):
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


class Rectangle(WireModel):
    low: LatLng
    high: LatLng

    @model_validator(mode="after")
    def check_corners(self) -> "Rectangle":
        if self.low.latitude > self.high.latitude:
            raise ValueError("low.latitude must not exceed high.latitude")
        if self.low.longitude > self.high.longitude:
            raise ValueError("low.longitude must not exceed high.longitude")
        return self


class LocationBias(WireModel):
    rectangle: Rectangle

    @classmethod
    def from_corners(
        cls, low_lat: float, low_lng: float, high_lat: float, high_lng: float
    ) -> "LocationBias":
        return cls(
            rectangle=Rectangle(
                low=LatLng(latitude=low_lat, longitude=low_lng),
                high=LatLng(latitude=high_lat, longitude=high_lng),
            )
        )


# --- Places ---
class LocalizedText(WireModel):
    text: str
    language_code: Optional[str] = None


class GenerativeSummary(WireModel):
    overview: Optional[LocalizedText] = None
    description: Optional[LocalizedText] = None


class References(WireModel):
    places: List[str] = []


class ContentBlock(WireModel):
    topic: str
    content: LocalizedText
    references: Optional[References] = None


class AreaSummary(WireModel):
    content_blocks: List[ContentBlock] = []
    flag_content_uri: Optional[str] = None


class Place(WireModel):
    id: str
    display_name: Optional[LocalizedText] = None
    generative_summary: Optional[GenerativeSummary] = None
    area_summary: Optional[AreaSummary] = None

    @property
    def display_text(self) -> str:
        if self.display_name and self.display_name.text:
            return self.display_name.text
        return "No name available"


# --- Contextual content ---
class AuthorAttribution(WireModel):
    display_name: Optional[str] = None
    uri: Optional[str] = None
    photo_uri: Optional[str] = None


class Review(WireModel):
    name: Optional[str] = None
    rating: Optional[float] = None
    text: Optional[LocalizedText] = None
    author_attribution: Optional[AuthorAttribution] = None


class Photo(WireModel):
    name: str
    width_px: Optional[int] = None
    height_px: Optional[int] = None
    author_attributions: List[AuthorAttribution] = []


class HighlightedTextRange(WireModel):
    start_index: int = 0
    end_index: int = 0


class HighlightedText(WireModel):
    text: str
    highlighted_text_ranges: List[HighlightedTextRange] = []


class ReviewJustification(WireModel):
    highlighted_text: Optional[HighlightedText] = None
    review: Optional[Review] = None


class BusinessAvailabilityAttributesJustification(WireModel):
    dine_in: Optional[bool] = None
    takeout: Optional[bool] = None
    delivery: Optional[bool] = None


class Justification(WireModel):
    review_justification: Optional[ReviewJustification] = None
    business_availability_attributes_justification: Optional[
        BusinessAvailabilityAttributesJustification
    ] = None


class ContextualContent(WireModel):
    reviews: List[Review] = []
    photos: List[Photo] = []
    justifications: List[Justification] = []

    @property
    def top_review(self) -> Optional[Review]:
        """First review that actually carries text."""
        for review in self.reviews:
            if review.text and review.text.text:
                return review
        return None


# --- Envelope ---
class PlacesResponse(WireModel):
    # The service answers {} when nothing matches
    places: List[Place] = []
    contextual_contents: Optional[List[ContextualContent]] = None

    def paired(self) -> List[Tuple[Place, Optional[ContextualContent]]]:
        """
        Joins each place with the contextual content at the same index.
        Places past the end of contextualContents get None.
        """
        contexts = self.contextual_contents or []
        return [
            (place, contexts[i] if i < len(contexts) else None)
            for i, place in enumerate(self.places)
        ]


class PlaceEntry(WireModel):
    """A place together with its own contextual content."""
    place: Place
    context: Optional[ContextualContent] = None
