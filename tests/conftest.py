"""
Pytest configuration and shared fixtures.

Sample payloads follow the shape of the Places Text Search (New) API with
the field mask used by places-brief.
"""

import pytest

from places_brief.core.config import Settings
from places_brief.models.places_model import LocationBias, PlacesResponse


@pytest.fixture
def settings():
    """Settings with every secret present, independent of the local .env."""
    return Settings(
        _env_file=None,
        GOOGLE_PLACES_API_KEY="places-test-key",
        OPENAI_API_KEY="openai-test-key",
        LLM_PROVIDER="openai",
    )


@pytest.fixture
def mountain_view_bias():
    return LocationBias.from_corners(37.415, -122.091, 37.429, -122.065)


@pytest.fixture
def places_payload():
    """Two places, with contextual content for both."""
    return {
        "places": [
            {
                "id": "ChIJ_school_1",
                "displayName": {"text": "Mountain View Academy", "languageCode": "en"},
                "generativeSummary": {
                    "overview": {"text": "A top school", "languageCode": "en-US"},
                    "description": {"text": "Private K-12 school with small classes.", "languageCode": "en-US"},
                },
            },
            {
                "id": "ChIJ_cafe_2",
                "displayName": {"text": "Castro Street Cafe", "languageCode": "en"},
                "areaSummary": {
                    "contentBlocks": [
                        {
                            "topic": "overview",
                            "content": {"text": "Busy downtown strip with many restaurants.", "languageCode": "en-US"},
                            "references": {"places": ["places/ChIJ_cafe_2"]},
                        },
                        {
                            "topic": "coffee",
                            "content": {"text": "Several independent coffee shops.", "languageCode": "en-US"},
                        },
                    ],
                    "flagContentUri": "https://www.google.com/local/review/rap/report?postId=abc",
                },
            },
        ],
        "contextualContents": [
            {"reviews": [], "photos": [], "justifications": []},
            {
                "reviews": [
                    {
                        "name": "places/ChIJ_cafe_2/reviews/r1",
                        "rating": 5,
                        "text": {"text": "Great espresso!", "languageCode": "en"},
                        "authorAttribution": {
                            "displayName": "Sam",
                            "uri": "https://www.google.com/maps/contrib/1",
                            "photoUri": "https://lh3.googleusercontent.com/a/1",
                        },
                    }
                ],
                "photos": [
                    {
                        "name": "places/ChIJ_cafe_2/photos/p1",
                        "widthPx": 4032,
                        "heightPx": 3024,
                        "authorAttributions": [{"displayName": "Sam"}],
                    }
                ],
                "justifications": [
                    {"businessAvailabilityAttributesJustification": {"dineIn": True}}
                ],
            },
        ],
    }


@pytest.fixture
def places_response(places_payload):
    return PlacesResponse.model_validate(places_payload)


@pytest.fixture
def summary_payload():
    return {
        "overview": "A quiet residential area with good schools and a lively downtown.",
        "highlights": ["Mountain View Academy", "Castro Street cafes"],
        "priceRange": "$$",
        "bestFor": ["Families", "Coffee lovers"],
        "warnings": ["Parking is scarce downtown on weekends"],
        "rating": 4.5,
    }
