from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from pydantic.json_schema import GenerateJsonSchema
from typing import List, Optional

ANALYZE_LOCATION_TOOL = "analyze_location"


class LocationSummary(BaseModel):
    """
    AI-generated summary of an area. This model is the single source of the
    summary shape: the tool declaration sent to the LLM is generated from it
    and the LLM's answer is validated against it.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    overview: str = Field(..., description="Brief overview of the area")
    highlights: List[str] = Field(..., description="Key highlights of the area")
    price_range: Optional[str] = Field(None, description="Typical price range, if applicable")
    best_for: List[str] = Field(..., description="Audiences or activities the area suits best")
    warnings: Optional[List[str]] = Field(None, description="Things visitors should watch out for")
    rating: float = Field(..., ge=1, le=5, description="Overall rating from 1 to 5")


class _ToolSchemaGenerator(GenerateJsonSchema):
    """Renders Optional[X] as plain X and drops field titles."""

    def nullable_schema(self, schema):
        return self.generate_inner(schema["schema"])

    def field_title_should_be_set(self, schema) -> bool:
        return False


def summary_parameters_schema() -> dict:
    schema = LocationSummary.model_json_schema(
        by_alias=True, schema_generator=_ToolSchemaGenerator
    )
    schema.pop("title", None)
    schema.pop("description", None)
    for prop in schema["properties"].values():
        prop.pop("default", None)
    return schema


def analyze_location_tool() -> dict:
    """Tool declaration for the forced structured-output call."""
    return {
        "name": ANALYZE_LOCATION_TOOL,
        "description": "Analyze the places in an area and return a structured summary",
        "parameters": summary_parameters_schema(),
    }
