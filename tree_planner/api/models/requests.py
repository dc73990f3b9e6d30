"""
API request models using Pydantic.
"""
from typing import Union

from pydantic import BaseModel, Field, StrictFloat, StrictInt
from pydantic.alias_generators import to_camel


class Coordinates(BaseModel):
    """A map click, parsed from query parameters."""
    lat: float = Field(
        ge=-90,
        le=90,
        allow_inf_nan=False,
        description="Latitude in degrees",
        examples=[14.6537]
    )
    lng: float = Field(
        ge=-180,
        le=180,
        allow_inf_nan=False,
        description="Longitude in degrees",
        examples=[121.0685]
    )


class TreeRecommendationRequest(BaseModel):
    """Request body for the tree recommendation endpoint."""
    land_area_sqm: float = Field(
        ge=1,
        strict=True,
        description="Plot area in square meters"
    )
    barangay_id: Union[StrictInt, StrictFloat] = Field(
        description="Identifier of the barangay the plot lies in; any JSON number"
    )

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "landAreaSqm": 150,
                "barangayId": 2,
            }
        }
