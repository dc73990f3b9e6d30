"""
Domain models for barangay and tree catalog data.

These models represent the core domain entities and should be independent
of any infrastructure concerns (API clients, databases, etc.). Field names
are snake_case in Python and camelCase on the wire.
"""
from enum import Enum
from typing import List

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class FloodRisk(str, Enum):
    """Flood-risk classification of a barangay."""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class UrbanDensity(str, Enum):
    """Urban-density classification of a barangay."""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class CatalogModel(BaseModel):
    """Base for immutable catalog records exchanged in camelCase."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        frozen = True


class Barangay(CatalogModel):
    """Smallest administrative area, with coordinates and risk classifications."""
    id: int
    name: str
    latitude: float = Field(description="Latitude in degrees (treated as planar)")
    longitude: float = Field(description="Longitude in degrees (treated as planar)")
    population: int = Field(ge=0)
    flood_risk: FloodRisk
    urban_density: UrbanDensity


class GrowthTimeline(CatalogModel):
    """Free-text durations for each growth stage, in stage order."""
    seedling: str
    juvenile: str
    mature: str


class Tree(CatalogModel):
    """Plantable species with its spatial and environmental suitability."""
    id: int
    name: str
    scientific_name: str
    description: str
    image_url: str
    min_area_sqm: float = Field(
        gt=0,
        description="Minimum land footprint in m² a single specimen requires"
    )
    flood_resilient: bool = False
    urban_suitable: bool = False
    growth_timeline: GrowthTimeline


class Constraints(CatalogModel):
    """Classifications of the barangay that drove the species filter."""
    flood_risk: FloodRisk
    urban_density: UrbanDensity


class RecommendationResult(CatalogModel):
    """Species viable for a plot in a barangay, with a capacity estimate."""
    recommended_trees: List[Tree]
    max_trees: int = Field(ge=1, description="Estimated number of planting slots")
    barangay: Barangay
    constraints: Constraints
