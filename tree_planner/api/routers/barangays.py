"""
API router for barangay endpoints.
"""
from typing import Annotated, List, Optional

from fastapi import APIRouter, Depends, Query, Request
from pydantic import ValidationError

from tree_planner.api.dependencies import PlantingServiceDep
from tree_planner.api.models.requests import Coordinates
from tree_planner.api.models.responses import error_responses
from tree_planner.api.rate_limit import RATE_LIMIT, limiter
from tree_planner.domain.exceptions import InvalidInputError
from tree_planner.domain.models import Barangay


router = APIRouter(
    prefix="/barangays",
    tags=["barangays"],
)


def parse_coordinates(
    lat: Annotated[Optional[str], Query(description="Latitude in degrees")] = None,
    lng: Annotated[Optional[str], Query(description="Longitude in degrees")] = None,
) -> Coordinates:
    """
    Parse the map click from raw query parameters.

    Raises:
        InvalidInputError: If either value is missing or not a usable number
    """
    try:
        return Coordinates(lat=lat, lng=lng)
    except ValidationError:
        raise InvalidInputError("Invalid coordinates") from None


@router.get(
    "",
    response_model=List[Barangay],
    summary="List barangays",
    responses=error_responses(429, 500),
)
@limiter.limit(RATE_LIMIT)
async def list_barangays(
    request: Request,
    planting_service: PlantingServiceDep,
) -> List[Barangay]:
    """Return the full barangay catalog, unfiltered."""
    return await planting_service.list_barangays()


@router.get(
    "/nearest",
    response_model=Barangay,
    summary="Find the nearest barangay",
    description="""
    Resolve a map click to the closest barangay.

    Distance is planar Euclidean distance on latitude/longitude degrees,
    which is accurate enough within a single municipality. When several
    barangays are equally close, the first in catalog order is returned.

    Both `lat` and `lng` are required, must be finite numbers, and must lie
    within [-90, 90] and [-180, 180]. Empty or missing values are rejected
    with 400 "Invalid coordinates" rather than being read as 0.
    """,
    responses={
        200: {
            "description": "Nearest barangay",
            "content": {
                "application/json": {
                    "example": {
                        "id": 3,
                        "name": "Barangay UP Campus, Quezon City",
                        "latitude": 14.6537,
                        "longitude": 121.0685,
                        "population": 35000,
                        "floodRisk": "Low",
                        "urbanDensity": "Medium",
                    }
                }
            }
        },
        **error_responses(400, 404, 429, 500),
    }
)
@limiter.limit(RATE_LIMIT)
async def get_nearest_barangay(
    request: Request,
    coordinates: Annotated[Coordinates, Depends(parse_coordinates)],
    planting_service: PlantingServiceDep,
) -> Barangay:
    """
    Get the barangay nearest to a coordinate.

    Args:
        coordinates: Parsed query coordinates (injected)
        planting_service: Planting service (injected dependency)

    Raises:
        InvalidInputError: If the coordinates are malformed
        BarangayNotFoundError: If there are no barangays at all
    """
    return await planting_service.find_nearest_barangay(coordinates.lat, coordinates.lng)
