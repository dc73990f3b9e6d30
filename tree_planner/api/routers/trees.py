"""
API router for tree endpoints.
"""
from typing import List

from fastapi import APIRouter, Request

from tree_planner.api.dependencies import PlantingServiceDep
from tree_planner.api.models.requests import TreeRecommendationRequest
from tree_planner.api.models.responses import error_responses
from tree_planner.api.rate_limit import RATE_LIMIT, limiter
from tree_planner.domain.models import RecommendationResult, Tree


router = APIRouter(
    prefix="/trees",
    tags=["trees"],
)


@router.get(
    "",
    response_model=List[Tree],
    summary="List tree species",
    responses=error_responses(429, 500),
)
@limiter.limit(RATE_LIMIT)
async def list_trees(
    request: Request,
    planting_service: PlantingServiceDep,
) -> List[Tree]:
    """Return the full tree catalog, unfiltered."""
    return await planting_service.list_trees()


@router.post(
    "/recommend",
    response_model=RecommendationResult,
    summary="Recommend tree species for a plot",
    description="""
    Recommend species for a plot of land in a barangay.

    A species is recommended when the plot can hold at least one specimen,
    and, for flood-prone (Medium/High risk) barangays, it is flood resilient,
    and, for high-density urban barangays, it is urban suitable.

    `maxTrees` estimates planting slots at one per 15 m², never below one.
    """,
    responses=error_responses(400, 404, 429, 500),
)
@limiter.limit(RATE_LIMIT)
async def recommend_trees(
    request: Request,
    payload: TreeRecommendationRequest,
    planting_service: PlantingServiceDep,
) -> RecommendationResult:
    """
    Recommend tree species for a plot.

    Args:
        payload: Land area and barangay id
        planting_service: Planting service (injected dependency)

    Raises:
        BarangayNotFoundError: If the barangay does not exist
    """
    # Delegate to service layer (no business logic here)
    return await planting_service.recommend_trees(
        barangay_id=payload.barangay_id,
        land_area_sqm=payload.land_area_sqm,
    )
