"""
Application service: Orchestration layer for planting operations.
"""
from typing import List, Union

from tree_planner.domain.exceptions import BarangayNotFoundError
from tree_planner.domain.models import Barangay, RecommendationResult, Tree
from tree_planner.infrastructure.catalog_repository import CatalogRepository
from tree_planner.services.domain.nearest_barangay_finder import NearestBarangayFinder
from tree_planner.services.domain.tree_recommender import (
    TreeRecommender,
    validate_land_area,
)


class PlantingService:
    """
    Application service for barangay lookup and tree recommendation.

    Coordinates catalog reads with the domain services; holds no business
    rules itself.
    """

    def __init__(
        self,
        catalog: CatalogRepository,
        finder: NearestBarangayFinder,
        recommender: TreeRecommender,
    ):
        """
        Initialize the service with dependencies.

        Args:
            catalog: Barangay and tree catalog reads
            finder: Nearest barangay lookup
            recommender: Species filter and capacity estimate
        """
        self.catalog = catalog
        self.finder = finder
        self.recommender = recommender

    async def list_barangays(self) -> List[Barangay]:
        """Return the full barangay catalog, unfiltered."""
        return await self.catalog.list_barangays()

    async def list_trees(self) -> List[Tree]:
        """Return the full tree catalog, unfiltered."""
        return await self.catalog.list_trees()

    async def find_nearest_barangay(self, lat: float, lng: float) -> Barangay:
        """
        Resolve a coordinate to the nearest barangay.

        Raises:
            BarangayNotFoundError: If the catalog holds no barangays
        """
        barangays = await self.catalog.list_barangays()
        nearest = self.finder.find_nearest(barangays, lat, lng)
        if nearest is None:
            raise BarangayNotFoundError("No barangays found")
        return nearest

    async def recommend_trees(
        self,
        barangay_id: Union[int, float],
        land_area_sqm: float,
    ) -> RecommendationResult:
        """
        Recommend species for a plot in a barangay.

        This method orchestrates:
        1. Validating the land area
        2. Fetching the barangay
        3. Fetching the tree catalog
        4. Running the recommender

        Raises:
            InvalidInputError: If the land area is not a positive number
            BarangayNotFoundError: If no barangay has this id
        """
        land_area_sqm = validate_land_area(land_area_sqm)

        # Ids are integers; a fractional id can never match
        if isinstance(barangay_id, float):
            if not barangay_id.is_integer():
                raise BarangayNotFoundError("Barangay not found")
            barangay_id = int(barangay_id)

        barangay = await self.catalog.get_barangay(barangay_id)
        if barangay is None:
            raise BarangayNotFoundError("Barangay not found")

        trees = await self.catalog.list_trees()
        return self.recommender.recommend(barangay, land_area_sqm, trees)
