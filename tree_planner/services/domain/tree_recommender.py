"""
Domain service: Tree species recommendation and planting capacity.

A species is recommended for a plot when:
- the plot can hold at least one specimen (land area >= species minimum);
- it is flood resilient, if the barangay is flood prone (Medium/High risk);
- it is urban suitable, if the barangay is high-density urban.

Capacity is a slot count from a fixed spacing heuristic and does not depend
on which species end up recommended.
"""
from dataclasses import dataclass
from typing import Iterable, List, Optional
import logging
import math

from tree_planner.config import settings
from tree_planner.domain.exceptions import InvalidInputError
from tree_planner.domain.models import (
    Barangay,
    Constraints,
    FloodRisk,
    RecommendationResult,
    Tree,
    UrbanDensity,
)

logger = logging.getLogger(__name__)

FLOOD_PRONE_RISKS = frozenset({FloodRisk.MEDIUM, FloodRisk.HIGH})


@dataclass(frozen=True)
class PlantingConstraints:
    """Restrictions a barangay places on species selection."""
    flood_prone: bool
    urban: bool


def compute_constraints(barangay: Barangay) -> PlantingConstraints:
    """Derive the planting restrictions from a barangay's classifications."""
    return PlantingConstraints(
        flood_prone=barangay.flood_risk in FLOOD_PRONE_RISKS,
        urban=barangay.urban_density == UrbanDensity.HIGH,
    )


def validate_land_area(land_area_sqm: float) -> float:
    """
    Check a land area is a finite positive number.

    Raises:
        InvalidInputError: If the value is not usable
    """
    if isinstance(land_area_sqm, bool) or not isinstance(land_area_sqm, (int, float)):
        raise InvalidInputError("Invalid input")
    if not math.isfinite(land_area_sqm) or land_area_sqm <= 0:
        raise InvalidInputError("Invalid input")
    return float(land_area_sqm)


class TreeRecommender:
    """
    Domain service filtering the tree catalog for a plot of land.
    """

    def __init__(self, sqm_per_tree: Optional[float] = None):
        """
        Initialize the recommender.

        Args:
            sqm_per_tree: Area of one planting slot; defaults to settings
        """
        self.sqm_per_tree = sqm_per_tree if sqm_per_tree is not None else settings.sqm_per_tree
        if self.sqm_per_tree <= 0:
            raise ValueError("sqm_per_tree must be positive")

    def estimate_max_trees(self, land_area_sqm: float) -> int:
        """Number of planting slots on the plot, never less than one."""
        land_area_sqm = validate_land_area(land_area_sqm)
        return max(1, math.floor(land_area_sqm / self.sqm_per_tree))

    def filter_trees(
        self,
        trees: Iterable[Tree],
        constraints: PlantingConstraints,
        land_area_sqm: float,
    ) -> List[Tree]:
        """
        Keep the species viable on the plot, in catalog order.

        Args:
            trees: Full tree catalog
            constraints: Restrictions derived from the barangay
            land_area_sqm: Total plot area in m²

        Returns:
            Viable species
        """
        viable = []
        for tree in trees:
            if land_area_sqm < tree.min_area_sqm:
                continue
            if constraints.flood_prone and not tree.flood_resilient:
                continue
            if constraints.urban and not tree.urban_suitable:
                continue
            viable.append(tree)
        return viable

    def recommend(
        self,
        barangay: Barangay,
        land_area_sqm: float,
        trees: Iterable[Tree],
    ) -> RecommendationResult:
        """
        Recommend species for a plot in a barangay.

        Args:
            barangay: Barangay the plot lies in
            land_area_sqm: Total plot area in m², must be > 0
            trees: Full tree catalog

        Returns:
            RecommendationResult with viable species and capacity

        Raises:
            InvalidInputError: If the land area is not a positive number
        """
        land_area_sqm = validate_land_area(land_area_sqm)
        trees = list(trees)

        constraints = compute_constraints(barangay)
        max_trees = self.estimate_max_trees(land_area_sqm)
        recommended = self.filter_trees(trees, constraints, land_area_sqm)

        logger.info(
            f"Recommended {len(recommended)}/{len(trees)} species for barangay {barangay.id} "
            f"(land={land_area_sqm} m², flood_prone={constraints.flood_prone}, "
            f"urban={constraints.urban}, max_trees={max_trees})"
        )

        return RecommendationResult(
            recommended_trees=recommended,
            max_trees=max_trees,
            barangay=barangay,
            constraints=Constraints(
                flood_risk=barangay.flood_risk,
                urban_density=barangay.urban_density,
            ),
        )
