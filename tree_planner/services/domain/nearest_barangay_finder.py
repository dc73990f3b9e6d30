"""
Domain service: Nearest barangay lookup.

Distances are planar squared Euclidean distances on raw latitude/longitude
degrees. This is a known simplification, not a great-circle distance; the
curvature error is negligible at the scale of a single municipality.

Both shipped strategies are linear scans over the whole catalog, which is
fine for tens to low hundreds of barangays. A spatial index (grid, k-d tree,
or a database nearest-neighbour operator) can be added as another
``DistanceScanStrategy`` without touching callers.
"""
from abc import ABC, abstractmethod
from typing import Optional, Sequence
import logging

import numpy as np

from tree_planner.config import settings
from tree_planner.domain.models import Barangay

logger = logging.getLogger(__name__)


def distance_sq(barangay: Barangay, lat: float, lng: float) -> float:
    """Squared planar distance from a barangay to a query point."""
    return (barangay.latitude - lat) ** 2 + (barangay.longitude - lng) ** 2


class DistanceScanStrategy(ABC):
    """
    Strategy for locating the index of the closest barangay.

    Implementations must return the index of the FIRST barangay in input
    order when several are equidistant, and None for an empty sequence.
    """

    name: str = "abstract"

    @abstractmethod
    def nearest_index(
        self,
        barangays: Sequence[Barangay],
        lat: float,
        lng: float,
    ) -> Optional[int]:
        ...


class LinearScanStrategy(DistanceScanStrategy):
    """Plain Python loop keeping the running minimum."""

    name = "linear"

    def nearest_index(
        self,
        barangays: Sequence[Barangay],
        lat: float,
        lng: float,
    ) -> Optional[int]:
        best_index = None
        best_dist = float("inf")

        for index, barangay in enumerate(barangays):
            dist = distance_sq(barangay, lat, lng)
            # Strict comparison keeps the earliest of equidistant barangays
            if best_index is None or dist < best_dist:
                best_index = index
                best_dist = dist

        return best_index


class VectorizedScanStrategy(DistanceScanStrategy):
    """Same scan over numpy arrays; ``argmin`` returns the first minimum."""

    name = "vectorized"

    def nearest_index(
        self,
        barangays: Sequence[Barangay],
        lat: float,
        lng: float,
    ) -> Optional[int]:
        if len(barangays) == 0:
            return None

        lats = np.fromiter((b.latitude for b in barangays), dtype=float, count=len(barangays))
        lngs = np.fromiter((b.longitude for b in barangays), dtype=float, count=len(barangays))
        distances = (lats - lat) ** 2 + (lngs - lng) ** 2

        return int(np.argmin(distances))


STRATEGIES = {
    LinearScanStrategy.name: LinearScanStrategy,
    VectorizedScanStrategy.name: VectorizedScanStrategy,
}


def get_strategy(name: str) -> DistanceScanStrategy:
    """
    Build a scan strategy by its configured name.

    Raises:
        ValueError: If no strategy is registered under that name
    """
    try:
        return STRATEGIES[name]()
    except KeyError:
        raise ValueError(
            f"Unknown nearest strategy '{name}', expected one of {sorted(STRATEGIES)}"
        ) from None


class NearestBarangayFinder:
    """
    Domain service resolving a map coordinate to the closest barangay.

    Pure: the catalog is passed in on every call, nothing is cached.
    """

    def __init__(self, strategy: Optional[DistanceScanStrategy] = None):
        """
        Initialize the finder.

        Args:
            strategy: Scan strategy; defaults to the configured one
        """
        self.strategy = strategy or get_strategy(settings.nearest_strategy)
        logger.debug(f"Initialized NearestBarangayFinder with strategy={self.strategy.name}")

    def find_nearest(
        self,
        barangays: Sequence[Barangay],
        lat: float,
        lng: float,
    ) -> Optional[Barangay]:
        """
        Find the barangay closest to a point.

        Args:
            barangays: Candidate barangays, in catalog order
            lat: Query latitude in degrees
            lng: Query longitude in degrees

        Returns:
            The nearest barangay, or None when there are no candidates
        """
        index = self.strategy.nearest_index(barangays, lat, lng)
        if index is None:
            logger.info("Nearest lookup over an empty catalog")
            return None

        nearest = barangays[index]
        logger.debug(
            f"Nearest barangay to ({lat}, {lng}) is {nearest.name} (id={nearest.id}) "
            f"among {len(barangays)} candidates"
        )
        return nearest
