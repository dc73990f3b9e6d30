"""
Unit tests for the nearest barangay lookup.

Tests cover:
- Nearest selection on hand-built layouts
- Empty catalogs
- Tie-breaking by catalog order
- Agreement between scan strategies
- Randomised check that nothing is strictly closer
"""
import random

import pytest

from tree_planner.infrastructure.sample_catalog import SAMPLE_BARANGAYS
from tree_planner.services.domain.nearest_barangay_finder import (
    LinearScanStrategy,
    NearestBarangayFinder,
    VectorizedScanStrategy,
    distance_sq,
    get_strategy,
)


STRATEGIES = [LinearScanStrategy, VectorizedScanStrategy]


@pytest.fixture(params=STRATEGIES, ids=lambda cls: cls.name)
def finder(request) -> NearestBarangayFinder:
    """A finder for each shipped strategy."""
    return NearestBarangayFinder(strategy=request.param())


# ============================================================
# Basic Lookup Tests
# ============================================================

class TestFindNearest:
    """Tests for nearest selection."""

    def test_single_barangay_is_nearest(self, finder, barangay_factory):
        """A lone barangay is returned wherever the query point is."""
        only = barangay_factory(id=7, latitude=10.0, longitude=120.0)

        assert finder.find_nearest([only], 14.0, 121.0) == only

    def test_picks_closest(self, finder, barangay_factory):
        """The barangay with the smallest distance is returned."""
        far = barangay_factory(id=1, latitude=14.70, longitude=121.10)
        near = barangay_factory(id=2, latitude=14.60, longitude=121.01)
        farther = barangay_factory(id=3, latitude=15.00, longitude=121.50)

        result = finder.find_nearest([far, near, farther], 14.6, 121.0)

        assert result.id == 2

    def test_sample_catalog_click_on_campus(self, finder):
        """A click on UP Diliman resolves to the UP Campus barangay."""
        result = finder.find_nearest(SAMPLE_BARANGAYS, 14.6540, 121.0690)

        assert result.name == "Barangay UP Campus, Quezon City"

    def test_empty_catalog_returns_none(self, finder):
        """No candidates yields None rather than an error."""
        assert finder.find_nearest([], 14.6, 121.0) is None

    def test_exact_match_is_nearest(self, finder, barangay_factory):
        """A query on top of a barangay returns that barangay."""
        a = barangay_factory(id=1, latitude=14.58, longitude=121.06)
        b = barangay_factory(id=2, latitude=14.65, longitude=121.09)

        assert finder.find_nearest([a, b], 14.65, 121.09).id == 2


# ============================================================
# Tie-break Tests
# ============================================================

class TestTieBreak:
    """Tests for deterministic tie-breaking."""

    def test_first_of_equidistant_wins(self, finder, barangay_factory):
        """Equidistant barangays resolve to the earliest in input order."""
        east = barangay_factory(id=10, latitude=0.0, longitude=1.0)
        west = barangay_factory(id=20, latitude=0.0, longitude=-1.0)
        north = barangay_factory(id=30, latitude=1.0, longitude=0.0)

        assert finder.find_nearest([east, west, north], 0.0, 0.0).id == 10
        assert finder.find_nearest([north, east, west], 0.0, 0.0).id == 30

    def test_tie_break_is_reproducible(self, finder, barangay_factory):
        """Repeated calls with the same order give the same answer."""
        a = barangay_factory(id=1, latitude=2.0, longitude=0.0)
        b = barangay_factory(id=2, latitude=-2.0, longitude=0.0)

        results = {finder.find_nearest([a, b], 0.0, 0.0).id for _ in range(20)}

        assert results == {1}

    def test_later_strictly_closer_still_wins(self, finder, barangay_factory):
        """Tie-breaking never beats a strictly closer barangay."""
        a = barangay_factory(id=1, latitude=1.0, longitude=0.0)
        b = barangay_factory(id=2, latitude=-1.0, longitude=0.0)
        c = barangay_factory(id=3, latitude=0.5, longitude=0.0)

        assert finder.find_nearest([a, b, c], 0.0, 0.0).id == 3


# ============================================================
# Property Tests
# ============================================================

class TestNearestProperty:
    """Randomised checks of the nearest-neighbour property."""

    def test_nothing_strictly_closer(self, finder, barangay_factory):
        """The result is in the set and no member is strictly closer."""
        rng = random.Random(20240615)

        for _ in range(50):
            count = rng.randint(1, 40)
            barangays = [
                barangay_factory(
                    id=i,
                    latitude=rng.uniform(14.4, 14.8),
                    longitude=rng.uniform(120.9, 121.2),
                )
                for i in range(count)
            ]
            lat = rng.uniform(14.3, 14.9)
            lng = rng.uniform(120.8, 121.3)

            result = finder.find_nearest(barangays, lat, lng)

            assert result in barangays
            best = distance_sq(result, lat, lng)
            assert all(distance_sq(b, lat, lng) >= best for b in barangays)

    def test_strategies_agree(self, barangay_factory):
        """Linear and vectorized scans return the same barangay."""
        rng = random.Random(7)
        linear = NearestBarangayFinder(strategy=LinearScanStrategy())
        vectorized = NearestBarangayFinder(strategy=VectorizedScanStrategy())

        # Coarse grid so that exact ties are common
        barangays = [
            barangay_factory(id=i, latitude=float(rng.randint(0, 5)), longitude=float(rng.randint(0, 5)))
            for i in range(30)
        ]

        for _ in range(100):
            lat = float(rng.randint(0, 5))
            lng = float(rng.randint(0, 5))
            assert linear.find_nearest(barangays, lat, lng) is vectorized.find_nearest(barangays, lat, lng)


# ============================================================
# Strategy Selection Tests
# ============================================================

class TestStrategySelection:
    """Tests for strategy lookup by name."""

    def test_get_strategy_by_name(self):
        assert isinstance(get_strategy("linear"), LinearScanStrategy)
        assert isinstance(get_strategy("vectorized"), VectorizedScanStrategy)

    def test_unknown_strategy_rejected(self):
        with pytest.raises(ValueError, match="Unknown nearest strategy"):
            get_strategy("kd-tree")

    def test_default_strategy_from_settings(self):
        """Without an explicit strategy the configured one is used."""
        finder = NearestBarangayFinder()

        assert finder.strategy.name in {"linear", "vectorized"}

    def test_distance_sq(self, barangay_factory):
        b = barangay_factory(latitude=3.0, longitude=4.0)

        assert distance_sq(b, 0.0, 0.0) == 25.0
