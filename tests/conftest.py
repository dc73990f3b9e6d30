"""
Shared pytest fixtures for all tests.

This module provides common fixtures including:
- Barangay and tree factories
- Sample and empty catalogs
- FastAPI test client with the catalog dependency overridden
"""
import pytest
from typing import Callable, Iterator
from fastapi.testclient import TestClient

from tree_planner.main import app
from tree_planner.api.dependencies import get_catalog_repository
from tree_planner.api.rate_limit import limiter
from tree_planner.domain.models import (
    Barangay,
    FloodRisk,
    GrowthTimeline,
    Tree,
    UrbanDensity,
)
from tree_planner.infrastructure.catalog_repository import (
    CatalogRepository,
    InMemoryCatalogRepository,
)


# ============================================================
# Factory Fixtures
# ============================================================

@pytest.fixture
def barangay_factory() -> Callable[..., Barangay]:
    """Build barangays with sensible defaults."""
    def make(**overrides) -> Barangay:
        fields = dict(
            id=1,
            name="Barangay Test",
            latitude=14.6,
            longitude=121.0,
            population=1000,
            flood_risk=FloodRisk.LOW,
            urban_density=UrbanDensity.LOW,
        )
        fields.update(overrides)
        return Barangay(**fields)
    return make


@pytest.fixture
def tree_factory() -> Callable[..., Tree]:
    """Build tree species with sensible defaults."""
    def make(**overrides) -> Tree:
        fields = dict(
            id=1,
            name="Test Tree",
            scientific_name="Arbor testus",
            description="A tree for tests.",
            image_url="https://example.com/tree.jpg",
            min_area_sqm=10,
            flood_resilient=False,
            urban_suitable=False,
            growth_timeline=GrowthTimeline(
                seedling="1-2 months",
                juvenile="1-3 years",
                mature="5+ years",
            ),
        )
        fields.update(overrides)
        return Tree(**fields)
    return make


# ============================================================
# Catalog Fixtures
# ============================================================

@pytest.fixture
def sample_catalog() -> InMemoryCatalogRepository:
    """The bundled Metro Manila sample catalog."""
    return InMemoryCatalogRepository.with_sample_data()


@pytest.fixture
def empty_catalog() -> InMemoryCatalogRepository:
    """A catalog with no barangays and no trees."""
    return InMemoryCatalogRepository()


# ============================================================
# FastAPI Test Client Fixtures
# ============================================================

@pytest.fixture(autouse=True)
def reset_rate_limiter() -> Iterator[None]:
    """Start every test with an empty rate-limit window."""
    limiter.reset()
    yield


def _client_for(catalog: CatalogRepository) -> Iterator[TestClient]:
    app.dependency_overrides[get_catalog_repository] = lambda: catalog
    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def test_client(sample_catalog) -> Iterator[TestClient]:
    """Test client serving the sample catalog."""
    yield from _client_for(sample_catalog)


@pytest.fixture
def empty_test_client(empty_catalog) -> Iterator[TestClient]:
    """Test client serving an empty catalog."""
    yield from _client_for(empty_catalog)
