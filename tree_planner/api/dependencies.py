"""
Dependency injection for FastAPI.
"""
from typing import Annotated
from fastapi import Depends, Request

from tree_planner.config import settings
from tree_planner.infrastructure.catalog_api_client import CatalogAPIClient
from tree_planner.infrastructure.catalog_repository import (
    CatalogRepository,
    InMemoryCatalogRepository,
)
from tree_planner.services.application.planting_service import PlantingService
from tree_planner.services.domain.nearest_barangay_finder import NearestBarangayFinder
from tree_planner.services.domain.tree_recommender import TreeRecommender


def build_catalog_repository() -> CatalogRepository:
    """
    Build the catalog backend selected in settings.

    Returns:
        CatalogRepository instance
    """
    if settings.catalog_backend == "remote":
        return CatalogAPIClient()
    if settings.catalog_load_sample_data:
        return InMemoryCatalogRepository.with_sample_data()
    return InMemoryCatalogRepository()


def get_catalog_repository(request: Request) -> CatalogRepository:
    """
    Dependency returning the catalog created during application startup.

    Returns:
        CatalogRepository instance stored on the application state
    """
    return request.app.state.catalog


def get_nearest_barangay_finder() -> NearestBarangayFinder:
    """
    Dependency factory for NearestBarangayFinder.

    Returns:
        NearestBarangayFinder instance
    """
    return NearestBarangayFinder()


def get_tree_recommender() -> TreeRecommender:
    """
    Dependency factory for TreeRecommender.

    Returns:
        TreeRecommender instance
    """
    return TreeRecommender()


def get_planting_service(
    catalog: Annotated[CatalogRepository, Depends(get_catalog_repository)],
    finder: Annotated[NearestBarangayFinder, Depends(get_nearest_barangay_finder)],
    recommender: Annotated[TreeRecommender, Depends(get_tree_recommender)],
) -> PlantingService:
    """
    Dependency factory for PlantingService.

    Args:
        catalog: Catalog repository (injected)
        finder: Nearest barangay finder (injected)
        recommender: Tree recommender (injected)

    Returns:
        PlantingService instance
    """
    return PlantingService(catalog=catalog, finder=finder, recommender=recommender)


# Type aliases for cleaner route signatures
PlantingServiceDep = Annotated[PlantingService, Depends(get_planting_service)]
