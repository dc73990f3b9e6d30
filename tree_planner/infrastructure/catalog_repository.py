"""
Infrastructure layer: Catalog repository contract and in-memory backend.
"""
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from tree_planner.domain.models import Barangay, Tree


class CatalogRepository(ABC):
    """
    Read-only access to the barangay and tree catalogs.

    Each call returns its own snapshot; no consistency is promised across
    calls.
    """

    @abstractmethod
    async def list_barangays(self) -> List[Barangay]:
        """Return every barangay, in catalog order."""

    @abstractmethod
    async def list_trees(self) -> List[Tree]:
        """Return every tree species, in catalog order."""

    @abstractmethod
    async def get_barangay(self, barangay_id: int) -> Optional[Barangay]:
        """Return the barangay with this id, or None."""

    async def close(self) -> None:
        """Release any held resources."""


class InMemoryCatalogRepository(CatalogRepository):
    """Catalog held in process memory, fixed at construction."""

    def __init__(
        self,
        barangays: Iterable[Barangay] = (),
        trees: Iterable[Tree] = (),
    ):
        self._barangays = tuple(barangays)
        self._trees = tuple(trees)
        self._by_id = {}
        for barangay in self._barangays:
            if barangay.id in self._by_id:
                raise ValueError(f"Duplicate barangay id {barangay.id}")
            self._by_id[barangay.id] = barangay

    @classmethod
    def with_sample_data(cls) -> "InMemoryCatalogRepository":
        """Build a repository preloaded with the sample Metro Manila catalog."""
        from tree_planner.infrastructure.sample_catalog import (
            SAMPLE_BARANGAYS,
            SAMPLE_TREES,
        )
        return cls(barangays=SAMPLE_BARANGAYS, trees=SAMPLE_TREES)

    async def list_barangays(self) -> List[Barangay]:
        return list(self._barangays)

    async def list_trees(self) -> List[Tree]:
        return list(self._trees)

    async def get_barangay(self, barangay_id: int) -> Optional[Barangay]:
        return self._by_id.get(barangay_id)
