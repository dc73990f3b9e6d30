"""
Infrastructure layer: Remote catalog client with retry logic.
"""
from typing import Any, List, Optional
import logging

from pydantic import TypeAdapter, ValidationError
import httpx
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
)

from tree_planner.config import settings
from tree_planner.domain.exceptions import CatalogUnavailableError
from tree_planner.domain.models import Barangay, Tree
from tree_planner.infrastructure.api_constants import APIConstants, CatalogAPIEndpoints
from tree_planner.infrastructure.catalog_repository import CatalogRepository

logger = logging.getLogger(__name__)

_barangay_list = TypeAdapter(List[Barangay])
_tree_list = TypeAdapter(List[Tree])


class CatalogAPIClient(CatalogRepository):
    """
    Catalog repository backed by an upstream catalog HTTP service.
    Implements retry logic with exponential backoff.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: Upstream base URL; defaults to settings
            api_key: Bearer token; defaults to settings
            timeout: Request timeout in seconds; defaults to settings
        """
        self.base_url = base_url or settings.catalog_api_base_url
        self.api_key = api_key if api_key is not None else settings.catalog_api_key

        headers = {"accept": APIConstants.CONTENT_TYPE_JSON}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"

        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            headers=headers,
            timeout=timeout if timeout is not None else settings.catalog_api_timeout,
        )

    async def __aenter__(self) -> "CatalogAPIClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client."""
        await self.client.aclose()

    @retry(
        stop=stop_after_attempt(settings.max_retry_attempts),
        wait=wait_exponential(
            multiplier=settings.retry_backoff_multiplier,
            min=settings.retry_min_wait,
            max=settings.retry_max_wait,
        ),
        retry=retry_if_exception_type((httpx.HTTPStatusError, httpx.RequestError)),
        reraise=True,
    )
    async def _make_request(
        self,
        method: str,
        endpoint: str,
        **kwargs
    ) -> Any:
        """
        Make an HTTP request with retry logic.

        Server errors (5xx) and transport errors are retried; client errors
        (4xx) are not.

        Args:
            method: HTTP method (GET, POST, etc.)
            endpoint: API endpoint path
            **kwargs: Additional arguments for the request

        Returns:
            Decoded JSON body

        Raises:
            CatalogUnavailableError: On 4xx or a body that is not JSON
            httpx.HTTPError: When retries are exhausted
        """
        response = await self.client.request(method, endpoint, **kwargs)
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            if e.response.status_code >= 500:
                logger.warning(f"Catalog service returned {e.response.status_code} for {endpoint}")
                raise
            raise CatalogUnavailableError(
                f"Catalog request failed: {e.response.status_code} - {e.response.text}"
            )

        try:
            return response.json()
        except ValueError:
            raise CatalogUnavailableError(f"Catalog service returned invalid JSON for {endpoint}")

    async def _get(self, endpoint: str) -> Any:
        try:
            return await self._make_request("GET", endpoint)
        except httpx.HTTPError as e:
            raise CatalogUnavailableError(f"Catalog request error: {str(e)}") from e

    async def list_barangays(self) -> List[Barangay]:
        """
        Fetch all barangays from the catalog service.

        Raises:
            CatalogUnavailableError: If the request fails or the payload is malformed
        """
        data = await self._get(CatalogAPIEndpoints.BARANGAYS)
        try:
            return _barangay_list.validate_python(data)
        except ValidationError as e:
            raise CatalogUnavailableError(f"Malformed barangay catalog: {e.error_count()} errors") from e

    async def list_trees(self) -> List[Tree]:
        """
        Fetch all tree species from the catalog service.

        Raises:
            CatalogUnavailableError: If the request fails or the payload is malformed
        """
        data = await self._get(CatalogAPIEndpoints.TREES)
        try:
            return _tree_list.validate_python(data)
        except ValidationError as e:
            raise CatalogUnavailableError(f"Malformed tree catalog: {e.error_count()} errors") from e

    async def get_barangay(self, barangay_id: int) -> Optional[Barangay]:
        """
        Fetch one barangay by id.

        The catalog service has no single-item endpoint, so this lists and
        filters.
        """
        for barangay in await self.list_barangays():
            if barangay.id == barangay_id:
                return barangay
        return None
