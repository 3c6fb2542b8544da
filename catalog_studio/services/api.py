"""
HTTP client for the catalog and generation endpoints.
"""
from __future__ import annotations
from typing import Any, Dict, List, Optional

import httpx

from catalog_studio.utils.errors import CatalogFetchError, GenerationError
from catalog_studio.utils.logging import logger
from catalog_studio.utils.typing import Category, Item

CATALOG_PATHS = {
    Category.PRODUCTS: "/api/products",
    Category.PLUGINS: "/api/plugins",
}
GENERATE_PATH = "/license-code/generate"

class ApiClient:
    def __init__(
        self,
        base_url: str,
        timeout: Optional[float] = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def _http(self) -> httpx.AsyncClient:
        # created lazily so it binds to the loop that first uses it
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self._timeout,
                transport=self._transport,
            )
        return self._client

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def fetch_items(self, category: Category) -> List[Item]:
        path = CATALOG_PATHS[category]
        try:
            response = await self._http().get(path)
            response.raise_for_status()
            records = response.json()
        except httpx.HTTPStatusError as e:
            logger.error("api GET %s: HTTP %s", path, e.response.status_code)
            raise CatalogFetchError(category.value, f"HTTP error! status: {e.response.status_code}") from e
        except (httpx.HTTPError, ValueError) as e:
            logger.error("api GET %s failed: %s", path, e)
            raise CatalogFetchError(category.value, str(e) or type(e).__name__) from e

        if not isinstance(records, list):
            raise CatalogFetchError(category.value, "Unexpected catalog payload")
        return [Item.from_record(category, r) for r in records if isinstance(r, dict)]

    async def generate(
        self,
        code: Optional[str],
        licensee_name: str,
        assignee_name: str,
        expiry_date: str,
    ) -> str:
        """Request a generated code; the response body is returned as-is."""
        params: Dict[str, Any] = {}
        if code:
            params["productCode"] = code
        params.update(
            licenseeName=licensee_name,
            assigneeName=assignee_name,
            expiryDate=expiry_date,
        )
        try:
            response = await self._http().get(GENERATE_PATH, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error("api GET %s: HTTP %s", GENERATE_PATH, e.response.status_code)
            raise GenerationError(f"HTTP error! status: {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.error("api GET %s failed: %s", GENERATE_PATH, e)
            raise GenerationError(str(e) or type(e).__name__) from e
        return response.text
