"""
Shopify Admin REST client.

Thin async wrapper around httpx that adds the access token header
and converts failures into the application's error taxonomy.
One client is opened per feed request and closed afterwards.
"""

from typing import Any, Optional
import httpx
import structlog

from config.settings import Settings
from exceptions import TransportError, UpstreamError, FormatError

logger = structlog.get_logger(__name__)


class ShopifyClient:
    """
    Async Shopify Admin API client.

    Usage:
        async with ShopifyClient(settings) as client:
            data = await client.get_json("/orders.json", params={"status": "any"})
    """

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.settings = settings
        self.base_url = settings.shopify_admin_url
        self._http = httpx.AsyncClient(
            headers={
                "X-Shopify-Access-Token": settings.shopify_access_token or "",
                "Content-Type": "application/json",
            },
            timeout=settings.upstream_timeout_seconds,
            transport=transport,
        )

    async def __aenter__(self) -> "ShopifyClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    async def get_json(
        self,
        path: str,
        params: Optional[dict[str, Any]] = None
    ) -> Any:
        """
        GET a Shopify endpoint and decode the JSON body.

        Args:
            path: Path relative to the admin API root (e.g. "/orders.json")
            params: Query parameters

        Returns:
            Decoded JSON body

        Raises:
            TransportError: Shopify could not be reached
            UpstreamError: Shopify returned a non-2xx status
            FormatError: Body is not JSON
        """
        url = self.url_for(path)

        try:
            response = await self._http.get(url, params=params)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error("shopify_request_failed", url=url, error=str(e), error_type=type(e).__name__)
            raise TransportError(f"Failed to reach Shopify: {e}", url=url) from e

        if not response.is_success:
            logger.error("shopify_api_error", url=url, status=response.status_code, body=response.text)
            raise UpstreamError(response.status_code, response.text, url=url)

        try:
            return response.json()
        except ValueError as e:
            logger.error("shopify_invalid_json", url=url, status=response.status_code)
            raise FormatError("Shopify returned a non-JSON body", details={"url": url}) from e
