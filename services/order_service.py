"""
Order service for pulling orders from Shopify.

Fetches every order (any status) with only the fields the feed uses.
"""

import pydantic
import structlog

from integrations.shopify import ShopifyClient
from models.shopify import ShopifyOrder
from exceptions import FormatError

logger = structlog.get_logger(__name__)


ORDER_FIELDS = (
    "id",
    "order_number",
    "created_at",
    "tags",
    "currency",
    "presentment_currency",
    "total_discounts",
    "total_price",
    "line_items",
    "total_shipping_price_set",
    "total_discounts_set",
    "total_price_set",
)


class OrderService:
    """
    Order retrieval service.

    Raises on any failure: without orders there is no feed.
    """

    def __init__(self, client: ShopifyClient):
        self.client = client

    async def fetch_orders(self) -> list[ShopifyOrder]:
        """
        Fetch all orders regardless of status.

        Returns:
            Orders in the order Shopify returned them

        Raises:
            TransportError: Shopify could not be reached
            UpstreamError: Shopify returned a non-2xx status
            FormatError: Response has no orders list or an order is malformed
        """
        params = {"status": "any", "fields": ",".join(ORDER_FIELDS)}
        logger.info("fetching_orders", url=self.client.url_for("/orders.json"), params=params)

        data = await self.client.get_json("/orders.json", params=params)

        raw_orders = data.get("orders") if isinstance(data, dict) else None
        if not isinstance(raw_orders, list):
            logger.error("orders_missing_from_response", response=data)
            raise FormatError("Invalid response format from Shopify API: no orders array")

        orders = []
        for index, raw in enumerate(raw_orders):
            try:
                orders.append(ShopifyOrder.model_validate(raw))
            except pydantic.ValidationError as e:
                logger.error("order_invalid", index=index, error=str(e))
                raise FormatError(
                    f"Invalid order at position {index} in Shopify response",
                    details={"index": index, "errors": e.errors(include_url=False)}
                ) from e

        logger.info("orders_fetched", count=len(orders))
        return orders
