"""
Feed service: orders in, enriched orders out.

Orders are enriched concurrently, bounded by a semaphore so large
batches do not flood Shopify with metafield calls. The feed is
all-or-nothing: any unabsorbed failure aborts the whole request.
"""

import asyncio
import structlog

from config.settings import Settings
from integrations.shopify import ShopifyClient
from models.feed import EnrichedOrder
from models.shopify import ShopifyOrder
from services.enrichment_service import OrderEnrichmentService
from services.metafield_service import MetafieldService
from services.order_service import OrderService
from exceptions import TransportError

logger = structlog.get_logger(__name__)


class FeedService:
    """
    Orders feed assembly.

    Usage:
        async with ShopifyClient(settings) as client:
            orders = await FeedService(client, settings).build_feed()
    """

    def __init__(self, client: ShopifyClient, settings: Settings):
        self.settings = settings
        self.orders = OrderService(client)
        self.enricher = OrderEnrichmentService(
            MetafieldService(client, owner=settings.metafield_owner)
        )

    async def build_feed(self) -> list[EnrichedOrder]:
        """
        Build the feed within the configured deadline.

        Returns:
            Enriched orders in the order Shopify returned them

        Raises:
            TransportError: Shopify unreachable or deadline exceeded
            UpstreamError: Shopify returned a non-2xx status
            FormatError: Orders response malformed
        """
        timeout = self.settings.feed_timeout_seconds
        try:
            return await asyncio.wait_for(self._assemble(), timeout=timeout)
        except asyncio.TimeoutError as e:
            logger.error("feed_deadline_exceeded", timeout_seconds=timeout)
            raise TransportError(f"Orders feed not assembled within {timeout:g} seconds") from e

    async def _assemble(self) -> list[EnrichedOrder]:
        orders = await self.orders.fetch_orders()
        logger.info(
            "processing_orders",
            count=len(orders),
            max_concurrent=self.settings.feed_max_concurrent_orders
        )

        semaphore = asyncio.Semaphore(self.settings.feed_max_concurrent_orders)

        async def enrich(order: ShopifyOrder) -> EnrichedOrder:
            async with semaphore:
                return await self.enricher.enrich_order(order)

        enriched = await asyncio.gather(*(enrich(order) for order in orders))

        logger.info("orders_processed", count=len(enriched))
        return list(enriched)
