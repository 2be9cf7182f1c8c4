"""
Business logic services.

Each service handles one step of the feed pipeline.
"""

from services.order_service import OrderService
from services.metafield_service import MetafieldService
from services.enrichment_service import OrderEnrichmentService
from services.feed_service import FeedService

__all__ = [
    "OrderService",
    "MetafieldService",
    "OrderEnrichmentService",
    "FeedService",
]
