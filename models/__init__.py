"""
Pydantic models for validation and serialization.
"""

from models.base import BaseSchema, ShopifySchema, FeedSchema
from models.shopify import (
    Money,
    MoneySet,
    ShopifyLineItem,
    ShopifyOrder,
    Metafield,
    RrpPrice,
)
from models.feed import (
    EnrichedLineItem,
    EnrichedOrder,
    HealthResponse,
    ErrorResponse,
)
from models.pricing import AmountSource, ResolvedAmount

__all__ = [
    # Base
    "BaseSchema",
    "ShopifySchema",
    "FeedSchema",

    # Shopify
    "Money",
    "MoneySet",
    "ShopifyLineItem",
    "ShopifyOrder",
    "Metafield",
    "RrpPrice",

    # Feed
    "EnrichedLineItem",
    "EnrichedOrder",
    "HealthResponse",
    "ErrorResponse",

    # Pricing
    "AmountSource",
    "ResolvedAmount",
]
