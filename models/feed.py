"""
Orders feed response models.

Field names are snake_case in Python and camelCase in JSON,
which is what the reporting consumers read.
"""

from typing import Any, Optional
from pydantic import Field

from models.base import BaseSchema, FeedSchema


class EnrichedLineItem(FeedSchema):
    """Line item with transactional price and RRP side by side."""

    product_name: Optional[str] = Field(None, alias="productName")
    sku: Optional[str] = None
    quantity: Any = None
    before_price: Optional[str] = Field(
        None,
        alias="beforePrice",
        description="RRP in the order currency, null when no RRP is stored"
    )
    your_price: Optional[str] = Field(None, alias="yourPrice")
    line_item_discount: Optional[str] = Field(None, alias="lineItemDiscount")


class EnrichedOrder(FeedSchema):
    """Order as emitted by GET /orders-feed."""

    order_number: Optional[int] = Field(None, alias="orderNumber")
    order_date: Optional[str] = Field(None, alias="orderDate")
    is_b2b: bool = Field(False, alias="isB2B")
    currency: str
    items: list[EnrichedLineItem] = Field(default_factory=list)
    total_discount: Optional[str] = Field(None, alias="totalDiscount")
    total_price: Optional[str] = Field(None, alias="totalPrice")


class HealthResponse(BaseSchema):
    """Liveness probe body."""

    status: str = "ok"
    message: str


class ErrorResponse(BaseSchema):
    """Feed failure body."""

    error: str
    details: str
    code: Optional[str] = None
    timestamp: str
