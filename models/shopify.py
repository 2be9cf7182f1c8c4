"""
Shopify Admin REST payloads consumed by the feed.

Only the fields requested in the orders projection are modelled.
Monetary amounts stay untyped (Any) because Shopify sends strings
and older stores occasionally send numbers; parsing happens in
utils.price_utils so a bad amount never rejects the whole order.
"""

from typing import Any, Optional
from pydantic import Field

from models.base import ShopifySchema


class Money(ShopifySchema):
    """Amount in a single currency."""

    amount: Any = None
    currency_code: Optional[str] = None


class MoneySet(ShopifySchema):
    """Shopify *_set field: the same amount in shop and presentment currency."""

    shop_money: Optional[Money] = None
    presentment_money: Optional[Money] = None


class ShopifyLineItem(ShopifySchema):
    """Order line item."""

    id: Optional[int] = None
    title: Optional[str] = None
    sku: Optional[str] = None
    quantity: Any = Field(None, description="Passed through as sent")
    price: Any = None
    price_set: Optional[MoneySet] = None
    total_discount: Any = None
    total_discount_set: Optional[MoneySet] = None
    variant_id: Optional[int] = Field(None, description="Preferred RRP lookup key")
    product_id: Optional[int] = Field(None, description="Legacy RRP lookup key")


class ShopifyOrder(ShopifySchema):
    """Order as returned by GET /orders.json with the feed projection."""

    id: Optional[int] = None
    order_number: Optional[int] = None
    created_at: Optional[str] = None
    tags: Optional[str] = None
    currency: str = Field(..., description="Shop currency")
    presentment_currency: Optional[str] = Field(None, description="Customer-facing currency")
    total_discounts: Any = None
    total_discounts_set: Optional[MoneySet] = None
    total_price: Any = None
    total_price_set: Optional[MoneySet] = None
    total_shipping_price_set: Optional[MoneySet] = None
    line_items: list[ShopifyLineItem] = Field(default_factory=list)


class Metafield(ShopifySchema):
    """Namespaced key/value attribute attached to a variant or product."""

    id: Optional[int] = None
    namespace: Optional[str] = None
    key: Optional[str] = None
    value: Any = None
    type: Optional[str] = None


class RrpPrice(ShopifySchema):
    """One entry of the sparklayer RRP metafield value."""

    currency_code: str
    value: Any = None
