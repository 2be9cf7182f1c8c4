"""
Amount resolution for price-bearing fields.

Every price field exists twice on a Shopify order: a plain scalar
(total_price) and a currency-structured set (total_price_set). The
structured presentment amount always wins when present; older API
contracts only carry the plain value.
"""

from typing import Any, Optional

from models.pricing import AmountSource, ResolvedAmount
from models.shopify import MoneySet, ShopifyLineItem, ShopifyOrder


def _has_amount(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str) and not value.strip():
        return False
    return True


def resolve_amount(money_set: Optional[MoneySet], plain: Any) -> ResolvedAmount:
    """
    Pick the amount to format for one field.

    Args:
        money_set: Structured *_set value (may be None)
        plain: Plain scalar value (may be None)

    Returns:
        ResolvedAmount tagged STRUCTURED, PLAIN or MISSING
    """
    presentment = money_set.presentment_money if money_set else None
    if presentment is not None and _has_amount(presentment.amount):
        return ResolvedAmount(source=AmountSource.STRUCTURED, amount=presentment.amount)

    if _has_amount(plain):
        return ResolvedAmount(source=AmountSource.PLAIN, amount=plain)

    return ResolvedAmount(source=AmountSource.MISSING)


def resolve_order_total(order: ShopifyOrder) -> ResolvedAmount:
    return resolve_amount(order.total_price_set, order.total_price)


def resolve_order_discount(order: ShopifyOrder) -> ResolvedAmount:
    return resolve_amount(order.total_discounts_set, order.total_discounts)


def resolve_item_price(item: ShopifyLineItem) -> ResolvedAmount:
    return resolve_amount(item.price_set, item.price)


def resolve_item_discount(item: ShopifyLineItem) -> ResolvedAmount:
    return resolve_amount(item.total_discount_set, item.total_discount)
