"""
Order enrichment service.

Turns one Shopify order into one feed order: resolves the order
currency, formats totals and pairs each line item's price with its RRP.
"""

from typing import Optional
import structlog

from models.feed import EnrichedLineItem, EnrichedOrder
from models.pricing import ResolvedAmount
from models.shopify import ShopifyLineItem, ShopifyOrder
from services.metafield_service import MetafieldService
from services.price_resolution_service import (
    resolve_item_discount,
    resolve_item_price,
    resolve_order_discount,
    resolve_order_total,
)
from services.reference_price_service import resolve_reference_price
from utils.price_utils import format_price

logger = structlog.get_logger(__name__)


B2B_TAG = "b2b"


def effective_currency(order: ShopifyOrder) -> str:
    """Presentment currency when set, shop currency otherwise."""
    return order.presentment_currency or order.currency


def is_b2b_order(order: ShopifyOrder) -> bool:
    """True when the comma-separated tags mention b2b (any case)."""
    return bool(order.tags) and B2B_TAG in order.tags.lower()


def _format(resolved: ResolvedAmount, currency: str, field: str, order_number) -> Optional[str]:
    if resolved.is_missing:
        return None
    formatted = format_price(resolved.amount, currency)
    if formatted is None:
        logger.warning(
            "amount_unparseable",
            order_number=order_number,
            field=field,
            source=resolved.source.value,
            value=resolved.amount
        )
    return formatted


class OrderEnrichmentService:
    """
    Per-order enrichment.

    Line items are resolved one at a time, in order, each with its
    own metafield lookup.
    """

    def __init__(self, metafield_service: MetafieldService):
        self.metafields = metafield_service

    def owner_id_for(self, item: ShopifyLineItem) -> Optional[int]:
        if self.metafields.owner == "product":
            return item.product_id
        return item.variant_id

    async def enrich_item(
        self,
        item: ShopifyLineItem,
        currency: str,
        order_number
    ) -> EnrichedLineItem:
        """
        Enrich one line item with its RRP.

        Args:
            item: Shopify line item
            currency: Effective order currency
            order_number: For log context

        Returns:
            EnrichedLineItem (beforePrice None when no RRP)
        """
        owner_id = self.owner_id_for(item)
        logger.debug("enriching_line_item", order_number=order_number, title=item.title, owner_id=owner_id)

        metafield = await self.metafields.fetch_rrp_metafield(owner_id)
        before_price = resolve_reference_price(metafield, currency)

        return EnrichedLineItem(
            product_name=item.title,
            sku=item.sku,
            quantity=item.quantity,
            before_price=before_price,
            your_price=_format(resolve_item_price(item), currency, "price", order_number),
            line_item_discount=_format(resolve_item_discount(item), currency, "total_discount", order_number),
        )

    async def enrich_order(self, order: ShopifyOrder) -> EnrichedOrder:
        """
        Enrich one order.

        Args:
            order: Shopify order

        Returns:
            EnrichedOrder with items in the original line item order
        """
        currency = effective_currency(order)
        logger.info(
            "enriching_order",
            order_number=order.order_number,
            currency=currency,
            line_items=len(order.line_items)
        )

        items = []
        for item in order.line_items:
            items.append(await self.enrich_item(item, currency, order.order_number))

        enriched = EnrichedOrder(
            order_number=order.order_number,
            order_date=order.created_at,
            is_b2b=is_b2b_order(order),
            currency=currency,
            items=items,
            total_discount=_format(resolve_order_discount(order), currency, "total_discounts", order.order_number),
            total_price=_format(resolve_order_total(order), currency, "total_price", order.order_number),
        )

        logger.info("order_enriched", order_number=order.order_number, items=len(items))
        return enriched
