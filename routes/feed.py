"""
Orders feed API routes.

GET /orders-feed returns every order enriched with RRPs,
or a single 500 error body. No partial feeds.
"""

from typing import AsyncIterator
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
import structlog

from config import Settings, get_settings
from integrations.shopify import ShopifyClient
from models.feed import EnrichedOrder, ErrorResponse
from services.feed_service import FeedService
from exceptions import AppError

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["Feed"])


async def get_shopify_client(
    settings: Settings = Depends(get_settings)
) -> AsyncIterator[ShopifyClient]:
    """Request-scoped Shopify client, closed after the response."""
    async with ShopifyClient(settings) as client:
        yield client


@router.get(
    "/orders-feed",
    response_model=list[EnrichedOrder],
    responses={500: {"model": ErrorResponse}},
)
async def orders_feed(
    client: ShopifyClient = Depends(get_shopify_client),
    settings: Settings = Depends(get_settings),
):
    """
    Get the enriched orders feed.

    Returns:
        One entry per Shopify order, each line item carrying
        yourPrice (transactional) and beforePrice (RRP)

    Raises:
        500: Shopify unreachable, rejected the request, or returned
             an unexpected shape
    """
    logger.info("orders_feed_requested")

    try:
        orders = await FeedService(client, settings).build_feed()
    except AppError as e:
        logger.error("orders_feed_failed", code=e.code, error=e.message)
        return JSONResponse(status_code=e.status_code, content=e.to_dict())

    logger.info("orders_feed_served", count=len(orders))
    return orders
