"""
Metafield service for RRP lookups.

Looks up the sparklayer/rrp metafield on a variant (or product on
legacy stores). Every failure is absorbed: a line item without an
RRP still belongs in the feed.
"""

from typing import Optional
import pydantic
import structlog

from integrations.shopify import ShopifyClient
from models.shopify import Metafield
from exceptions import AppError

logger = structlog.get_logger(__name__)


RRP_NAMESPACE = "sparklayer"
RRP_KEY = "rrp"


class MetafieldService:
    """
    RRP metafield lookup.

    Owner is "variant" for current stores and "product" for the
    legacy contract where RRPs were stored per product.
    """

    def __init__(self, client: ShopifyClient, owner: str = "variant"):
        self.client = client
        self.owner = owner

    def metafields_path(self, owner_id: int) -> str:
        return f"/{self.owner}s/{owner_id}/metafields.json"

    async def fetch_rrp_metafield(self, owner_id: Optional[int]) -> Optional[Metafield]:
        """
        Fetch the RRP metafield for one variant/product.

        Args:
            owner_id: Variant or product ID (None for custom line items)

        Returns:
            The sparklayer/rrp Metafield, or None if absent or unreadable
        """
        if owner_id is None:
            logger.info("rrp_lookup_skipped_no_owner", owner=self.owner)
            return None

        path = self.metafields_path(owner_id)
        logger.debug("fetching_metafields", owner=self.owner, owner_id=owner_id, url=self.client.url_for(path))

        try:
            data = await self.client.get_json(path)
        except AppError as e:
            logger.warning(
                "metafield_fetch_failed",
                owner=self.owner,
                owner_id=owner_id,
                code=e.code,
                error=e.message
            )
            return None

        raw_metafields = data.get("metafields") if isinstance(data, dict) else None
        if not isinstance(raw_metafields, list):
            logger.warning("metafields_missing_from_response", owner=self.owner, owner_id=owner_id)
            return None

        logger.debug("metafields_received", owner_id=owner_id, count=len(raw_metafields))

        for raw in raw_metafields:
            if not isinstance(raw, dict):
                continue
            if raw.get("namespace") == RRP_NAMESPACE and raw.get("key") == RRP_KEY:
                try:
                    metafield = Metafield.model_validate(raw)
                except pydantic.ValidationError as e:
                    logger.warning("rrp_metafield_invalid", owner_id=owner_id, error=str(e))
                    return None
                logger.debug("rrp_metafield_found", owner_id=owner_id, value=metafield.value)
                return metafield

        logger.info("rrp_metafield_not_found", owner=self.owner, owner_id=owner_id)
        return None
