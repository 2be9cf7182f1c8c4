"""
Reference price (RRP) resolution.

The sparklayer/rrp metafield holds a JSON array of per-currency prices:

    [{"currency_code": "USD", "value": 60}, {"currency_code": "EUR", "value": "55.5"}]

The entry matching the order currency (case-insensitive) becomes
the item's beforePrice.
"""

from typing import Optional
import json
import pydantic
import structlog

from models.shopify import Metafield, RrpPrice
from exceptions import MetafieldAbsentError
from utils.price_utils import format_price

logger = structlog.get_logger(__name__)


def parse_rrp_prices(metafield: Metafield) -> list[RrpPrice]:
    """
    Decode the metafield value into RRP entries.

    Entries without a currency code are skipped.

    Args:
        metafield: sparklayer/rrp metafield

    Returns:
        RRP entries in stored order

    Raises:
        MetafieldAbsentError: Value is not a JSON array
    """
    value = metafield.value

    if isinstance(value, str):
        try:
            value = json.loads(value)
        except ValueError as e:
            raise MetafieldAbsentError(
                f"RRP metafield value is not valid JSON: {e}",
                details={"metafield_id": metafield.id}
            ) from e

    if not isinstance(value, list):
        raise MetafieldAbsentError(
            "RRP metafield value is not a list of prices",
            details={"metafield_id": metafield.id, "type": type(value).__name__}
        )

    prices = []
    for entry in value:
        try:
            prices.append(RrpPrice.model_validate(entry))
        except pydantic.ValidationError:
            logger.debug("rrp_entry_skipped", metafield_id=metafield.id, entry=entry)
    return prices


def resolve_reference_price(
    metafield: Optional[Metafield],
    currency: str
) -> Optional[str]:
    """
    Resolve the RRP for one currency.

    Args:
        metafield: sparklayer/rrp metafield, or None
        currency: Effective order currency

    Returns:
        Two-decimal price string, or None when absent, unmatched or unreadable
    """
    if metafield is None:
        return None

    try:
        prices = parse_rrp_prices(metafield)
    except MetafieldAbsentError as e:
        logger.warning("rrp_metafield_unreadable", error=e.message, **e.details)
        return None

    target = currency.lower()
    match = next((p for p in prices if p.currency_code.lower() == target), None)

    if match is None:
        logger.info("rrp_currency_not_found", currency=currency, metafield_id=metafield.id)
        return None

    before_price = format_price(match.value, currency)
    if before_price is None:
        logger.warning("rrp_value_unparseable", currency=currency, value=match.value)
    return before_price
