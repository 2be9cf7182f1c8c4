"""
Base schemas for all models.
"""

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """
    Base for all schemas.

    Features:
        - Auto-trim whitespace from strings
        - Validate on attribute assignment
        - Ignore unknown keys (Shopify adds fields between versions)
    """
    model_config = ConfigDict(
        from_attributes=True,
        str_strip_whitespace=True,
        validate_assignment=True,
        extra="ignore"
    )


class ShopifySchema(BaseSchema):
    """Base for Shopify payloads: text is kept exactly as Shopify sent it."""
    model_config = ConfigDict(
        str_strip_whitespace=False
    )


class FeedSchema(BaseSchema):
    """Base for feed output: snake_case in Python, camelCase on the wire."""
    model_config = ConfigDict(
        populate_by_name=True,
        str_strip_whitespace=False
    )
