"""
Application settings loaded from environment variables.

Uses pydantic-settings for validation and type safety.
Settings are frozen: build once at startup and pass the instance
into anything that talks to Shopify.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from functools import lru_cache
from typing import Literal, Optional


class Settings(BaseSettings):
    """
    Application settings.

    All values loaded from .env file or environment variables.
    Shop URL and access token are not validated here; a missing
    token surfaces as an authorization error from Shopify.
    """

    model_config = SettingsConfigDict(
        env_file=(".env", "../.env"),  # Check current dir, then parent
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # ===================
    # SHOPIFY
    # ===================
    shopify_shop_url: Optional[str] = Field(
        None,
        description="Shop domain, e.g. my-shop.myshopify.com"
    )
    shopify_access_token: Optional[str] = Field(
        None,
        description="Admin API access token"
    )
    shopify_api_version: str = Field(
        default="2024-01",
        description="Admin REST API version"
    )
    metafield_owner: Literal["variant", "product"] = Field(
        default="variant",
        description="Resource the RRP metafield is attached to (product = legacy stores)"
    )

    # ===================
    # FEED LIMITS
    # ===================
    upstream_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        le=120,
        description="Timeout for a single Shopify call"
    )
    feed_timeout_seconds: float = Field(
        default=120.0,
        gt=0,
        le=900,
        description="Deadline for assembling one feed response"
    )
    feed_max_concurrent_orders: int = Field(
        default=8,
        ge=1,
        le=64,
        description="Orders enriched in parallel per feed request"
    )

    # ===================
    # APP SETTINGS
    # ===================
    environment: str = Field(
        default="development",
        pattern="^(development|staging|production)$",
        description="Application environment"
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    log_level: str = Field(
        default="INFO",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Logging level"
    )
    api_host: str = Field(
        default="0.0.0.0",
        description="API host"
    )
    port: int = Field(
        default=3000,
        ge=1,
        le=65535,
        description="API port"
    )

    # ===================
    # COMPUTED PROPERTIES
    # ===================
    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment == "production"

    @property
    def shopify_configured(self) -> bool:
        """Check if both shop URL and token are set."""
        return bool(self.shopify_shop_url and self.shopify_access_token)

    @property
    def shopify_admin_url(self) -> str:
        """Admin REST base URL, tolerating a scheme in the shop setting."""
        shop = (self.shopify_shop_url or "").strip().rstrip("/")
        for scheme in ("https://", "http://"):
            if shop.startswith(scheme):
                shop = shop[len(scheme):]
        return f"https://{shop}/admin/api/{self.shopify_api_version}"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload.

    Returns:
        Settings: Application settings

    Raises:
        ValidationError: If env vars are invalid
    """
    return Settings()


# For convenient imports: from config.settings import settings
settings = get_settings()
