"""
Custom exception classes for the application.

Feed-level failures (transport, upstream, format) abort the whole
request. MetafieldAbsentError never leaves the enrichment layer.
"""

from typing import Optional, Any
from datetime import datetime, timezone


class AppError(Exception):
    """
    Base exception for all application errors.

    All custom exceptions inherit from this.

    Attributes:
        code: Error code (e.g., "SHOPIFY_UPSTREAM_ERROR")
        message: Human-readable message
        status_code: HTTP status code
        details: Additional context
    """

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = 500,
        details: Optional[dict[str, Any]] = None
    ):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(message)

    def to_dict(self, error: str = "Failed to process orders") -> dict:
        """Convert to feed error response format."""
        return {
            "error": error,
            "details": self.message,
            "code": self.code,
            "timestamp": self.timestamp
        }


class ExternalServiceError(AppError):
    """External service failure (500)."""

    def __init__(
        self,
        service: str,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict] = None
    ):
        super().__init__(
            code=code or f"{service.upper()}_ERROR",
            message=message,
            status_code=500,
            details={"service": service, **(details or {})}
        )


# ===================
# SHOPIFY ERRORS
# ===================

class TransportError(ExternalServiceError):
    """Shopify could not be reached (network failure or deadline)."""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(
            service="shopify",
            code="SHOPIFY_TRANSPORT_ERROR",
            message=message,
            details={"url": url} if url else None
        )


class UpstreamError(ExternalServiceError):
    """Shopify answered with a non-success status."""

    def __init__(self, upstream_status: int, body: str, url: Optional[str] = None):
        self.upstream_status = upstream_status
        self.body = body
        super().__init__(
            service="shopify",
            code="SHOPIFY_UPSTREAM_ERROR",
            message=f"Shopify API responded with status {upstream_status}: {body}",
            details={"upstream_status": upstream_status, "url": url}
        )


class FormatError(AppError):
    """Shopify response does not have the expected shape."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(
            code="SHOPIFY_FORMAT_ERROR",
            message=message,
            status_code=500,
            details=details
        )


# ===================
# METAFIELD ERRORS
# ===================

class MetafieldAbsentError(AppError):
    """RRP metafield missing or unreadable for one line item."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(
            code="RRP_METAFIELD_ABSENT",
            message=message,
            status_code=404,
            details=details
        )
