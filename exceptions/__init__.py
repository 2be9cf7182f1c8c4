"""
Custom exceptions module.
"""

from exceptions.errors import (
    # Base exceptions
    AppError,
    ExternalServiceError,

    # Shopify
    TransportError,
    UpstreamError,
    FormatError,

    # Metafields
    MetafieldAbsentError,
)

__all__ = [
    # Base
    "AppError",
    "ExternalServiceError",

    # Shopify
    "TransportError",
    "UpstreamError",
    "FormatError",

    # Metafields
    "MetafieldAbsentError",
]
