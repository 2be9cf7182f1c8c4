"""
Amount resolution result.

Separates "structured amount used", "plain amount used" and
"nothing to format" so the precedence rule can be checked directly.
"""

from typing import Any
from enum import Enum

from models.base import BaseSchema


class AmountSource(str, Enum):
    """Where a resolved amount came from."""
    STRUCTURED = "STRUCTURED"  # <field>_set.presentment_money.amount
    PLAIN = "PLAIN"            # legacy scalar field
    MISSING = "MISSING"


class ResolvedAmount(BaseSchema):
    """Raw amount picked for one price-bearing field."""

    source: AmountSource
    amount: Any = None

    @property
    def is_missing(self) -> bool:
        return self.source == AmountSource.MISSING
