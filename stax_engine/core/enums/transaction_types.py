"""
Transaction type enumerations.
"""

from enum import StrEnum


class TransactionType(StrEnum):
    """Realized events recorded against a holding."""

    SELL = "sell"
    DIVIDEND = "dividend"

    @property
    def has_quantity(self) -> bool:
        """Check if the transaction carries quantity and unit price."""
        return self == TransactionType.SELL
