"""
Asset class enumerations.

This module defines the closed set of asset classes a holding can belong to.
"""

from enum import StrEnum


class AssetType(StrEnum):
    """
    Allowed asset classes.

    Listed classes are priced from an external market quote; non-listed
    classes carry a user-entered manual value.
    """

    STOCK = "stock"
    ETF = "etf"
    CRYPTO = "crypto"
    METAL = "metal"
    COMMODITY = "commodity"
    FIXED_INCOME = "fixed_income"
    REAL_ESTATE = "real_estate"
    CASH = "cash"
    OTHER = "other"

    @property
    def is_listed(self) -> bool:
        """Check if the asset class is priced from market quotes."""
        return self in _LISTED

    @property
    def has_equity_exposure(self) -> bool:
        """Check if country/sector exposure applies to this asset class."""
        return self in (AssetType.STOCK, AssetType.ETF)

    @property
    def display_name(self) -> str:
        """Human-readable label, e.g. ``real estate``."""
        return self.value.replace("_", " ")

    @classmethod
    def listed(cls) -> tuple["AssetType", ...]:
        """Return the listed asset classes."""
        return _LISTED

    @classmethod
    def non_listed(cls) -> tuple["AssetType", ...]:
        """Return the manually valued asset classes."""
        return tuple(member for member in cls if member not in _LISTED)


_LISTED = (
    AssetType.STOCK,
    AssetType.ETF,
    AssetType.CRYPTO,
    AssetType.METAL,
    AssetType.COMMODITY,
)
