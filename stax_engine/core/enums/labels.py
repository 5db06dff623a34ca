"""
Result label enumerations.

Labels attached to computed results for the presentation layer.
"""

from enum import StrEnum

from stax_engine.core.constants import (
    HHI_MODERATELY_CONCENTRATED_BELOW,
    HHI_WELL_DIVERSIFIED_BELOW,
)


class ChangeLabel(StrEnum):
    """Comparison point used for a portfolio change figure."""

    DAY_24H = "24h"
    PREVIOUS_CLOSE = "previous_close"
    PRICED_ASSETS = "priced_assets"


class DiversificationLabel(StrEnum):
    """Diversification band derived from the HHI."""

    WELL_DIVERSIFIED = "Well diversified"
    MODERATELY_CONCENTRATED = "Moderately concentrated"
    HIGHLY_CONCENTRATED = "Highly concentrated"

    @classmethod
    def from_hhi(cls, hhi: float) -> "DiversificationLabel":
        """Classify an HHI value on the 0-10000 scale."""
        if hhi < HHI_WELL_DIVERSIFIED_BELOW:
            return cls.WELL_DIVERSIFIED
        if hhi < HHI_MODERATELY_CONCENTRATED_BELOW:
            return cls.MODERATELY_CONCENTRATED
        return cls.HIGHLY_CONCENTRATED


class ExposureType(StrEnum):
    """Dimension of an exposure slice."""

    ASSET_CLASS = "asset_class"
    CURRENCY = "currency"
    COUNTRY = "country"
    SECTOR = "sector"
