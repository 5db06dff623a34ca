"""
Core enumerations for the portfolio engine.

This module provides centralized enumerations for domain concepts
like asset classes, lot sources, transaction types and result labels.
"""

from .asset_types import AssetType
from .labels import ChangeLabel, DiversificationLabel, ExposureType
from .lot_sources import LotSource
from .transaction_types import TransactionType

__all__ = [
    "AssetType",
    "ChangeLabel",
    "DiversificationLabel",
    "ExposureType",
    "LotSource",
    "TransactionType",
]
