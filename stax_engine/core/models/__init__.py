"""
Domain models for the portfolio engine.
"""

from .holding import Holding, HoldingMetadata, PriceResult, build_price_map
from .lot import ConsumedLot, FifoResult, Lot, build_asset_id
from .results import (
    AllocationSlice,
    AttributionResult,
    AttributionRow,
    ConcentrationMetrics,
    ExposureSlice,
    HoldingPnl,
    HoldingWithValue,
    InceptionReturn,
    MonthlyIncome,
    PortfolioChange,
    PortfolioStats,
    SellRecord,
)
from .transaction import Transaction
from .valuation import (
    ListedValuation,
    ManualValuation,
    Unvalued,
    Valuation,
    classify_valuation,
)

__all__ = [
    "AllocationSlice",
    "AttributionResult",
    "AttributionRow",
    "ConcentrationMetrics",
    "ConsumedLot",
    "ExposureSlice",
    "FifoResult",
    "Holding",
    "HoldingMetadata",
    "HoldingPnl",
    "HoldingWithValue",
    "InceptionReturn",
    "ListedValuation",
    "Lot",
    "ManualValuation",
    "MonthlyIncome",
    "PortfolioChange",
    "PortfolioStats",
    "PriceResult",
    "SellRecord",
    "Transaction",
    "Unvalued",
    "Valuation",
    "build_asset_id",
    "build_price_map",
    "classify_valuation",
]
