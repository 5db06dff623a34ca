"""
Portfolio valuation and performance-attribution engine.

Converts holdings, price quotes and FX rates into base-currency values,
returns, concentration metrics and per-holding attribution, and matches
sells against acquisition lots FIFO.
"""

from stax_engine.analytics import (
    PortfolioSnapshot,
    attribution_from_change,
    compute_fifo_sell,
    compute_portfolio_stats,
    holding_inception_return,
    holdings_with_values,
    portfolio_change,
    portfolio_inception_return,
    portfolio_total_base,
    portfolio_total_ref,
    record_sell,
    reference_value_in_base,
    value_in_base,
)
from stax_engine.core.enums import AssetType, ChangeLabel, LotSource, TransactionType
from stax_engine.core.models import Holding, Lot, PriceResult, Transaction, build_price_map
from stax_engine.core.types.money import format_money, rate_to_base
from stax_engine.infrastructure.fx import FxRateCache

__version__ = "0.1.0"

__all__ = [
    "AssetType",
    "ChangeLabel",
    "FxRateCache",
    "Holding",
    "Lot",
    "LotSource",
    "PortfolioSnapshot",
    "PriceResult",
    "Transaction",
    "TransactionType",
    "attribution_from_change",
    "build_price_map",
    "compute_fifo_sell",
    "compute_portfolio_stats",
    "format_money",
    "holding_inception_return",
    "holdings_with_values",
    "portfolio_change",
    "portfolio_inception_return",
    "portfolio_total_base",
    "portfolio_total_ref",
    "rate_to_base",
    "record_sell",
    "reference_value_in_base",
    "value_in_base",
]
