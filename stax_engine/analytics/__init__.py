"""
Valuation and performance analytics.

Pure functions over a holdings/quotes/FX snapshot, plus the FIFO lot
matcher and transaction flows.
"""

from .aggregation import (
    allocation_by_asset_class,
    exposure_breakdown,
    holdings_with_values,
    portfolio_total_base,
    portfolio_total_ref,
)
from .diversification import (
    compute_concentration,
    compute_diversification_score,
    generate_insights,
)
from .fifo import compute_fifo_sell
from .holding_valuation import (
    format_holding_value_display,
    holding_unrealized_pnl,
    reference_value_in_base,
    value_in_base,
)
from .performance import (
    attribution_from_change,
    holding_inception_return,
    portfolio_change,
    portfolio_inception_return,
)
from .snapshot import PortfolioSnapshot
from .statistics import compute_portfolio_stats, herfindahl_index
from .transactions import (
    dividends_by_holding,
    monthly_dividend_income,
    record_dividend,
    record_sell,
    total_dividend_income,
    total_realized_gain_loss,
)

__all__ = [
    "PortfolioSnapshot",
    "allocation_by_asset_class",
    "attribution_from_change",
    "compute_concentration",
    "compute_diversification_score",
    "compute_fifo_sell",
    "compute_portfolio_stats",
    "dividends_by_holding",
    "exposure_breakdown",
    "format_holding_value_display",
    "generate_insights",
    "herfindahl_index",
    "holding_inception_return",
    "holding_unrealized_pnl",
    "holdings_with_values",
    "monthly_dividend_income",
    "portfolio_change",
    "portfolio_inception_return",
    "portfolio_total_base",
    "portfolio_total_ref",
    "record_dividend",
    "record_sell",
    "reference_value_in_base",
    "total_dividend_income",
    "total_realized_gain_loss",
    "value_in_base",
]
