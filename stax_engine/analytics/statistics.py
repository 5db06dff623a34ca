"""
Portfolio summary statistics.

Derives cost-basis P&L, concentration (HHI), diversification band and
summary counts from the aggregation layer.
"""

from collections.abc import Sequence

from stax_engine.analytics.aggregation import holdings_with_values
from stax_engine.analytics.holding_valuation import price_for
from stax_engine.analytics.performance import portfolio_change
from stax_engine.core.constants import HHI_SCALE, TOP_N_CONCENTRATION
from stax_engine.core.enums import DiversificationLabel
from stax_engine.core.models.holding import Holding
from stax_engine.core.models.results import HoldingWithValue, PortfolioStats
from stax_engine.core.models.valuation import ManualValuation, classify_valuation
from stax_engine.core.protocols import FxRates, PriceMap
from stax_engine.core.types.financial import HUNDRED, ZERO, percent_of
from stax_engine.core.types.money import rate_to_base


def herfindahl_index(with_values: Sequence[HoldingWithValue]) -> float:
    """Herfindahl-Hirschman Index on the 0-10000 scale.

    A single holding scores 10000; an empty or zero-valued portfolio 0.
    """
    return sum(((row.weight_percent / HUNDRED) ** 2 * HHI_SCALE for row in with_values), ZERO)


def total_cost_basis(
    holdings: Sequence[Holding],
    base_currency: str,
    rates: FxRates | None = None,
) -> float:
    """Sum of cost basis across holdings, in base currency.

    Each ``cost_basis`` is added as-is, without a quantity multiplier.
    """
    total = ZERO
    for holding in holdings:
        if holding.cost_basis is None:
            continue
        rate = rate_to_base(holding.effective_cost_basis_currency, base_currency, rates)
        total += holding.cost_basis * rate
    return total


def compute_portfolio_stats(
    holdings: Sequence[Holding],
    prices: PriceMap,
    base_currency: str,
    rates: FxRates | None = None,
) -> PortfolioStats:
    """Compute summary statistics for a portfolio snapshot."""
    with_values = holdings_with_values(holdings, prices, base_currency, rates)
    total_value = sum((row.value_base for row in with_values), ZERO)

    cost_basis = total_cost_basis(holdings, base_currency, rates)
    gain_loss = total_value - cost_basis if cost_basis > ZERO else ZERO

    holding_count = len(holdings)
    top = with_values[0] if with_values else None
    hhi = herfindahl_index(with_values)

    change = portfolio_change(holdings, prices, base_currency, rates)

    return PortfolioStats(
        total_value=total_value,
        total_cost_basis=cost_basis,
        total_gain_loss=gain_loss,
        total_gain_loss_pct=percent_of(gain_loss, cost_basis),
        holding_count=holding_count,
        asset_class_count=len({h.asset_type for h in holdings}),
        top_holding_weight=top.weight_percent if top else ZERO,
        top_holding_name=top.holding.name if top else "",
        top3_weight=sum(
            (row.weight_percent for row in with_values[:TOP_N_CONCENTRATION]), ZERO
        ),
        hhi=hhi,
        diversification_label=DiversificationLabel.from_hhi(hhi),
        priced_count=sum(1 for h in holdings if h.symbol and h.is_listed),
        manual_count=sum(
            1
            for h in holdings
            if isinstance(classify_valuation(h, price_for(h, prices)), ManualValuation)
        ),
        avg_weight=HUNDRED / holding_count if holding_count > 0 else ZERO,
        day_change_pnl=change.pnl if change else None,
        day_change_pct=change.pct * HUNDRED if change else None,
    )
