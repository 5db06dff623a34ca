"""
Portfolio snapshot facade.

Binds one consistent set of inputs (holdings, quotes, base currency and FX
rates) so every figure rendered together comes from the same computation
pass.
"""

from collections.abc import Mapping, Sequence

from stax_engine.analytics.aggregation import (
    allocation_by_asset_class,
    exposure_breakdown,
    holdings_with_values,
    portfolio_total_base,
    portfolio_total_ref,
)
from stax_engine.analytics.diversification import (
    compute_concentration,
    compute_diversification_score,
    generate_insights,
)
from stax_engine.analytics.holding_valuation import (
    format_holding_value_display,
    price_for,
    value_in_base,
)
from stax_engine.analytics.performance import (
    attribution_from_change,
    holding_inception_return,
    portfolio_change,
    portfolio_inception_return,
)
from stax_engine.analytics.statistics import compute_portfolio_stats
from stax_engine.core.config import get_settings
from stax_engine.core.models.holding import Holding, PriceResult
from stax_engine.core.models.results import (
    AllocationSlice,
    AttributionResult,
    ConcentrationMetrics,
    ExposureSlice,
    HoldingWithValue,
    InceptionReturn,
    PortfolioChange,
    PortfolioStats,
)


class PortfolioSnapshot:
    """Read-only view over one portfolio snapshot.

    Inputs are copied at construction, so later changes to the caller's
    collections do not leak into figures computed from this snapshot.
    """

    def __init__(
        self,
        holdings: Sequence[Holding],
        prices: Mapping[str, PriceResult],
        base_currency: str | None = None,
        fx_rates: Mapping[str, float] | None = None,
    ) -> None:
        """Initialize the snapshot.

        Args:
            holdings: Holdings in the portfolio
            prices: Quotes keyed by symbol
            base_currency: Reporting currency, defaults to the configured one
            fx_rates: Optional currency -> rate table relative to USD
        """
        self.holdings: tuple[Holding, ...] = tuple(holdings)
        self.prices: dict[str, PriceResult] = dict(prices)
        self.base_currency = base_currency or get_settings().base_currency
        self.fx_rates: dict[str, float] | None = dict(fx_rates) if fx_rates is not None else None
        self._with_values: list[HoldingWithValue] | None = None

    def _args(
        self,
    ) -> tuple[tuple[Holding, ...], dict[str, PriceResult], str, dict[str, float] | None]:
        return self.holdings, self.prices, self.base_currency, self.fx_rates

    # Valuation
    def value_of(self, holding: Holding) -> float:
        """Current value of one holding in base currency."""
        return value_in_base(
            holding, price_for(holding, self.prices), self.base_currency, self.fx_rates
        )

    def display_value_of(self, holding: Holding) -> str:
        """Display string for one holding's value."""
        return format_holding_value_display(
            holding, price_for(holding, self.prices), self.base_currency, self.fx_rates
        )

    # Aggregation
    def total_value(self) -> float:
        """Total current value."""
        return portfolio_total_base(*self._args())

    def reference_total(self) -> float:
        """Total value at the reference point."""
        return portfolio_total_ref(*self._args())

    def holdings_with_values(self) -> list[HoldingWithValue]:
        """Holdings with value and weight, largest first."""
        if self._with_values is None:
            self._with_values = holdings_with_values(*self._args())
        return list(self._with_values)

    def allocation(self) -> list[AllocationSlice]:
        """Allocation by asset class."""
        return allocation_by_asset_class(self.holdings_with_values())

    def exposure(self) -> list[ExposureSlice]:
        """Exposure by asset class, currency, country and sector."""
        return exposure_breakdown(self.holdings_with_values())

    # Change and attribution
    def change(self) -> PortfolioChange | None:
        """Change since the reference point, or None without a baseline."""
        return portfolio_change(*self._args())

    def attribution(self) -> AttributionResult:
        """Per-holding contribution to the change."""
        return attribution_from_change(*self._args())

    def inception_return(self) -> InceptionReturn | None:
        """Aggregate since-inception return."""
        return portfolio_inception_return(*self._args())

    def holding_inception_return(self, holding: Holding) -> InceptionReturn | None:
        """Since-inception return of one holding."""
        return holding_inception_return(
            holding, price_for(holding, self.prices), self.base_currency, self.fx_rates
        )

    # Statistics and diversification
    def stats(self) -> PortfolioStats:
        """Summary statistics."""
        return compute_portfolio_stats(*self._args())

    def concentration(self) -> ConcentrationMetrics:
        """Concentration metrics for diversification scoring."""
        return compute_concentration(self.holdings_with_values())

    def diversification_score(self, crypto_threshold_percent: float | None = None) -> int:
        """Diversification score from 0 to 100."""
        return compute_diversification_score(
            self.concentration(), self.holdings_with_values(), crypto_threshold_percent
        )

    def insights(self, crypto_threshold_percent: float | None = None) -> list[str]:
        """Plain-language diversification insights."""
        with_values = self.holdings_with_values()
        concentration = compute_concentration(with_values)
        score = compute_diversification_score(
            concentration, with_values, crypto_threshold_percent
        )
        return generate_insights(concentration, score, with_values, crypto_threshold_percent)
