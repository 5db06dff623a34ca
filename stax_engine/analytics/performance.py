"""
Change and attribution engine.

Computes day-over-day portfolio change, each holding's contribution to that
change, and since-inception returns against cost basis.
"""

from collections.abc import Sequence

from loguru import logger

from stax_engine.analytics.aggregation import portfolio_total_base, portfolio_total_ref
from stax_engine.analytics.holding_valuation import (
    price_for,
    reference_value_in_base,
    value_in_base,
)
from stax_engine.core.enums import ChangeLabel
from stax_engine.core.models.holding import Holding, PriceResult
from stax_engine.core.models.results import (
    AttributionResult,
    AttributionRow,
    InceptionReturn,
    PortfolioChange,
)
from stax_engine.core.models.valuation import ManualValuation, classify_valuation
from stax_engine.core.protocols import FxRates, PriceMap
from stax_engine.core.types.financial import HUNDRED, ONE, ZERO
from stax_engine.core.types.money import rate_to_base


def _change_label(holdings: Sequence[Holding], prices: PriceMap, has_manual: bool) -> ChangeLabel:
    """Pick the comparison label for a portfolio change.

    Mixed reference points (previous close next to 24h) or any manual value
    make the figure a plain "priced assets" change.
    """
    with_previous_close = False
    with_24h_only = False
    for holding in holdings:
        if not (holding.symbol and holding.is_listed):
            continue
        quote = prices.get(holding.symbol)
        if quote is None:
            continue
        with_previous_close = with_previous_close or quote.has_previous_close
        with_24h_only = with_24h_only or quote.is_24h_only

    if has_manual or (with_previous_close and with_24h_only):
        return ChangeLabel.PRICED_ASSETS
    if with_previous_close:
        return ChangeLabel.PREVIOUS_CLOSE
    if with_24h_only:
        return ChangeLabel.DAY_24H
    return ChangeLabel.PRICED_ASSETS


def portfolio_change(
    holdings: Sequence[Holding],
    prices: PriceMap,
    base_currency: str,
    rates: FxRates | None = None,
) -> PortfolioChange | None:
    """Portfolio change from the reference point to now.

    Returns:
        PortfolioChange, or None when the reference total is not positive
        and no meaningful baseline exists
    """
    total_now = portfolio_total_base(holdings, prices, base_currency, rates)
    total_ref = portfolio_total_ref(holdings, prices, base_currency, rates)
    if total_ref <= ZERO:
        logger.debug(f"No change baseline for {len(holdings)} holdings (total_ref={total_ref})")
        return None

    pnl = total_now - total_ref
    has_manual = any(
        isinstance(classify_valuation(h, price_for(h, prices)), ManualValuation) for h in holdings
    )
    return PortfolioChange(
        total_now=total_now,
        total_ref=total_ref,
        pnl=pnl,
        pct=pnl / total_ref,
        label=_change_label(holdings, prices, has_manual),
        has_manual=has_manual,
    )


def attribution_from_change(
    holdings: Sequence[Holding],
    prices: PriceMap,
    base_currency: str,
    rates: FxRates | None = None,
) -> AttributionResult:
    """Per-holding contribution to the portfolio change.

    Uses the same reference point as ``portfolio_change``. When the total
    change is nonzero the ``contribution_pct`` values sum to 100. Rows are
    sorted by absolute contribution, largest first.
    """
    total_pnl = portfolio_total_base(holdings, prices, base_currency, rates) - portfolio_total_ref(
        holdings, prices, base_currency, rates
    )

    rows: list[AttributionRow] = []
    for holding in holdings:
        price = price_for(holding, prices)
        ref_value = reference_value_in_base(holding, price, base_currency, rates)
        now_value = value_in_base(holding, price, base_currency, rates)
        contribution = now_value - ref_value
        rows.append(
            AttributionRow(
                holding_id=holding.id,
                holding_name=holding.name,
                contribution_abs=contribution,
                contribution_pct=contribution / total_pnl * HUNDRED if total_pnl != ZERO else ZERO,
                return_pct=contribution / ref_value * HUNDRED if ref_value > ZERO else None,
            )
        )

    rows.sort(key=lambda row: abs(row.contribution_abs), reverse=True)
    return AttributionResult(rows=rows, total_pnl=total_pnl)


def holding_inception_return(
    holding: Holding,
    price: PriceResult | None,
    base_currency: str,
    rates: FxRates | None = None,
) -> InceptionReturn | None:
    """Since-inception return of one holding.

    ``cost_basis`` is a per-unit purchase price; total cost is cost basis
    times quantity (1 when the holding has no quantity).

    Returns:
        InceptionReturn, or None when the holding has no positive cost basis
    """
    if holding.cost_basis is None or holding.cost_basis <= ZERO:
        return None

    cost_rate = rate_to_base(holding.effective_cost_basis_currency, base_currency, rates)
    quantity = holding.quantity if holding.quantity is not None else ONE
    cost_basis = holding.cost_basis * quantity * cost_rate
    # Zero quantity leaves nothing to measure against
    if cost_basis <= ZERO:
        return None

    current_value = value_in_base(holding, price, base_currency, rates)
    gain_loss = current_value - cost_basis
    return InceptionReturn(
        cost_basis=cost_basis,
        current_value=current_value,
        gain_loss=gain_loss,
        return_pct=gain_loss / cost_basis * HUNDRED,
    )


def portfolio_inception_return(
    holdings: Sequence[Holding],
    prices: PriceMap,
    base_currency: str,
    rates: FxRates | None = None,
) -> InceptionReturn | None:
    """Aggregate since-inception return across holdings with cost basis.

    Holdings without cost basis are left out entirely rather than counted
    as zero cost.
    """
    returns = [
        r
        for r in (
            holding_inception_return(h, price_for(h, prices), base_currency, rates)
            for h in holdings
        )
        if r is not None
    ]
    if not returns:
        return None

    total_cost = sum((r.cost_basis for r in returns), ZERO)
    total_value = sum((r.current_value for r in returns), ZERO)
    if total_cost <= ZERO:
        return None
    gain_loss = total_value - total_cost
    return InceptionReturn(
        cost_basis=total_cost,
        current_value=total_value,
        gain_loss=gain_loss,
        return_pct=gain_loss / total_cost * HUNDRED,
    )
