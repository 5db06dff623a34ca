"""
Single-holding valuation.

Converts a holding and its quote into base-currency figures: current value,
reference value at the prior comparison point, display string and
unrealized gain/loss against cost basis.
"""

from stax_engine.core.constants import PRICE_UNAVAILABLE
from stax_engine.core.models.holding import Holding, PriceResult
from stax_engine.core.models.results import HoldingPnl
from stax_engine.core.models.valuation import (
    ListedValuation,
    ManualValuation,
    Valuation,
    classify_valuation,
)
from stax_engine.core.protocols import FxRates, PriceMap
from stax_engine.core.types.financial import HUNDRED, ONE, ZERO
from stax_engine.core.types.money import format_money, rate_to_base


def price_for(holding: Holding, prices: PriceMap) -> PriceResult | None:
    """Look up the quote for a holding's symbol, if it has one."""
    if not holding.symbol:
        return None
    return prices.get(holding.symbol)


def valuation_value(valuation: Valuation) -> float:
    """Current value of a valuation path in the holding's own currency."""
    if isinstance(valuation, ListedValuation):
        return valuation.quantity * valuation.price.price
    if isinstance(valuation, ManualValuation):
        return valuation.value
    return ZERO


def valuation_reference_value(valuation: Valuation) -> float:
    """Value at the prior comparison point in the holding's own currency.

    Manual values have no day-change concept and stay flat. Listed values
    use the previous close, else back-solve the prior price from the daily
    change percent, else assume no change.
    """
    if isinstance(valuation, ManualValuation):
        return valuation.value
    if not isinstance(valuation, ListedValuation):
        return ZERO

    quote = valuation.price
    if quote.previous_close is not None:
        return valuation.quantity * quote.previous_close
    if quote.change_percent is not None and quote.change_percent != ZERO:
        reference_price = quote.price / (ONE + quote.change_percent / HUNDRED)
        return valuation.quantity * reference_price
    return valuation.quantity * quote.price


def value_in_base(
    holding: Holding,
    price: PriceResult | None,
    base_currency: str,
    rates: FxRates | None = None,
) -> float:
    """Current value of a holding in base currency.

    Listed: quantity * price, converted to base. Manual: manual value,
    converted to base. Otherwise 0.
    """
    valuation = classify_valuation(holding, price)
    return valuation_value(valuation) * rate_to_base(holding.currency, base_currency, rates)


def reference_value_in_base(
    holding: Holding,
    price: PriceResult | None,
    base_currency: str,
    rates: FxRates | None = None,
) -> float:
    """Value of a holding at the comparison point, in base currency.

    The comparison point is the previous close for exchange-traded assets
    and 24h ago for always-on markets.
    """
    valuation = classify_valuation(holding, price)
    rate = rate_to_base(holding.currency, base_currency, rates)
    return valuation_reference_value(valuation) * rate


def format_holding_value_display(
    holding: Holding,
    price: PriceResult | None,
    base_currency: str,
    rates: FxRates | None = None,
) -> str:
    """Format a holding's value for display.

    Listed holdings that own units but have no quote show
    ``"Price unavailable"`` instead of a misleading zero.
    """
    if (
        holding.is_listed
        and holding.symbol
        and price is None
        and holding.quantity is not None
        and holding.quantity > ZERO
    ):
        return PRICE_UNAVAILABLE
    return format_money(value_in_base(holding, price, base_currency, rates), base_currency)


def holding_unrealized_pnl(
    holding: Holding,
    price: PriceResult | None,
    base_currency: str,
    rates: FxRates | None = None,
) -> HoldingPnl | None:
    """Unrealized gain/loss of a holding against its cost basis.

    Listed holdings multiply the per-unit cost basis by quantity; manual
    holdings treat the cost basis as a total.

    Returns:
        HoldingPnl, or None when cost basis or value inputs are missing
    """
    if holding.cost_basis is None or holding.cost_basis <= ZERO:
        return None

    cost_rate = rate_to_base(holding.effective_cost_basis_currency, base_currency, rates)
    if holding.quantity is not None and holding.quantity > ZERO and holding.symbol:
        cost_base = holding.cost_basis * holding.quantity * cost_rate
    elif holding.manual_value is not None:
        cost_base = holding.cost_basis * cost_rate
    else:
        return None

    if cost_base <= ZERO:
        return None
    pnl = value_in_base(holding, price, base_currency, rates) - cost_base
    return HoldingPnl(pnl=pnl, pnl_pct=pnl / cost_base * HUNDRED)
