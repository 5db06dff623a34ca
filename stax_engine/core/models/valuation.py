"""
Valuation path of a holding.

Every holding is valued through exactly one path. The path is derived once
per holding and read by the value, reference value and change-label
calculations so they cannot disagree about which inputs apply.
"""

from dataclasses import dataclass

from stax_engine.core.models.holding import Holding, PriceResult


@dataclass(frozen=True)
class ListedValuation:
    """Market-priced: quantity times quote price."""

    quantity: float
    symbol: str
    price: PriceResult


@dataclass(frozen=True)
class ManualValuation:
    """User-entered current value."""

    value: float


@dataclass(frozen=True)
class Unvalued:
    """No usable valuation input. Values to zero."""


Valuation = ListedValuation | ManualValuation | Unvalued

UNVALUED = Unvalued()


def classify_valuation(holding: Holding, price: PriceResult | None) -> Valuation:
    """Derive the valuation path for a holding and its quote.

    The listed path wins when quantity, symbol and a quote are all present;
    otherwise the manual value applies when set.
    """
    if holding.quantity is not None and holding.symbol and price is not None:
        return ListedValuation(quantity=holding.quantity, symbol=holding.symbol, price=price)
    if holding.manual_value is not None:
        return ManualValuation(value=holding.manual_value)
    return UNVALUED
