"""
Currency conversion and money formatting.

``rate_to_base`` is the single conversion point used by every valuation
function. It never raises: when live rates are missing it falls back to a
small fixed table, and currencies absent from that table are treated as
already being in base units.
"""

from collections.abc import Mapping

from loguru import logger

from stax_engine.core.constants import FALLBACK_FX_RATES
from stax_engine.core.types.financial import ONE, ZERO

_CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
}


def rate_to_base(
    from_currency: str,
    base_currency: str,
    rates: Mapping[str, float] | None = None,
) -> float:
    """Rate that converts an amount in ``from_currency`` into ``base_currency``.

    Args:
        from_currency: Currency the amount is denominated in
        base_currency: Currency to convert into
        rates: Optional currency -> rate table relative to USD

    Returns:
        Multiplier for the amount. 1.0 for the same currency.

    Examples:
        >>> rate_to_base("EUR", "EUR")
        1.0
        >>> rate_to_base("EUR", "USD", {"USD": 1.0, "EUR": 0.8})
        1.25
    """
    if from_currency == base_currency:
        return ONE

    if rates is not None and from_currency in rates and base_currency in rates:
        from_rate = rates[from_currency]
        if from_rate > ZERO:
            return rates[base_currency] / from_rate

    logger.debug(f"Using fallback FX table for {from_currency}->{base_currency}")
    from_rate = FALLBACK_FX_RATES.get(from_currency, ONE)
    to_rate = FALLBACK_FX_RATES.get(base_currency, ONE)
    return to_rate / from_rate


def format_money(value: float, currency: str = "USD") -> str:
    """Format a monetary amount with two decimals and thousands separators.

    Examples:
        >>> format_money(1234.56, "USD")
        '$1,234.56'
        >>> format_money(-5, "EUR")
        '-€5.00'
        >>> format_money(10, "CHF")
        'CHF 10.00'
    """
    sign = "-" if value < ZERO else ""
    amount = f"{abs(value):,.2f}"
    symbol = _CURRENCY_SYMBOLS.get(currency.upper())
    if symbol is not None:
        return f"{sign}{symbol}{amount}"
    return f"{sign}{currency.upper()} {amount}"


def format_weight(weight_percent: float) -> str:
    """Format a portfolio weight, e.g. ``25.5%``."""
    return f"{weight_percent:.1f}%"
