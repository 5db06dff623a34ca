"""
Portfolio aggregation.

Sums holding valuations into portfolio totals, weights and allocation
breakdowns. Every function takes the whole snapshot (holdings, quotes,
base currency, rates) so totals and per-holding figures stay consistent.
"""

from collections.abc import Sequence

from stax_engine.analytics.holding_valuation import (
    price_for,
    reference_value_in_base,
    value_in_base,
)
from stax_engine.core.enums import ExposureType
from stax_engine.core.models.holding import Holding
from stax_engine.core.models.results import AllocationSlice, ExposureSlice, HoldingWithValue
from stax_engine.core.protocols import FxRates, PriceMap
from stax_engine.core.types.financial import ZERO, percent_of


def portfolio_total_base(
    holdings: Sequence[Holding],
    prices: PriceMap,
    base_currency: str,
    rates: FxRates | None = None,
) -> float:
    """Total current value of all holdings in base currency."""
    return sum(
        (value_in_base(h, price_for(h, prices), base_currency, rates) for h in holdings),
        ZERO,
    )


def portfolio_total_ref(
    holdings: Sequence[Holding],
    prices: PriceMap,
    base_currency: str,
    rates: FxRates | None = None,
) -> float:
    """Total value at the reference point. Manual values stay constant."""
    return sum(
        (reference_value_in_base(h, price_for(h, prices), base_currency, rates) for h in holdings),
        ZERO,
    )


def holdings_with_values(
    holdings: Sequence[Holding],
    prices: PriceMap,
    base_currency: str,
    rates: FxRates | None = None,
) -> list[HoldingWithValue]:
    """Value and weight for each holding, sorted by value descending.

    Weights are 0 when the portfolio total is 0. Equal values keep their
    input order.
    """
    values = [
        (holding, value_in_base(holding, price_for(holding, prices), base_currency, rates))
        for holding in holdings
    ]
    total = sum((value for _, value in values), ZERO)

    rows = [
        HoldingWithValue(
            holding=holding,
            value_base=value,
            weight_percent=percent_of(value, total),
        )
        for holding, value in values
    ]
    return sorted(rows, key=lambda row: row.value_base, reverse=True)


def allocation_by_asset_class(
    with_values: Sequence[HoldingWithValue],
) -> list[AllocationSlice]:
    """Group valued holdings by asset class, in first-seen order."""
    by_class: dict[str, float] = {}
    for row in with_values:
        key = row.holding.asset_type.value
        by_class[key] = by_class.get(key, ZERO) + row.value_base

    total = sum(by_class.values(), ZERO)
    return [
        AllocationSlice(asset_class=asset_class, value=value, percent=percent_of(value, total))
        for asset_class, value in by_class.items()
    ]


def exposure_breakdown(with_values: Sequence[HoldingWithValue]) -> list[ExposureSlice]:
    """Exposure by asset class, currency, country and sector.

    Country and sector exposure only counts stocks and ETFs with metadata.
    Slices are sorted by percent descending; empty when the total is 0.
    """
    total = sum((row.value_base for row in with_values), ZERO)
    if total <= ZERO:
        return []

    buckets: dict[ExposureType, dict[str, float]] = {kind: {} for kind in ExposureType}

    def add(kind: ExposureType, key: str, value: float) -> None:
        bucket = buckets[kind]
        bucket[key] = bucket.get(key, ZERO) + value

    for row in with_values:
        holding = row.holding
        add(ExposureType.ASSET_CLASS, holding.asset_type.display_name, row.value_base)
        add(ExposureType.CURRENCY, holding.currency, row.value_base)
        meta = holding.metadata
        if meta is None or not holding.asset_type.has_equity_exposure:
            continue
        if meta.country:
            add(ExposureType.COUNTRY, meta.country, row.value_base)
        if meta.sector:
            add(ExposureType.SECTOR, meta.sector, row.value_base)

    slices = [
        ExposureSlice(label=label, percent=percent_of(value, total), type=kind)
        for kind, bucket in buckets.items()
        for label, value in bucket.items()
    ]
    return sorted(slices, key=lambda s: s.percent, reverse=True)
