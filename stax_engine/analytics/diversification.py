"""
Diversification scoring.

Scores a portfolio from 100 down, subtracting fixed penalties for each
concentration threshold it breaches, and turns the result into short
plain-language insights.
"""

from collections.abc import Sequence

from stax_engine.core.config import get_settings
from stax_engine.core.constants import (
    MAX_INSIGHTS,
    SCORE_COUNTRY_PENALTY,
    SCORE_COUNTRY_THRESHOLD,
    SCORE_CRYPTO_PENALTY,
    SCORE_HEALTHY_MIN,
    SCORE_MODERATE_MIN,
    SCORE_SECTOR_PENALTY,
    SCORE_SECTOR_THRESHOLD,
    SCORE_START,
    SCORE_TOP3_PENALTY,
    SCORE_TOP3_THRESHOLD,
    SCORE_TOP_HOLDING_PENALTY,
    SCORE_TOP_HOLDING_THRESHOLD,
    TOP_N_CONCENTRATION,
)
from stax_engine.core.enums import AssetType
from stax_engine.core.models.results import ConcentrationMetrics, HoldingWithValue
from stax_engine.core.types.financial import HUNDRED, ZERO, percent_of


def _largest_share(values: dict[str, float], total: float) -> float:
    if total <= ZERO or not values:
        return ZERO
    return max(values.values()) / total * HUNDRED


def crypto_weight(with_values: Sequence[HoldingWithValue]) -> float:
    """Combined weight (percent) of crypto holdings."""
    return sum(
        (row.weight_percent for row in with_values if row.holding.asset_type == AssetType.CRYPTO),
        ZERO,
    )


def compute_concentration(with_values: Sequence[HoldingWithValue]) -> ConcentrationMetrics:
    """Concentration figures from value-sorted holdings.

    Country and sector shares read holding metadata; holdings without it
    do not count towards any country or sector.
    """
    total = sum((row.value_base for row in with_values), ZERO)

    by_country: dict[str, float] = {}
    by_sector: dict[str, float] = {}
    for row in with_values:
        meta = row.holding.metadata
        if meta is None:
            continue
        if meta.country:
            by_country[meta.country] = by_country.get(meta.country, ZERO) + row.value_base
        if meta.sector:
            by_sector[meta.sector] = by_sector.get(meta.sector, ZERO) + row.value_base

    top_values = sum((row.value_base for row in with_values[:TOP_N_CONCENTRATION]), ZERO)
    return ConcentrationMetrics(
        top_holding_percent=with_values[0].weight_percent if with_values else ZERO,
        top3_combined_percent=percent_of(top_values, total),
        largest_country_percent=_largest_share(by_country, total),
        largest_sector_percent=_largest_share(by_sector, total),
        hhi=sum(((row.weight_percent / HUNDRED) ** 2 for row in with_values), ZERO),
    )


def compute_diversification_score(
    concentration: ConcentrationMetrics,
    with_values: Sequence[HoldingWithValue],
    crypto_threshold_percent: float | None = None,
) -> int:
    """Diversification score from 0 to 100.

    Args:
        concentration: Output of ``compute_concentration``
        with_values: Holdings with weights, for the crypto share
        crypto_threshold_percent: Crypto weight above which a penalty applies.
            Defaults to the configured threshold.

    Returns:
        Score floored at 0
    """
    if crypto_threshold_percent is None:
        crypto_threshold_percent = get_settings().crypto_concentration_threshold

    score = SCORE_START
    if concentration.top_holding_percent > SCORE_TOP_HOLDING_THRESHOLD:
        score -= SCORE_TOP_HOLDING_PENALTY
    if concentration.top3_combined_percent > SCORE_TOP3_THRESHOLD:
        score -= SCORE_TOP3_PENALTY
    if concentration.largest_country_percent > SCORE_COUNTRY_THRESHOLD:
        score -= SCORE_COUNTRY_PENALTY
    if concentration.largest_sector_percent > SCORE_SECTOR_THRESHOLD:
        score -= SCORE_SECTOR_PENALTY
    if crypto_weight(with_values) > crypto_threshold_percent:
        score -= SCORE_CRYPTO_PENALTY
    return max(0, score)


def generate_insights(
    concentration: ConcentrationMetrics,
    score: int,
    with_values: Sequence[HoldingWithValue],
    crypto_threshold_percent: float | None = None,
) -> list[str]:
    """Plain-language insights, one per breached threshold plus a verdict.

    The crypto insight uses the same threshold as the score. At most five
    insights are returned.
    """
    if crypto_threshold_percent is None:
        crypto_threshold_percent = get_settings().crypto_concentration_threshold

    insights: list[str] = []
    if concentration.top_holding_percent > SCORE_TOP_HOLDING_THRESHOLD:
        insights.append(
            f"Top holding is {concentration.top_holding_percent:.1f}%. Consider diversifying."
        )
    if concentration.top3_combined_percent > SCORE_TOP3_THRESHOLD:
        insights.append(
            f"Top 3 holdings make up {concentration.top3_combined_percent:.1f}%. "
            "Concentration is high."
        )
    if concentration.largest_country_percent > SCORE_COUNTRY_THRESHOLD:
        insights.append(
            f"Largest country exposure is {concentration.largest_country_percent:.1f}%. "
            "Consider geographic diversification."
        )
    if concentration.largest_sector_percent > SCORE_SECTOR_THRESHOLD:
        insights.append(
            f"Largest sector is {concentration.largest_sector_percent:.1f}%. "
            "Sector risk is elevated."
        )
    crypto_percent = crypto_weight(with_values)
    if crypto_percent > crypto_threshold_percent:
        insights.append(
            f"Crypto is {crypto_percent:.1f}% of portfolio. Volatility may be high."
        )

    if score >= SCORE_HEALTHY_MIN:
        insights.append("Portfolio diversification looks healthy.")
    elif score >= SCORE_MODERATE_MIN:
        insights.append("Moderate diversification. A few tweaks could improve balance.")
    else:
        insights.append("Consider diversifying across holdings, sectors, and regions.")
    return insights[:MAX_INSIGHTS]
