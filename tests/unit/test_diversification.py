"""
Unit tests for diversification scoring and insights.
"""

import pytest

from stax_engine.analytics.aggregation import holdings_with_values
from stax_engine.analytics.diversification import (
    compute_concentration,
    compute_diversification_score,
    crypto_weight,
    generate_insights,
)
from stax_engine.core.config import get_settings
from stax_engine.core.enums import AssetType
from stax_engine.core.models import Holding, HoldingMetadata, HoldingWithValue

US_TECH = HoldingMetadata(country="US", sector="Technology")


def valued(
    *entries: tuple[str, AssetType, float, HoldingMetadata | None],
) -> list[HoldingWithValue]:
    holdings = [
        Holding(
            id=holding_id,
            portfolio_id="p1",
            asset_type=asset_type,
            name=holding_id,
            currency="USD",
            manual_value=value,
            metadata=metadata,
        )
        for holding_id, asset_type, value, metadata in entries
    ]
    return holdings_with_values(holdings, {}, "USD")


@pytest.fixture
def balanced_mix() -> list[HoldingWithValue]:
    """Stock 60%, crypto 30%, cash 10%."""
    return valued(
        ("stock", AssetType.STOCK, 600.0, US_TECH),
        ("btc", AssetType.CRYPTO, 300.0, None),
        ("cash", AssetType.CASH, 100.0, None),
    )


class TestConcentration:
    """Test suite for concentration metrics."""

    def test_should_compute_concentration_figures(
        self, balanced_mix: list[HoldingWithValue]
    ) -> None:
        """Test top, country, sector and HHI figures."""
        concentration = compute_concentration(balanced_mix)

        assert concentration.top_holding_percent == pytest.approx(60.0)
        assert concentration.top3_combined_percent == pytest.approx(100.0)
        assert concentration.largest_country_percent == pytest.approx(60.0)
        assert concentration.largest_sector_percent == pytest.approx(60.0)
        assert concentration.hhi == pytest.approx(0.36 + 0.09 + 0.01)

    def test_should_report_zero_for_empty_portfolio(self) -> None:
        """Test no holdings."""
        concentration = compute_concentration([])

        assert concentration.top_holding_percent == 0.0
        assert concentration.top3_combined_percent == 0.0
        assert concentration.largest_country_percent == 0.0
        assert concentration.hhi == 0.0

    def test_should_sum_crypto_weight(self, balanced_mix: list[HoldingWithValue]) -> None:
        """Test crypto share."""
        assert crypto_weight(balanced_mix) == pytest.approx(30.0)


class TestDiversificationScore:
    """Test suite for the 0-100 score."""

    def test_should_apply_threshold_penalties(self, balanced_mix: list[HoldingWithValue]) -> None:
        """Test top holding, top 3 and sector penalties."""
        concentration = compute_concentration(balanced_mix)

        assert compute_diversification_score(concentration, balanced_mix, 30.0) == 60

    def test_should_penalize_crypto_over_custom_threshold(
        self, balanced_mix: list[HoldingWithValue]
    ) -> None:
        """Test a lower crypto threshold."""
        concentration = compute_concentration(balanced_mix)

        assert compute_diversification_score(concentration, balanced_mix, 20.0) == 50

    def test_should_default_threshold_from_settings(
        self, balanced_mix: list[HoldingWithValue]
    ) -> None:
        """Test the configured crypto threshold."""
        concentration = compute_concentration(balanced_mix)

        assert compute_diversification_score(concentration, balanced_mix) == 60

    def test_should_score_spread_portfolio_at_hundred(self) -> None:
        """Test no breached thresholds."""
        with_values = valued(*[(f"c{i}", AssetType.CASH, 100.0, None) for i in range(10)])

        assert compute_diversification_score(compute_concentration(with_values), with_values) == 100

    def test_should_apply_every_penalty(self) -> None:
        """Test crypto-heavy portfolio with full metadata."""
        with_values = valued(
            ("btc", AssetType.CRYPTO, 800.0, US_TECH),
            ("stock", AssetType.STOCK, 200.0, US_TECH),
        )

        score = compute_diversification_score(compute_concentration(with_values), with_values, 30.0)

        assert score == 35


class TestInsights:
    """Test suite for generated insights."""

    def test_should_explain_breaches_and_verdict(
        self, balanced_mix: list[HoldingWithValue]
    ) -> None:
        """Test insight text for a moderate portfolio."""
        concentration = compute_concentration(balanced_mix)

        insights = generate_insights(concentration, 60, balanced_mix)

        assert insights == [
            "Top holding is 60.0%. Consider diversifying.",
            "Top 3 holdings make up 100.0%. Concentration is high.",
            "Largest sector is 60.0%. Sector risk is elevated.",
            "Moderate diversification. A few tweaks could improve balance.",
        ]

    def test_should_cap_insights_at_five(self) -> None:
        """Test truncation when every threshold is breached."""
        with_values = valued(
            ("btc", AssetType.CRYPTO, 800.0, US_TECH),
            ("stock", AssetType.STOCK, 200.0, US_TECH),
        )

        insights = generate_insights(compute_concentration(with_values), 35, with_values)

        assert len(insights) == 5
        assert insights[-1] == "Crypto is 80.0% of portfolio. Volatility may be high."

    def test_should_report_healthy_portfolio(self) -> None:
        """Test healthy verdict."""
        with_values = valued(*[(f"c{i}", AssetType.CASH, 100.0, None) for i in range(10)])

        insights = generate_insights(compute_concentration(with_values), 100, with_values)

        assert insights == ["Portfolio diversification looks healthy."]

    def test_should_report_low_score(self) -> None:
        """Test low-score verdict."""
        with_values = valued(("only", AssetType.CASH, 100.0, None))

        insights = generate_insights(compute_concentration(with_values), 40, with_values)

        assert insights[-1] == "Consider diversifying across holdings, sectors, and regions."

    def test_should_flag_crypto_against_given_threshold(self) -> None:
        """Test the crypto insight follows the threshold used for the score."""
        with_values = valued(
            ("btc", AssetType.CRYPTO, 400.0, None),
            ("c1", AssetType.CASH, 300.0, None),
            ("c2", AssetType.CASH, 300.0, None),
        )
        concentration = compute_concentration(with_values)

        relaxed = generate_insights(concentration, 70, with_values, 50.0)
        strict = generate_insights(concentration, 60, with_values, 30.0)

        assert not any(insight.startswith("Crypto") for insight in relaxed)
        assert "Crypto is 40.0% of portfolio. Volatility may be high." in strict

    def test_should_default_crypto_threshold_from_settings(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test the configured crypto threshold applies to score and insights alike."""
        monkeypatch.setenv("STAX_CRYPTO_CONCENTRATION_THRESHOLD", "50")
        get_settings.cache_clear()
        try:
            with_values = valued(
                ("btc", AssetType.CRYPTO, 400.0, None),
                ("c1", AssetType.CASH, 300.0, None),
                ("c2", AssetType.CASH, 300.0, None),
            )
            concentration = compute_concentration(with_values)
            score = compute_diversification_score(concentration, with_values)

            insights = generate_insights(concentration, score, with_values)
        finally:
            get_settings.cache_clear()

        assert score == 70
        assert not any(insight.startswith("Crypto") for insight in insights)
