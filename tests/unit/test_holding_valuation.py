"""
Unit tests for single-holding valuation.
"""

import pytest

from stax_engine.analytics.holding_valuation import (
    format_holding_value_display,
    holding_unrealized_pnl,
    price_for,
    reference_value_in_base,
    value_in_base,
)
from stax_engine.core.enums import AssetType
from stax_engine.core.models import Holding, PriceResult, build_price_map


def listed(**overrides: object) -> Holding:
    fields: dict[str, object] = {
        "id": "h1",
        "portfolio_id": "p1",
        "asset_type": AssetType.STOCK,
        "name": "Test Corp",
        "currency": "USD",
        "symbol": "TST",
        "quantity": 10.0,
    }
    fields.update(overrides)
    return Holding(**fields)  # type: ignore[arg-type]


def manual(value: float, **overrides: object) -> Holding:
    fields: dict[str, object] = {
        "id": "m1",
        "portfolio_id": "p1",
        "asset_type": AssetType.REAL_ESTATE,
        "name": "Flat",
        "currency": "USD",
        "manual_value": value,
    }
    fields.update(overrides)
    return Holding(**fields)  # type: ignore[arg-type]


def quote(price: float, **overrides: object) -> PriceResult:
    fields: dict[str, object] = {"symbol": "TST", "price": price, "currency": "USD"}
    fields.update(overrides)
    return PriceResult(**fields)  # type: ignore[arg-type]


class TestValueInBase:
    """Test suite for current and reference values."""

    def test_should_value_listed_holding_from_quote(self) -> None:
        """Test quantity times price with previous-close reference."""
        price = quote(110.0, previous_close=100.0)

        assert value_in_base(listed(), price, "USD") == 1100.0
        assert reference_value_in_base(listed(), price, "USD") == 1000.0

    def test_should_back_solve_reference_from_change_percent(self) -> None:
        """Test 24h reference price derivation."""
        price = quote(110.0, change_percent=10.0)

        assert reference_value_in_base(listed(), price, "USD") == pytest.approx(1000.0)

    def test_should_assume_no_change_without_reference_data(self) -> None:
        """Test reference equals current when the quote has no change data."""
        price = quote(110.0)
        assert reference_value_in_base(listed(), price, "USD") == 1100.0

        flat = quote(110.0, change_percent=0.0)
        assert reference_value_in_base(listed(), flat, "USD") == 1100.0

    def test_should_keep_manual_reference_flat(self) -> None:
        """Test that manual values have no day change."""
        holding = manual(5000.0)

        assert value_in_base(holding, None, "USD") == 5000.0
        assert reference_value_in_base(holding, None, "USD") == 5000.0

    def test_should_value_unpriced_holding_at_zero(self) -> None:
        """Test listed holdings without a quote or manual value."""
        assert value_in_base(listed(), None, "USD") == 0.0
        assert reference_value_in_base(listed(), None, "USD") == 0.0

    def test_should_convert_with_live_rates(self) -> None:
        """Test conversion via rates relative to USD."""
        holding = listed(currency="EUR", quantity=2.0)
        price = quote(10.0, currency="EUR")

        assert value_in_base(holding, price, "USD", {"USD": 1.0, "EUR": 0.8}) == 25.0

    def test_should_convert_with_fallback_table(self) -> None:
        """Test conversion when no rates are available."""
        holding = manual(100.0, currency="EUR")
        assert value_in_base(holding, None, "USD") == pytest.approx(100.0 / 1.05)

    def test_should_ignore_manual_value_on_priced_listed_holding(self) -> None:
        """Test that the listed path wins for value and reference value."""
        holding = listed(manual_value=999.0)
        price = quote(5.0, previous_close=4.0)

        assert value_in_base(holding, price, "USD") == 50.0
        assert reference_value_in_base(holding, price, "USD") == 40.0


class TestPriceLookup:
    """Test suite for quote lookup."""

    def test_should_find_quote_by_symbol(self) -> None:
        """Test price map lookup."""
        price = quote(1.0)
        assert price_for(listed(), {"TST": price}) is price

    def test_should_match_quotes_regardless_of_symbol_case(self) -> None:
        """Test lowercase symbols against a map built from quotes."""
        holding = listed(symbol=" tst ", quantity=1.0)
        prices = build_price_map([quote(10.0, symbol="tst")])

        assert price_for(holding, prices) is prices["TST"]
        assert value_in_base(holding, price_for(holding, prices), "USD") == 10.0

    def test_should_return_none_without_symbol(self) -> None:
        """Test holdings with no symbol."""
        assert price_for(manual(1.0), {"TST": quote(1.0)}) is None


class TestValueDisplay:
    """Test suite for the display string."""

    def test_should_format_priced_value(self) -> None:
        """Test formatted base-currency value."""
        assert format_holding_value_display(listed(), quote(110.0), "USD") == "$1,100.00"

    def test_should_show_price_unavailable(self) -> None:
        """Test listed holding with units but no quote."""
        assert format_holding_value_display(listed(), None, "USD") == "Price unavailable"

    def test_should_show_zero_for_empty_listed_position(self) -> None:
        """Test that zero units format as zero, not unavailable."""
        assert format_holding_value_display(listed(quantity=0.0), None, "USD") == "$0.00"

    def test_should_format_manual_value(self) -> None:
        """Test manual holdings in a non-USD base."""
        holding = manual(250.0, currency="EUR")
        assert format_holding_value_display(holding, None, "EUR") == "€250.00"


class TestUnrealizedPnl:
    """Test suite for unrealized gain/loss."""

    def test_should_compute_listed_pnl_from_per_unit_cost(self) -> None:
        """Test listed holding pnl."""
        result = holding_unrealized_pnl(listed(cost_basis=100.0), quote(110.0), "USD")

        assert result is not None
        assert result.pnl == pytest.approx(100.0)
        assert result.pnl_pct == pytest.approx(10.0)

    def test_should_compute_manual_pnl_from_total_cost(self) -> None:
        """Test manual holding pnl."""
        result = holding_unrealized_pnl(manual(1000.0, cost_basis=800.0), None, "USD")

        assert result is not None
        assert result.pnl == pytest.approx(200.0)
        assert result.pnl_pct == pytest.approx(25.0)

    def test_should_convert_cost_basis_currency(self) -> None:
        """Test cost basis in a different currency."""
        holding = listed(cost_basis=50.0, cost_basis_currency="EUR")
        rates = {"USD": 1.0, "EUR": 0.5}

        result = holding_unrealized_pnl(holding, quote(110.0), "USD", rates)

        assert result is not None
        assert result.pnl == pytest.approx(100.0)

    @pytest.mark.parametrize("cost_basis", [None, 0.0])
    def test_should_return_none_without_cost_basis(self, cost_basis: float | None) -> None:
        """Test missing cost basis."""
        assert holding_unrealized_pnl(listed(cost_basis=cost_basis), quote(1.0), "USD") is None

    def test_should_return_none_without_value_inputs(self) -> None:
        """Test listed holding with no quantity and no manual value."""
        holding = listed(quantity=None, cost_basis=10.0)
        assert holding_unrealized_pnl(holding, None, "USD") is None
