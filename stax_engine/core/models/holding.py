"""
Holding and price quote domain models.

Holdings are immutable snapshots handed to the engine by the persistence
layer; quotes are handed over by the pricing layer as a symbol -> quote map.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from stax_engine.core.enums import AssetType
from stax_engine.core.exceptions.valuation import ValidationError
from stax_engine.core.utils.validation import (
    normalize_symbol,
    validate_currency,
    validate_optional_non_negative,
    validate_positive,
)


@dataclass(frozen=True)
class HoldingMetadata:
    """Descriptive data used for exposure breakdowns."""

    country: str | None = None
    sector: str | None = None
    provider_id: str | None = None
    contract_address: str | None = None
    network: str | None = None

    @classmethod
    def from_record(cls, record: Mapping[str, Any] | None) -> "HoldingMetadata | None":
        """Build metadata from a camelCase persistence row, or ``None``."""
        if not record:
            return None
        return cls(
            country=record.get("country"),
            sector=record.get("sector"),
            provider_id=record.get("providerId"),
            contract_address=record.get("contractAddress"),
            network=record.get("network"),
        )


@dataclass(frozen=True)
class Holding:
    """A position in the portfolio.

    Listed holdings are valued from ``quantity`` and a market quote for
    ``symbol``; non-listed holdings from ``manual_value``. ``cost_basis``
    is per unit for listed holdings and a total for non-listed ones.
    Symbols are stored stripped and upper-cased, matching price map keys.
    """

    id: str
    portfolio_id: str
    asset_type: AssetType
    name: str
    currency: str
    symbol: str | None = None
    quantity: float | None = None
    manual_value: float | None = None
    cost_basis: float | None = None
    cost_basis_currency: str | None = None
    metadata: HoldingMetadata | None = None

    def __post_init__(self) -> None:
        """Validate holding fields after initialization."""
        try:
            object.__setattr__(self, "asset_type", AssetType(self.asset_type))
        except ValueError as e:
            raise ValidationError(f"Unknown asset type: {self.asset_type!r}") from e
        if self.symbol:
            object.__setattr__(self, "symbol", normalize_symbol(self.symbol))

        validate_currency(self.currency)
        if self.cost_basis_currency is not None:
            validate_currency(self.cost_basis_currency, "cost_basis_currency")
        validate_optional_non_negative(self.quantity, "quantity")
        validate_optional_non_negative(self.manual_value, "manual_value")
        validate_optional_non_negative(self.cost_basis, "cost_basis")

    @property
    def is_listed(self) -> bool:
        """Check if the holding's asset class is market-priced."""
        return self.asset_type.is_listed

    @property
    def effective_cost_basis_currency(self) -> str:
        """Currency the cost basis is denominated in."""
        return self.cost_basis_currency or self.currency

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Holding":
        """Build a holding from a camelCase persistence row.

        Raises:
            ValidationError: If a required field is missing or invalid
        """
        try:
            return cls(
                id=record["id"],
                portfolio_id=record["portfolioId"],
                asset_type=record["type"],
                name=record["name"],
                currency=record["currency"],
                symbol=record.get("symbol") or None,
                quantity=record.get("quantity"),
                manual_value=record.get("manualValue"),
                cost_basis=record.get("costBasis"),
                cost_basis_currency=record.get("costBasisCurrency"),
                metadata=HoldingMetadata.from_record(record.get("metadata")),
            )
        except KeyError as e:
            raise ValidationError(f"Holding record missing field: {e.args[0]}") from e


@dataclass(frozen=True)
class PriceResult:
    """A market quote for one symbol.

    ``change_percent`` is the daily change in percent (2.5 means +2.5%).
    """

    symbol: str
    price: float
    currency: str
    previous_close: float | None = None
    change_percent: float | None = None

    def __post_init__(self) -> None:
        """Validate quote fields after initialization."""
        validate_positive(self.price, "price")
        validate_currency(self.currency)

    @property
    def has_previous_close(self) -> bool:
        """Check if the quote carries a previous-close reference price."""
        return self.previous_close is not None

    @property
    def is_24h_only(self) -> bool:
        """Check if the quote only carries a rolling 24h change."""
        return self.change_percent is not None and self.previous_close is None


def build_price_map(quotes: Iterable[PriceResult]) -> dict[str, PriceResult]:
    """Key quotes by normalized symbol. Later quotes replace earlier ones."""
    return {normalize_symbol(quote.symbol): quote for quote in quotes}
