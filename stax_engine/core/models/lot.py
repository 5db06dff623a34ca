"""
Acquisition lot models used for FIFO cost-basis matching.

Lots are never mutated by a sell; consumption is reported as
``ConsumedLot`` records that the persistence layer applies.
"""

from dataclasses import dataclass, field
from datetime import datetime

from stax_engine.core.enums import LotSource
from stax_engine.core.exceptions.valuation import ValidationError
from stax_engine.core.types.financial import FLOAT_TOLERANCE, ZERO
from stax_engine.core.utils.validation import (
    validate_optional_non_negative,
    validate_positive,
)


@dataclass(frozen=True)
class Lot:
    """One acquisition of an asset for a holding."""

    id: str
    holding_id: str
    asset_id: str
    timestamp: datetime
    qty_in: float
    source: LotSource
    cost_basis_usd_total: float | None = None

    def __post_init__(self) -> None:
        """Validate lot fields after initialization."""
        try:
            object.__setattr__(self, "source", LotSource(self.source))
        except ValueError as e:
            raise ValidationError(f"Unknown lot source: {self.source!r}") from e
        if not self.asset_id:
            raise ValidationError("asset_id must not be empty")
        validate_positive(self.qty_in, "qty_in")
        validate_optional_non_negative(self.cost_basis_usd_total, "cost_basis_usd_total")

    @property
    def has_cost_basis(self) -> bool:
        """Check if the lot carries a usable cost."""
        return self.cost_basis_usd_total is not None and self.cost_basis_usd_total > ZERO

    @property
    def cost_per_unit(self) -> float | None:
        """USD cost per unit, or ``None`` when the cost is unknown."""
        if not self.has_cost_basis:
            return None
        return self.cost_basis_usd_total / self.qty_in  # type: ignore[operator]


@dataclass(frozen=True)
class ConsumedLot:
    """Units and cost taken from one lot by a sell."""

    lot_id: str
    qty_consumed: float
    cost_consumed: float


@dataclass(frozen=True)
class FifoResult:
    """Outcome of matching a sell against lots oldest-first."""

    realized_gain_loss: float
    total_cost_consumed: float
    proceeds: float
    qty_requested: float
    consumed_lots: list[ConsumedLot] = field(default_factory=list)

    @property
    def qty_filled(self) -> float:
        """Units actually matched against lots."""
        return sum((lot.qty_consumed for lot in self.consumed_lots), ZERO)

    @property
    def is_partial(self) -> bool:
        """Check if the lots could not cover the requested quantity."""
        return self.qty_requested - self.qty_filled > FLOAT_TOLERANCE


def build_asset_id(chain_id: int, contract_address: str | None) -> str:
    """Build an asset id from a chain id and contract address.

    Native assets have no contract and are stored as ``"<chain>:"``.

    Examples:
        >>> build_asset_id(1, "0xABC")
        '1:0xabc'
        >>> build_asset_id(1, None)
        '1:'
    """
    address = contract_address.strip().lower() if contract_address else ""
    return f"{chain_id}:{address}"
