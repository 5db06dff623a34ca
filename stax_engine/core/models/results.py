"""
Result records produced by the analytics layer.

These are plain immutable records consumed directly by the presentation
layer.
"""

from dataclasses import dataclass, field

from stax_engine.core.enums import ChangeLabel, DiversificationLabel, ExposureType
from stax_engine.core.models.holding import Holding
from stax_engine.core.models.lot import FifoResult
from stax_engine.core.models.transaction import Transaction


@dataclass(frozen=True)
class HoldingWithValue:
    """A holding with its base-currency value and portfolio weight (0-100)."""

    holding: Holding
    value_base: float
    weight_percent: float


@dataclass(frozen=True)
class AllocationSlice:
    """Value and share of one asset class."""

    asset_class: str
    value: float
    percent: float


@dataclass(frozen=True)
class ExposureSlice:
    """Share of the portfolio along one exposure dimension."""

    label: str
    percent: float
    type: ExposureType


@dataclass(frozen=True)
class HoldingPnl:
    """Unrealized gain/loss of a holding against its cost basis."""

    pnl: float
    pnl_pct: float


@dataclass(frozen=True)
class PortfolioChange:
    """Portfolio change between the reference point and now.

    ``pct`` is a fraction (0.10 means +10%).
    """

    total_now: float
    total_ref: float
    pnl: float
    pct: float
    label: ChangeLabel
    has_manual: bool


@dataclass(frozen=True)
class AttributionRow:
    """One holding's contribution to the portfolio change."""

    holding_id: str
    holding_name: str
    contribution_abs: float
    contribution_pct: float
    return_pct: float | None


@dataclass(frozen=True)
class AttributionResult:
    """Per-holding attribution rows and the total change they explain."""

    rows: list[AttributionRow] = field(default_factory=list)
    total_pnl: float = 0.0


@dataclass(frozen=True)
class InceptionReturn:
    """Since-inception return against cost basis, in base currency."""

    cost_basis: float
    current_value: float
    gain_loss: float
    return_pct: float


@dataclass(frozen=True)
class ConcentrationMetrics:
    """Concentration figures for diversification scoring.

    ``hhi`` here is the sum of squared fractional weights (0-1), unlike
    ``PortfolioStats.hhi`` which uses the 0-10000 scale.
    """

    top_holding_percent: float
    top3_combined_percent: float
    largest_country_percent: float
    largest_sector_percent: float
    hhi: float


@dataclass(frozen=True)
class PortfolioStats:
    """Summary statistics for a portfolio."""

    total_value: float
    total_cost_basis: float
    total_gain_loss: float
    total_gain_loss_pct: float
    holding_count: int
    asset_class_count: int
    top_holding_weight: float
    top_holding_name: str
    top3_weight: float
    hhi: float
    diversification_label: DiversificationLabel
    priced_count: int
    manual_count: int
    avg_weight: float
    day_change_pnl: float | None
    day_change_pct: float | None


@dataclass(frozen=True)
class MonthlyIncome:
    """Income received in one calendar month (``YYYY-MM``)."""

    month: str
    amount: float


@dataclass(frozen=True)
class SellRecord:
    """A sell ready to persist: the transaction plus the holding's new position.

    ``remaining_cost_basis`` is per unit, matching ``Holding.cost_basis``.
    """

    transaction: Transaction
    fifo: FifoResult
    remaining_quantity: float
    remaining_cost_basis: float
