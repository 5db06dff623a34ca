"""
Realized transaction model.

The engine fills in the numeric fields; ``id`` and ``created_at`` are
assigned by the persistence layer when the record is stored.
"""

from dataclasses import dataclass
from datetime import datetime

from stax_engine.core.enums import TransactionType
from stax_engine.core.exceptions.valuation import ValidationError
from stax_engine.core.utils.validation import validate_currency


@dataclass(frozen=True)
class Transaction:
    """A sell or dividend recorded against a holding."""

    holding_id: str
    type: TransactionType
    date: datetime
    total_amount: float
    currency: str
    quantity: float | None = None
    price_per_unit: float | None = None
    realized_gain_loss: float | None = None
    note: str | None = None
    id: str | None = None
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate transaction fields after initialization."""
        try:
            object.__setattr__(self, "type", TransactionType(self.type))
        except ValueError as e:
            raise ValidationError(f"Unknown transaction type: {self.type!r}") from e
        validate_currency(self.currency)

        if not self.type.has_quantity and (
            self.quantity is not None or self.price_per_unit is not None
        ):
            raise ValidationError(f"{self.type.value} transactions carry no quantity or price")

    @property
    def is_sell(self) -> bool:
        """Check if this is a sell."""
        return self.type == TransactionType.SELL

    @property
    def is_dividend(self) -> bool:
        """Check if this is a dividend."""
        return self.type == TransactionType.DIVIDEND
