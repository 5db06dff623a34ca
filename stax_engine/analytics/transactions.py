"""
Transaction flows and summaries.

Builds sell and dividend transactions ready for persistence and summarizes
recorded transactions into realized gain and dividend income figures.
"""

from collections.abc import Sequence
from datetime import UTC, datetime

import pandas as pd
from loguru import logger

from stax_engine.analytics.fifo import compute_fifo_sell
from stax_engine.core.config import get_settings
from stax_engine.core.enums import TransactionType
from stax_engine.core.exceptions.valuation import InsufficientQuantityError
from stax_engine.core.models.holding import Holding
from stax_engine.core.models.lot import Lot
from stax_engine.core.models.results import MonthlyIncome, SellRecord
from stax_engine.core.models.transaction import Transaction
from stax_engine.core.types.financial import ZERO
from stax_engine.core.utils.validation import validate_non_negative, validate_positive


def record_sell(
    holding: Holding,
    lots: Sequence[Lot],
    quantity: float,
    price_per_unit: float,
    date: datetime,
    currency: str | None = None,
    note: str | None = None,
) -> SellRecord:
    """Build a sell transaction and the holding's position after the sell.

    Unlike ``compute_fifo_sell``, this validates strictly: the holding must
    own at least ``quantity`` units.

    Args:
        holding: Holding being sold from
        lots: The holding's lots, oldest first
        quantity: Units sold
        price_per_unit: Sale price per unit
        date: Trade date
        currency: Sale currency, defaults to the holding's currency
        note: Optional free-text note

    Returns:
        SellRecord with the transaction, FIFO match and remaining position

    Raises:
        ValidationError: If quantity or price is invalid
        InsufficientQuantityError: If the holding owns fewer units
    """
    validate_positive(quantity, "quantity")
    validate_non_negative(price_per_unit, "price_per_unit")
    held = holding.quantity if holding.quantity is not None else ZERO
    if quantity > held:
        raise InsufficientQuantityError(requested=quantity, available=held, holding_id=holding.id)

    fifo = compute_fifo_sell(lots, quantity, price_per_unit)
    transaction = Transaction(
        holding_id=holding.id,
        type=TransactionType.SELL,
        date=date,
        quantity=quantity,
        price_per_unit=price_per_unit,
        total_amount=quantity * price_per_unit,
        currency=currency or holding.currency,
        realized_gain_loss=fifo.realized_gain_loss,
        note=note or None,
    )

    # cost_basis is per unit: rebuild it from the cost left after FIFO
    remaining_quantity = held - quantity
    old_total_cost = (holding.cost_basis or ZERO) * held
    remaining_total_cost = max(ZERO, old_total_cost - fifo.total_cost_consumed)
    remaining_cost_basis = (
        remaining_total_cost / remaining_quantity if remaining_quantity > ZERO else ZERO
    )

    logger.debug(
        f"Recorded sell of {quantity} {holding.symbol or holding.name} at {price_per_unit}: "
        f"realized={fifo.realized_gain_loss:.2f}"
    )
    return SellRecord(
        transaction=transaction,
        fifo=fifo,
        remaining_quantity=remaining_quantity,
        remaining_cost_basis=remaining_cost_basis,
    )


def record_dividend(
    holding: Holding,
    amount: float,
    date: datetime,
    currency: str | None = None,
    note: str | None = None,
) -> Transaction:
    """Build a dividend transaction for a holding.

    Raises:
        ValidationError: If amount is not positive
    """
    validate_positive(amount, "amount")
    return Transaction(
        holding_id=holding.id,
        type=TransactionType.DIVIDEND,
        date=date,
        total_amount=amount,
        currency=currency or holding.currency,
        note=note or None,
    )


def total_realized_gain_loss(transactions: Sequence[Transaction]) -> float:
    """Sum realized gain/loss over sells with a known figure."""
    return sum(
        (
            t.realized_gain_loss
            for t in transactions
            if t.is_sell and t.realized_gain_loss is not None
        ),
        ZERO,
    )


def total_dividend_income(transactions: Sequence[Transaction]) -> float:
    """Sum dividend amounts."""
    return sum((t.total_amount for t in transactions if t.is_dividend), ZERO)


def dividends_by_holding(transactions: Sequence[Transaction]) -> dict[str, float]:
    """Dividend totals keyed by holding id."""
    totals: dict[str, float] = {}
    for t in transactions:
        if t.is_dividend:
            totals[t.holding_id] = totals.get(t.holding_id, ZERO) + t.total_amount
    return totals


def _utc_timestamp(value: datetime) -> pd.Timestamp:
    stamp = pd.Timestamp(value)
    if stamp.tzinfo is None:
        return stamp.tz_localize("UTC")
    return stamp.tz_convert("UTC")


def monthly_dividend_income(
    transactions: Sequence[Transaction],
    months_back: int | None = None,
    as_of: datetime | None = None,
) -> list[MonthlyIncome]:
    """Dividend income per calendar month, oldest month first.

    Covers the month ``months_back`` months before ``as_of`` through the
    month of ``as_of``; months without dividends are 0. Naive datetimes are
    read as UTC.

    Args:
        transactions: Recorded transactions; non-dividends are ignored
        months_back: Months of history, defaults to the configured value
        as_of: End of the window, defaults to now
    """
    if months_back is None:
        months_back = get_settings().dividend_months_back
    end = _utc_timestamp(as_of or datetime.now(UTC))
    since = end - pd.DateOffset(months=months_back)

    months = pd.period_range(
        start=since.tz_convert(None).to_period("M"),
        end=end.tz_convert(None).to_period("M"),
        freq="M",
    )
    totals = pd.Series(ZERO, index=months)

    dividends = [(t.date, t.total_amount) for t in transactions if t.is_dividend]
    if dividends:
        frame = pd.DataFrame(dividends, columns=["date", "amount"])
        frame["date"] = pd.to_datetime(frame["date"], utc=True)
        frame = frame[frame["date"] >= since]
        by_month = frame.groupby(frame["date"].dt.tz_convert(None).dt.to_period("M"))[
            "amount"
        ].sum()
        totals = totals.add(by_month, fill_value=ZERO).reindex(months, fill_value=ZERO)

    return [
        MonthlyIncome(month=str(period), amount=float(amount)) for period, amount in totals.items()
    ]
