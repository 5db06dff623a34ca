"""
FIFO (first in, first out) cost-basis matching for sells.

Pure function over an ordered lot sequence; the caller applies the
returned consumption records to storage.
"""

from collections.abc import Sequence

from loguru import logger

from stax_engine.core.models.lot import ConsumedLot, FifoResult, Lot
from stax_engine.core.types.financial import FLOAT_TOLERANCE, ZERO


def compute_fifo_sell(
    lots: Sequence[Lot],
    sell_qty: float,
    sell_price_per_unit: float,
) -> FifoResult:
    """Realized gain/loss from selling ``sell_qty`` units at ``sell_price_per_unit``.

    Walks ``lots`` in the given order, which must be oldest first; the
    lots are not re-sorted. Lots without cost data contribute zero cost,
    so the realized figure then only reflects lots with known cost.

    Selling more than the lots hold fills what is available and reports
    the shortfall through ``FifoResult.is_partial``; it does not raise.
    Callers that need strict accounting validate quantity beforehand.

    Args:
        lots: Acquisition lots sorted by timestamp ascending
        sell_qty: Units sold
        sell_price_per_unit: Sale price per unit

    Returns:
        FifoResult with realized gain/loss, consumed cost and per-lot consumption
    """
    remaining = sell_qty
    total_cost_consumed = ZERO
    total_proceeds = ZERO
    consumed_lots: list[ConsumedLot] = []

    for lot in lots:
        if remaining <= ZERO:
            break

        consume = min(remaining, lot.qty_in)
        cost_per_unit = lot.cost_per_unit
        cost_for_consume = cost_per_unit * consume if cost_per_unit is not None else ZERO

        total_cost_consumed += cost_for_consume
        total_proceeds += consume * sell_price_per_unit
        consumed_lots.append(
            ConsumedLot(lot_id=lot.id, qty_consumed=consume, cost_consumed=cost_for_consume)
        )
        remaining -= consume

    if remaining > FLOAT_TOLERANCE:
        logger.warning(
            f"FIFO sell of {sell_qty} units exceeds lots; {remaining} units left unmatched"
        )

    return FifoResult(
        realized_gain_loss=total_proceeds - total_cost_consumed,
        total_cost_consumed=total_cost_consumed,
        proceeds=total_proceeds,
        qty_requested=sell_qty,
        consumed_lots=consumed_lots,
    )
