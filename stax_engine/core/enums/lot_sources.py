"""
Lot source enumerations.
"""

from enum import StrEnum


class LotSource(StrEnum):
    """How an acquisition lot came into the portfolio."""

    TRANSFER = "transfer"  # transfer, airdrop or deposit with no on-chain buy
    SWAP = "swap"  # DEX swap
    MANUAL = "manual"
