"""
Collaborator interfaces consumed by the engine.

The engine never fetches prices or rates itself; callers hand it a
consistent snapshot built from these sources.
"""

from collections.abc import Mapping
from typing import Protocol

from stax_engine.core.models.holding import PriceResult

# Type aliases for commonly used inputs
PriceMap = Mapping[str, PriceResult]
FxRates = Mapping[str, float]


class RateFetcher(Protocol):
    """Source of FX rates relative to USD.

    Returns ``None`` (or raises) when rates are unavailable.
    """

    def __call__(self) -> FxRates | None:
        """Fetch the current currency -> rate table."""
        ...
