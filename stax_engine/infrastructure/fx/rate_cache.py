"""
FX rate cache.

Holds the most recent currency -> rate table fetched by a caller-supplied
fetcher. Fresh rates are served for the TTL; once expired the fetcher is
called again, and if it fails the last good rates are served stale.
"""

import threading
import time
from collections.abc import Callable

from cachetools import TTLCache
from loguru import logger

from stax_engine.core.config import get_settings
from stax_engine.core.constants import FX_ANCHOR_CURRENCY
from stax_engine.core.protocols import FxRates, RateFetcher
from stax_engine.core.types.financial import ONE


class FxRateCache:
    """TTL cache for FX rates relative to USD.

    The clock is injectable so expiry can be driven deterministically.

    Thread Safety:
        ``get_rates`` and ``invalidate`` hold an internal lock, so
        concurrent callers trigger at most one fetch per expiry.
    """

    def __init__(
        self,
        fetcher: RateFetcher,
        ttl_seconds: float | None = None,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize FX rate cache.

        Args:
            fetcher: Callable returning a rate table, or None on failure
            ttl_seconds: Freshness window, defaults to the configured TTL
            timer: Clock used for expiry
        """
        if ttl_seconds is None:
            ttl_seconds = get_settings().fx_cache_ttl_seconds
        self.fetcher = fetcher
        self.ttl_seconds = ttl_seconds
        self._fresh: TTLCache[str, dict[str, float]] = TTLCache(
            maxsize=1, ttl=ttl_seconds, timer=timer
        )
        self._last_good: dict[str, float] | None = None
        self._lock = threading.RLock()

    @property
    def has_rates(self) -> bool:
        """Check if any rates, fresh or stale, are available."""
        return self._last_good is not None

    def get_rates(self) -> dict[str, float] | None:
        """Return current rates, fetching when the cached table has expired.

        Returns:
            Rate table including ``USD: 1.0``, stale rates when a refetch
            fails, or None when nothing has ever been fetched
        """
        with self._lock:
            cached = self._fresh.get(FX_ANCHOR_CURRENCY)
            if cached is not None:
                return dict(cached)

            try:
                fetched = self.fetcher()
            except Exception as e:
                logger.warning(f"FX rate fetch failed: {e}")
                fetched = None

            if not fetched:
                if self._last_good is not None:
                    logger.debug("Serving stale FX rates")
                    return dict(self._last_good)
                return None

            rates = self._normalize(fetched)
            self._fresh[FX_ANCHOR_CURRENCY] = rates
            self._last_good = rates
            logger.info(f"Refreshed FX rates for {len(rates)} currencies")
            return dict(rates)

    def invalidate(self) -> None:
        """Drop the fresh entry so the next read refetches. Stale rates are kept."""
        with self._lock:
            self._fresh.clear()

    @staticmethod
    def _normalize(fetched: FxRates) -> dict[str, float]:
        """Copy the fetched table and add the anchor currency, which providers omit."""
        rates = {FX_ANCHOR_CURRENCY: ONE}
        rates.update({code.upper(): float(rate) for code, rate in fetched.items()})
        return rates
