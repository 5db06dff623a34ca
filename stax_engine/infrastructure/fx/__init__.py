"""
FX rate infrastructure.
"""

from .rate_cache import FxRateCache

__all__ = ["FxRateCache"]
