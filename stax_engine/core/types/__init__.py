"""
Core type definitions and utilities.
"""

# Re-export financial and money utilities for easy access
from .financial import FLOAT_TOLERANCE, HUNDRED, ONE, ZERO, percent_of
from .money import format_money, format_weight, rate_to_base

__all__ = [
    # Utility functions
    "percent_of",
    "rate_to_base",
    "format_money",
    "format_weight",
    # Constants
    "FLOAT_TOLERANCE",
    "HUNDRED",
    "ONE",
    "ZERO",
]
