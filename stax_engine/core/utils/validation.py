"""
Validation utilities for core domain models.

Provides consistent validation across the application.
"""

from stax_engine.core.exceptions.valuation import ValidationError


def validate_positive(value: float, param_name: str) -> float:
    """Validate that a numeric value is positive.

    Raises:
        ValidationError: If value is not positive
    """
    if value <= 0:
        raise ValidationError(f"{param_name} must be positive, got {value}")
    return value


def validate_non_negative(value: float, param_name: str) -> float:
    """Validate that a numeric value is zero or positive.

    Raises:
        ValidationError: If value is negative
    """
    if value < 0:
        raise ValidationError(f"{param_name} must be non-negative, got {value}")
    return value


def validate_optional_non_negative(value: float | None, param_name: str) -> float | None:
    """Validate an optional numeric value, passing ``None`` through."""
    if value is None:
        return None
    return validate_non_negative(value, param_name)


def validate_currency(currency: str, param_name: str = "currency") -> str:
    """Validate that a currency code is a non-empty string.

    Codes are free-form; only blank values are rejected.

    Raises:
        ValidationError: If the code is blank or not a string
    """
    if not isinstance(currency, str) or not currency.strip():
        raise ValidationError(f"{param_name} must be a non-empty string, got {currency!r}")
    return currency


def normalize_symbol(symbol: str) -> str:
    """Normalize a listed asset symbol for storage and price lookups.

    Examples:
        >>> normalize_symbol(" aapl ")
        'AAPL'
    """
    return symbol.strip().upper()
