"""
Custom exception hierarchy for the portfolio engine.

The analytics functions return defined values instead of raising; these
exceptions cover record construction and caller-side flow validation.
"""


class StaxEngineException(Exception):
    """Base exception for all portfolio engine errors."""

    pass


class ValidationError(StaxEngineException):
    """Raised when input validation fails."""

    pass


class PortfolioError(StaxEngineException):
    """Raised when a portfolio operation cannot be applied."""

    pass


class InsufficientQuantityError(PortfolioError):
    """Raised when a sell asks for more units than the holding owns."""

    def __init__(self, requested: float, available: float, holding_id: str = ""):
        self.requested = requested
        self.available = available
        self.holding_id = holding_id
        target = f" of holding {holding_id}" if holding_id else ""
        super().__init__(
            f"Insufficient quantity{target}: requested={requested}, available={available}"
        )
