"""Custom exception hierarchy for tilecrs."""

from typing import Optional


class TileCrsError(Exception):
    """Base exception for tilecrs library."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.cause = cause


class InvalidArgumentError(TileCrsError):
    """Missing, mismatched or out-of-range arguments to a conversion."""
    pass


class NotSupportedError(TileCrsError):
    """Coordinate reference system with no registered profile."""
    pass


class NumericNonConvergenceError(TileCrsError):
    """An iterative projection failed to reach its tolerance."""

    def __init__(
        self,
        message: str,
        iterations: Optional[int] = None,
        residual: Optional[float] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message, cause)
        self.iterations = iterations
        self.residual = residual
