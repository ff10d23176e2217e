"""Exception classes for the symbolic algebra package."""

from typing import Any, Dict, Optional


class AlgebraError(Exception):
    """Base for all symbolic algebra errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class BadDifferentiationError(AlgebraError):
    """Raised when differentiating with respect to something that is not a variable."""
    pass


class UnresolvedEvaluationError(AlgebraError):
    """Raised when a bound expression does not reduce to a single constant."""
    pass


class DimensionMismatchError(AlgebraError, ValueError):
    """Raised when vector operands have incompatible dimensions."""
    pass
