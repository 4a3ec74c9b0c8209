"""Custom exception hierarchy for finance-engine."""


class FinanceEngineError(Exception):
    """Base exception for all finance-engine errors."""


class EntityNotFoundError(FinanceEngineError):
    """Raised when a referenced record does not exist."""


class InvalidEntityStateError(FinanceEngineError):
    """Raised when a record is in an invalid state for the operation."""


class ConfigurationError(FinanceEngineError):
    """Raised when configuration is invalid or missing."""


class IndeterminateResultError(FinanceEngineError):
    """Raised when an amortization cannot converge (payment <= interest)."""


class InvalidAmountError(FinanceEngineError, ValueError):
    """Raised for negative, NaN or otherwise unusable monetary input."""


class InsufficientFundsError(InvalidEntityStateError):
    """Raised when a goal withdrawal exceeds the saved amount."""


class DuplicateBudgetError(InvalidEntityStateError):
    """Raised when a budget already exists for the category and month."""


class InvalidRecordError(FinanceEngineError, ValueError):
    """Raised when a backend payload cannot be mapped to a record."""


class SinkError(FinanceEngineError):
    """Raised when a sink operation fails."""
