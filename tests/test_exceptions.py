"""Tests for custom exception hierarchy."""

from finance_engine.exceptions import (
    ConfigurationError,
    DuplicateBudgetError,
    EntityNotFoundError,
    FinanceEngineError,
    IndeterminateResultError,
    InsufficientFundsError,
    InvalidAmountError,
    InvalidEntityStateError,
    InvalidRecordError,
    SinkError,
)


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    def test_finance_engine_error_is_exception(self) -> None:
        assert isinstance(FinanceEngineError("test"), Exception)

    def test_entity_not_found_is_finance_engine_error(self) -> None:
        assert isinstance(EntityNotFoundError("test"), FinanceEngineError)

    def test_insufficient_funds_is_invalid_state(self) -> None:
        err = InsufficientFundsError("test")
        assert isinstance(err, InvalidEntityStateError)
        assert isinstance(err, FinanceEngineError)

    def test_duplicate_budget_is_invalid_state(self) -> None:
        assert isinstance(DuplicateBudgetError("test"), InvalidEntityStateError)

    def test_invalid_amount_is_value_error(self) -> None:
        err = InvalidAmountError("test")
        assert isinstance(err, ValueError)
        assert isinstance(err, FinanceEngineError)

    def test_invalid_record_is_value_error(self) -> None:
        assert isinstance(InvalidRecordError("test"), ValueError)

    def test_other_errors_are_finance_engine_errors(self) -> None:
        for cls in (ConfigurationError, IndeterminateResultError, SinkError):
            assert isinstance(cls("test"), FinanceEngineError)

    def test_exception_message(self) -> None:
        err = EntityNotFoundError("Debt debt-001 not found")
        assert str(err) == "Debt debt-001 not found"
