"""Tests for record models and enums."""

from dataclasses import FrozenInstanceError, replace
from datetime import date
from decimal import Decimal

import pytest

from finance_engine.models import (
    Budget,
    Debt,
    Goal,
    PaymentFrequency,
    Transaction,
    TransactionType,
)


class TestEnums:
    """Tests for enum helpers."""

    def test_payment_frequency_months(self) -> None:
        assert PaymentFrequency.WEEKLY.months == Decimal("0.23")
        assert PaymentFrequency.BIWEEKLY.months == Decimal("0.5")
        assert PaymentFrequency.YEARLY.months == 12

    def test_str_enum_value(self) -> None:
        assert PaymentFrequency("monthly") is PaymentFrequency.MONTHLY
        assert TransactionType.EXPENSE == "expense"


class TestRecords:
    """Tests for record properties."""

    def test_records_are_frozen(self, sample_debt: Debt) -> None:
        with pytest.raises(FrozenInstanceError):
            sample_debt.current_balance = Decimal("0")

    def test_scheduled_payment(self, sample_debt: Debt) -> None:
        assert sample_debt.scheduled_payment == Decimal("100")
        assert replace(sample_debt, minimum_payment=Decimal("25")).scheduled_payment == Decimal("25")

    def test_goal_remaining(self, sample_goal: Goal) -> None:
        assert sample_goal.remaining == Decimal("600")
        assert not sample_goal.is_complete
        assert replace(sample_goal, current_amount=Decimal("1200")).remaining == 0

    def test_budget_key(self, sample_budget: Budget) -> None:
        assert sample_budget.key == ("Alimentación", "2024-03")

    def test_transaction_month(self) -> None:
        transaction = Transaction("tx-1", TransactionType.INCOME, Decimal("1"), "Salario", date(2024, 3, 1))

        assert transaction.month == "2024-03"
        assert replace(transaction, date=None).month is None
