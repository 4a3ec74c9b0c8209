"""Pytest configuration and fixtures."""

from collections.abc import Callable
from dataclasses import dataclass, field, replace
from datetime import date
from decimal import Decimal
from typing import Any

import pytest

from finance_engine.exceptions import EntityNotFoundError
from finance_engine.models import (
    Budget,
    Debt,
    Goal,
    PaymentFrequency,
    Reminder,
    ReminderFrequency,
    SaveFrequency,
    Transaction,
    TransactionType,
)
from finance_engine.store import FinanceDataStore


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def today() -> date:
    """Fixed evaluation date (a Friday)."""
    return date(2024, 3, 15)


@pytest.fixture
def sample_debt(today: date) -> Debt:
    """1000 owed at 24% a year, paying 100 a month."""
    return Debt(
        debt_id="debt-001",
        name="Tarjeta Visa",
        principal=Decimal("1000"),
        current_balance=Decimal("1000"),
        interest_rate=Decimal("24"),
        payment_amount=Decimal("100"),
        payment_frequency=PaymentFrequency.MONTHLY,
        next_payment_date=date(2024, 3, 25),
        start_date=date(2024, 1, 1),
    )


@pytest.fixture
def sample_goal() -> Goal:
    """Goal at 40% with a monthly auto-save on day 15."""
    return Goal(
        goal_id="goal-001",
        name="Vacaciones",
        target_amount=Decimal("1000"),
        current_amount=Decimal("400"),
        auto_save_enabled=True,
        auto_save_amount=Decimal("50"),
        auto_save_frequency=SaveFrequency.MONTHLY,
        auto_save_day=15,
        last_auto_save=date(2024, 2, 15),
    )


@pytest.fixture
def sample_budget() -> Budget:
    return Budget(
        budget_id="budget-001",
        category="Alimentación",
        limit=Decimal("100"),
        month="2024-03",
    )


@pytest.fixture
def sample_reminder() -> Reminder:
    return Reminder(
        reminder_id="rem-001",
        name="Alquiler",
        amount=Decimal("750"),
        category="Vivienda",
        frequency=ReminderFrequency.MONTHLY,
        next_due_date=date(2024, 3, 31),
    )


@pytest.fixture
def make_transaction() -> Callable[..., Transaction]:
    """Factory for transactions with sensible defaults."""
    counter = iter(range(1, 10_000))

    def _make(
        amount: str | Decimal = "10",
        on: date | None = date(2024, 3, 10),
        type: TransactionType = TransactionType.EXPENSE,
        category: str = "Alimentación",
    ) -> Transaction:
        return Transaction(
            transaction_id=f"tx-{next(counter):03d}",
            type=type,
            amount=Decimal(amount),
            category=category,
            date=on,
        )

    return _make


@pytest.fixture
def store() -> FinanceDataStore:
    """Create a fresh store for each test."""
    return FinanceDataStore()


class ListRepository:
    """Repository over a plain list, standing in for a remote backend."""

    def __init__(self, id_field: str) -> None:
        self.id_field = id_field
        self.records: list[Any] = []
        self.calls: list[str] = []

    def list(self, filter: Callable[[Any], bool] | None = None) -> list[Any]:
        return [r for r in self.records if filter is None or filter(r)]

    def get(self, record_id: str) -> Any:
        for record in self.records:
            if getattr(record, self.id_field) == record_id:
                return record
        raise EntityNotFoundError(record_id)

    def create(self, record: Any) -> Any:
        self.calls.append("create")
        self.records.append(record)
        return record

    def update(self, record_id: str, patch: dict[str, Any]) -> Any:
        self.calls.append("update")
        current = self.get(record_id)
        updated = replace(current, **patch)
        self.records[self.records.index(current)] = updated
        return updated

    def delete(self, record_id: str) -> None:
        self.records.remove(self.get(record_id))


@dataclass
class ListStore:
    debts: ListRepository = field(default_factory=lambda: ListRepository("debt_id"))
    goals: ListRepository = field(default_factory=lambda: ListRepository("goal_id"))
    budgets: ListRepository = field(default_factory=lambda: ListRepository("budget_id"))
    transactions: ListRepository = field(
        default_factory=lambda: ListRepository("transaction_id")
    )
    reminders: ListRepository = field(default_factory=lambda: ListRepository("reminder_id"))


@pytest.fixture
def list_store() -> ListStore:
    """Repositories that share no code with the in-memory store."""
    return ListStore()
