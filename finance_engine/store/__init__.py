"""Repositories for personal-finance records."""

from finance_engine.store.base import (
    DebtRepositoryProtocol,
    FinanceRepositories,
    GoalRepositoryProtocol,
    Repository,
)
from finance_engine.store.finance import FinanceDataStore, sync_debt_reminders
from finance_engine.store.memory import (
    BudgetRepository,
    DebtRepository,
    GoalRepository,
    InMemoryRepository,
    ReminderRepository,
    TransactionRepository,
)

__all__ = [
    "BudgetRepository",
    "DebtRepository",
    "DebtRepositoryProtocol",
    "FinanceDataStore",
    "FinanceRepositories",
    "GoalRepository",
    "GoalRepositoryProtocol",
    "InMemoryRepository",
    "ReminderRepository",
    "Repository",
    "TransactionRepository",
    "sync_debt_reminders",
]
