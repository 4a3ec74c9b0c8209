"""Domain models for personal-finance records."""

from finance_engine.models.budget import Budget
from finance_engine.models.debt import Debt, Payment
from finance_engine.models.enums import (
    AutoSaveState,
    BudgetStatus,
    DebtType,
    GoalCategory,
    NotificationKind,
    PaymentFrequency,
    ProjectionStatus,
    ReminderFrequency,
    SaveFrequency,
    Severity,
    TransactionType,
)
from finance_engine.models.goal import Goal
from finance_engine.models.notification import Notification
from finance_engine.models.reminder import Reminder
from finance_engine.models.transaction import Transaction

__all__ = [
    "AutoSaveState",
    "Budget",
    "BudgetStatus",
    "Debt",
    "DebtType",
    "Goal",
    "GoalCategory",
    "Notification",
    "NotificationKind",
    "Payment",
    "PaymentFrequency",
    "ProjectionStatus",
    "Reminder",
    "ReminderFrequency",
    "SaveFrequency",
    "Severity",
    "Transaction",
    "TransactionType",
]
