"""Faker-backed sample data generators."""

from finance_engine.generators.base import BaseGenerator
from finance_engine.generators.budget import BudgetGenerator
from finance_engine.generators.debt import DebtGenerator
from finance_engine.generators.goal import GoalGenerator
from finance_engine.generators.reminder import ReminderGenerator
from finance_engine.generators.transaction import TransactionGenerator

__all__ = [
    "BaseGenerator",
    "BudgetGenerator",
    "DebtGenerator",
    "GoalGenerator",
    "ReminderGenerator",
    "TransactionGenerator",
]
