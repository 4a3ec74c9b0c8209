"""Recurring payment reminder model."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from finance_engine.models.enums import ReminderFrequency


@dataclass(frozen=True)
class Reminder:
    """Recurring bill notice, independent of debts and goals."""

    reminder_id: str
    name: str
    amount: Decimal
    category: str
    frequency: ReminderFrequency
    next_due_date: date
    notify_days_before: int = 3
    is_active: bool = True
    debt_id: str | None = None  # Set when mirrored from a debt
