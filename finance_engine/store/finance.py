"""Personal-finance data store grouping every repository."""

import logging
from dataclasses import dataclass, field

from finance_engine.engine import ledger
from finance_engine.store.base import FinanceRepositories
from finance_engine.store.memory import (
    BudgetRepository,
    DebtRepository,
    GoalRepository,
    ReminderRepository,
    TransactionRepository,
)

logger = logging.getLogger(__name__)


def sync_debt_reminders(repositories: FinanceRepositories) -> int:
    """Create or refresh the reminder of every debt with auto-reminders on.

    Returns
    -------
    int
        Number of reminders created or updated.
    """
    reminders = repositories.reminders
    existing = {r.debt_id: r for r in reminders.list(lambda r: r.debt_id is not None)}
    changed = 0
    for debt in repositories.debts.list():
        current = existing.get(debt.debt_id)
        mirrored = ledger.reminder_for_debt(
            debt, reminder_id=current.reminder_id if current else None
        )
        if mirrored is None or mirrored == current:
            continue
        if current is None:
            reminders.create(mirrored)
        else:
            reminders.update(current.reminder_id, {
                "name": mirrored.name,
                "amount": mirrored.amount,
                "frequency": mirrored.frequency,
                "next_due_date": mirrored.next_due_date,
                "notify_days_before": mirrored.notify_days_before,
                "is_active": True,
            })
        changed += 1

    if changed:
        logger.debug("Synchronized %d debt reminders", changed)
    return changed


@dataclass
class FinanceDataStore:
    """In-memory store for one household's records."""

    debts: DebtRepository = field(default_factory=DebtRepository)
    goals: GoalRepository = field(default_factory=GoalRepository)
    budgets: BudgetRepository = field(default_factory=BudgetRepository)
    transactions: TransactionRepository = field(default_factory=TransactionRepository)
    reminders: ReminderRepository = field(default_factory=ReminderRepository)

    def delete_debt(self, debt_id: str) -> None:
        """Delete a debt together with the reminder mirroring it."""
        self.debts.delete(debt_id)
        for reminder in self.reminders.list(lambda r: r.debt_id == debt_id):
            self.reminders.delete(reminder.reminder_id)

    def sync_debt_reminders(self) -> int:
        """See :func:`sync_debt_reminders`."""
        return sync_debt_reminders(self)

    def summary(self) -> dict[str, int]:
        """Return summary counts of all records."""
        return {
            "debts": len(self.debts),
            "goals": len(self.goals),
            "budgets": len(self.budgets),
            "transactions": len(self.transactions),
            "reminders": len(self.reminders),
        }
