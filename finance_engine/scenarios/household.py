"""Household scenario: one person's debts, goals, budgets and spending."""

import logging
import random
from datetime import date
from typing import Any

from dateutil.relativedelta import relativedelta

from finance_engine import mapping
from finance_engine.generators import (
    BudgetGenerator,
    DebtGenerator,
    GoalGenerator,
    ReminderGenerator,
    TransactionGenerator,
)
from finance_engine.sinks.serialization import serialize_value
from finance_engine.store import FinanceDataStore

logger = logging.getLogger(__name__)


class HouseholdScenario:
    """Generate a coherent household for dashboards and demos.

    This scenario creates:
    - Active debts, mirrored into reminders when auto-reminders are on
    - Savings goals, about half with auto-save rules
    - Monthly budgets for the current and previous months
    - Salaries and everyday expenses over the last few months
    - Standalone bill reminders
    """

    def __init__(
        self,
        today: date,
        num_debts: int = 4,
        num_goals: int = 3,
        num_reminders: int = 3,
        num_transactions: int = 150,
        budget_months: int = 2,
        history_days: int = 120,
        seed: int | None = None,
        locale: str = "es_ES",
    ) -> None:
        """Initialize household scenario.

        Parameters
        ----------
        today : date
            Reference date every generated record is relative to.
        num_debts : int
            Number of debts.
        num_goals : int
            Number of savings goals.
        num_reminders : int
            Number of standalone reminders (debt reminders come on top).
        num_transactions : int
            Number of expenses; salaries are added once per month.
        budget_months : int
            Number of months, ending with today's, that get budgets.
        history_days : int
            How far back transactions go.
        seed : int | None
            Random seed for reproducibility.
        locale : str
            Faker locale.
        """
        self.today = today
        self.num_debts = num_debts
        self.num_goals = num_goals
        self.num_reminders = num_reminders
        self.num_transactions = num_transactions
        self.budget_months = budget_months
        self.history_days = history_days
        self.seed = seed

        if seed is not None:
            random.seed(seed)

        self.store = FinanceDataStore()
        self._debt_gen = DebtGenerator(seed=seed, locale=locale)
        self._goal_gen = GoalGenerator(seed=seed, locale=locale)
        self._budget_gen = BudgetGenerator(seed=seed, locale=locale)
        self._transaction_gen = TransactionGenerator(seed=seed, locale=locale)
        self._reminder_gen = ReminderGenerator(seed=seed, locale=locale)

    def generate(self) -> FinanceDataStore:
        """Generate all data for the household.

        Returns
        -------
        FinanceDataStore
            Store containing all generated data.
        """
        logger.info("Starting household scenario for %s", self.today)

        for _ in range(self.num_debts):
            self.store.debts.create(self._debt_gen.generate(self.today))

        for _ in range(self.num_goals):
            self.store.goals.create(self._goal_gen.generate(self.today))

        for offset in range(self.budget_months):
            month = (self.today - relativedelta(months=offset)).strftime("%Y-%m")
            for budget in self._budget_gen.generate_month(month):
                self.store.budgets.create(budget)

        batch = self._transaction_gen.generate_batch(
            self.today, self.num_transactions, days_back=self.history_days
        )
        for transaction in batch:
            self.store.transactions.create(transaction)

        for _ in range(self.num_reminders):
            self.store.reminders.create(self._reminder_gen.generate(self.today))
        self.store.sync_debt_reminders()

        summary = self.store.summary()
        logger.info(
            "Generated household: %d debts, %d goals, %d budgets, "
            "%d transactions, %d reminders",
            summary["debts"],
            summary["goals"],
            summary["budgets"],
            summary["transactions"],
            summary["reminders"],
        )
        return self.store

    def export(self, sinks: list[Any], as_payloads: bool = False) -> None:
        """Export generated data to sinks.

        Parameters
        ----------
        sinks : list[Any]
            List of sink instances (ConsoleSink, JsonFileSink).
        as_payloads : bool
            Write debts, goals, budgets and transactions in the backend
            payload shape instead of as records.
        """
        batches = {
            "debts": (self.store.debts.list(), mapping.debt_to_payload),
            "goals": (self.store.goals.list(), mapping.goal_to_payload),
            "budgets": (self.store.budgets.list(), mapping.budget_to_payload),
            "transactions": (self.store.transactions.list(), mapping.transaction_to_payload),
        }
        for sink in sinks:
            for entity_type, (records, to_payload) in batches.items():
                if as_payloads:
                    records = [to_payload(r) for r in records]
                sink.write_batch(entity_type, records)
            sink.write_batch("reminders", self.store.reminders.list())

        logger.info("Exported household data to %d sinks", len(sinks))

    def get_summary(self) -> dict[str, Any]:
        """Get summary of generated data."""
        debts = self.store.debts.list()
        goals = self.store.goals.list()
        return {
            "today": serialize_value(self.today),
            **self.store.summary(),
            "total_debt_balance": serialize_value(sum(d.current_balance for d in debts)),
            "goals_with_auto_save": sum(1 for g in goals if g.auto_save_enabled),
            "debt_reminders": len(self.store.reminders.list(lambda r: r.debt_id is not None)),
        }
