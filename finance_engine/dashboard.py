"""One-shot refresh of everything the dashboard shows.

A refresh runs the auto-save pass (the only step with side effects),
mirrors debts into reminders, and then reads the store to build
notifications, debt projections and statistics for ``today``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from finance_engine.config import EngineConfig
from finance_engine.effects import AppliedEffects, apply_effects
from finance_engine.engine import evaluate, plan_auto_saves, project_debt
from finance_engine.engine.amortization import DebtProjection
from finance_engine.engine.statistics import (
    BudgetOverview,
    CategoryTotals,
    DailyTrend,
    DataIssue,
    DebtSummary,
    GoalSummary,
    MonthlyFlows,
    SpendingTrend,
    WeeklyTotals,
    budget_overview,
    category_totals,
    daily_trend,
    debt_summary,
    goal_summary,
    month_balance,
    spending_trend,
    weekly_totals,
)
from finance_engine.models import Notification
from finance_engine.store import FinanceRepositories, sync_debt_reminders

logger = logging.getLogger(__name__)


@dataclass
class DashboardSnapshot:
    """Result of :meth:`Dashboard.refresh`."""

    today: date
    auto_saves: AppliedEffects
    synced_reminders: int
    notifications: list[Notification]
    projections: list[DebtProjection]
    debts: DebtSummary
    goals: GoalSummary
    budgets: BudgetOverview
    balance: MonthlyFlows
    expenses_by_category: CategoryTotals
    daily: DailyTrend
    weekly: WeeklyTotals
    spending: SpendingTrend
    issues: list[DataIssue] = field(default_factory=list)

    @property
    def unpayable_debts(self) -> list[DebtProjection]:
        return [p for p in self.projections if p.is_unpayable]


class Dashboard:
    """Compute dashboard snapshots over a set of repositories.

    Parameters
    ----------
    store : FinanceRepositories
        Records to read and, for auto-saves and debt reminders, update.
        A :class:`~finance_engine.store.FinanceDataStore` or any backend
        exposing the same repositories.
    config : EngineConfig | None
        Window sizes come from ``config.windows``.
    """

    def __init__(self, store: FinanceRepositories, config: EngineConfig | None = None) -> None:
        self.store = store
        self.config = config or EngineConfig()

    def run_auto_saves(self, today: date) -> AppliedEffects:
        """Plan and apply the auto-save pass for ``today``."""
        effects = plan_auto_saves(self.store.goals.list(), today)
        return apply_effects(effects, self.store)

    def refresh(self, today: date) -> DashboardSnapshot:
        """Apply pending auto-saves, then compute the snapshot for ``today``.

        Calling it twice with the same ``today`` applies each auto-save
        once; the second call only recomputes.
        """
        windows = self.config.windows
        applied = self.run_auto_saves(today)
        synced = sync_debt_reminders(self.store)

        debts = self.store.debts.list()
        goals = self.store.goals.list()
        budgets = self.store.budgets.list()
        transactions = self.store.transactions.list()
        reminders = self.store.reminders.list()
        month = today.strftime("%Y-%m")

        notifications = evaluate(
            today,
            debts=debts,
            goals=goals,
            budgets=budgets,
            transactions=transactions,
            reminders=reminders,
            history=windows.spending_history_months,
        )
        projections = [project_debt(d, today) for d in debts if d.active]

        daily = daily_trend(transactions, today, days=windows.trend_days)
        snapshot = DashboardSnapshot(
            today=today,
            auto_saves=applied,
            synced_reminders=synced,
            notifications=notifications,
            projections=projections,
            debts=debt_summary(debts),
            goals=goal_summary(goals),
            budgets=budget_overview(budgets, transactions, month),
            balance=month_balance(transactions, month),
            expenses_by_category=category_totals(transactions, month),
            daily=daily,
            weekly=weekly_totals(transactions, today, weeks=windows.weekly_buckets),
            spending=spending_trend(transactions, today, history=windows.spending_history_months),
            # Every reduction sees the same transactions, so one report suffices
            issues=list(daily.issues),
        )

        logger.info(
            "Dashboard for %s: %d notifications, %d auto-saves, %d data issues",
            today,
            len(notifications),
            len(applied.goals),
            len(snapshot.issues),
        )
        return snapshot


def render_report(snapshot: DashboardSnapshot, currency: str = "USD") -> str:
    """Short human-readable report of a snapshot, amounts in ``currency``."""

    def money(amount: Decimal) -> str:
        return f"{amount:,.2f} {currency}"

    flow = snapshot.balance.flows[0]
    lines = [
        "=" * 60,
        f"Dashboard for {snapshot.today}",
        "=" * 60,
        f"  Debt balance:     {money(snapshot.debts.total_balance)} "
        f"({snapshot.debts.overall_progress:.1f}% repaid)",
        f"  Saved in goals:   {money(snapshot.goals.total_saved)} "
        f"of {money(snapshot.goals.total_target)}",
        f"  Month balance:    {money(flow.net)} "
        f"(in {money(flow.income)}, out {money(flow.expense)})",
        f"  Budgets left:     {money(snapshot.budgets.remaining)}",
        f"  Auto-saves made:  {len(snapshot.auto_saves.transactions)}",
    ]
    if snapshot.unpayable_debts:
        lines.append(f"  Unpayable debts:  {len(snapshot.unpayable_debts)}")
    if snapshot.issues:
        lines.append(f"  Skipped records:  {len(snapshot.issues)}")

    lines.append("")
    lines.append(f"Notifications ({len(snapshot.notifications)})")
    for notification in snapshot.notifications:
        lines.append(
            f"  [{notification.severity.value:>7}] {notification.title}: {notification.message}"
        )
    return "\n".join(lines)
