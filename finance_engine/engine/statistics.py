"""Reductions of transactions, budgets, debts and goals for display.

Every function is a pure fold. Transactions whose amount is not a finite
number, or whose date is missing, are left out of the sums and reported
in the result's ``issues`` list so the caller can surface them.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date, timedelta
from decimal import Decimal

from finance_engine.engine.amortization import effective_monthly_payment
from finance_engine.engine.money import HUNDRED, ZERO
from finance_engine.models import (
    Budget,
    BudgetStatus,
    Debt,
    Goal,
    Transaction,
    TransactionType,
)

logger = logging.getLogger(__name__)

# Budget bands, as fractions of the limit
BUDGET_CAUTION_RATIO = Decimal("0.6")
BUDGET_ALERT_RATIO = Decimal("0.8")
BUDGET_EXCEEDED_RATIO = Decimal("1.0")


@dataclass(frozen=True)
class DataIssue:
    """A transaction that could not be counted."""

    transaction_id: str
    field: str
    reason: str


def _usable(
    transactions: Iterable[Transaction],
    issues: list[DataIssue],
) -> list[Transaction]:
    """Drop transactions that would distort totals, recording why."""
    usable = []
    for t in transactions:
        if not (isinstance(t.amount, Decimal) and t.amount.is_finite()):
            issues.append(DataIssue(t.transaction_id, "amount", f"not a finite number: {t.amount!r}"))
            continue
        if t.date is None:
            issues.append(DataIssue(t.transaction_id, "date", "missing"))
            continue
        usable.append(t)
    if issues:
        logger.debug("Excluded %d transactions with unusable data", len(issues))
    return usable


# Category totals


@dataclass
class CategoryTotals:
    month: str
    type: TransactionType
    totals: dict[str, Decimal] = field(default_factory=dict)
    issues: list[DataIssue] = field(default_factory=list)

    @property
    def total(self) -> Decimal:
        return sum(self.totals.values(), ZERO)

    @property
    def categories(self) -> list[str]:
        return list(self.totals)


def category_totals(
    transactions: Iterable[Transaction],
    month: str,
    type: TransactionType = TransactionType.EXPENSE,
) -> CategoryTotals:
    """Sum ``type`` transactions per category for ``month`` (YYYY-MM).

    Categories keep first-seen order.
    """
    result = CategoryTotals(month=month, type=type)
    for t in _usable(transactions, result.issues):
        if t.type != type or t.month != month:
            continue
        result.totals[t.category] = result.totals.get(t.category, ZERO) + t.amount
    return result


# Income vs expense


@dataclass(frozen=True)
class MonthlyFlow:
    month: str
    income: Decimal
    expense: Decimal

    @property
    def net(self) -> Decimal:
        return self.income - self.expense


@dataclass
class MonthlyFlows:
    flows: list[MonthlyFlow] = field(default_factory=list)
    issues: list[DataIssue] = field(default_factory=list)

    @property
    def months(self) -> list[str]:
        return [f.month for f in self.flows]


def monthly_flows(transactions: Iterable[Transaction]) -> MonthlyFlows:
    """Income and expense per calendar month, oldest first."""
    result = MonthlyFlows()
    sums: dict[str, dict[TransactionType, Decimal]] = {}
    for t in _usable(transactions, result.issues):
        bucket = sums.setdefault(t.month, {TransactionType.INCOME: ZERO, TransactionType.EXPENSE: ZERO})
        bucket[t.type] += t.amount
    for month in sorted(sums):
        result.flows.append(
            MonthlyFlow(
                month=month,
                income=sums[month][TransactionType.INCOME],
                expense=sums[month][TransactionType.EXPENSE],
            )
        )
    return result


def month_balance(transactions: Iterable[Transaction], month: str) -> MonthlyFlows:
    """Income, expense and net for a single month."""
    txns = list(transactions)
    flows = monthly_flows(t for t in txns if t.date is None or t.month == month)
    if not flows.flows:
        flows.flows.append(MonthlyFlow(month=month, income=ZERO, expense=ZERO))
    return flows


# Rolling windows


@dataclass(frozen=True)
class DailyPoint:
    day: date
    income: Decimal
    expense: Decimal
    balance: Decimal  # Running net since the first day of the window


@dataclass
class DailyTrend:
    points: list[DailyPoint] = field(default_factory=list)
    issues: list[DataIssue] = field(default_factory=list)


def daily_trend(
    transactions: Iterable[Transaction],
    today: date,
    days: int = 30,
) -> DailyTrend:
    """Per-day totals for the last ``days`` days ending today."""
    result = DailyTrend()
    window = [today - timedelta(days=i) for i in range(days - 1, -1, -1)]
    income = {d: ZERO for d in window}
    expense = {d: ZERO for d in window}
    for t in _usable(transactions, result.issues):
        if t.date not in income:
            continue
        if t.type == TransactionType.INCOME:
            income[t.date] += t.amount
        else:
            expense[t.date] += t.amount

    running = ZERO
    for d in window:
        running += income[d] - expense[d]
        result.points.append(DailyPoint(day=d, income=income[d], expense=expense[d], balance=running))
    return result


@dataclass(frozen=True)
class WeeklyBucket:
    label: str
    start: date
    end: date
    income: Decimal
    expense: Decimal


@dataclass
class WeeklyTotals:
    buckets: list[WeeklyBucket] = field(default_factory=list)
    issues: list[DataIssue] = field(default_factory=list)


def weekly_totals(
    transactions: Iterable[Transaction],
    today: date,
    weeks: int = 12,
) -> WeeklyTotals:
    """Totals for the last ``weeks`` Sunday-to-Saturday weeks.

    Buckets are labelled S1 (oldest) to S<weeks> (current week).
    """
    result = WeeklyTotals()
    days_since_sunday = (today.weekday() + 1) % 7
    current_start = today - timedelta(days=days_since_sunday)
    spans = []
    for i in range(weeks - 1, -1, -1):
        start = current_start - timedelta(days=7 * i)
        spans.append((f"S{weeks - i}", start, start + timedelta(days=6)))

    income = [ZERO] * weeks
    expense = [ZERO] * weeks
    for t in _usable(transactions, result.issues):
        for idx, (_, start, end) in enumerate(spans):
            if start <= t.date <= end:
                if t.type == TransactionType.INCOME:
                    income[idx] += t.amount
                else:
                    expense[idx] += t.amount
                break

    for idx, (label, start, end) in enumerate(spans):
        result.buckets.append(WeeklyBucket(label, start, end, income[idx], expense[idx]))
    return result


# Budgets


def budget_status(spent: Decimal, limit: Decimal) -> BudgetStatus:
    """Classify spending against a limit.

    Bands include their lower edge: 80% of the limit is an alert, 100% is
    exceeded.
    """
    if limit <= 0:
        return BudgetStatus.EXCEEDED if spent > 0 else BudgetStatus.OK
    if spent >= limit * BUDGET_EXCEEDED_RATIO:
        return BudgetStatus.EXCEEDED
    if spent >= limit * BUDGET_ALERT_RATIO:
        return BudgetStatus.ALERT
    if spent >= limit * BUDGET_CAUTION_RATIO:
        return BudgetStatus.CAUTION
    return BudgetStatus.OK


def budget_spent(
    budget: Budget,
    transactions: Iterable[Transaction],
    issues: list[DataIssue] | None = None,
) -> Decimal:
    """Expenses in the budget's category and month."""
    issues = issues if issues is not None else []
    return sum(
        (
            t.amount
            for t in _usable(transactions, issues)
            if t.type == TransactionType.EXPENSE
            and t.category == budget.category
            and t.month == budget.month
        ),
        ZERO,
    )


@dataclass(frozen=True)
class BudgetUsage:
    budget: Budget
    spent: Decimal
    percentage: Decimal  # Capped at 100 for progress bars
    status: BudgetStatus

    @property
    def remaining(self) -> Decimal:
        return self.budget.limit - self.spent


@dataclass
class BudgetOverview:
    month: str
    usages: list[BudgetUsage] = field(default_factory=list)
    issues: list[DataIssue] = field(default_factory=list)

    @property
    def total_limit(self) -> Decimal:
        return sum((u.budget.limit for u in self.usages), ZERO)

    @property
    def total_spent(self) -> Decimal:
        return sum((u.spent for u in self.usages), ZERO)

    @property
    def remaining(self) -> Decimal:
        return self.total_limit - self.total_spent

    def with_status(self, *statuses: BudgetStatus) -> list[BudgetUsage]:
        return [u for u in self.usages if u.status in statuses]


def budget_usage(budget: Budget, spent: Decimal) -> BudgetUsage:
    if budget.limit > 0:
        percentage = min(spent / budget.limit * HUNDRED, HUNDRED)
    else:
        percentage = HUNDRED
    return BudgetUsage(
        budget=budget,
        spent=spent,
        percentage=percentage,
        status=budget_status(spent, budget.limit),
    )


def budget_overview(
    budgets: Iterable[Budget],
    transactions: Iterable[Transaction],
    month: str,
) -> BudgetOverview:
    """Usage of every budget in ``month``, most consumed first."""
    result = BudgetOverview(month=month)
    usable = _usable(transactions, result.issues)
    for budget in budgets:
        if budget.month != month:
            continue
        result.usages.append(budget_usage(budget, budget_spent(budget, usable)))
    result.usages.sort(key=lambda u: u.percentage, reverse=True)
    return result


# Debts and goals


@dataclass(frozen=True)
class DebtSummary:
    active_count: int
    settled_count: int
    total_balance: Decimal
    total_principal: Decimal
    total_paid: Decimal
    overall_progress: Decimal
    monthly_payments: Decimal
    average_interest_rate: Decimal


def is_open_debt(debt: Debt) -> bool:
    return debt.active and debt.current_balance > 0


def debt_summary(debts: Iterable[Debt]) -> DebtSummary:
    """Portfolio totals over open debts."""
    debts = list(debts)
    open_debts = [d for d in debts if is_open_debt(d)]
    total_balance = sum((d.current_balance for d in open_debts), ZERO)
    total_principal = sum((d.principal for d in open_debts), ZERO)
    total_paid = total_principal - total_balance
    return DebtSummary(
        active_count=len(open_debts),
        settled_count=len(debts) - len(open_debts),
        total_balance=total_balance,
        total_principal=total_principal,
        total_paid=total_paid,
        overall_progress=total_paid / total_principal * HUNDRED if total_principal > 0 else ZERO,
        monthly_payments=sum(
            (effective_monthly_payment(d.payment_amount, d.payment_frequency) for d in open_debts),
            ZERO,
        ),
        average_interest_rate=(
            sum((d.interest_rate for d in open_debts), ZERO) / len(open_debts)
            if open_debts
            else ZERO
        ),
    )


@dataclass(frozen=True)
class GoalSummary:
    active_count: int
    completed_count: int
    total_saved: Decimal
    total_target: Decimal
    overall_progress: Decimal


def goal_summary(goals: Iterable[Goal]) -> GoalSummary:
    goals = list(goals)
    total_saved = sum((g.current_amount for g in goals), ZERO)
    total_target = sum((g.target_amount for g in goals), ZERO)
    active = sum(1 for g in goals if g.active)
    return GoalSummary(
        active_count=active,
        completed_count=len(goals) - active,
        total_saved=total_saved,
        total_target=total_target,
        overall_progress=total_saved / total_target * HUNDRED if total_target > 0 else ZERO,
    )


# Spending trend


@dataclass
class SpendingTrend:
    month: str
    current_expense: Decimal
    previous_months: list[str]
    average_expense: Decimal | None  # None without history
    issues: list[DataIssue] = field(default_factory=list)

    @property
    def ratio(self) -> Decimal | None:
        if not self.average_expense:
            return None
        return self.current_expense / self.average_expense


def spending_trend(
    transactions: Iterable[Transaction],
    today: date,
    history: int = 3,
) -> SpendingTrend:
    """Compare this month's expenses with the mean of earlier months.

    Only months that have at least one transaction count toward the
    history, up to the ``history`` most recent ones.
    """
    issues: list[DataIssue] = []
    usable = _usable(transactions, issues)
    month = today.strftime("%Y-%m")

    expenses: dict[str, Decimal] = {}
    for t in usable:
        expenses.setdefault(t.month, ZERO)
        if t.type == TransactionType.EXPENSE:
            expenses[t.month] += t.amount

    previous = sorted(m for m in expenses if m < month)[-history:] if history > 0 else []
    average = (
        sum((expenses[m] for m in previous), ZERO) / len(previous) if previous else None
    )
    return SpendingTrend(
        month=month,
        current_expense=expenses.get(month, ZERO),
        previous_months=previous,
        average_expense=average,
        issues=issues,
    )
