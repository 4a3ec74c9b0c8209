"""Advisory notifications for debts, goals, budgets and reminders.

The evaluator is pure: it reads snapshots plus an explicit ``today`` and
returns notifications in a stable order (entities in input order, rules in
the order they appear below). Several rules may fire for one entity.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from datetime import date
from decimal import Decimal

from finance_engine.engine.amortization import payment_progress_pct
from finance_engine.engine.money import HUNDRED
from finance_engine.engine.statistics import budget_spent, budget_status, spending_trend
from finance_engine.models import (
    Budget,
    BudgetStatus,
    Debt,
    Goal,
    Notification,
    NotificationKind,
    Reminder,
    Severity,
    Transaction,
)

logger = logging.getLogger(__name__)

# Progress thresholds (percent)
SLOW_PROGRESS_PCT = Decimal("25")
GOOD_PROGRESS_PCT = Decimal("50")
NEAR_COMPLETION_PCT = Decimal("75")
GOAL_NEAR_COMPLETION_PCT = Decimal("90")
COMPLETE_PCT = Decimal("100")

HIGH_INTEREST_RATE_PCT = Decimal("20")
SLOW_PROGRESS_MIN_MONTHS = 6
DEADLINE_WINDOW_DAYS = 30
DAYS_PER_MONTH = 30

SPENDING_REDUCED_RATIO = Decimal("0.85")
OVERSPENDING_RATIO = Decimal("1.2")


def _notification(
    kind: NotificationKind,
    severity: Severity,
    entity_type: str,
    entity_id: str,
    title: str,
    message: str,
    **extra,
) -> Notification:
    return Notification(
        notification_id=f"{kind.value}-{entity_id}",
        kind=kind,
        severity=severity,
        entity_type=entity_type,
        entity_id=entity_id,
        title=title,
        message=message,
        **extra,
    )


def _plural(n: int, word: str) -> str:
    return f"{n} {word}" if n == 1 else f"{n} {word}s"


def goal_progress_pct(goal: Goal) -> Decimal:
    """Unclamped saved/target percentage; a zero target counts as done."""
    if goal.target_amount <= 0:
        return HUNDRED
    return goal.current_amount / goal.target_amount * HUNDRED


# Debts


def debt_notifications(debt: Debt, today: date) -> list[Notification]:
    if not debt.active:
        return []

    alerts = []
    days = (debt.next_payment_date - today).days if debt.next_payment_date else None

    if days is not None and 0 <= days <= debt.reminder_days:
        alerts.append(_notification(
            NotificationKind.PAYMENT_UPCOMING, Severity.WARNING, "debt", debt.debt_id,
            "Upcoming payment",
            f'Payment for "{debt.name}" is due in {_plural(days, "day")}. '
            f"Amount: {debt.scheduled_payment}.",
            amount=debt.scheduled_payment,
            days=days,
        ))

    if days is not None and days < 0:
        alerts.append(_notification(
            NotificationKind.PAYMENT_OVERDUE, Severity.ERROR, "debt", debt.debt_id,
            "Payment overdue",
            f'Payment for "{debt.name}" is {_plural(-days, "day")} overdue.',
            amount=debt.scheduled_payment,
            days=days,
        ))

    if debt.interest_rate > HIGH_INTEREST_RATE_PCT:
        alerts.append(_notification(
            NotificationKind.HIGH_INTEREST, Severity.WARNING, "debt", debt.debt_id,
            "High interest rate",
            f'"{debt.name}" charges {debt.interest_rate}% a year. '
            "Consider refinancing or paying more than the minimum.",
        ))

    progress = payment_progress_pct(debt.principal, debt.current_balance)

    if progress < SLOW_PROGRESS_PCT and debt.start_date:
        months = (today - debt.start_date).days // DAYS_PER_MONTH
        if months > SLOW_PROGRESS_MIN_MONTHS:
            alerts.append(_notification(
                NotificationKind.SLOW_PROGRESS, Severity.INFO, "debt", debt.debt_id,
                "Consider paying more",
                f'After {months} months only {progress:.1f}% of "{debt.name}" is repaid. '
                "Larger payments reduce the interest.",
                progress=progress,
            ))

    if NEAR_COMPLETION_PCT <= progress < COMPLETE_PCT:
        alerts.append(_notification(
            NotificationKind.DEBT_NEAR_COMPLETION, Severity.SUCCESS, "debt", debt.debt_id,
            "Almost there",
            f'{progress:.1f}% of "{debt.name}" is repaid. {debt.current_balance} to go.',
            amount=debt.current_balance,
            progress=progress,
        ))

    if debt.current_balance <= 0 and debt.active:
        alerts.append(_notification(
            NotificationKind.PAYOFF_READY, Severity.SUCCESS, "debt", debt.debt_id,
            "Debt paid off",
            f'"{debt.name}" is fully repaid. Mark it as paid to close it.',
        ))

    return alerts


# Goals


def goal_notifications(goal: Goal, today: date) -> list[Notification]:
    if not goal.active:
        return []

    alerts = []
    progress = goal_progress_pct(goal)
    days = (goal.deadline - today).days if goal.deadline else None
    missing = goal.target_amount - goal.current_amount

    if progress >= COMPLETE_PCT:
        alerts.append(_notification(
            NotificationKind.GOAL_COMPLETED, Severity.SUCCESS, "goal", goal.goal_id,
            "Goal reached",
            f'"{goal.name}" is complete with {goal.current_amount} saved.',
            amount=goal.current_amount,
            progress=progress,
        ))
    elif progress >= GOAL_NEAR_COMPLETION_PCT:
        alerts.append(_notification(
            NotificationKind.GOAL_NEAR_COMPLETION, Severity.INFO, "goal", goal.goal_id,
            "Almost there",
            f'"{goal.name}" is at {progress:.0f}%. {missing} to go.',
            amount=missing,
            progress=progress,
        ))
    elif progress >= GOOD_PROGRESS_PCT:
        alerts.append(_notification(
            NotificationKind.GOAL_GOOD_PROGRESS, Severity.INFO, "goal", goal.goal_id,
            "Good progress",
            f'"{goal.name}" is at {progress:.0f}%. Keep going!',
            progress=progress,
        ))

    if days is not None:
        if days < 0 and progress < COMPLETE_PCT:
            alerts.append(_notification(
                NotificationKind.DEADLINE_MISSED, Severity.ERROR, "goal", goal.goal_id,
                "Deadline passed",
                f'The deadline for "{goal.name}" has passed at {progress:.0f}%.',
                progress=progress,
                days=days,
            ))
        elif 0 < days <= DEADLINE_WINDOW_DAYS and progress < NEAR_COMPLETION_PCT:
            monthly_needed = missing / (Decimal(days) / DAYS_PER_MONTH)
            alerts.append(_notification(
                NotificationKind.DEADLINE_APPROACHING, Severity.WARNING, "goal", goal.goal_id,
                "Deadline approaching",
                f'{_plural(days, "day")} left for "{goal.name}". '
                f"Save about {monthly_needed:.2f} per month to make it.",
                amount=monthly_needed,
                progress=progress,
                days=days,
            ))

    if goal.auto_save_enabled and progress < COMPLETE_PCT:
        alerts.append(_notification(
            NotificationKind.AUTO_SAVE_ACTIVE, Severity.INFO, "goal", goal.goal_id,
            "Auto-save active",
            f'{goal.auto_save_amount} is saved {goal.auto_save_frequency.value} for "{goal.name}".',
            amount=goal.auto_save_amount,
        ))

    return alerts


# Budgets


_BUDGET_RULES = {
    BudgetStatus.EXCEEDED: (NotificationKind.BUDGET_EXCEEDED, Severity.ERROR, "Budget exceeded"),
    BudgetStatus.ALERT: (NotificationKind.BUDGET_ALERT, Severity.WARNING, "Budget alert"),
    BudgetStatus.CAUTION: (NotificationKind.BUDGET_CAUTION, Severity.INFO, "Budget caution"),
}


def budget_notification(budget: Budget, spent: Decimal) -> Notification | None:
    """Notification for one budget given what was spent, if any band is hit."""
    status = budget_status(spent, budget.limit)
    if status not in _BUDGET_RULES:
        return None
    kind, severity, title = _BUDGET_RULES[status]
    used = spent / budget.limit * HUNDRED if budget.limit > 0 else HUNDRED
    if status == BudgetStatus.EXCEEDED:
        message = f"Spending on {budget.category} is over the budget by {spent - budget.limit}."
        amount = spent - budget.limit
    else:
        message = f"{used:.0f}% of the {budget.category} budget is used."
        amount = budget.limit - spent
    return _notification(
        kind, severity, "budget", budget.budget_id, title, message,
        amount=amount,
        progress=used,
    )


def budget_notifications(
    budgets: Iterable[Budget],
    transactions: Sequence[Transaction],
    today: date,
) -> list[Notification]:
    """Notifications for the budgets of today's month."""
    month = today.strftime("%Y-%m")
    alerts = []
    for budget in budgets:
        if budget.month != month:
            continue
        notification = budget_notification(budget, budget_spent(budget, transactions))
        if notification is not None:
            alerts.append(notification)
    return alerts


# Reminders


def reminder_notifications(reminder: Reminder, today: date) -> list[Notification]:
    if not reminder.is_active:
        return []

    days = (reminder.next_due_date - today).days
    if 0 <= days <= reminder.notify_days_before:
        when = "today" if days == 0 else "tomorrow" if days == 1 else f"in {days} days"
        return [_notification(
            NotificationKind.REMINDER_DUE,
            Severity.URGENT if days <= 1 else Severity.WARNING,
            "reminder", reminder.reminder_id,
            "Payment due soon",
            f"{reminder.name} is due {when}.",
            amount=reminder.amount,
            days=days,
        )]
    if days < 0:
        return [_notification(
            NotificationKind.REMINDER_OVERDUE, Severity.ERROR, "reminder", reminder.reminder_id,
            "Payment overdue",
            f"{reminder.name} was due {_plural(-days, 'day')} ago.",
            amount=reminder.amount,
            days=days,
        )]
    return []


# Spending trend


def spending_notifications(
    transactions: Sequence[Transaction],
    today: date,
    history: int = 3,
) -> list[Notification]:
    """Compare this month's spending with the recent average."""
    trend = spending_trend(transactions, today, history=history)
    if trend.average_expense is None or trend.average_expense <= 0:
        return []

    average = trend.average_expense
    current = trend.current_expense
    if current < average * SPENDING_REDUCED_RATIO:
        change = (average - current) / average * HUNDRED
        return [_notification(
            NotificationKind.SPENDING_REDUCED, Severity.SUCCESS, "spending", trend.month,
            "Great savings",
            f"Spending is down {change:.0f}% against the recent average.",
            amount=average - current,
            progress=change,
        )]
    if current > average * OVERSPENDING_RATIO:
        change = (current - average) / average * HUNDRED
        return [_notification(
            NotificationKind.OVERSPENDING, Severity.WARNING, "spending", trend.month,
            "Overspending",
            f"Spending is {change:.0f}% above the recent average.",
            amount=current - average,
            progress=change,
        )]
    return []


def evaluate(
    today: date,
    debts: Iterable[Debt] = (),
    goals: Iterable[Goal] = (),
    budgets: Iterable[Budget] = (),
    transactions: Iterable[Transaction] = (),
    reminders: Iterable[Reminder] = (),
    history: int = 3,
) -> list[Notification]:
    """Evaluate every rule against the given snapshots.

    Parameters
    ----------
    today : date
        Evaluation date; nothing reads the clock.
    debts, goals, budgets, transactions, reminders
        Current record snapshots.
    history : int
        Months averaged by the spending-trend rule.

    Returns
    -------
    list[Notification]
        Debt, goal, budget, reminder and spending notifications, in that
        order.
    """
    transactions = list(transactions)
    alerts: list[Notification] = []
    for debt in debts:
        alerts.extend(debt_notifications(debt, today))
    for goal in goals:
        alerts.extend(goal_notifications(goal, today))
    alerts.extend(budget_notifications(budgets, transactions, today))
    for reminder in reminders:
        alerts.extend(reminder_notifications(reminder, today))
    alerts.extend(spending_notifications(transactions, today, history=history))

    logger.debug("Evaluated %d notifications for %s", len(alerts), today)
    return alerts
