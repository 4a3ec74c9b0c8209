"""Record update functions.

Every function takes a record and returns a new one; inputs are never
mutated. Validation errors are raised as :class:`InvalidAmountError`,
business-rule violations as the matching ``InvalidEntityStateError``
subclass.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from decimal import Decimal
from typing import Iterable

from finance_engine.exceptions import (
    DuplicateBudgetError,
    InsufficientFundsError,
    InvalidAmountError,
    InvalidEntityStateError,
)
from finance_engine.engine.amortization import next_payment_date
from finance_engine.engine.money import ZERO, non_negative, positive, to_decimal
from finance_engine.models import (
    Budget,
    Debt,
    Goal,
    Payment,
    Reminder,
    ReminderFrequency,
    Transaction,
    TransactionType,
)

logger = logging.getLogger(__name__)

DEBT_REMINDER_CATEGORY = "Deudas"


# Validation


def validate_debt(debt: Debt) -> Debt:
    """Check a newly entered debt."""
    principal = positive(debt.principal, "principal")
    balance = non_negative(debt.current_balance, "current_balance")
    non_negative(debt.interest_rate, "interest_rate")
    non_negative(debt.payment_amount, "payment_amount")
    if debt.minimum_payment is not None:
        non_negative(debt.minimum_payment, "minimum_payment")
    if balance > principal:
        raise InvalidAmountError(
            f"current_balance {balance} exceeds principal {principal}"
        )
    if debt.reminder_days < 0:
        raise InvalidAmountError("reminder_days must be >= 0")
    return debt


def validate_goal(goal: Goal) -> Goal:
    """Check a newly entered goal."""
    positive(goal.target_amount, "target_amount")
    non_negative(goal.current_amount, "current_amount")
    if goal.auto_save_enabled:
        positive(goal.auto_save_amount, "auto_save_amount")
    if not 1 <= goal.auto_save_day <= 28:
        raise InvalidAmountError(f"auto_save_day must be within 1..28, got {goal.auto_save_day}")
    return goal


def validate_budget(budget: Budget) -> Budget:
    """Check a budget's limit and month format."""
    positive(budget.limit, "limit")
    year, _, month = budget.month.partition("-")
    if not (
        len(year) == 4 and year.isdigit()
        and len(month) == 2 and month.isdigit() and 1 <= int(month) <= 12
    ):
        raise InvalidAmountError(f"month must be YYYY-MM, got {budget.month!r}")
    if not budget.category:
        raise InvalidAmountError("budget category is required")
    return budget


def ensure_unique_budget(existing: Iterable[Budget], candidate: Budget) -> None:
    """Reject a second budget for the same category and month.

    Raises
    ------
    DuplicateBudgetError
        If another budget (different id) already has the same key.
    """
    for budget in existing:
        if budget.key == candidate.key and budget.budget_id != candidate.budget_id:
            raise DuplicateBudgetError(
                f"A budget for {candidate.category} in {candidate.month} already exists"
            )


# Debts


def register_payment(
    debt: Debt,
    amount: Decimal,
    on: date,
    description: str | None = None,
) -> Debt:
    """Apply a payment: lower the balance and append to the history.

    The balance never drops below zero. The debt stays active; closing it
    is :func:`mark_as_paid`'s job.
    """
    amount = positive(amount, "payment amount")
    if not debt.active:
        raise InvalidEntityStateError(f"Debt {debt.debt_id} is closed")

    new_balance = max(ZERO, to_decimal(debt.current_balance) - amount)
    payment = Payment(amount=amount, date=on, description=description)
    logger.debug("Payment of %s on debt %s, balance %s -> %s",
                 amount, debt.debt_id, debt.current_balance, new_balance)
    return replace(
        debt,
        current_balance=new_balance,
        payment_history=debt.payment_history + (payment,),
    )


def mark_as_paid(debt: Debt, today: date) -> Debt:
    """Close a debt as fully liquidated."""
    return replace(debt, current_balance=ZERO, active=False, paid_off_date=today)


def reminder_for_debt(debt: Debt, reminder_id: str | None = None) -> Reminder | None:
    """Mirror a debt into a recurring reminder.

    Returns None when the debt has reminders off, is closed, or has no
    next payment date.
    """
    if not debt.auto_reminder or not debt.active or debt.next_payment_date is None:
        return None
    return Reminder(
        reminder_id=reminder_id or f"debt-{debt.debt_id}",
        name=f"Pago: {debt.name}",
        amount=debt.scheduled_payment,
        category=DEBT_REMINDER_CATEGORY,
        frequency=ReminderFrequency(debt.payment_frequency.value),
        next_due_date=debt.next_payment_date,
        notify_days_before=debt.reminder_days,
        is_active=True,
        debt_id=debt.debt_id,
    )


# Goals


def add_funds(goal: Goal, amount: Decimal) -> Goal:
    """Deposit ``amount`` into a goal."""
    amount = positive(amount, "amount")
    return replace(goal, current_amount=to_decimal(goal.current_amount) + amount)


def withdraw_funds(goal: Goal, amount: Decimal) -> Goal:
    """Take ``amount`` out of a goal.

    Raises
    ------
    InsufficientFundsError
        If ``amount`` exceeds what has been saved.
    """
    amount = positive(amount, "amount")
    current = to_decimal(goal.current_amount)
    if amount > current:
        raise InsufficientFundsError(
            f"Cannot withdraw {amount} from goal {goal.goal_id}: only {current} saved"
        )
    return replace(goal, current_amount=current - amount)


def mark_completed(goal: Goal, today: date) -> Goal:
    """Close a goal as reached; the saved amount is set to the target."""
    return replace(
        goal,
        current_amount=goal.target_amount,
        active=False,
        completed_at=today,
    )


# Reminders


def mark_reminder_paid(
    reminder: Reminder,
    today: date,
    transaction_id: str,
) -> tuple[Reminder, Transaction]:
    """Roll a reminder to its next due date and record the expense."""
    advanced = replace(
        reminder,
        next_due_date=next_payment_date(reminder.next_due_date, reminder.frequency),
    )
    transaction = Transaction(
        transaction_id=transaction_id,
        type=TransactionType.EXPENSE,
        amount=reminder.amount,
        category=reminder.category,
        date=today,
        description=f"{reminder.name} (Pago recurrente)",
    )
    return advanced, transaction
