"""Automatic savings rules for goals.

Planning is pure: :func:`plan_auto_saves` returns the effects a pass would
have (goal updates plus the matching expense transactions) and
:func:`finance_engine.effects.apply_effects` executes them.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from datetime import date
from uuid import uuid4

from finance_engine.effects import AppendTransaction, Effect, UpdateGoal
from finance_engine.models import AutoSaveState, Goal, SaveFrequency, Transaction, TransactionType

logger = logging.getLogger(__name__)

SAVINGS_CATEGORY = "Ahorro"

# Minimum days since the last save, per frequency
AUTO_SAVE_INTERVAL_DAYS = {
    SaveFrequency.WEEKLY: 7,
    SaveFrequency.BIWEEKLY: 14,
    SaveFrequency.MONTHLY: 28,
    SaveFrequency.QUARTERLY: 90,
}


def auto_save_state(goal: Goal, today: date) -> AutoSaveState:
    """Where ``goal`` stands in its auto-save cycle on ``today``.

    Monthly saves also require ``today`` to be the configured day of the
    month, so a cycle can be skipped when that day falls less than 28 days
    after the previous save.
    """
    if (
        not goal.auto_save_enabled
        or not goal.active
        or goal.auto_save_frequency == SaveFrequency.NONE
    ):
        return AutoSaveState.DISABLED

    if goal.last_auto_save is None:
        return AutoSaveState.DUE

    elapsed = (today - goal.last_auto_save).days
    due = elapsed >= AUTO_SAVE_INTERVAL_DAYS[goal.auto_save_frequency]
    if goal.auto_save_frequency == SaveFrequency.MONTHLY:
        due = due and today.day == goal.auto_save_day
    return AutoSaveState.DUE if due else AutoSaveState.PENDING


def savings_transaction(goal: Goal, today: date, transaction_id: str) -> Transaction:
    """Expense recording an automatic contribution to ``goal``."""
    return Transaction(
        transaction_id=transaction_id,
        type=TransactionType.EXPENSE,
        amount=goal.auto_save_amount,
        category=SAVINGS_CATEGORY,
        date=today,
        description=f"{SAVINGS_CATEGORY}/{goal.name}",
    )


def plan_auto_saves(
    goals: Iterable[Goal],
    today: date,
    new_id: Callable[[], str] = lambda: str(uuid4()),
) -> list[Effect]:
    """Effects for every goal whose auto-save is due on ``today``.

    Each goal id is planned at most once per call, even if it appears
    twice in ``goals``.

    Parameters
    ----------
    goals : Iterable[Goal]
        Goal snapshots.
    today : date
        Evaluation date.
    new_id : Callable[[], str]
        Id factory for the generated transactions.

    Returns
    -------
    list[Effect]
        ``UpdateGoal`` followed by ``AppendTransaction`` for each save.
    """
    effects: list[Effect] = []
    planned: set[str] = set()

    for goal in goals:
        if goal.goal_id in planned:
            continue
        if auto_save_state(goal, today) != AutoSaveState.DUE:
            continue
        if goal.current_amount >= goal.target_amount:
            continue
        if not goal.auto_save_amount or goal.auto_save_amount <= 0:
            logger.debug("Goal %s has auto-save on without an amount", goal.goal_id)
            continue

        planned.add(goal.goal_id)
        effects.append(
            UpdateGoal(
                goal_id=goal.goal_id,
                patch={
                    "current_amount": goal.current_amount + goal.auto_save_amount,
                    "last_auto_save": today,
                },
            )
        )
        effects.append(AppendTransaction(savings_transaction(goal, today, new_id())))

    if effects:
        logger.debug("Planned %d auto-saves for %s", len(planned), today)
    return effects
