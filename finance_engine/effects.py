"""Side effects requested by the engine and the step that applies them."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Union

from finance_engine.models import Goal, Transaction

if TYPE_CHECKING:
    from finance_engine.store.base import FinanceRepositories

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppendTransaction:
    """Record a new transaction."""

    transaction: Transaction


@dataclass(frozen=True)
class UpdateGoal:
    """Patch a goal's fields."""

    goal_id: str
    patch: dict[str, Any] = field(default_factory=dict)


Effect = Union[AppendTransaction, UpdateGoal]


@dataclass
class AppliedEffects:
    """Records produced while applying effects."""

    goals: list[Goal] = field(default_factory=list)
    transactions: list[Transaction] = field(default_factory=list)


def apply_effects(effects: Iterable[Effect], store: "FinanceRepositories") -> AppliedEffects:
    """Execute ``effects`` in order against the goal and transaction repositories.

    Errors from the repositories propagate; effects before the failing
    one stay applied.
    """
    applied = AppliedEffects()
    for effect in effects:
        if isinstance(effect, UpdateGoal):
            applied.goals.append(store.goals.update(effect.goal_id, effect.patch))
        elif isinstance(effect, AppendTransaction):
            applied.transactions.append(store.transactions.create(effect.transaction))
        else:
            raise TypeError(f"Unknown effect: {effect!r}")

    if applied.goals or applied.transactions:
        logger.info(
            "Applied %d goal updates and %d transactions",
            len(applied.goals),
            len(applied.transactions),
        )
    return applied
