"""Savings goal model."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from finance_engine.models.enums import GoalCategory, SaveFrequency


@dataclass(frozen=True)
class Goal:
    """Savings target with optional automatic contributions."""

    goal_id: str
    name: str
    target_amount: Decimal
    current_amount: Decimal = Decimal("0")
    deadline: date | None = None
    category: GoalCategory = GoalCategory.OTHER
    description: str | None = None

    # Auto-save rule
    auto_save_enabled: bool = False
    auto_save_amount: Decimal | None = None
    auto_save_frequency: SaveFrequency = SaveFrequency.MONTHLY
    auto_save_day: int = 1  # 1..28, monthly frequency only
    last_auto_save: date | None = None

    active: bool = True
    completed_at: date | None = None

    @property
    def is_complete(self) -> bool:
        return self.current_amount >= self.target_amount

    @property
    def remaining(self) -> Decimal:
        return max(Decimal("0"), self.target_amount - self.current_amount)
