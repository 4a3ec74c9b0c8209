"""Monthly category budget model."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Budget:
    """Spending ceiling for one category in one calendar month."""

    budget_id: str
    category: str
    limit: Decimal
    month: str  # YYYY-MM

    @property
    def key(self) -> tuple[str, str]:
        """Uniqueness key: at most one budget per (category, month)."""
        return (self.category, self.month)
