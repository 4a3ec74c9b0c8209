"""Monthly budget generator."""

import random
from decimal import Decimal

from finance_engine.generators.base import BaseGenerator
from finance_engine.models import Budget


class BudgetGenerator(BaseGenerator):
    """Generate monthly budgets, one per category."""

    # Typical monthly limit range per expense category
    LIMITS = {
        "Alimentación": (250, 600),
        "Transporte": (60, 200),
        "Vivienda": (500, 1200),
        "Ocio": (80, 300),
        "Salud": (40, 150),
        "Servicios": (80, 250),
    }

    def generate(self, category: str, month: str) -> Budget:
        """Generate the budget of ``category`` for ``month`` (YYYY-MM)."""
        low, high = self.LIMITS.get(category, (50, 300))
        return Budget(
            budget_id=self.new_id(),
            category=category,
            limit=self.money(low, high).quantize(Decimal("1")),
            month=month,
        )

    def generate_month(self, month: str, coverage: float = 0.7) -> list[Budget]:
        """Budgets for a random subset of categories (at least one)."""
        categories = [c for c in self.LIMITS if random.random() < coverage]
        if not categories:
            categories = [random.choice(list(self.LIMITS))]
        return [self.generate(category, month) for category in categories]
