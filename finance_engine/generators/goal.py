"""Savings goal generator."""

import random
from datetime import date, timedelta
from decimal import Decimal

from finance_engine.generators.base import BaseGenerator
from finance_engine.models import Goal, GoalCategory, SaveFrequency


class GoalGenerator(BaseGenerator):
    """Generate savings goals, some with auto-save rules."""

    NAMES = {
        GoalCategory.EMERGENCY: "Fondo de emergencia",
        GoalCategory.VACATION: "Vacaciones",
        GoalCategory.PURCHASE: "Compra",
        GoalCategory.HOME: "Entrada piso",
        GoalCategory.EDUCATION: "Formación",
        GoalCategory.HEALTH: "Salud",
        GoalCategory.OTHER: "Ahorro",
    }
    FREQUENCIES = [
        SaveFrequency.WEEKLY,
        SaveFrequency.BIWEEKLY,
        SaveFrequency.MONTHLY,
        SaveFrequency.QUARTERLY,
    ]
    FREQUENCY_WEIGHTS = [0.15, 0.15, 0.6, 0.1]

    def generate(self, today: date, auto_save_rate: float = 0.5) -> Goal:
        """Generate a single active goal.

        Parameters
        ----------
        today : date
            Reference date for deadline and last auto-save.
        auto_save_rate : float
            Probability that the goal has auto-save enabled.

        Returns
        -------
        Goal
            Generated goal.
        """
        category = random.choice(list(GoalCategory))
        target = self.money(500, 20000)
        current = (target * Decimal(str(round(random.uniform(0.0, 0.95), 2)))).quantize(
            Decimal("0.01")
        )

        auto_save = random.random() < auto_save_rate
        frequency = random.choices(self.FREQUENCIES, weights=self.FREQUENCY_WEIGHTS, k=1)[0]
        deadline = None
        if random.random() < 0.8:
            deadline = today + timedelta(days=random.randint(-30, 720))

        name = self.NAMES[category]
        if category == GoalCategory.VACATION:
            name = f"{name} {self.fake.city()}"

        return Goal(
            goal_id=self.new_id(),
            name=name,
            target_amount=target,
            current_amount=current,
            deadline=deadline,
            category=category,
            description=self.fake.sentence(nb_words=6),
            auto_save_enabled=auto_save,
            auto_save_amount=self.money(20, 300) if auto_save else None,
            auto_save_frequency=frequency if auto_save else SaveFrequency.NONE,
            auto_save_day=random.randint(1, 28),
            last_auto_save=today - timedelta(days=random.randint(1, 40)) if auto_save else None,
        )
