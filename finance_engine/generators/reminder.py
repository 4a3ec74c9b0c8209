"""Recurring payment reminder generator."""

import random
from datetime import date, timedelta

from finance_engine.generators.base import BaseGenerator
from finance_engine.models import Reminder, ReminderFrequency


class ReminderGenerator(BaseGenerator):
    """Generate standalone recurring bill reminders."""

    BILLS = [
        ("Alquiler", "Vivienda", (500, 1100), ReminderFrequency.MONTHLY),
        ("Luz", "Servicios", (30, 120), ReminderFrequency.MONTHLY),
        ("Internet", "Servicios", (25, 60), ReminderFrequency.MONTHLY),
        ("Gimnasio", "Salud", (20, 50), ReminderFrequency.MONTHLY),
        ("Seguro coche", "Transporte", (200, 600), ReminderFrequency.YEARLY),
        ("Comunidad", "Vivienda", (60, 180), ReminderFrequency.QUARTERLY),
    ]

    def generate(self, today: date) -> Reminder:
        """Generate a reminder due within roughly the next month."""
        name, category, (low, high), frequency = random.choice(self.BILLS)
        return Reminder(
            reminder_id=self.new_id(),
            name=name,
            amount=self.money(low, high),
            category=category,
            frequency=frequency,
            next_due_date=today + timedelta(days=random.randint(-3, 30)),
            notify_days_before=random.choice([1, 3, 5]),
        )
