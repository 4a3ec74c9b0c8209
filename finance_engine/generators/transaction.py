"""Transaction generator."""

import random
from datetime import date, timedelta
from typing import Iterator

from dateutil.relativedelta import relativedelta

from finance_engine.generators.base import BaseGenerator
from finance_engine.models import Transaction, TransactionType


class TransactionGenerator(BaseGenerator):
    """Generate income and expense transactions."""

    EXPENSE_CATEGORIES = ["Alimentación", "Transporte", "Vivienda", "Ocio", "Salud", "Servicios"]
    EXPENSE_WEIGHTS = [0.35, 0.20, 0.05, 0.20, 0.10, 0.10]

    # Amount range per category
    EXPENSE_AMOUNTS = {
        "Alimentación": (5, 120),
        "Transporte": (2, 60),
        "Vivienda": (400, 900),
        "Ocio": (10, 90),
        "Salud": (10, 80),
        "Servicios": (20, 110),
    }

    def generate_expense(self, today: date, days_back: int = 120) -> Transaction:
        """Generate an expense dated within the last ``days_back`` days."""
        category = random.choices(self.EXPENSE_CATEGORIES, weights=self.EXPENSE_WEIGHTS, k=1)[0]
        low, high = self.EXPENSE_AMOUNTS[category]
        return Transaction(
            transaction_id=self.new_id(),
            type=TransactionType.EXPENSE,
            amount=self.money(low, high),
            category=category,
            date=today - timedelta(days=random.randint(0, days_back)),
            description=self.fake.company(),
        )

    def generate_salaries(self, today: date, months: int = 4) -> Iterator[Transaction]:
        """One salary per month, on the first of the month, up to ``today``."""
        salary = self.money(1400, 3200)
        first = today.replace(day=1)
        for offset in range(months - 1, -1, -1):
            yield Transaction(
                transaction_id=self.new_id(),
                type=TransactionType.INCOME,
                amount=salary,
                category="Salario",
                date=first - relativedelta(months=offset),
                description=f"Nómina {self.fake.company()}",
            )

    def generate_batch(
        self,
        today: date,
        count: int,
        days_back: int = 120,
        freelance_rate: float = 0.05,
    ) -> list[Transaction]:
        """Salaries plus ``count`` random expenses and occasional freelance income.

        Parameters
        ----------
        today : date
            Latest possible transaction date.
        count : int
            Number of expenses to generate.
        days_back : int
            Window the expenses are spread over.
        freelance_rate : float
            Probability of an extra income per expense generated.

        Returns
        -------
        list[Transaction]
            Transactions sorted by date.
        """
        months = days_back // 30 + 1
        transactions = list(self.generate_salaries(today, months))
        for _ in range(count):
            transactions.append(self.generate_expense(today, days_back))
            if random.random() < freelance_rate:
                transactions.append(
                    Transaction(
                        transaction_id=self.new_id(),
                        type=TransactionType.INCOME,
                        amount=self.money(100, 800),
                        category="Freelance",
                        date=today - timedelta(days=random.randint(0, days_back)),
                        description=self.fake.job(),
                    )
                )
        transactions.sort(key=lambda t: t.date)
        return transactions
