"""Debt generator."""

import random
from datetime import date, timedelta
from decimal import Decimal

from finance_engine.engine.amortization import effective_monthly_payment, monthly_interest
from finance_engine.generators.base import BaseGenerator
from finance_engine.models import Debt, DebtType, PaymentFrequency


class DebtGenerator(BaseGenerator):
    """Generate debts with realistic principal, rate and payment."""

    # (principal range, annual rate range) per debt type
    PROFILES = {
        DebtType.CREDIT_CARD: ((500, 6000), (18.0, 32.0)),
        DebtType.PERSONAL_LOAN: ((2000, 20000), (7.0, 16.0)),
        DebtType.AUTO_LOAN: ((8000, 30000), (5.0, 10.0)),
        DebtType.STUDENT_LOAN: ((3000, 25000), (2.0, 6.0)),
        DebtType.MORTGAGE: ((60000, 250000), (2.0, 5.0)),
        DebtType.OTHER: ((200, 3000), (0.0, 12.0)),
    }
    DEBT_TYPES = list(PROFILES)
    TYPE_WEIGHTS = [0.35, 0.25, 0.15, 0.10, 0.05, 0.10]

    NAMES = {
        DebtType.CREDIT_CARD: "Tarjeta",
        DebtType.PERSONAL_LOAN: "Préstamo personal",
        DebtType.AUTO_LOAN: "Préstamo coche",
        DebtType.STUDENT_LOAN: "Préstamo estudios",
        DebtType.MORTGAGE: "Hipoteca",
        DebtType.OTHER: "Deuda",
    }

    def generate(
        self,
        today: date,
        debt_type: DebtType | None = None,
        unpayable_rate: float = 0.05,
    ) -> Debt:
        """Generate a single active debt.

        Parameters
        ----------
        today : date
            Reference date for start and next payment dates.
        debt_type : DebtType | None
            Type to generate (random when None).
        unpayable_rate : float
            Probability that the payment does not cover the interest.

        Returns
        -------
        Debt
            Generated debt.
        """
        debt_type = debt_type or random.choices(self.DEBT_TYPES, weights=self.TYPE_WEIGHTS, k=1)[0]
        (low, high), (rate_low, rate_high) = self.PROFILES[debt_type]

        principal = self.money(low, high)
        balance = (principal * Decimal(str(round(random.uniform(0.05, 1.0), 2)))).quantize(
            Decimal("0.01")
        )
        rate = Decimal(str(round(random.uniform(rate_low, rate_high), 1)))
        frequency = random.choices(
            [PaymentFrequency.MONTHLY, PaymentFrequency.BIWEEKLY, PaymentFrequency.WEEKLY],
            weights=[0.8, 0.1, 0.1],
            k=1,
        )[0]

        interest = monthly_interest(balance, rate)
        if random.random() < unpayable_rate:
            monthly = interest * Decimal("0.8")
        else:
            monthly = max(interest * Decimal("1.5"), balance / Decimal(random.randint(6, 60)))
        # Express the monthly amount in the chosen frequency
        per_month = effective_monthly_payment(Decimal("1"), frequency)
        payment = (monthly / per_month).quantize(Decimal("0.01"))

        company = self.fake.company()
        return Debt(
            debt_id=self.new_id(),
            name=f"{self.NAMES[debt_type]} {company.split()[0]}",
            principal=principal,
            current_balance=balance,
            interest_rate=rate,
            payment_amount=payment,
            payment_frequency=frequency,
            next_payment_date=today + timedelta(days=random.randint(-5, 30)),
            reminder_days=random.choice([1, 3, 5, 7]),
            auto_reminder=random.random() < 0.8,
            start_date=today - timedelta(days=random.randint(30, 1500)),
            debt_type=debt_type,
            creditor=company,
        )
