"""Debt models."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from finance_engine.models.enums import DebtType, PaymentFrequency


@dataclass(frozen=True)
class Payment:
    """A single payment applied against a debt."""

    amount: Decimal
    date: date
    description: str | None = None


@dataclass(frozen=True)
class Debt:
    """Amortizing liability (credit card, loan, mortgage...)."""

    debt_id: str
    name: str
    principal: Decimal  # Original amount, fixed at creation
    current_balance: Decimal
    interest_rate: Decimal  # Nominal annual rate in percent (24 == 24%)
    payment_amount: Decimal
    payment_frequency: PaymentFrequency = PaymentFrequency.MONTHLY
    minimum_payment: Decimal | None = None
    next_payment_date: date | None = None
    reminder_days: int = 3
    auto_reminder: bool = True
    active: bool = True
    start_date: date | None = None
    debt_type: DebtType = DebtType.OTHER
    creditor: str | None = None
    description: str | None = None
    paid_off_date: date | None = None
    payment_history: tuple[Payment, ...] = field(default_factory=tuple)

    @property
    def scheduled_payment(self) -> Decimal:
        """Amount a reminder should ask for (minimum payment when set)."""
        return self.minimum_payment or self.payment_amount
