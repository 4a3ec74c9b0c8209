"""Fixed-payment amortization for debts.

All functions are pure and work on ``Decimal``. Anything that would be
infinite or undefined (payment never covers the interest, zero payment,
nothing left to pay) comes back as ``None`` or :data:`UNBOUNDED` so that
no ``Infinity``/``NaN`` reaches the caller.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import ROUND_CEILING, Decimal
from enum import Enum

from dateutil.relativedelta import relativedelta

from finance_engine.exceptions import IndeterminateResultError
from finance_engine.engine.money import HUNDRED, ZERO, cents, non_negative, to_decimal
from finance_engine.models import Debt, PaymentFrequency, ProjectionStatus, ReminderFrequency

logger = logging.getLogger(__name__)

_TWELVE = Decimal("12")
_ONE = Decimal("1")


class Unbounded(str, Enum):
    """Sentinel for totals that never converge."""

    UNBOUNDED = "unbounded"


UNBOUNDED = Unbounded.UNBOUNDED


def monthly_rate(annual_rate_pct: Decimal) -> Decimal:
    """Nominal annual percentage to a monthly fraction (24 -> 0.02)."""
    return non_negative(annual_rate_pct, "interest_rate") / HUNDRED / _TWELVE


def monthly_interest(balance: Decimal, annual_rate_pct: Decimal) -> Decimal:
    """Interest accrued over one month on ``balance``."""
    balance = to_decimal(balance, "balance")
    rate = monthly_rate(annual_rate_pct)
    if rate == 0:
        return ZERO
    return balance * rate


def effective_monthly_payment(payment_amount: Decimal, frequency: PaymentFrequency) -> Decimal:
    """Normalize a payment of the given frequency to a monthly equivalent."""
    payment = non_negative(payment_amount, "payment_amount")
    payments_per_year = _TWELVE / PaymentFrequency(frequency).months
    return payment * payments_per_year / _TWELVE


def payoff_months(
    balance: Decimal,
    effective_payment: Decimal,
    annual_rate_pct: Decimal,
) -> Decimal | None:
    """Months until ``balance`` is repaid with a fixed monthly payment.

    Returns
    -------
    Decimal | None
        Fractional months, or None when no payoff is computable: nothing
        owed, no payment, or a payment that does not cover the interest.
    """
    balance = to_decimal(balance, "balance")
    effective_payment = non_negative(effective_payment, "effective_payment")
    rate = monthly_rate(annual_rate_pct)

    if balance <= 0 or effective_payment <= 0:
        return None

    if rate == 0:
        return balance / effective_payment

    interest = balance * rate
    if effective_payment <= interest:
        logger.debug(
            "Payment %s does not cover monthly interest %s; debt never resolves",
            effective_payment,
            interest,
        )
        return None

    months = (effective_payment / (effective_payment - interest)).ln() / (_ONE + rate).ln()
    if not months.is_finite() or months < 0:
        return None
    return months


def require_payoff_months(
    balance: Decimal,
    effective_payment: Decimal,
    annual_rate_pct: Decimal,
) -> Decimal:
    """:func:`payoff_months`, raising instead of returning None.

    Raises
    ------
    IndeterminateResultError
        If the payoff horizon cannot be computed.
    """
    months = payoff_months(balance, effective_payment, annual_rate_pct)
    if months is None:
        raise IndeterminateResultError(
            f"Balance {balance} cannot be repaid with {effective_payment}/month "
            f"at {annual_rate_pct}% annual interest"
        )
    return months


def payoff_date(today: date, months: Decimal) -> date:
    """``today`` plus ``ceil(months)`` calendar months."""
    whole = int(to_decimal(months, "months").to_integral_value(rounding=ROUND_CEILING))
    return today + relativedelta(months=whole)


def total_interest(
    balance: Decimal,
    effective_payment: Decimal,
    months: Decimal | None,
) -> Decimal | Unbounded:
    """Interest paid over the remaining life of the debt."""
    if months is None:
        return UNBOUNDED
    return to_decimal(effective_payment) * months - to_decimal(balance, "balance")


def payment_progress_pct(principal: Decimal, current_balance: Decimal) -> Decimal:
    """Share of the principal already repaid, clamped to [0, 100]."""
    principal = to_decimal(principal, "principal")
    current_balance = to_decimal(current_balance, "current_balance")
    if principal == 0:
        return HUNDRED
    paid = principal - current_balance
    return max(ZERO, min(HUNDRED, paid / principal * HUNDRED))


def next_payment_date(
    current: date,
    frequency: PaymentFrequency | ReminderFrequency,
) -> date:
    """Advance a due date by one payment period."""
    steps = {
        "weekly": relativedelta(days=7),
        "biweekly": relativedelta(days=14),
        "monthly": relativedelta(months=1),
        "quarterly": relativedelta(months=3),
        "yearly": relativedelta(years=1),
    }
    return current + steps[frequency.value]


@dataclass(frozen=True)
class DebtProjection:
    """Everything the debts page shows about one debt's future."""

    debt_id: str
    status: ProjectionStatus
    progress: Decimal
    monthly_interest: Decimal
    effective_monthly_payment: Decimal
    payoff_months: Decimal | None
    payoff_date: date | None
    total_interest: Decimal | Unbounded

    @property
    def is_unpayable(self) -> bool:
        return self.status == ProjectionStatus.UNPAYABLE


def project_debt(debt: Debt, today: date) -> DebtProjection:
    """Compute progress, payoff horizon and interest for ``debt``."""
    balance = to_decimal(debt.current_balance, "current_balance")
    effective = effective_monthly_payment(debt.payment_amount, debt.payment_frequency)
    interest = monthly_interest(balance, debt.interest_rate)
    progress = payment_progress_pct(debt.principal, balance)
    months = payoff_months(balance, effective, debt.interest_rate)

    if balance <= 0:
        status = ProjectionStatus.SETTLED
    elif effective <= 0:
        status = ProjectionStatus.NO_PAYMENT
    elif months is None:
        status = ProjectionStatus.UNPAYABLE
    else:
        status = ProjectionStatus.PAYABLE

    if status == ProjectionStatus.SETTLED:
        interest_total: Decimal | Unbounded = cents(ZERO)
    else:
        interest_total = total_interest(balance, effective, months)
        if interest_total is not UNBOUNDED:
            interest_total = max(cents(ZERO), cents(interest_total))

    return DebtProjection(
        debt_id=debt.debt_id,
        status=status,
        progress=progress,
        monthly_interest=cents(interest),
        effective_monthly_payment=cents(effective),
        payoff_months=months,
        payoff_date=payoff_date(today, months) if months is not None else None,
        total_interest=interest_total,
    )
