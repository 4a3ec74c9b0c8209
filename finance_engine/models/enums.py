"""Enumeration types for personal-finance records."""

from decimal import Decimal
from enum import Enum


class TransactionType(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


class PaymentFrequency(str, Enum):
    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    YEARLY = "yearly"

    @property
    def months(self) -> Decimal:
        """Fraction of a month covered by one payment period."""
        return PAYMENT_FREQUENCY_MONTHS[self]


# Weekly is 0.23 rather than 12/52; payoff projections depend on it.
PAYMENT_FREQUENCY_MONTHS = {
    PaymentFrequency.WEEKLY: Decimal("0.23"),
    PaymentFrequency.BIWEEKLY: Decimal("0.5"),
    PaymentFrequency.MONTHLY: Decimal("1"),
    PaymentFrequency.QUARTERLY: Decimal("3"),
    PaymentFrequency.YEARLY: Decimal("12"),
}


class SaveFrequency(str, Enum):
    NONE = "none"
    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"


class ReminderFrequency(str, Enum):
    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    YEARLY = "yearly"


class DebtType(str, Enum):
    CREDIT_CARD = "credit_card"
    PERSONAL_LOAN = "personal_loan"
    MORTGAGE = "mortgage"
    AUTO_LOAN = "auto_loan"
    STUDENT_LOAN = "student_loan"
    BUSINESS_LOAN = "business_loan"
    OTHER = "other"


class GoalCategory(str, Enum):
    EMERGENCY = "emergency"
    VACATION = "vacation"
    PURCHASE = "purchase"
    HOME = "home"
    EDUCATION = "education"
    HEALTH = "health"
    OTHER = "other"


class Severity(str, Enum):
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
    URGENT = "urgent"


class NotificationKind(str, Enum):
    # Debts
    PAYMENT_UPCOMING = "payment-upcoming"
    PAYMENT_OVERDUE = "payment-overdue"
    HIGH_INTEREST = "high-interest"
    SLOW_PROGRESS = "slow-progress"
    DEBT_NEAR_COMPLETION = "debt-near-completion"
    PAYOFF_READY = "payoff-ready"
    # Goals
    GOAL_COMPLETED = "goal-completed"
    GOAL_NEAR_COMPLETION = "goal-near-completion"
    GOAL_GOOD_PROGRESS = "goal-good-progress"
    DEADLINE_MISSED = "deadline-missed"
    DEADLINE_APPROACHING = "deadline-approaching"
    AUTO_SAVE_ACTIVE = "auto-save-active"
    # Budgets
    BUDGET_EXCEEDED = "budget-exceeded"
    BUDGET_ALERT = "budget-alert"
    BUDGET_CAUTION = "budget-caution"
    # Reminders
    REMINDER_DUE = "reminder-due"
    REMINDER_OVERDUE = "reminder-overdue"
    # Spending trend
    SPENDING_REDUCED = "spending-reduced"
    OVERSPENDING = "overspending"


class BudgetStatus(str, Enum):
    OK = "ok"
    CAUTION = "caution"
    ALERT = "alert"
    EXCEEDED = "exceeded"


class ProjectionStatus(str, Enum):
    SETTLED = "settled"
    PAYABLE = "payable"
    UNPAYABLE = "unpayable"
    NO_PAYMENT = "no_payment"


class AutoSaveState(str, Enum):
    DISABLED = "disabled"
    PENDING = "pending"
    DUE = "due"
