"""Pure computation over personal-finance records."""

from finance_engine.engine.amortization import (
    UNBOUNDED,
    DebtProjection,
    effective_monthly_payment,
    monthly_interest,
    next_payment_date,
    payment_progress_pct,
    payoff_date,
    payoff_months,
    project_debt,
    require_payoff_months,
    total_interest,
)
from finance_engine.engine.autosave import auto_save_state, plan_auto_saves
from finance_engine.engine.notifications import evaluate

__all__ = [
    "UNBOUNDED",
    "DebtProjection",
    "auto_save_state",
    "effective_monthly_payment",
    "evaluate",
    "monthly_interest",
    "next_payment_date",
    "payment_progress_pct",
    "payoff_date",
    "payoff_months",
    "plan_auto_saves",
    "project_debt",
    "require_payoff_months",
    "total_interest",
]
