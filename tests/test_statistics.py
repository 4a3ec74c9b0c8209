"""Tests for the budget and statistics aggregator."""

from collections.abc import Callable
from dataclasses import replace
from datetime import date
from decimal import Decimal

import pytest

from finance_engine.engine.statistics import (
    budget_overview,
    budget_spent,
    budget_status,
    category_totals,
    daily_trend,
    debt_summary,
    goal_summary,
    month_balance,
    monthly_flows,
    spending_trend,
    weekly_totals,
)
from finance_engine.models import (
    Budget,
    BudgetStatus,
    Debt,
    Goal,
    PaymentFrequency,
    Transaction,
    TransactionType,
)

INCOME = TransactionType.INCOME


class TestDataIssues:
    """Unusable transactions are excluded and reported."""

    def test_nan_amount_and_missing_date(self, make_transaction: Callable[..., Transaction]) -> None:
        transactions = [
            make_transaction("40"),
            make_transaction("NaN"),
            make_transaction("25", on=None),
        ]

        result = category_totals(transactions, "2024-03")

        assert result.totals == {"Alimentación": Decimal("40")}
        assert [(i.transaction_id, i.field) for i in result.issues] == [
            ("tx-002", "amount"),
            ("tx-003", "date"),
        ]

    def test_infinite_amount(self, make_transaction: Callable[..., Transaction]) -> None:
        result = monthly_flows([make_transaction("Infinity")])

        assert result.flows == []
        assert len(result.issues) == 1


class TestCategoryTotals:
    """Tests for category_totals."""

    def test_groups_by_category(self, make_transaction: Callable[..., Transaction]) -> None:
        transactions = [
            make_transaction("10", category="Ocio"),
            make_transaction("15"),
            make_transaction("5", category="Ocio"),
            make_transaction("99", on=date(2024, 2, 28)),
            make_transaction("2000", type=INCOME, category="Salario"),
        ]

        result = category_totals(transactions, "2024-03")

        assert result.totals == {"Ocio": Decimal("15"), "Alimentación": Decimal("15")}
        assert result.categories == ["Ocio", "Alimentación"]
        assert result.total == Decimal("30")

    def test_income(self, make_transaction: Callable[..., Transaction]) -> None:
        transactions = [make_transaction("2000", type=INCOME, category="Salario")]

        result = category_totals(transactions, "2024-03", type=INCOME)

        assert result.totals == {"Salario": Decimal("2000")}


class TestMonthlyFlows:
    """Tests for monthly_flows and month_balance."""

    def test_sorted_by_month(self, make_transaction: Callable[..., Transaction]) -> None:
        transactions = [
            make_transaction("100", on=date(2024, 3, 1)),
            make_transaction("2000", on=date(2024, 1, 1), type=INCOME),
            make_transaction("300", on=date(2024, 1, 9)),
        ]

        result = monthly_flows(transactions)

        assert result.months == ["2024-01", "2024-03"]
        assert result.flows[0].income == Decimal("2000")
        assert result.flows[0].expense == Decimal("300")
        assert result.flows[0].net == Decimal("1700")

    def test_month_balance(self, make_transaction: Callable[..., Transaction]) -> None:
        transactions = [
            make_transaction("2000", type=INCOME),
            make_transaction("300"),
            make_transaction("500", on=date(2024, 2, 1)),
        ]

        flow = month_balance(transactions, "2024-03").flows[0]

        assert (flow.income, flow.expense, flow.net) == (Decimal("2000"), Decimal("300"), Decimal("1700"))

    def test_month_balance_empty_month(self) -> None:
        flow = month_balance([], "2024-03").flows[0]

        assert flow.month == "2024-03"
        assert flow.net == 0


class TestRollingWindows:
    """Tests for daily_trend and weekly_totals."""

    def test_daily_trend(self, make_transaction: Callable[..., Transaction], today: date) -> None:
        transactions = [
            make_transaction("1000", on=date(2024, 2, 20), type=INCOME),
            make_transaction("200", on=date(2024, 3, 1)),
            make_transaction("50", on=today),
            make_transaction("999", on=date(2024, 2, 1)),
        ]

        trend = daily_trend(transactions, today)

        assert len(trend.points) == 30
        assert trend.points[0].day == date(2024, 2, 15)
        assert trend.points[-1].day == today
        assert trend.points[-1].expense == Decimal("50")
        assert trend.points[-1].balance == Decimal("750")

    def test_weekly_buckets_start_on_sunday(
        self, make_transaction: Callable[..., Transaction]
    ) -> None:
        wednesday = date(2024, 3, 13)
        transactions = [
            make_transaction("30", on=date(2024, 3, 10)),
            make_transaction("20", on=date(2024, 3, 9)),
            make_transaction("500", on=date(2023, 12, 23)),
        ]

        result = weekly_totals(transactions, wednesday)

        assert len(result.buckets) == 12
        assert result.buckets[-1].label == "S12"
        assert result.buckets[-1].start == date(2024, 3, 10)
        assert result.buckets[-1].end == date(2024, 3, 16)
        assert result.buckets[-1].expense == Decimal("30")
        assert result.buckets[-2].expense == Decimal("20")
        assert result.buckets[0].label == "S1"
        assert result.buckets[0].start == date(2023, 12, 24)
        assert sum(b.expense for b in result.buckets) == Decimal("50")


class TestBudgets:
    """Tests for budget status and overview."""

    @pytest.mark.parametrize(
        "spent,expected",
        [
            ("0", BudgetStatus.OK),
            ("59.99", BudgetStatus.OK),
            ("60", BudgetStatus.CAUTION),
            ("79.99", BudgetStatus.CAUTION),
            ("80", BudgetStatus.ALERT),
            ("100", BudgetStatus.EXCEEDED),
        ],
    )
    def test_status_bands(self, spent: str, expected: BudgetStatus) -> None:
        assert budget_status(Decimal(spent), Decimal("100")) == expected

    def test_zero_limit(self) -> None:
        assert budget_status(Decimal("1"), Decimal("0")) == BudgetStatus.EXCEEDED
        assert budget_status(Decimal("0"), Decimal("0")) == BudgetStatus.OK

    def test_budget_spent(
        self, sample_budget: Budget, make_transaction: Callable[..., Transaction]
    ) -> None:
        transactions = [
            make_transaction("30"),
            make_transaction("20", category="Ocio"),
            make_transaction("40", on=date(2024, 2, 10)),
            make_transaction("500", type=INCOME),
        ]

        assert budget_spent(sample_budget, transactions) == Decimal("30")

    def test_overview(
        self, sample_budget: Budget, make_transaction: Callable[..., Transaction]
    ) -> None:
        leisure = Budget("budget-002", "Ocio", Decimal("50"), "2024-03")
        other_month = replace(sample_budget, budget_id="budget-003", month="2024-02")
        transactions = [
            make_transaction("30"),
            make_transaction("75", category="Ocio"),
        ]

        overview = budget_overview([sample_budget, leisure, other_month], transactions, "2024-03")

        assert [u.budget.budget_id for u in overview.usages] == ["budget-002", "budget-001"]
        assert overview.usages[0].percentage == 100
        assert overview.usages[0].status == BudgetStatus.EXCEEDED
        assert overview.usages[0].remaining == Decimal("-25")
        assert overview.total_limit == Decimal("150")
        assert overview.total_spent == Decimal("105")
        assert overview.remaining == Decimal("45")
        assert overview.with_status(BudgetStatus.EXCEEDED) == [overview.usages[0]]


class TestSummaries:
    """Tests for debt and goal summaries."""

    def test_debt_summary(self, sample_debt: Debt) -> None:
        weekly = replace(
            sample_debt,
            debt_id="debt-002",
            principal=Decimal("500"),
            current_balance=Decimal("250"),
            interest_rate=Decimal("10"),
            payment_amount=Decimal("23"),
            payment_frequency=PaymentFrequency.WEEKLY,
        )
        closed = replace(sample_debt, debt_id="debt-003", active=False)
        settled = replace(sample_debt, debt_id="debt-004", current_balance=Decimal("0"))

        summary = debt_summary([sample_debt, weekly, closed, settled])

        assert summary.active_count == 2
        assert summary.settled_count == 2
        assert summary.total_balance == Decimal("1250")
        assert summary.total_principal == Decimal("1500")
        assert summary.total_paid == Decimal("250")
        assert summary.average_interest_rate == Decimal("17")
        assert summary.monthly_payments.quantize(Decimal("0.01")) == Decimal("200.00")

    def test_debt_summary_empty(self) -> None:
        summary = debt_summary([])

        assert summary.active_count == 0
        assert summary.overall_progress == 0

    def test_goal_summary(self, sample_goal: Goal) -> None:
        done = replace(sample_goal, goal_id="goal-002", current_amount=Decimal("1000"), active=False)

        summary = goal_summary([sample_goal, done])

        assert summary.active_count == 1
        assert summary.completed_count == 1
        assert summary.total_saved == Decimal("1400")
        assert summary.total_target == Decimal("2000")
        assert summary.overall_progress == Decimal("70")


class TestSpendingTrend:
    """Tests for spending_trend."""

    def test_uses_last_months_with_data(
        self, make_transaction: Callable[..., Transaction], today: date
    ) -> None:
        transactions = [
            make_transaction("1000", on=date(2023, 10, 5)),
            make_transaction("100", on=date(2023, 11, 5)),
            make_transaction("200", on=date(2024, 1, 5)),
            make_transaction("2000", on=date(2024, 2, 1), type=INCOME),
            make_transaction("90", on=date(2024, 3, 2)),
        ]

        trend = spending_trend(transactions, today)

        assert trend.month == "2024-03"
        assert trend.previous_months == ["2023-11", "2024-01", "2024-02"]
        assert trend.average_expense == Decimal("100")
        assert trend.current_expense == Decimal("90")
        assert trend.ratio == Decimal("0.9")

    def test_without_history(self, make_transaction: Callable[..., Transaction], today: date) -> None:
        trend = spending_trend([make_transaction("90")], today)

        assert trend.average_expense is None
        assert trend.ratio is None

    def test_zero_history_ignores_past_months(
        self, make_transaction: Callable[..., Transaction], today: date
    ) -> None:
        transactions = [
            make_transaction("100", on=date(2024, 1, 5)),
            make_transaction("200", on=date(2024, 2, 5)),
            make_transaction("90", on=date(2024, 3, 2)),
        ]

        trend = spending_trend(transactions, today, history=0)

        assert trend.previous_months == []
        assert trend.average_expense is None
