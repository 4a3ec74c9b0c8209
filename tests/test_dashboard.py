"""Tests for the dashboard refresh."""

from collections.abc import Callable
from dataclasses import replace
from datetime import date
from decimal import Decimal

import pytest

from finance_engine.config import EngineConfig, WindowConfig
from finance_engine.dashboard import Dashboard, render_report
from finance_engine.models import (
    Budget,
    Debt,
    Goal,
    NotificationKind,
    ProjectionStatus,
    Transaction,
)
from finance_engine.scenarios import HouseholdScenario
from finance_engine.store import FinanceDataStore


@pytest.fixture
def household(
    store: FinanceDataStore,
    sample_debt: Debt,
    sample_goal: Goal,
    sample_budget: Budget,
    make_transaction: Callable[..., Transaction],
) -> FinanceDataStore:
    store.debts.create(sample_debt)
    store.debts.create(
        replace(sample_debt, debt_id="debt-002", name="Préstamo", payment_amount=Decimal("10"))
    )
    store.goals.create(sample_goal)
    store.budgets.create(sample_budget)
    store.transactions.create(make_transaction("70", on=date(2024, 3, 2)))
    store.transactions.create(make_transaction("NaN", on=date(2024, 3, 3)))
    return store


class TestDashboard:
    """Tests for Dashboard.refresh."""

    def test_refresh(self, household: FinanceDataStore, today: date) -> None:
        snapshot = Dashboard(household).refresh(today)

        assert snapshot.today == today
        assert len(snapshot.auto_saves.goals) == 1
        assert household.goals.get("goal-001").current_amount == Decimal("450")
        assert snapshot.synced_reminders == 2
        assert [p.status for p in snapshot.projections] == [
            ProjectionStatus.PAYABLE,
            ProjectionStatus.UNPAYABLE,
        ]
        assert [p.debt_id for p in snapshot.unpayable_debts] == ["debt-002"]
        assert snapshot.debts.total_balance == Decimal("2000")
        assert snapshot.goals.total_saved == Decimal("450")
        assert snapshot.budgets.usages[0].spent == Decimal("70")
        assert snapshot.expenses_by_category.totals == {
            "Alimentación": Decimal("70"),
            "Ahorro": Decimal("50"),
        }
        assert snapshot.balance.flows[0].expense == Decimal("120")
        assert [i.field for i in snapshot.issues] == ["amount"]

    def test_notifications(self, household: FinanceDataStore, today: date) -> None:
        snapshot = Dashboard(household).refresh(today)

        kinds = {n.kind for n in snapshot.notifications}
        assert NotificationKind.HIGH_INTEREST in kinds
        assert NotificationKind.AUTO_SAVE_ACTIVE in kinds
        assert NotificationKind.BUDGET_CAUTION in kinds

    def test_auto_save_applied_once(self, household: FinanceDataStore, today: date) -> None:
        dashboard = Dashboard(household)

        dashboard.refresh(today)
        second = dashboard.refresh(today)

        assert second.auto_saves.goals == []
        assert second.synced_reminders == 0
        assert household.goals.get("goal-001").current_amount == Decimal("450")
        assert len(household.transactions) == 3

    def test_windows_from_config(self, household: FinanceDataStore, today: date) -> None:
        config = EngineConfig(windows=WindowConfig(trend_days=7, weekly_buckets=4))

        snapshot = Dashboard(household, config).refresh(today)

        assert len(snapshot.daily.points) == 7
        assert [b.label for b in snapshot.weekly.buckets] == ["S1", "S2", "S3", "S4"]

    def test_generated_household(self, seed: int, today: date) -> None:
        store = HouseholdScenario(today=today, seed=seed).generate()

        snapshot = Dashboard(store).refresh(today)

        assert len(snapshot.projections) == 4
        assert snapshot.issues == []
        assert len(snapshot.daily.points) == 30

    def test_refresh_over_other_backend(
        self, list_store, sample_debt: Debt, sample_goal: Goal, today: date
    ) -> None:
        list_store.debts.records.append(sample_debt)
        list_store.goals.records.append(sample_goal)

        snapshot = Dashboard(list_store).refresh(today)

        assert snapshot.synced_reminders == 1
        assert list_store.reminders.records[0].debt_id == "debt-001"
        assert list_store.goals.records[0].current_amount == Decimal("450")
        assert len(list_store.transactions.records) == 1
        assert [p.debt_id for p in snapshot.projections] == ["debt-001"]

    def test_render_report_uses_currency(self, household: FinanceDataStore, today: date) -> None:
        snapshot = Dashboard(household).refresh(today)

        report = render_report(snapshot, currency="EUR")

        assert "Dashboard for 2024-03-15" in report
        assert "Debt balance:     2,000.00 EUR" in report
        assert "Unpayable debts:  1" in report
        assert "Skipped records:  1" in report
        assert f"Notifications ({len(snapshot.notifications)})" in report
