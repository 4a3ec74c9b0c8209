"""Repository interfaces the engine persists through.

The engine never talks to a transport directly; any backend (the REST API,
a database, the in-memory store used in tests) only has to provide these
operations, succeeding with the updated record or raising.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date
from decimal import Decimal
from typing import Any, Protocol, TypeVar

from finance_engine.models import Budget, Debt, Goal, Reminder, Transaction

T = TypeVar("T")


class Repository(Protocol[T]):
    """CRUD over one record collection."""

    def list(self, filter: Callable[[T], bool] | None = None) -> list[T]: ...

    def get(self, record_id: str) -> T: ...

    def create(self, record: T) -> T: ...

    def update(self, record_id: str, patch: dict[str, Any]) -> T: ...

    def delete(self, record_id: str) -> None: ...


class DebtRepositoryProtocol(Repository[Debt], Protocol):
    def apply_payment(
        self,
        record_id: str,
        amount: Decimal,
        on: date,
        description: str | None = None,
    ) -> Debt: ...


class GoalRepositoryProtocol(Repository[Goal], Protocol):
    def add_funds(self, record_id: str, amount: Decimal) -> Goal: ...

    def withdraw_funds(self, record_id: str, amount: Decimal) -> Goal: ...


class FinanceRepositories(Protocol):
    """The collections the dashboard reads and the auto-save pass writes.

    :class:`~finance_engine.store.FinanceDataStore` satisfies it; so does
    any object exposing the same five repositories.
    """

    @property
    def debts(self) -> DebtRepositoryProtocol: ...

    @property
    def goals(self) -> GoalRepositoryProtocol: ...

    @property
    def budgets(self) -> Repository[Budget]: ...

    @property
    def transactions(self) -> Repository[Transaction]: ...

    @property
    def reminders(self) -> Repository[Reminder]: ...
