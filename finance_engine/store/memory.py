"""In-memory repositories."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import fields, replace
from datetime import date
from decimal import Decimal
from typing import Any, Generic, TypeVar
from uuid import uuid4

from finance_engine.engine import ledger
from finance_engine.exceptions import EntityNotFoundError, InvalidEntityStateError
from finance_engine.models import Budget, Debt, Goal, Reminder, Transaction

logger = logging.getLogger(__name__)

T = TypeVar("T")


class InMemoryRepository(Generic[T]):
    """Dict-backed collection of immutable records keyed by their id field.

    Parameters
    ----------
    id_field : str
        Name of the record attribute holding its id.
    validate : Callable[[T], T] | None
        Called on every created or updated record; raises to reject it.
    """

    def __init__(
        self,
        id_field: str,
        validate: Callable[[T], T] | None = None,
    ) -> None:
        self.id_field = id_field
        self._validate = validate
        self._records: dict[str, T] = {}

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._records.values()))

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._records

    def list(self, filter: Callable[[T], bool] | None = None) -> list[T]:
        """Records in insertion order, optionally filtered."""
        records = list(self._records.values())
        if filter is None:
            return records
        return [r for r in records if filter(r)]

    def get(self, record_id: str) -> T:
        try:
            return self._records[record_id]
        except KeyError:
            raise EntityNotFoundError(f"{self._kind} {record_id} not found") from None

    def create(self, record: T) -> T:
        """Store a new record, assigning an id when it has none."""
        if not getattr(record, self.id_field):
            record = replace(record, **{self.id_field: str(uuid4())})
        record_id = getattr(record, self.id_field)
        if record_id in self._records:
            raise InvalidEntityStateError(f"{self._kind} {record_id} already exists")
        record = self._checked(record)
        self._records[record_id] = record
        return record

    def update(self, record_id: str, patch: dict[str, Any]) -> T:
        """Replace the named fields of a stored record."""
        current = self.get(record_id)
        known = {f.name for f in fields(current)}
        unknown = set(patch) - known
        if unknown:
            raise InvalidEntityStateError(f"Unknown {self._kind} fields: {sorted(unknown)}")
        if patch.get(self.id_field, record_id) != record_id:
            raise InvalidEntityStateError(f"Cannot change the id of {self._kind} {record_id}")
        return self._put(replace(current, **patch))

    def delete(self, record_id: str) -> None:
        self.get(record_id)
        del self._records[record_id]

    def _put(self, record: T) -> T:
        record = self._checked(record)
        self._records[getattr(record, self.id_field)] = record
        return record

    def _checked(self, record: T) -> T:
        if self._validate is not None:
            self._validate(record)
        return record

    @property
    def _kind(self) -> str:
        return self.id_field.removesuffix("_id").capitalize()


class DebtRepository(InMemoryRepository[Debt]):
    def __init__(self) -> None:
        super().__init__("debt_id", validate=ledger.validate_debt)

    def apply_payment(
        self,
        record_id: str,
        amount: Decimal,
        on: date,
        description: str | None = None,
    ) -> Debt:
        return self._put(ledger.register_payment(self.get(record_id), amount, on, description))

    def mark_as_paid(self, record_id: str, today: date) -> Debt:
        return self._put(ledger.mark_as_paid(self.get(record_id), today))


class GoalRepository(InMemoryRepository[Goal]):
    def __init__(self) -> None:
        super().__init__("goal_id", validate=ledger.validate_goal)

    def add_funds(self, record_id: str, amount: Decimal) -> Goal:
        return self._put(ledger.add_funds(self.get(record_id), amount))

    def withdraw_funds(self, record_id: str, amount: Decimal) -> Goal:
        return self._put(ledger.withdraw_funds(self.get(record_id), amount))

    def mark_completed(self, record_id: str, today: date) -> Goal:
        return self._put(ledger.mark_completed(self.get(record_id), today))


class BudgetRepository(InMemoryRepository[Budget]):
    """Budgets, unique per (category, month)."""

    def __init__(self) -> None:
        super().__init__("budget_id", validate=ledger.validate_budget)

    def _checked(self, record: Budget) -> Budget:
        record = super()._checked(record)
        ledger.ensure_unique_budget(self._records.values(), record)
        return record


class TransactionRepository(InMemoryRepository[Transaction]):
    def __init__(self) -> None:
        super().__init__("transaction_id")


class ReminderRepository(InMemoryRepository[Reminder]):
    def __init__(self) -> None:
        super().__init__("reminder_id")
