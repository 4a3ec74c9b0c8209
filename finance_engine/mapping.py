"""Mapping between backend JSON payloads and engine records.

The backend speaks snake_case with amounts as strings or numbers and
dates as ISO strings. Required fields that cannot be parsed raise
:class:`InvalidRecordError`, except transaction amounts and dates: those
are kept as ``NaN`` / ``None`` (unless ``strict``) so that the statistics
aggregator can exclude and report them.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any

from finance_engine.exceptions import InvalidAmountError, InvalidRecordError
from finance_engine.engine.money import to_decimal
from finance_engine.models import (
    Budget,
    Debt,
    DebtType,
    Goal,
    GoalCategory,
    PaymentFrequency,
    SaveFrequency,
    Transaction,
    TransactionType,
)
from finance_engine.sinks.serialization import serialize_value

_NAN = Decimal("NaN")


def parse_date(value: Any) -> date | None:
    """ISO date or datetime string to a date; None for empty values."""
    if value in (None, ""):
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value)[:10])
    except ValueError as exc:
        raise InvalidRecordError(f"Invalid date: {value!r}") from exc


def _amount(payload: dict[str, Any], key: str, default: Any = None) -> Decimal:
    value = payload.get(key, default)
    if value in (None, "") and default is not None:
        value = default
    try:
        return to_decimal(value, key)
    except InvalidAmountError as exc:
        raise InvalidRecordError(str(exc)) from exc


def _optional_amount(payload: dict[str, Any], key: str) -> Decimal | None:
    if payload.get(key) in (None, ""):
        return None
    return _amount(payload, key)


def _int(payload: dict[str, Any], key: str, default: int) -> int:
    value = payload.get(key)
    if value in (None, ""):
        return default
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise InvalidRecordError(f"Invalid {key}: {value!r}") from exc


def _required(payload: dict[str, Any], key: str) -> Any:
    if payload.get(key) in (None, ""):
        raise InvalidRecordError(f"Missing required field: {key}")
    return payload[key]


def _category_name(payload: dict[str, Any]) -> str:
    category = payload.get("category")
    if isinstance(category, dict):
        return category.get("name") or "Unknown"
    return category or "Unknown"


# Transactions


def transaction_from_payload(payload: dict[str, Any], strict: bool = False) -> Transaction:
    """Build a transaction from the backend representation."""
    try:
        tx_type = TransactionType(_required(payload, "type"))
    except ValueError as exc:
        raise InvalidRecordError(f"Invalid transaction type: {payload.get('type')!r}") from exc

    try:
        amount = Decimal(str(payload.get("amount")).strip())
    except InvalidOperation:
        if strict:
            raise InvalidRecordError(f"Invalid amount: {payload.get('amount')!r}") from None
        amount = _NAN
    if strict and not amount.is_finite():
        raise InvalidRecordError(f"Invalid amount: {payload.get('amount')!r}")

    try:
        day = parse_date(payload.get("date"))
    except InvalidRecordError:
        if strict:
            raise
        day = None
    if strict and day is None:
        raise InvalidRecordError("Missing required field: date")

    return Transaction(
        transaction_id=str(_required(payload, "id")),
        type=tx_type,
        amount=amount,
        category=_category_name(payload),
        date=day,
        description=payload.get("description") or "",
    )


def transaction_to_payload(transaction: Transaction) -> dict[str, Any]:
    return {
        "id": transaction.transaction_id,
        "type": transaction.type.value,
        "amount": serialize_value(transaction.amount),
        "category": transaction.category,
        "date": serialize_value(transaction.date),
        "description": transaction.description or None,
    }


# Debts


def debt_from_payload(payload: dict[str, Any]) -> Debt:
    """Build a debt; ``total_amount`` is the backend name for the principal."""
    current_balance = _amount(payload, "current_balance")
    minimum = _optional_amount(payload, "minimum_payment")
    try:
        frequency = PaymentFrequency(payload.get("payment_frequency") or "monthly")
        debt_type = DebtType(payload.get("type") or "other")
    except ValueError as exc:
        raise InvalidRecordError(str(exc)) from exc

    status = payload.get("status")
    active = status == "active" if status else current_balance > 0
    return Debt(
        debt_id=str(_required(payload, "id")),
        name=_required(payload, "name"),
        principal=_amount(payload, "total_amount"),
        current_balance=current_balance,
        interest_rate=_amount(payload, "interest_rate", 0),
        payment_amount=_amount(payload, "payment_amount", 0),
        payment_frequency=frequency,
        minimum_payment=minimum or None,
        next_payment_date=parse_date(payload.get("next_payment_date")),
        reminder_days=_int(payload, "reminder_days", 3),
        auto_reminder=bool(payload.get("auto_reminder", True)),
        active=active,
        start_date=parse_date(payload.get("start_date")),
        debt_type=debt_type,
        creditor=payload.get("creditor") or None,
        description=payload.get("description") or None,
    )


def debt_to_payload(debt: Debt) -> dict[str, Any]:
    return {
        "id": debt.debt_id,
        "name": debt.name,
        "description": debt.description,
        "type": debt.debt_type.value,
        "total_amount": serialize_value(debt.principal),
        "current_balance": serialize_value(debt.current_balance),
        "interest_rate": serialize_value(debt.interest_rate),
        "minimum_payment": serialize_value(debt.minimum_payment),
        "payment_amount": serialize_value(debt.payment_amount),
        "payment_frequency": debt.payment_frequency.value,
        "next_payment_date": serialize_value(debt.next_payment_date),
        "start_date": serialize_value(debt.start_date),
        "creditor": debt.creditor,
        "reminder_days": debt.reminder_days,
        "auto_reminder": debt.auto_reminder,
        "status": "active" if debt.active else "paid",
    }


# Goals


def goal_from_payload(payload: dict[str, Any]) -> Goal:
    """Build a goal.

    The backend does not store auto-save settings; they travel in an
    optional ``auto_save`` object kept next to the goal by the client.
    """
    auto_save = payload.get("auto_save") or {}
    try:
        frequency = SaveFrequency(auto_save.get("frequency") or "monthly")
        category = GoalCategory(payload.get("category") or "other")
    except ValueError as exc:
        raise InvalidRecordError(str(exc)) from exc
    enabled = bool(auto_save.get("enabled", False))

    return Goal(
        goal_id=str(_required(payload, "id")),
        name=_required(payload, "name"),
        target_amount=_amount(payload, "target_amount"),
        current_amount=_amount(payload, "current_amount", 0),
        deadline=parse_date(payload.get("deadline")),
        category=category,
        description=payload.get("description") or None,
        auto_save_enabled=enabled,
        auto_save_amount=_optional_amount(auto_save, "amount"),
        auto_save_frequency=frequency,
        auto_save_day=_int(auto_save, "day", 1),
        last_auto_save=parse_date(auto_save.get("last_run")),
        active=payload.get("status", "active") == "active",
    )


def goal_to_payload(goal: Goal) -> dict[str, Any]:
    return {
        "id": goal.goal_id,
        "name": goal.name,
        "description": goal.description,
        "category": goal.category.value,
        "target_amount": serialize_value(goal.target_amount),
        "current_amount": serialize_value(goal.current_amount),
        "deadline": serialize_value(goal.deadline),
        "status": "active" if goal.active else "completed",
        "auto_save": {
            "enabled": goal.auto_save_enabled,
            "amount": serialize_value(goal.auto_save_amount),
            "frequency": goal.auto_save_frequency.value,
            "day": goal.auto_save_day,
            "last_run": serialize_value(goal.last_auto_save),
        },
    }


# Budgets


def budget_from_payload(payload: dict[str, Any]) -> Budget:
    """Build a budget; the month comes from ``start_date``."""
    start = parse_date(_required(payload, "start_date"))
    return Budget(
        budget_id=str(_required(payload, "id")),
        category=_category_name(payload),
        limit=_amount(payload, "amount_limit"),
        month=start.strftime("%Y-%m"),
    )


def budget_to_payload(budget: Budget) -> dict[str, Any]:
    return {
        "id": budget.budget_id,
        "category": budget.category,
        "amount_limit": serialize_value(budget.limit),
        "period": "monthly",
        "start_date": f"{budget.month}-01",
    }
