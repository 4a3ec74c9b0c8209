"""Conversion of records and reports to JSON-ready structures."""

from collections.abc import Mapping
from dataclasses import fields, is_dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any


def to_dict(obj: Any) -> dict:
    """Top-level conversion used by sinks: one JSON object per record."""
    if is_dataclass(obj) and not isinstance(obj, type):
        return dataclass_to_dict(obj)
    if isinstance(obj, Mapping):
        return serialize_value(obj)
    return {"value": serialize_value(obj)}


def dataclass_to_dict(obj: Any) -> dict:
    """Declared fields of a dataclass, serialized recursively.

    Properties are left out. Nested records (a debt's payment history, the
    usages of a budget overview) become nested objects.
    """
    return {f.name: serialize_value(getattr(obj, f.name)) for f in fields(obj)}


def serialize_value(value: Any) -> Any:
    """Render ``value`` with JSON-native types only.

    Decimals become plain-notation strings so no precision is lost, enums
    (including the ``UNBOUNDED`` sentinel) their value, dates ISO strings.
    """
    if isinstance(value, Decimal):
        return format(value, "f") if value.is_finite() else str(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, date):
        return value.isoformat()
    if is_dataclass(value) and not isinstance(value, type):
        return dataclass_to_dict(value)
    if isinstance(value, Mapping):
        return {k: serialize_value(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [serialize_value(v) for v in value]
    return value
