"""Transaction model."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from finance_engine.models.enums import TransactionType


@dataclass(frozen=True)
class Transaction:
    """Income or expense movement owned by the backend."""

    transaction_id: str
    type: TransactionType
    amount: Decimal
    category: str
    date: date | None  # None when the backend sent an unusable date
    description: str = ""

    @property
    def month(self) -> str | None:
        """Calendar month as YYYY-MM."""
        return self.date.strftime("%Y-%m") if self.date else None
