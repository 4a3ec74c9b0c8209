"""Advisory notification produced by the rule evaluator."""

from dataclasses import dataclass
from decimal import Decimal

from finance_engine.models.enums import NotificationKind, Severity


@dataclass(frozen=True)
class Notification:
    """Alert shown to the user; never persisted by the engine."""

    notification_id: str  # <kind>-<entity id>
    kind: NotificationKind
    severity: Severity
    entity_type: str  # debt, goal, budget, reminder, spending
    entity_id: str
    title: str
    message: str
    amount: Decimal | None = None
    progress: Decimal | None = None
    days: int | None = None
