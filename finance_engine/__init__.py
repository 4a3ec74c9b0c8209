"""Personal-finance engine: debt amortization, notifications, auto-save and statistics."""

from finance_engine.config import EngineConfig
from finance_engine.dashboard import Dashboard, DashboardSnapshot
from finance_engine.store import FinanceDataStore

__version__ = "0.1.0"

__all__ = [
    "Dashboard",
    "DashboardSnapshot",
    "EngineConfig",
    "FinanceDataStore",
    "__version__",
]
