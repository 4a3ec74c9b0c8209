"""Sample data scenarios."""

from finance_engine.scenarios.household import HouseholdScenario

__all__ = ["HouseholdScenario"]
