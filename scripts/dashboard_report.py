#!/usr/bin/env python3
"""Refresh the dashboard over a sample household and print the report.

Loads the JSON files written by ``generate_sample_data.py`` when
``--input-dir`` is given, otherwise generates a fresh household.
"""

import argparse
import json
import logging
from datetime import date
from pathlib import Path

from finance_engine.config import EngineConfig
from finance_engine.dashboard import Dashboard, render_report
from finance_engine.exceptions import FinanceEngineError
from finance_engine.logging import configure_logging
from finance_engine.mapping import (
    budget_from_payload,
    debt_from_payload,
    goal_from_payload,
    transaction_from_payload,
)
from finance_engine.scenarios import HouseholdScenario
from finance_engine.sinks import ConsoleSink, JsonFileSink
from finance_engine.store import FinanceDataStore

logger = logging.getLogger(__name__)


def load_store(input_dir: Path) -> FinanceDataStore:
    """Build a store from backend-shaped JSON files in ``input_dir``.

    Each of ``debts.json``, ``goals.json``, ``budgets.json`` and
    ``transactions.json`` is optional and holds a list of payloads.
    """
    store = FinanceDataStore()
    loaders = [
        ("debts.json", debt_from_payload, store.debts),
        ("goals.json", goal_from_payload, store.goals),
        ("budgets.json", budget_from_payload, store.budgets),
        ("transactions.json", transaction_from_payload, store.transactions),
    ]
    for filename, from_payload, repository in loaders:
        path = input_dir / filename
        if not path.exists():
            logger.warning("No %s in %s", filename, input_dir)
            continue
        with open(path, encoding="utf-8") as f:
            payloads = json.load(f)
        for payload in payloads:
            repository.create(from_payload(payload))
        logger.info("Loaded %d records from %s", len(payloads), path)
    return store


def main() -> None:
    """Main entry point."""
    config = EngineConfig.from_env()

    parser = argparse.ArgumentParser(description="Print the finance dashboard")
    parser.add_argument(
        "--today",
        type=date.fromisoformat,
        default=date.today(),
        help="Evaluation date (YYYY-MM-DD, default: today)",
    )
    parser.add_argument(
        "--input-dir",
        type=Path,
        default=None,
        help="Directory with backend JSON payloads (default: generate a household)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=config.seed,
        help="Random seed when generating (default: SEED env var)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Write the full snapshot to OUTPUT_DIR/dashboard.json",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Dump notifications and projections as JSON",
    )
    args = parser.parse_args()

    configure_logging(config)

    try:
        if args.input_dir:
            store = load_store(args.input_dir)
        else:
            store = HouseholdScenario(
                today=args.today, seed=args.seed, locale=config.faker_locale
            ).generate()

        snapshot = Dashboard(store, config).refresh(args.today)
    except FinanceEngineError as exc:
        logger.error("Dashboard refresh failed: %s", exc)
        raise SystemExit(1) from exc

    print()
    print(render_report(snapshot, config.currency))

    if args.verbose:
        console = ConsoleSink(pretty=True)
        console.write_batch("notifications", snapshot.notifications)
        console.write_batch("projections", snapshot.projections)
        console.close()

    if args.json:
        sink = JsonFileSink(config.output.json_output_dir, pretty=config.output.pretty_json)
        sink.write_batch("dashboard", [snapshot])
        sink.close()


if __name__ == "__main__":
    main()
