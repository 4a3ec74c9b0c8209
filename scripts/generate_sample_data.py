#!/usr/bin/env python3
"""Generate a sample household and write it to JSON files.

One file per entity type (debts, goals, budgets, transactions, reminders)
is written to the output directory in the backend payload shape, plus
``summary.json``. ``dashboard_report.py --input-dir`` reads them back.
"""

import argparse
import json
import logging
from datetime import date

from finance_engine.config import EngineConfig
from finance_engine.exceptions import FinanceEngineError
from finance_engine.logging import configure_logging
from finance_engine.scenarios import HouseholdScenario
from finance_engine.sinks import ConsoleSink, JsonFileSink

logger = logging.getLogger(__name__)


def main() -> None:
    """Main entry point."""
    config = EngineConfig.from_env()

    parser = argparse.ArgumentParser(description="Generate a sample household")
    parser.add_argument(
        "--today",
        type=date.fromisoformat,
        default=date.today(),
        help="Reference date (YYYY-MM-DD, default: today)",
    )
    parser.add_argument(
        "--debts",
        type=int,
        default=4,
        help="Number of debts (default: 4)",
    )
    parser.add_argument(
        "--goals",
        type=int,
        default=3,
        help="Number of savings goals (default: 3)",
    )
    parser.add_argument(
        "--transactions",
        type=int,
        default=150,
        help="Number of expenses (default: 150)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=config.seed,
        help="Random seed for reproducibility (default: SEED env var)",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default=str(config.output.json_output_dir),
        help="Output directory (default: OUTPUT_DIR env var or ./output)",
    )
    parser.add_argument(
        "--console",
        action="store_true",
        help="Also print the first records of each type",
    )
    args = parser.parse_args()

    configure_logging(config)
    logger.info("Effective config: %s", config.to_dict())

    scenario = HouseholdScenario(
        today=args.today,
        num_debts=args.debts,
        num_goals=args.goals,
        num_transactions=args.transactions,
        seed=args.seed,
        locale=config.faker_locale,
    )
    scenario.generate()

    sinks = [JsonFileSink(args.output_dir, pretty=config.output.pretty_json)]
    if args.console:
        sinks.append(ConsoleSink(max_records=3))

    try:
        scenario.export(sinks, as_payloads=True)
        summary = scenario.get_summary()
        sinks[0].write_batch("summary", [summary])
    except FinanceEngineError as exc:
        logger.error("Export failed: %s", exc)
        raise SystemExit(1) from exc
    finally:
        for sink in sinks:
            sink.close()

    print(json.dumps(summary, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
