"""JSON file sink for exporting records and reports."""

import json
import logging
from pathlib import Path
from typing import Any

from finance_engine.exceptions import SinkError
from finance_engine.sinks.serialization import to_dict

logger = logging.getLogger(__name__)


class JsonFileSink:
    """Write each entity type to ``<output_dir>/<entity_type>.json``.

    A file holds one JSON array; writing the same entity type again
    replaces it. The files are what ``scripts/dashboard_report.py`` loads.

    Parameters
    ----------
    output_dir : str | Path
        Created if missing.
    pretty : bool
        Indent the output.
    """

    def __init__(self, output_dir: str | Path, pretty: bool = False) -> None:
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.pretty = pretty
        self._counts: dict[str, int] = {}

    def write_batch(self, entity_type: str, records: list[Any]) -> Path:
        """Write ``records`` and return the file path.

        Raises
        ------
        SinkError
            If the file cannot be written.
        """
        path = self.output_dir / f"{entity_type}.json"
        payload = [to_dict(record) for record in records]
        try:
            path.write_text(
                json.dumps(payload, indent=2 if self.pretty else None, ensure_ascii=False),
                encoding="utf-8",
            )
        except OSError as exc:
            raise SinkError(f"Cannot write {path}: {exc}") from exc

        self._counts[entity_type] = len(records)
        logger.debug("Wrote %d %s to %s", len(records), entity_type, path)
        return path

    @property
    def counts(self) -> dict[str, int]:
        return dict(self._counts)

    def close(self) -> None:
        logger.info("JSON files written to: %s", self.output_dir)
        for entity_type, count in self._counts.items():
            logger.info("  %s: %d records", entity_type, count)
