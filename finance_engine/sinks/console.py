"""Console sink for reports and debugging."""

import json
from typing import Any, TextIO

from finance_engine.sinks.serialization import to_dict

RULE = "=" * 60


class ConsoleSink:
    """Print records as JSON to a text stream (stdout by default).

    Parameters
    ----------
    pretty : bool
        Indent each record over several lines.
    max_records : int | None
        Records shown per batch; the rest are only counted.
    stream : TextIO | None
        Destination; ``sys.stdout`` when None.
    """

    def __init__(
        self,
        pretty: bool = True,
        max_records: int | None = None,
        stream: TextIO | None = None,
    ) -> None:
        self.pretty = pretty
        self.max_records = max_records
        self.stream = stream
        self._counts: dict[str, int] = {}

    def _banner(self, title: str) -> None:
        print(f"\n{RULE}\n{title}\n{RULE}", file=self.stream)

    def write_batch(self, entity_type: str, records: list[Any]) -> None:
        self._banner(f"{entity_type} ({len(records)} records)")

        shown = records if self.max_records is None else records[: self.max_records]
        indent = 2 if self.pretty else None
        for record in shown:
            print(json.dumps(to_dict(record), indent=indent, ensure_ascii=False), file=self.stream)

        hidden = len(records) - len(shown)
        if hidden > 0:
            print(f"... and {hidden} more records", file=self.stream)

        self._counts[entity_type] = self._counts.get(entity_type, 0) + len(records)

    def close(self) -> None:
        """Print how many records each entity type received."""
        self._banner("Summary")
        for entity_type, count in self._counts.items():
            print(f"  {entity_type}: {count} records", file=self.stream)
