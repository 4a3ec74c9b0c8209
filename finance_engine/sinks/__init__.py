"""Output sinks for records and reports."""

from finance_engine.sinks.console import ConsoleSink
from finance_engine.sinks.json_file import JsonFileSink

__all__ = ["ConsoleSink", "JsonFileSink"]
