"""Configuration management for finance-engine."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from finance_engine.exceptions import ConfigurationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("standard", "json")


@dataclass
class OutputConfig:
    """Output configuration for report sinks."""

    json_output_dir: Path = field(default_factory=lambda: Path("output"))
    pretty_json: bool = False


@dataclass
class WindowConfig:
    """Rolling windows used by the statistics aggregator."""

    trend_days: int = 30
    weekly_buckets: int = 12
    spending_history_months: int = 3

    def __post_init__(self) -> None:
        for name in ("trend_days", "weekly_buckets", "spending_history_months"):
            if getattr(self, name) <= 0:
                raise ConfigurationError(f"{name} must be positive")


@dataclass
class EngineConfig:
    """Main configuration for finance-engine."""

    output: OutputConfig = field(default_factory=OutputConfig)
    windows: WindowConfig = field(default_factory=WindowConfig)
    currency: str = "USD"
    faker_locale: str = "es_ES"
    seed: int | None = None
    log_level: str = "INFO"
    log_format: str = "standard"

    def __post_init__(self) -> None:
        if self.log_level.upper() not in LOG_LEVELS:
            raise ConfigurationError(f"Unknown log level: {self.log_level}")
        if self.log_format not in LOG_FORMATS:
            raise ConfigurationError(f"Unknown log format: {self.log_format}")

    def to_dict(self) -> dict[str, Any]:
        """Flatten to a plain dict (for logging the effective config)."""
        return {
            "json_output_dir": str(self.output.json_output_dir),
            "pretty_json": self.output.pretty_json,
            "trend_days": self.windows.trend_days,
            "weekly_buckets": self.windows.weekly_buckets,
            "spending_history_months": self.windows.spending_history_months,
            "currency": self.currency,
            "faker_locale": self.faker_locale,
            "seed": self.seed,
            "log_level": self.log_level,
            "log_format": self.log_format,
        }

    @classmethod
    def from_env(cls) -> "EngineConfig":
        """Create config from environment variables."""
        import os

        output = OutputConfig(
            json_output_dir=Path(os.getenv("OUTPUT_DIR", "output")),
            pretty_json=os.getenv("PRETTY_JSON", "false").lower() == "true",
        )

        windows = WindowConfig(
            trend_days=_int_env("TREND_DAYS", 30),
            weekly_buckets=_int_env("WEEKLY_BUCKETS", 12),
            spending_history_months=_int_env("SPENDING_HISTORY_MONTHS", 3),
        )

        return cls(
            output=output,
            windows=windows,
            currency=os.getenv("CURRENCY", "USD"),
            faker_locale=os.getenv("FAKER_LOCALE", "es_ES"),
            seed=_int_env("SEED", None),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )


def _int_env(name: str, default: int | None) -> int | None:
    import os

    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc
