"""Configuration management for loan-ledger."""

from dataclasses import dataclass, field
from pathlib import Path

from loan_ledger.exceptions import ConfigurationError


@dataclass
class StorageConfig:
    """Where the loan file lives and how it is written."""

    data_file: Path = field(default_factory=lambda: Path("loans.json"))
    pretty_json: bool = False


@dataclass
class GeneratorConfig:
    """Sample portfolio generation settings."""

    locale: str = "en_IN"
    num_loans: int = 25


@dataclass
class LedgerConfig:
    """Main configuration for loan-ledger."""

    storage: StorageConfig = field(default_factory=StorageConfig)
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    seed: int | None = None
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "LedgerConfig":
        """Create config from environment variables."""
        import os

        storage = StorageConfig(
            data_file=Path(os.getenv("LOAN_LEDGER_DATA_FILE", "loans.json")),
            pretty_json=os.getenv("PRETTY_JSON", "false").lower() == "true",
        )

        generator = GeneratorConfig(
            locale=os.getenv("LOAN_LEDGER_LOCALE", "en_IN"),
            num_loans=_env_int("NUM_LOANS", 25),
        )

        seed_str = os.getenv("SEED")

        log_format = os.getenv("LOG_FORMAT", "standard")
        if log_format not in ("standard", "json"):
            raise ConfigurationError(f"LOG_FORMAT must be 'standard' or 'json', got {log_format!r}")

        return cls(
            storage=storage,
            generator=generator,
            seed=_env_int("SEED", 0) if seed_str else None,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=log_format,
        )


def _env_int(name: str, default: int) -> int:
    import os

    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc
