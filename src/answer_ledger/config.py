"""Application settings loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv


def _env(name: str, default: str = "") -> str:
    return os.environ.get(name, default)


def _env_int(name: str, default: int) -> int:
    raw = _env(name)
    try:
        return int(raw) if raw else default
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = _env(name)
    try:
        return float(raw) if raw else default
    except ValueError:
        return default


@dataclass(frozen=True)
class CosmosConfig:
    endpoint: str = field(default_factory=lambda: _env("COSMOS_ENDPOINT"))
    key: str = field(default_factory=lambda: _env("COSMOS_KEY"))
    database: str = field(default_factory=lambda: _env("COSMOS_DATABASE", "answer-ledger"))
    request_timeout: int = field(default_factory=lambda: _env_int("COSMOS_REQUEST_TIMEOUT", 10))


@dataclass(frozen=True)
class AppConfig:
    env: str = field(default_factory=lambda: _env("APP_ENV", "development"))
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))
    host: str = field(default_factory=lambda: _env("SERVER_HOST", "0.0.0.0"))  # noqa: S104
    port: int = field(default_factory=lambda: _env_int("SERVER_PORT", 8080))

    @property
    def is_development(self) -> bool:
        return self.env == "development"


@dataclass(frozen=True)
class EventsConfig:
    """Limits for detached audit-event writes."""

    max_concurrency: int = field(default_factory=lambda: _env_int("EVENT_MAX_CONCURRENCY", 16))
    write_timeout: float = field(default_factory=lambda: _env_float("EVENT_WRITE_TIMEOUT", 5.0))
    shutdown_timeout: float = field(
        default_factory=lambda: _env_float("EVENT_SHUTDOWN_TIMEOUT", 3.0)
    )


@dataclass(frozen=True)
class Settings:
    cosmos: CosmosConfig = field(default_factory=CosmosConfig)
    app: AppConfig = field(default_factory=AppConfig)
    events: EventsConfig = field(default_factory=EventsConfig)


def load_settings() -> Settings:
    """Load settings, reading a local .env file first if one exists."""
    load_dotenv()
    return Settings()
