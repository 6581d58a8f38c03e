"""Configuration management with environment variable support."""

import logging
import os
from dataclasses import dataclass, field


def _parse_seed() -> int | None:
    """Parse BLACKJACK_SEED environment variable."""
    seed = os.getenv("BLACKJACK_SEED", "").strip()
    if not seed:
        return None
    try:
        return int(seed)
    except ValueError:
        raise ValueError(f"BLACKJACK_SEED must be an integer, got {seed!r}") from None


@dataclass(frozen=True)
class DeckConfig:
    """Deck shuffling configuration."""

    seed: int | None = field(default_factory=_parse_seed)


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str = field(
        default_factory=lambda: os.getenv("BLACKJACK_LOG_LEVEL", "WARNING").upper()
    )
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(
        default_factory=lambda: os.getenv("BLACKJACK_DEBUG", "false").lower() == "true"
    )

    deck: DeckConfig = field(default_factory=DeckConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def configure_logging(app_config: AppConfig | None = None) -> None:
    """Install a root handler for applications embedding the engine."""
    app_config = app_config or config
    level = logging.DEBUG if app_config.debug else app_config.logging.level
    logging.basicConfig(level=level, format=app_config.logging.format, force=True)


# Global configuration instance
config = AppConfig()
