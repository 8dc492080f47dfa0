"""
Runtime settings, read from the environment (and a .env file when present).

Environment variables:
    SNAKE_TICK_MS    tick length in milliseconds (default 100)
    SNAKE_SEED       integer seed for fruit placement (default: unseeded)
    SNAKE_LOG_FILE   write logs to this file (default: logging disabled)
    SNAKE_LOG_LEVEL  logging level name (default INFO)
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from snake_terminal.domain.constants import READ_TIME_MS


@dataclass
class Settings:
    tick_ms: int = READ_TIME_MS
    seed: Optional[int] = None
    log_file: Optional[str] = None
    log_level: str = "INFO"


def _int_from_env(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


def load_settings() -> Settings:
    """Build Settings from the environment, loading .env first."""
    load_dotenv()

    settings = Settings(
        tick_ms=_int_from_env("SNAKE_TICK_MS", READ_TIME_MS),
        seed=_int_from_env("SNAKE_SEED", None),
        log_file=os.getenv("SNAKE_LOG_FILE") or None,
        log_level=os.getenv("SNAKE_LOG_LEVEL", "INFO").upper(),
    )
    validate_settings(settings)
    return settings


def validate_settings(settings: Settings) -> None:
    if settings.tick_ms <= 0:
        raise ValueError(f"Tick length must be positive, got {settings.tick_ms}")
    if not isinstance(logging.getLevelName(settings.log_level), int):
        raise ValueError(f"Unknown log level: {settings.log_level}")
