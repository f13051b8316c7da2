"""Environment-driven settings, read once at startup."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from grocery.domain.exceptions import DomainException

# Default store lives next to the project when run from a checkout.
DEFAULT_DB_PATH = str(Path("data") / "grocery.db")
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 5000


class ConfigurationError(DomainException):
    """An environment variable held an unusable value."""


@dataclass(frozen=True)
class Settings:
    db_path: str = DEFAULT_DB_PATH
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = "INFO"
    retry_attempts: int = 3
    retry_base_delay: float = 0.05
    cors_origins: tuple[str, ...] = ("*",)


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    env = os.environ if environ is None else environ
    return Settings(
        db_path=env.get("GROCERY_DB_PATH", DEFAULT_DB_PATH),
        host=env.get("HOST", DEFAULT_HOST),
        port=_int(env, "PORT", DEFAULT_PORT, minimum=1),
        log_level=_log_level(env.get("GROCERY_LOG_LEVEL", "INFO")),
        retry_attempts=_int(env, "GROCERY_RETRY_ATTEMPTS", 3, minimum=1),
        retry_base_delay=_float(env, "GROCERY_RETRY_BASE_DELAY", 0.05),
        cors_origins=_origins(env.get("GROCERY_CORS_ORIGINS", "*")),
    )


def _int(env: Mapping[str, str], key: str, default: int, minimum: int = 0) -> int:
    raw = env.get(key)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{key} must be an integer, got {raw!r}") from exc
    if value < minimum:
        raise ConfigurationError(f"{key} must be >= {minimum}, got {value}")
    return value


def _float(env: Mapping[str, str], key: str, default: float) -> float:
    raw = env.get(key)
    if raw is None or raw == "":
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{key} must be a number, got {raw!r}") from exc
    if value < 0:
        raise ConfigurationError(f"{key} cannot be negative, got {value}")
    return value


def _log_level(raw: str) -> str:
    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigurationError(f"GROCERY_LOG_LEVEL is not a log level: {raw!r}")
    return level


def _origins(raw: str) -> tuple[str, ...]:
    """Comma-separated allowed origins; ``*`` allows any."""
    origins = tuple(part.strip() for part in raw.split(",") if part.strip())
    if not origins:
        raise ConfigurationError("GROCERY_CORS_ORIGINS must name at least one origin")
    return origins
