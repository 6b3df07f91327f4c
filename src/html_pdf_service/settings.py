"""Runtime configuration loaded from environment variables (and a local .env)."""

import os

from dotenv import load_dotenv

load_dotenv()

VALID_APP_ENVS = ("development", "production", "test")
VALID_LOG_LEVELS = ("critical", "error", "warning", "info", "debug")


def _flag(value: str) -> bool:
    return value.lower() in {"1", "true", "yes", "on"}


def validate_choice(value: str, valid_values: tuple[str, ...], name: str) -> str:
    """Return ``value`` lower-cased, or raise ValueError if it is not allowed."""
    normalized = value.strip().lower()
    if normalized not in valid_values:
        raise ValueError(
            f"Invalid environment variable {name}. Must be one of: "
            f"{' | '.join(valid_values)}. Current value: {value!r}."
        )
    return normalized


APP_ENV = validate_choice(os.getenv("APP_ENV", "development"), VALID_APP_ENVS, "APP_ENV")
LOG_LEVEL = validate_choice(os.getenv("LOG_LEVEL", "info"), VALID_LOG_LEVELS, "LOG_LEVEL")
LOGS_DIR = os.getenv("LOGS_DIR", "logs")
LOG_TO_FILES = _flag(os.getenv("LOG_TO_FILES", "true"))

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
RELOAD = _flag(os.getenv("RELOAD", "false"))

PDF_PAGE_FORMAT = os.getenv("PDF_PAGE_FORMAT", "A4")
PLAYWRIGHT_HEADLESS = _flag(os.getenv("PLAYWRIGHT_HEADLESS", "true"))
PLAYWRIGHT_TIMEOUT = int(os.getenv("PLAYWRIGHT_TIMEOUT", "30000"))  # milliseconds
